"""Configuration management for the sentence splitter."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .engines.base import DEFAULT_ABBREVIATIONS, DEFAULT_KOREAN_ENDINGS
from .exceptions import ConfigError


class SplitterConfig(BaseModel):
    """Configuration for segmentation and scoring."""

    abbreviations: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ABBREVIATIONS),
        description="Abbreviations whose periods never end a sentence",
    )
    korean_sentence_endings: str = Field(
        default=DEFAULT_KOREAN_ENDINGS,
        description="Syllables that end a Korean sentence when followed by whitespace",
    )
    min_words: int = Field(default=3, ge=1)
    max_words: int = Field(default=50, ge=1)
    review_threshold: float = Field(
        default=0.8, ge=0.0, le=1.0,
        description="Sentences below this confidence are flagged for manual review",
    )
    reliable_threshold: float = Field(
        default=0.9, ge=0.0, le=1.0,
        description="Minimum overall confidence for a result to skip escalation",
    )

    @field_validator("abbreviations")
    @classmethod
    def check_abbreviations(cls, v):
        """Reject blank abbreviation entries."""
        cleaned = [abbr.strip() for abbr in v]
        if any(not abbr for abbr in cleaned):
            raise ValueError("abbreviations must not contain blank entries")
        return cleaned

    @field_validator("korean_sentence_endings")
    @classmethod
    def check_endings(cls, v):
        """Require at least one ending character."""
        if not v.strip():
            raise ValueError("korean_sentence_endings must not be empty")
        return "".join(v.split())


class InputConfig(BaseModel):
    """Field names of JSONL input records."""

    id_field: str = "id"
    text_field: str = "text"
    translation_field: str = "translation"


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_dir: Path = Path("data/split_output")
    format: Literal["csv", "json"] = "csv"
    save_statuses: bool = True  # Write one row per passage with translation status


class Config(BaseModel):
    """Main configuration for the splitting pipeline."""

    input_file: Optional[Path] = None
    splitter: SplitterConfig = Field(default_factory=SplitterConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a YAML mapping")
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {path}: {e}") from e

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
