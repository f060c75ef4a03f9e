"""Data models for sentence splitting and translation analysis."""

import math
from dataclasses import dataclass, field
from typing import Literal, Optional

# Method tag of the deterministic rule-based splitter
METHOD_REGEX = "regex"

Alignment = Literal["perfect", "mismatch", "missing"]
Quality = Literal["good", "suspicious", "unknown"]
Severity = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class Sentence:
    """Represents one source sentence with its quality metadata."""

    ordinal: int  # 1-based, dense
    text: str
    word_count: int
    confidence: float
    issues: list[str] = field(default_factory=list)
    translation: Optional[str] = None
    start_index: int = 0  # Offsets within the whitespace-normalized source
    end_index: int = 0

    def needs_review(self, threshold: float) -> bool:
        """Whether a reviewer should check this sentence manually."""
        return self.confidence < threshold

    def to_dict(self) -> dict:
        """Convert to dictionary for output."""
        return {
            "ordinal": self.ordinal,
            "text": self.text,
            "translation": self.translation,
            "word_count": self.word_count,
            "confidence": self.confidence,
            "issues": list(self.issues),
            "start_index": self.start_index,
            "end_index": self.end_index,
        }


@dataclass(frozen=True)
class SentencePair:
    """A source sentence aligned to a translation sentence (or to nothing)."""

    source: str
    translation: Optional[str]
    confidence: float

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "translation": self.translation,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class SplitStats:
    """Summary counts for a split result."""

    sentence_count: int
    total_words: int
    avg_words_per_sentence: int


@dataclass(frozen=True)
class SplitResult:
    """Result of splitting one passage."""

    sentences: list[Sentence]
    overall_confidence: float
    method: str = METHOD_REGEX
    warnings: list[str] = field(default_factory=list)
    pairs: list[SentencePair] = field(default_factory=list)

    def stats(self) -> SplitStats:
        """Compute sentence and word totals."""
        total_words = sum(sentence.word_count for sentence in self.sentences)
        count = len(self.sentences)
        # Half-up rounding
        average = math.floor(total_words / count + 0.5) if count else 0
        return SplitStats(
            sentence_count=count,
            total_words=total_words,
            avg_words_per_sentence=average,
        )

    def is_reliable(self, threshold: float = 0.9) -> bool:
        """Whether the result can be used without an alternate splitter."""
        return self.overall_confidence >= threshold and not self.warnings

    def to_dict(self) -> dict:
        """Convert to dictionary for output."""
        stats = self.stats()
        return {
            "sentences": [sentence.to_dict() for sentence in self.sentences],
            "overall_confidence": self.overall_confidence,
            "method": self.method,
            "warnings": list(self.warnings),
            "pairs": [pair.to_dict() for pair in self.pairs],
            "stats": {
                "sentence_count": stats.sentence_count,
                "total_words": stats.total_words,
                "avg_words_per_sentence": stats.avg_words_per_sentence,
            },
        }


@dataclass(frozen=True)
class SentenceCounts:
    """Sentence counts on each side of a translation."""

    source: int
    translation: int


@dataclass(frozen=True)
class TranslationStatus:
    """Translation-quality verdict for one passage."""

    has_translation: bool
    sentence_counts: SentenceCounts
    alignment: Alignment
    quality: Quality
    needs_escalation: bool
    suspicion_score: int  # 0-100
    signals: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for output."""
        return {
            "has_translation": self.has_translation,
            "sentence_counts": {
                "source": self.sentence_counts.source,
                "translation": self.sentence_counts.translation,
            },
            "alignment": self.alignment,
            "quality": self.quality,
            "needs_escalation": self.needs_escalation,
            "suspicion_score": self.suspicion_score,
            "signals": list(self.signals),
        }


@dataclass(frozen=True)
class PairIssue:
    """A translation problem found on one aligned sentence pair."""

    kind: Literal["missing", "incomplete", "untranslated"]
    ordinal: int
    description: str
    severity: Severity
    needs_review: bool

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "ordinal": self.ordinal,
            "description": self.description,
            "severity": self.severity,
            "needs_review": self.needs_review,
        }


@dataclass(frozen=True)
class TextComparison:
    """Outcome of comparing an original text with a reconstructed one."""

    is_match: bool
    diff: Optional[str] = None
