"""sentsplit - Split English passages into scored sentences aligned to Korean translations."""

__version__ = "0.1.0"

from .analysis import TranslationAnalyzer, compare_texts, detect_pair_issues, verify_sentences
from .config import Config, SplitterConfig
from .exceptions import ConfigError, InvalidInputError, SentsplitError
from .models import (
    PairIssue,
    Sentence,
    SentenceCounts,
    SentencePair,
    SplitResult,
    TextComparison,
    TranslationStatus,
)
from .splitter import SentenceSplitter, analyze_translation, split

__all__ = [
    "split",
    "analyze_translation",
    "SentenceSplitter",
    "TranslationAnalyzer",
    "compare_texts",
    "detect_pair_issues",
    "verify_sentences",
    "Config",
    "SplitterConfig",
    "SentsplitError",
    "InvalidInputError",
    "ConfigError",
    "Sentence",
    "SentencePair",
    "SplitResult",
    "SentenceCounts",
    "TranslationStatus",
    "PairIssue",
    "TextComparison",
]
