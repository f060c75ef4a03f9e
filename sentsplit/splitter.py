"""Sentence splitter: the single entry point composing all engines."""

import logging
from dataclasses import replace
from functools import lru_cache
from typing import Optional

from .analysis import TranslationAnalyzer, detect_pair_issues
from .config import SplitterConfig
from .engines import KoreanSegmenter, ProtectedSpanCodec, RegexSegmenter
from .exceptions import InvalidInputError
from .matching import match_sentences
from .models import METHOD_REGEX, PairIssue, Sentence, SplitResult, TranslationStatus
from .scoring import SentenceScorer, overall_confidence
from .utils.text_normalizer import normalize_source_text

logger = logging.getLogger(__name__)


def _check_inputs(source_text, translation_text) -> None:
    if not isinstance(source_text, str):
        raise InvalidInputError("source_text", source_text)
    if translation_text is not None and not isinstance(translation_text, str):
        raise InvalidInputError("translation_text", translation_text)


def build_warnings(sentences: list[Sentence]) -> list[str]:
    """Format one warning per sentence that has issues."""
    return [
        f"sentence {sentence.ordinal}: {', '.join(sentence.issues)}"
        for sentence in sentences
        if sentence.issues
    ]


class SentenceSplitter:
    """Split English passages into scored sentences aligned to a Korean translation.

    Instances hold only configuration and compiled patterns, so one splitter
    can be shared freely between threads.
    """

    def __init__(self, config: Optional[SplitterConfig] = None):
        """Initialize splitter.

        Args:
            config: Splitter configuration (defaults when omitted)
        """
        self.config = config or SplitterConfig()
        self.codec = ProtectedSpanCodec(self.config.abbreviations)
        self.source_segmenter = RegexSegmenter(self.codec)
        self.translation_segmenter = KoreanSegmenter(self.config.korean_sentence_endings)
        self.scorer = SentenceScorer(
            self.codec.abbreviation_pattern,
            min_words=self.config.min_words,
            max_words=self.config.max_words,
        )
        self.analyzer = TranslationAnalyzer(self.source_segmenter, self.translation_segmenter)

    def split(
        self, source_text: str, translation_text: Optional[str] = None
    ) -> SplitResult:
        """Split a passage and align it to its translation.

        Args:
            source_text: English passage (may be empty)
            translation_text: Korean translation, or None

        Returns:
            SplitResult with dense 1-based ordinals

        Raises:
            InvalidInputError: If an argument is not a string
        """
        _check_inputs(source_text, translation_text)

        normalized = normalize_source_text(source_text)
        spans = self.source_segmenter.segment_with_indices(normalized)
        sentences = [
            self.scorer.build_sentence(ordinal, text, start, end)
            for ordinal, (text, start, end) in enumerate(spans, 1)
        ]
        confidence = overall_confidence(sentences)
        warnings = build_warnings(sentences)

        pairs = []
        if translation_text and translation_text.strip():
            translations = self.translation_segmenter.segment(translation_text)
            pairs = match_sentences([sentence.text for sentence in sentences], translations)
            sentences = [
                replace(sentence, translation=pair.translation)
                for sentence, pair in zip(sentences, pairs)
            ]

        logger.debug(
            f"Split {len(sentences)} sentences (confidence {confidence:.2f}, "
            f"{len(warnings)} warnings)"
        )
        return SplitResult(
            sentences=sentences,
            overall_confidence=confidence,
            method=METHOD_REGEX,
            warnings=warnings,
            pairs=pairs,
        )

    def analyze_translation(
        self, source_text: str, translation_text: Optional[str] = None
    ) -> TranslationStatus:
        """Compute the translation-quality verdict for a passage.

        Raises:
            InvalidInputError: If an argument is not a string
        """
        _check_inputs(source_text, translation_text)
        return self.analyzer.analyze(source_text, translation_text)

    def pair_issues(self, result: SplitResult) -> list[PairIssue]:
        """Per-pair translation problems of a split result."""
        return detect_pair_issues(result.pairs)

    def needs_escalation(self, result: SplitResult, status: TranslationStatus) -> bool:
        """Whether a result should go to a human or an alternate splitter."""
        return (
            not result.is_reliable(self.config.reliable_threshold)
            or (status.has_translation and status.needs_escalation)
        )


@lru_cache(maxsize=1)
def get_default_splitter() -> SentenceSplitter:
    """Shared splitter with default configuration."""
    return SentenceSplitter()


def split(source_text: str, translation_text: Optional[str] = None) -> SplitResult:
    """Split a passage with the default splitter."""
    return get_default_splitter().split(source_text, translation_text)


def analyze_translation(
    source_text: str, translation_text: Optional[str] = None
) -> TranslationStatus:
    """Analyze a translation with the default splitter."""
    return get_default_splitter().analyze_translation(source_text, translation_text)
