"""Translation quality analysis.

Every check here is a heuristic signal: it raises a suspicion score or flags a
pair for review, it never rejects input. The resulting verdict decides whether
a translation can be aligned automatically or should be escalated to a human
or a secondary process.
"""

import logging
import re
from typing import Optional, Sequence

from .engines import KoreanSegmenter, RegexSegmenter, SentenceSegmenter
from .models import (
    PairIssue,
    SentenceCounts,
    SentencePair,
    TextComparison,
    TranslationStatus,
)
from .utils.text_normalizer import TextNormalizer, count_words, normalize_source_text

logger = logging.getLogger(__name__)

# Suspicion penalties
COUNT_MISMATCH_PENALTY = 40
TOO_SHORT_PENALTY = 30
TOO_LONG_PENALTY = 20
UNTRANSLATED_PENALTY = 25
NO_HANGUL_PENALTY = 35
REPEATED_BLOCK_PENALTY = 40

MIN_LENGTH_RATIO = 0.3
MAX_LENGTH_RATIO = 3.0
MAX_LATIN_TOKEN_RATIO = 0.3
MIN_HANGUL_CHARS = 10

GOOD_QUALITY_BELOW = 20
SUSPICIOUS_QUALITY_BELOW = 50
ESCALATION_SCORE = 50

LATIN_RUN = re.compile(r"[a-zA-Z]{3,}")
LATIN_WORD = re.compile(r"[a-zA-Z]{4,}")
HANGUL_SYLLABLE = re.compile(r"[가-힣]")
REPEATED_BLOCK = re.compile(r"(.{10,})\1")

# Per-pair thresholds
INCOMPLETE_MIN_SOURCE_WORDS = 10
HANGUL_PER_SOURCE_WORD = 1.2
MAX_UNTRANSLATED_WORDS = 5


class TranslationAnalyzer:
    """Compute a translation-quality verdict for a passage."""

    def __init__(
        self,
        source_segmenter: Optional[SentenceSegmenter] = None,
        translation_segmenter: Optional[SentenceSegmenter] = None,
    ):
        """Initialize analyzer.

        Args:
            source_segmenter: Segmenter for the English source
            translation_segmenter: Segmenter for the Korean translation
        """
        self.source_segmenter = source_segmenter or RegexSegmenter()
        self.translation_segmenter = translation_segmenter or KoreanSegmenter()

    def analyze(
        self, source_text: str, translation_text: Optional[str]
    ) -> TranslationStatus:
        """Analyze a translation against its source.

        Args:
            source_text: English source passage
            translation_text: Korean translation, or None

        Returns:
            TranslationStatus verdict
        """
        source_count = self.source_segmenter.count(normalize_source_text(source_text))

        if not translation_text or not translation_text.strip():
            return TranslationStatus(
                has_translation=False,
                sentence_counts=SentenceCounts(source=source_count, translation=0),
                alignment="missing",
                quality="unknown",
                needs_escalation=True,
                suspicion_score=100,
                signals=["no translation present"],
            )

        translation_count = self.translation_segmenter.count(translation_text)
        signals = []
        score = 0

        if source_count != translation_count:
            signals.append(
                f"sentence count mismatch (source: {source_count}, "
                f"translation: {translation_count})"
            )
            score += COUNT_MISMATCH_PENALTY

        ratio = length_ratio(source_text, translation_text)
        if ratio < MIN_LENGTH_RATIO:
            signals.append("translation too short")
            score += TOO_SHORT_PENALTY
        if ratio > MAX_LENGTH_RATIO:
            signals.append("translation too long")
            score += TOO_LONG_PENALTY

        if latin_token_ratio(translation_text) > MAX_LATIN_TOKEN_RATIO:
            signals.append("untranslated words remain")
            score += UNTRANSLATED_PENALTY

        if len(HANGUL_SYLLABLE.findall(translation_text)) < MIN_HANGUL_CHARS:
            signals.append("almost no target-language content")
            score += NO_HANGUL_PENALTY

        if REPEATED_BLOCK.search(translation_text):
            signals.append("repeated text block detected")
            score += REPEATED_BLOCK_PENALTY

        score = max(0, min(100, score))
        alignment = "perfect" if source_count == translation_count else "mismatch"
        if score < GOOD_QUALITY_BELOW:
            quality = "good"
        elif score < SUSPICIOUS_QUALITY_BELOW:
            quality = "suspicious"
        else:
            quality = "unknown"

        if signals:
            logger.debug(f"Translation signals: {'; '.join(signals)} (score {score})")

        return TranslationStatus(
            has_translation=True,
            sentence_counts=SentenceCounts(source=source_count, translation=translation_count),
            alignment=alignment,
            quality=quality,
            needs_escalation=score >= ESCALATION_SCORE or alignment == "mismatch",
            suspicion_score=score,
            signals=signals,
        )


def length_ratio(source_text: str, translation_text: str) -> float:
    """Translation length divided by source length (infinite for empty source)."""
    if not source_text:
        return float("inf")
    return len(translation_text) / len(source_text)


def latin_token_ratio(translation_text: str) -> float:
    """Share of whitespace tokens that are untranslated Latin words."""
    tokens = re.split(r"\s+", translation_text)
    latin_runs = LATIN_RUN.findall(translation_text)
    return len(latin_runs) / len(tokens) if tokens else 0.0


def detect_pair_issues(pairs: Sequence[SentencePair]) -> list[PairIssue]:
    """Flag aligned pairs whose translation is missing, short or untranslated.

    Args:
        pairs: Aligned pairs in source order

    Returns:
        Issues ordered by pair
    """
    issues = []
    for ordinal, pair in enumerate(pairs, 1):
        if not pair.source or not pair.source.strip():
            logger.warning(f"Pair {ordinal} has no source text, skipping")
            continue

        translation = pair.translation or ""
        if not translation.strip():
            issues.append(PairIssue(
                kind="missing",
                ordinal=ordinal,
                description=f"sentence {ordinal} has no translation",
                severity="high",
                needs_review=True,
            ))

        source_words = count_words(pair.source)
        hangul = len(HANGUL_SYLLABLE.findall(translation))
        if (source_words > INCOMPLETE_MIN_SOURCE_WORDS
                and hangul < source_words * HANGUL_PER_SOURCE_WORD):
            issues.append(PairIssue(
                kind="incomplete",
                ordinal=ordinal,
                description=(
                    f"sentence {ordinal} translation may be incomplete "
                    f"(source {source_words} words, translation {hangul} Hangul syllables)"
                ),
                severity="low",
                needs_review=False,
            ))

        latin_words = LATIN_WORD.findall(translation)
        if len(latin_words) > MAX_UNTRANSLATED_WORDS:
            issues.append(PairIssue(
                kind="untranslated",
                ordinal=ordinal,
                description=(
                    f"sentence {ordinal} translation contains many English words: "
                    f"{', '.join(latin_words[:3])}"
                ),
                severity="low",
                needs_review=False,
            ))
    return issues


def compare_texts(original: str, candidate: str) -> TextComparison:
    """Compare two texts ignoring whitespace and typographic variants.

    Args:
        original: Reference text
        candidate: Text reconstructed from a split

    Returns:
        TextComparison; diff describes the first difference when they differ
    """
    normalized_original = TextNormalizer.normalize_for_comparison(original)
    normalized_candidate = TextNormalizer.normalize_for_comparison(candidate)

    if normalized_original == normalized_candidate:
        return TextComparison(is_match=True)

    limit = min(len(normalized_original), len(normalized_candidate), 100)
    for index in range(limit):
        if normalized_original[index] != normalized_candidate[index]:
            start = max(0, index - 20)
            return TextComparison(
                is_match=False,
                diff=(
                    f"position {index}: original[{normalized_original[start:index + 20]}] "
                    f"vs candidate[{normalized_candidate[start:index + 20]}]"
                ),
            )

    return TextComparison(
        is_match=False,
        diff=(
            f"texts differ after position {limit} "
            f"(original {len(normalized_original)} chars, "
            f"candidate {len(normalized_candidate)} chars)"
        ),
    )


def verify_sentences(original: str, sentences: Sequence[str]) -> TextComparison:
    """Check that joined sentences reproduce the original text."""
    return compare_texts(original, " ".join(sentences))
