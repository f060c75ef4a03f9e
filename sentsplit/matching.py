"""Positional alignment of source sentences to translation sentences."""

import logging
from typing import Sequence

from .models import SentencePair

logger = logging.getLogger(__name__)

# Equal sentence counts are a strong, though not perfect, correctness signal
EXACT_MATCH_CONFIDENCE = 0.9
FALLBACK_CONFIDENCE = 0.6
UNMATCHED_CONFIDENCE = 0.0


def match_sentences(
    source_sentences: Sequence[str],
    translation_sentences: Sequence[str],
) -> list[SentencePair]:
    """Pair source sentences with translation sentences by position.

    With equal counts every pair gets EXACT_MATCH_CONFIDENCE. Otherwise the
    pairing walks both lists in order: pairs get FALLBACK_CONFIDENCE while
    translations remain, then the leftover source sentences are paired with
    None. Surplus translation sentences are dropped. No re-alignment by
    length or vocabulary is attempted.

    Args:
        source_sentences: Source sentence texts in order
        translation_sentences: Translation sentence texts in order

    Returns:
        One SentencePair per source sentence
    """
    if len(source_sentences) == len(translation_sentences):
        return [
            SentencePair(source=source, translation=translation,
                         confidence=EXACT_MATCH_CONFIDENCE)
            for source, translation in zip(source_sentences, translation_sentences)
        ]

    logger.debug(
        f"Sentence count mismatch ({len(source_sentences)} vs "
        f"{len(translation_sentences)}), using positional fallback"
    )
    pairs = []
    for index, source in enumerate(source_sentences):
        if index < len(translation_sentences):
            pairs.append(SentencePair(source=source,
                                      translation=translation_sentences[index],
                                      confidence=FALLBACK_CONFIDENCE))
        else:
            pairs.append(SentencePair(source=source, translation=None,
                                      confidence=UNMATCHED_CONFIDENCE))
    return pairs
