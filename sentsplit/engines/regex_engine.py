"""Regex-based English sentence boundary segmenter."""

import logging
import re
from typing import Optional

from .base import CLOSING_QUOTES, TERMINALS, SentenceSegmenter
from .protected_spans import MaskedText, ProtectedSpanCodec

logger = logging.getLogger(__name__)


class RegexSegmenter(SentenceSegmenter):
    """Split English prose on terminal punctuation that survives masking.

    A boundary is a terminal mark, optionally followed by one closing quote,
    then whitespace, then one of: an uppercase letter, a quote, a digit, the
    start of an abbreviation, or the end of the text.
    """

    BOUNDARY_PATTERN = re.compile(rf"([{re.escape(TERMINALS)}][{CLOSING_QUOTES}]?)\s+")
    SENTENCE_START = re.compile(rf"[A-Z{CLOSING_QUOTES}0-9]")

    def __init__(self, codec: Optional[ProtectedSpanCodec] = None):
        """Initialize regex segmenter.

        Args:
            codec: Protected-span codec; a default one is built when omitted
        """
        self.codec = codec or ProtectedSpanCodec()

    def is_sentence_start(self, masked: MaskedText, offset: int) -> bool:
        """Check whether the character at offset can open a new sentence.

        Args:
            masked: Masked text being scanned
            offset: Position right after the whitespace following a terminal

        Returns:
            True if a split at the preceding terminal is legitimate
        """
        if offset >= len(masked.text):
            return True
        if masked.is_abbreviation_start(offset):
            return True
        return bool(self.SENTENCE_START.match(masked.text, offset))

    def find_split_points(self, masked: MaskedText) -> list[int]:
        """Collect split offsets in one left-to-right scan.

        Args:
            masked: Masked text

        Returns:
            Offsets right after each sentence-ending mark (and closing quote)
        """
        split_points = []
        for match in self.BOUNDARY_PATTERN.finditer(masked.text):
            if self.is_sentence_start(masked, match.end()):
                split_points.append(match.end(1))
        return split_points

    def segment_with_indices(self, text: str) -> list[tuple[str, int, int]]:
        """Segment text into sentences.

        Args:
            text: Whitespace-normalized input text

        Returns:
            List of (sentence_text, start_index, end_index) tuples with
            punctuation restored and surrounding whitespace trimmed
        """
        if not text or not text.strip():
            return []

        masked = self.codec.mask(text)
        split_points = self.find_split_points(masked)
        logger.debug(f"Found {len(split_points)} split points")

        boundaries = [0, *split_points, len(masked.text)]
        sentences = []
        for start, end in zip(boundaries, boundaries[1:]):
            span = masked.text[start:end]
            stripped = span.strip()
            if not stripped:
                continue
            leading = len(span) - len(span.lstrip())
            span_start = start + leading
            span_end = span_start + len(stripped)
            sentences.append(
                (masked.restore(span_start, span_end), span_start, span_end)
            )
        return sentences
