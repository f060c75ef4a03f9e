"""Suffix-based Korean sentence segmenter for the translation side."""

import re

from .base import DEFAULT_KOREAN_ENDINGS, TERMINALS, SentenceSegmenter


class KoreanSegmenter(SentenceSegmenter):
    """Split Korean text after terminal punctuation or sentence-final syllables.

    No abbreviation or quote protection is applied; Korean orthography does
    not share the English decoys.
    """

    def __init__(self, sentence_endings: str = DEFAULT_KOREAN_ENDINGS):
        """Initialize Korean segmenter.

        Args:
            sentence_endings: Syllables that end a sentence when followed by whitespace
        """
        self.sentence_endings = sentence_endings
        terminal_class = re.escape(TERMINALS + sentence_endings)
        self.split_pattern = re.compile(rf"(?<=[{terminal_class}])\s+")

    def segment_with_indices(self, text: str) -> list[tuple[str, int, int]]:
        """Segment Korean text.

        Args:
            text: Translation text

        Returns:
            List of (sentence_text, start_index, end_index) tuples
        """
        if not text or not text.strip():
            return []

        sentences = []
        cursor = 0
        for match in self.split_pattern.finditer(text):
            self._append_span(sentences, text, cursor, match.start())
            cursor = match.end()
        self._append_span(sentences, text, cursor, len(text))
        return sentences

    @staticmethod
    def _append_span(
        sentences: list[tuple[str, int, int]], text: str, start: int, end: int
    ) -> None:
        span = text[start:end]
        stripped = span.strip()
        if stripped:
            span_start = start + len(span) - len(span.lstrip())
            sentences.append((stripped, span_start, span_start + len(stripped)))
