"""Text normalization utilities for source and translation text."""

import re
import logging

logger = logging.getLogger(__name__)


class TextNormalizer:
    """Normalize whitespace and typographic variants before splitting or comparing."""

    # Whitespace including no-break, typographic and ideographic spaces
    SPACE_VARIANTS = r'[\s\u00A0\u2000-\u200B\u2028\u2029\u3000\uFEFF]+'

    # Hyphen/dash variants (‐ ‑ ‒ – — ― − ﹘ ﹣ －)
    DASH_VARIANTS = r'[\u2010-\u2015\u2212\uFE58\uFE63\uFF0D]'

    SINGLE_QUOTE_VARIANTS = r'[\u2018\u2019\u201A\u201B]'
    DOUBLE_QUOTE_VARIANTS = r'[\u201C\u201D\u201E\u201F]'

    @classmethod
    def collapse_whitespace(cls, text: str) -> str:
        """
        Collapse line breaks and whitespace runs into single spaces.

        CRLF and CR line endings are unified first, so that paragraph
        breaks and wrapped lines all become ordinary word separators.

        Args:
            text: Input text

        Returns:
            Single-spaced, trimmed text
        """
        if not text:
            return ""

        text = text.replace('\r\n', '\n').replace('\r', '\n')
        text = re.sub(r'\s+', ' ', text)
        return text.strip()

    @classmethod
    def normalize_for_comparison(cls, text: str) -> str:
        """
        Normalize text for whitespace- and typography-insensitive comparison.

        This removes:
        - Differences between whitespace characters
        - Differences between dash variants
        - Curly vs straight quotes
        - Quotes wrapping the whole text

        Args:
            text: Input text

        Returns:
            Normalized text
        """
        if not text:
            return ""

        text = re.sub(cls.SPACE_VARIANTS, ' ', text)
        text = re.sub(cls.DASH_VARIANTS, '-', text)
        text = re.sub(cls.SINGLE_QUOTE_VARIANTS, "'", text)
        text = re.sub(cls.DOUBLE_QUOTE_VARIANTS, '"', text)

        # Quotes an extractor may have added around the whole text
        text = re.sub(r'^["\']+|["\']+$', '', text)
        text = re.sub(r'["\']\s*$', '', text)
        text = re.sub(r'^\s*["\']', '', text)

        return text.strip()


def normalize_source_text(text: str) -> str:
    """Convenience function for single-spacing source text before splitting."""
    return TextNormalizer.collapse_whitespace(text)


def count_words(text: str) -> int:
    """Count whitespace-separated tokens."""
    return len(text.split())
