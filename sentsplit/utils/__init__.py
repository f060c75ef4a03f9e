"""Utility functions."""

from .text_normalizer import TextNormalizer, count_words, normalize_source_text

__all__ = [
    "TextNormalizer",
    "count_words",
    "normalize_source_text",
]
