"""Sentence segmentation engines."""

from .base import SentenceSegmenter
from .korean_engine import KoreanSegmenter
from .protected_spans import MaskedText, ProtectedSpanCodec
from .regex_engine import RegexSegmenter

__all__ = [
    "SentenceSegmenter",
    "KoreanSegmenter",
    "MaskedText",
    "ProtectedSpanCodec",
    "RegexSegmenter",
]
