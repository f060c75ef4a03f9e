"""Reversible masking of punctuation that must not end a sentence."""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .base import DEFAULT_ABBREVIATIONS, TERMINALS, compile_abbreviation_pattern

logger = logging.getLogger(__name__)


# Private-use code points standing in for masked terminal marks.
# One code point per character keeps masked text the same length as the input.
MASK_CHARS = {
    ".": "\ue000",
    "!": "\ue001",
    "?": "\ue002",
}
UNMASK_TABLE = str.maketrans({marker: char for char, marker in MASK_CHARS.items()})


@dataclass(frozen=True)
class MaskedText:
    """Text with protected terminal marks replaced by marker code points."""

    text: str
    substitutions: dict[int, str] = field(default_factory=dict)  # offset -> original char
    abbreviation_starts: frozenset[int] = frozenset()

    def is_abbreviation_start(self, offset: int) -> bool:
        return offset in self.abbreviation_starts

    def restore(self, start: int = 0, end: Optional[int] = None) -> str:
        """Restore the original characters of text[start:end].

        Only offsets recorded in substitutions are restored, so marker code
        points that were already in the input stay as they were.
        """
        end = len(self.text) if end is None else end
        return "".join(
            self.substitutions.get(offset, self.text[offset])
            for offset in range(start, end)
        )


class ProtectedSpanCodec:
    """Mask punctuation inside quotes, parentheses, abbreviations and numbers.

    All protected spans are located on the unmodified input and tagged in a
    single offset set; the masked string is then rebuilt once. Spans never
    interfere with each other because masking does not touch the quote,
    parenthesis or letter characters the patterns anchor on.
    """

    DOUBLE_QUOTED = re.compile(r'"([^"]+)"')
    # Single-character content is most likely an apostrophe pair, not a quote
    SINGLE_QUOTED = re.compile(r"'([^']{2,})'")
    PARENTHESIZED = re.compile(r"\(([^)]+)\)")
    DECIMAL = re.compile(r"(?<=\d)\.(?=\d)")
    ENUMERATOR = re.compile(r"(?<=\d)\.(?=\s*[A-Z])")

    def __init__(self, abbreviations: Iterable[str] = DEFAULT_ABBREVIATIONS):
        """Initialize codec.

        Args:
            abbreviations: Abbreviations (with periods) whose periods are protected
        """
        self.abbreviations = tuple(abbreviations)
        self.abbreviation_pattern = compile_abbreviation_pattern(self.abbreviations)

    def _quoted_offsets(self, pattern: re.Pattern, text: str) -> Iterable[int]:
        for match in pattern.finditer(text):
            start, end = match.span(1)
            # A terminal mark closing the quoted content ends the sentence
            if text[end - 1] in TERMINALS:
                end -= 1
            yield from range(start, end)

    def protected_offsets(self, text: str) -> tuple[set[int], set[int]]:
        """Locate protected terminal marks.

        Args:
            text: Unmasked input text

        Returns:
            Tuple of (offsets of terminal marks to mask, offsets where an
            abbreviation starts)
        """
        candidates: set[int] = set()
        candidates.update(self._quoted_offsets(self.DOUBLE_QUOTED, text))
        candidates.update(self._quoted_offsets(self.SINGLE_QUOTED, text))
        for match in self.PARENTHESIZED.finditer(text):
            candidates.update(range(*match.span(1)))

        abbreviation_starts: set[int] = set()
        for match in self.abbreviation_pattern.finditer(text):
            abbreviation_starts.add(match.start())
            candidates.update(range(*match.span()))

        for pattern in (self.DECIMAL, self.ENUMERATOR):
            candidates.update(match.start() for match in pattern.finditer(text))

        masked = {offset for offset in candidates if text[offset] in TERMINALS}
        return masked, abbreviation_starts

    def mask(self, text: str) -> MaskedText:
        """Replace protected terminal marks with marker code points.

        Args:
            text: Input text

        Returns:
            MaskedText with the masked string and its substitution table
        """
        if not text:
            return MaskedText(text="")

        if any(marker in text for marker in MASK_CHARS.values()):
            logger.warning(
                "Input already contains mask marker code points; "
                "unmask() on the masked string turns them into punctuation"
            )

        masked_offsets, abbreviation_starts = self.protected_offsets(text)
        substitutions = {offset: text[offset] for offset in masked_offsets}
        chars = [
            MASK_CHARS[char] if offset in substitutions else char
            for offset, char in enumerate(text)
        ]
        return MaskedText(
            text="".join(chars),
            substitutions=substitutions,
            abbreviation_starts=frozenset(abbreviation_starts),
        )

    @staticmethod
    def unmask(text: str) -> str:
        """Restore every marker code point to its original punctuation."""
        return text.translate(UNMASK_TABLE)
