"""Base classes and constants for sentence segmentation engines."""

import re
from abc import ABC, abstractmethod


# Sentence-final punctuation shared by English and Korean text
TERMINALS = ".!?"

# Quote characters that may close a sentence after its terminal mark
CLOSING_QUOTES = "\"'"

# Abbreviations whose periods never end a sentence
DEFAULT_ABBREVIATIONS = (
    # Titles
    "Dr.", "Mr.", "Mrs.", "Ms.", "Prof.", "Jr.", "Sr.",
    # Countries / organizations
    "U.S.", "U.K.", "U.N.", "E.U.",
    # Degrees
    "Ph.D.", "M.D.", "B.A.", "M.A.", "B.S.", "M.S.",
    # Latin
    "e.g.", "i.e.", "etc.", "vs.", "cf.",
    # Months
    "Jan.", "Feb.", "Mar.", "Apr.", "Jun.", "Jul.", "Aug.", "Sep.", "Oct.", "Nov.", "Dec.",
    # Weekdays
    "Mon.", "Tue.", "Wed.", "Thu.", "Fri.", "Sat.", "Sun.",
    # Addresses, companies, units
    "St.", "Ave.", "Blvd.", "Rd.", "Mt.", "Inc.", "Corp.", "Ltd.", "Co.",
    "a.m.", "p.m.", "A.M.", "P.M.",
    "No.", "Vol.", "pp.", "Fig.", "Eq.",
)

# Korean sentence-final syllables (declarative/polite/nominal endings)
DEFAULT_KOREAN_ENDINGS = "다요죠음함"


def compile_abbreviation_pattern(abbreviations) -> re.Pattern:
    """Build one case-insensitive, word-bounded pattern for all abbreviations.

    Longer entries are tried first so that e.g. "Ph.D." wins over any
    shorter entry sharing its prefix.

    Args:
        abbreviations: Iterable of abbreviation strings (with their periods)

    Returns:
        Compiled pattern; matches nothing when the list is empty
    """
    entries = sorted({abbr for abbr in abbreviations if abbr}, key=len, reverse=True)
    if not entries:
        return re.compile(r"(?!)")
    alternation = "|".join(re.escape(abbr) for abbr in entries)
    return re.compile(rf"\b(?:{alternation})", re.IGNORECASE)


class SentenceSegmenter(ABC):
    """Base class for sentence segmentation engines."""

    @abstractmethod
    def segment_with_indices(self, text: str) -> list[tuple[str, int, int]]:
        """Segment text and return sentences with their indices.

        Args:
            text: Input text to segment

        Returns:
            List of (sentence_text, start_index, end_index) tuples
        """
        pass

    def segment(self, text: str) -> list[str]:
        """Segment text into a list of sentence strings."""
        return [sentence for sentence, _, _ in self.segment_with_indices(text)]

    def count(self, text: str) -> int:
        """Count sentences in text."""
        return len(self.segment_with_indices(text))
