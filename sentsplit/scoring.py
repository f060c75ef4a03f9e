"""Per-sentence confidence scoring and issue detection."""

import re
from typing import Optional, Sequence

from .engines.base import DEFAULT_ABBREVIATIONS, compile_abbreviation_pattern
from .models import Sentence
from .utils.text_normalizer import count_words

# Penalties subtracted from a perfect score of 1.0
SHORT_PENALTY = 0.10
LONG_PENALTY = 0.10
ABBREVIATION_PENALTY = 0.05
PARENTHESES_PENALTY = 0.15
DOUBLE_QUOTE_PENALTY = 0.10
SINGLE_QUOTE_PENALTY = 0.05
LIST_ITEM_PENALTY = 0.10
NO_TERMINAL_PENALTY = 0.20

# Weight of the share of sentences with issues in the overall confidence
ISSUE_DENSITY_WEIGHT = 0.1

LIST_ITEM_START = re.compile(r"^\d+\.")
TERMINAL_END = re.compile(r"[.!?][\"']?$")


class SentenceScorer:
    """Score how trustworthy each produced sentence is.

    The score says nothing about whether a boundary is actually right; it
    tells a reviewer which sentences deserve a second look.
    """

    def __init__(
        self,
        abbreviation_pattern: Optional[re.Pattern] = None,
        min_words: int = 3,
        max_words: int = 50,
    ):
        """Initialize scorer.

        Args:
            abbreviation_pattern: Pattern from compile_abbreviation_pattern()
            min_words: Sentences with fewer words are penalized as too short
            max_words: Sentences with more words are penalized as too long
        """
        self.abbreviation_pattern = abbreviation_pattern or compile_abbreviation_pattern(
            DEFAULT_ABBREVIATIONS
        )
        self.min_words = min_words
        self.max_words = max_words

    def find_abbreviations(self, sentence: str) -> list[str]:
        """Return the abbreviations in sentence, in order of first appearance."""
        found = []
        for match in self.abbreviation_pattern.finditer(sentence):
            if match.group(0) not in found:
                found.append(match.group(0))
        return found

    def _checks(self, sentence: str) -> list[tuple[bool, float, str]]:
        words = count_words(sentence)
        single_quotes = sentence.count("'")
        return [
            (bool(self.find_abbreviations(sentence)), ABBREVIATION_PENALTY, ""),
            (words < self.min_words, SHORT_PENALTY, "sentence too short"),
            (words > self.max_words, LONG_PENALTY, "sentence too long (may need splitting)"),
            (sentence.count("(") != sentence.count(")"), PARENTHESES_PENALTY,
             "unbalanced parentheses"),
            (sentence.count('"') % 2 != 0, DOUBLE_QUOTE_PENALTY, "unbalanced double quotes"),
            # Apostrophes make small odd counts common
            (single_quotes > 2 and single_quotes % 2 != 0, SINGLE_QUOTE_PENALTY,
             "unbalanced single quotes"),
            (bool(LIST_ITEM_START.match(sentence)), LIST_ITEM_PENALTY,
             "starts like a list item"),
            (not TERMINAL_END.search(sentence), NO_TERMINAL_PENALTY,
             "missing terminal punctuation"),
        ]

    def score(self, sentence: str) -> float:
        """Compute a confidence in [0, 1] for one sentence."""
        confidence = 1.0
        for triggered, penalty, _ in self._checks(sentence):
            if triggered:
                confidence -= penalty
        return max(0.0, min(1.0, confidence))

    def detect_issues(self, sentence: str) -> list[str]:
        """List human-readable issues for one sentence."""
        issues = []
        abbreviations = self.find_abbreviations(sentence)
        if abbreviations:
            issues.append(f"abbreviation detected: {', '.join(abbreviations)}")
        for triggered, _, label in self._checks(sentence):
            if triggered and label:
                issues.append(label)
        return issues

    def build_sentence(
        self, ordinal: int, text: str, start_index: int = 0, end_index: int = 0
    ) -> Sentence:
        """Create a scored Sentence."""
        return Sentence(
            ordinal=ordinal,
            text=text,
            word_count=count_words(text),
            confidence=self.score(text),
            issues=self.detect_issues(text),
            start_index=start_index,
            end_index=end_index,
        )


def overall_confidence(sentences: Sequence[Sentence]) -> float:
    """Mean sentence confidence minus a penalty for the share of sentences with issues.

    Args:
        sentences: Scored sentences

    Returns:
        Confidence in [0, 1]; 0 when there are no sentences
    """
    if not sentences:
        return 0.0
    average = sum(sentence.confidence for sentence in sentences) / len(sentences)
    with_issues = sum(1 for sentence in sentences if sentence.issues)
    penalty = ISSUE_DENSITY_WEIGHT * with_issues / len(sentences)
    return max(0.0, average - penalty)
