"""Tests for sentence scoring."""

import pytest

from sentsplit.models import Sentence
from sentsplit.scoring import SentenceScorer, overall_confidence


@pytest.fixture
def scorer():
    return SentenceScorer()


class TestSentenceScorer:
    """Tests for SentenceScorer."""

    def test_clean_sentence(self, scorer):
        assert scorer.score("The museum opened in the morning.") == 1.0
        assert scorer.detect_issues("The museum opened in the morning.") == []

    def test_short_sentence(self, scorer):
        assert scorer.score("Go now.") == pytest.approx(0.9)
        assert scorer.detect_issues("Go now.") == ["sentence too short"]

    def test_long_sentence(self, scorer):
        sentence = " ".join(["word"] * 51) + "."
        assert scorer.score(sentence) == pytest.approx(0.9)
        assert scorer.detect_issues(sentence) == ["sentence too long (may need splitting)"]

    def test_missing_terminal(self, scorer):
        assert scorer.score("This has no ending") == pytest.approx(0.8)
        assert scorer.detect_issues("This has no ending") == ["missing terminal punctuation"]

    def test_closing_quote_after_terminal(self, scorer):
        assert scorer.score('She said "yes."') == 1.0

    def test_abbreviations_listed_in_order(self, scorer):
        sentence = "Dr. Smith and Mr. Jones met Dr. Who."
        assert scorer.score(sentence) == pytest.approx(0.95)
        assert scorer.detect_issues(sentence) == ["abbreviation detected: Dr., Mr."]

    def test_list_item(self, scorer):
        assert scorer.score("1. Apples are red.") == pytest.approx(0.9)
        assert scorer.detect_issues("1. Apples are red.") == ["starts like a list item"]

    def test_unbalanced_double_quotes(self, scorer):
        assert scorer.score('He said "hello there.') == pytest.approx(0.9)
        assert "unbalanced double quotes" in scorer.detect_issues('He said "hello there.')

    def test_unbalanced_single_quotes_need_more_than_two(self, scorer):
        assert "unbalanced single quotes" not in scorer.detect_issues("It's fine here.")
        assert scorer.score("a 'b' 'c") == pytest.approx(0.75)

    def test_unbalanced_parentheses_lower_score(self, scorer):
        balanced = scorer.score("He left (quickly and quietly).")
        unbalanced = scorer.score("He left (quickly and quietly.")
        assert unbalanced < balanced
        assert unbalanced == pytest.approx(0.85)

    def test_penalties_accumulate_within_bounds(self, scorer):
        sentence = '1. ( "'
        assert scorer.score(sentence) == pytest.approx(0.45)
        assert scorer.detect_issues(sentence) == [
            "unbalanced parentheses",
            "unbalanced double quotes",
            "starts like a list item",
            "missing terminal punctuation",
        ]

    def test_custom_word_limits(self):
        scorer = SentenceScorer(min_words=1, max_words=2)
        assert scorer.detect_issues("Go now.") == []
        assert scorer.detect_issues("Go home now.") == ["sentence too long (may need splitting)"]

    def test_build_sentence(self, scorer):
        sentence = scorer.build_sentence(2, "Go now.", 10, 17)
        assert sentence.ordinal == 2
        assert sentence.word_count == 2
        assert sentence.start_index == 10
        assert sentence.end_index == 17
        assert sentence.translation is None


class TestOverallConfidence:
    """Tests for overall_confidence."""

    def test_empty(self):
        assert overall_confidence([]) == 0.0

    def test_issue_density_penalty(self):
        sentences = [
            Sentence(1, "Dr. Smith arrived.", 3, 0.95, ["abbreviation detected: Dr."]),
            Sentence(2, "He left.", 2, 0.9, ["sentence too short"]),
        ]
        assert overall_confidence(sentences) == pytest.approx(0.825)

    def test_clean_sentences(self):
        sentences = [
            Sentence(1, "One two three.", 3, 1.0),
            Sentence(2, "Four five six.", 3, 1.0),
        ]
        assert overall_confidence(sentences) == 1.0
