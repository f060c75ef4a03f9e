"""Tests for translation analysis, pair issues and text comparison."""

import pytest

from sentsplit.analysis import (
    TranslationAnalyzer,
    compare_texts,
    detect_pair_issues,
    latin_token_ratio,
    length_ratio,
    verify_sentences,
)
from sentsplit.models import SentencePair

SOURCE = "The museum opened in the morning. Many visitors waited outside."
TRANSLATION = "박물관은 아침에 문을 열었다. 많은 방문객들이 밖에서 기다렸다."


@pytest.fixture
def analyzer():
    return TranslationAnalyzer()


class TestTranslationAnalyzer:
    """Tests for TranslationAnalyzer."""

    def test_good_translation(self, analyzer):
        status = analyzer.analyze(SOURCE, TRANSLATION)
        assert status.has_translation
        assert status.sentence_counts.source == 2
        assert status.sentence_counts.translation == 2
        assert status.alignment == "perfect"
        assert status.quality == "good"
        assert status.suspicion_score == 0
        assert status.signals == []
        assert not status.needs_escalation

    @pytest.mark.parametrize("translation", [None, "", "   "])
    def test_missing_translation(self, analyzer, translation):
        status = analyzer.analyze(SOURCE, translation)
        assert not status.has_translation
        assert status.sentence_counts.source == 2
        assert status.sentence_counts.translation == 0
        assert status.alignment == "missing"
        assert status.quality == "unknown"
        assert status.suspicion_score == 100
        assert status.needs_escalation
        assert status.signals == ["no translation present"]

    def test_count_mismatch_escalates(self, analyzer):
        source = "I went to school today. It was very fun. I came home late."
        translation = "나는 오늘 학교에 갔다. 정말 재미있었고 늦게 집에 왔다."
        status = analyzer.analyze(source, translation)
        assert status.alignment == "mismatch"
        assert status.signals[0] == "sentence count mismatch (source: 3, translation: 2)"
        assert status.needs_escalation

    def test_untranslated_words(self, analyzer):
        status = analyzer.analyze("I studied computer science.", "나는 computer science 공부를 했다.")
        assert status.signals == ["untranslated words remain", "almost no target-language content"]
        assert status.suspicion_score == 60
        assert status.quality == "unknown"
        assert status.needs_escalation

    def test_translation_too_long(self, analyzer):
        status = analyzer.analyze("Hi.", "여러분 오늘 만나서 정말 반갑습니다")
        assert status.signals == ["translation too long"]
        assert status.suspicion_score == 20
        assert status.quality == "suspicious"
        assert status.alignment == "perfect"
        assert not status.needs_escalation

    def test_repeated_block(self, analyzer):
        source = "Good morning today. Good morning today. The end."
        status = analyzer.analyze(source, "오늘은 좋은 아침입니다 오늘은 좋은 아침입니다 끝.")
        assert "repeated text block detected" in status.signals
        assert status.suspicion_score >= 40

    def test_score_is_clamped(self, analyzer):
        source = (
            "The first sentence is here. The second sentence is here. "
            "The third sentence is here."
        )
        status = analyzer.analyze(source, "abc")
        assert "translation too short" in status.signals
        assert status.suspicion_score == 100
        assert status.quality == "unknown"


def test_length_ratio_of_empty_source():
    assert length_ratio("", "가나다") == float("inf")


def test_latin_token_ratio():
    assert latin_token_ratio("나는 computer 공부를 했다") == pytest.approx(0.25)
    assert latin_token_ratio("모두 한국어") == 0.0


class TestDetectPairIssues:
    """Tests for detect_pair_issues."""

    def test_missing_translation(self):
        issues = detect_pair_issues([SentencePair("Hello there friend.", None, 0.0)])
        assert len(issues) == 1
        assert issues[0].kind == "missing"
        assert issues[0].ordinal == 1
        assert issues[0].severity == "high"
        assert issues[0].needs_review

    def test_incomplete_translation(self):
        source = "This rather long sentence has more than ten words in it for sure."
        issues = detect_pair_issues([SentencePair(source, "짧다.", 0.9)])
        assert [issue.kind for issue in issues] == ["incomplete"]
        assert issues[0].severity == "low"
        assert not issues[0].needs_review

    def test_untranslated_words(self):
        translation = "이것은 apple banana cherry grape lemon melon 이다"
        issues = detect_pair_issues([SentencePair("Fruit is here.", translation, 0.9)])
        assert [issue.kind for issue in issues] == ["untranslated"]
        assert issues[0].description.endswith("apple, banana, cherry")

    def test_clean_pairs_and_blank_source(self):
        pairs = [
            SentencePair("The museum opened.", "박물관이 열었다.", 0.9),
            SentencePair("   ", "무언가.", 0.9),
        ]
        assert detect_pair_issues(pairs) == []

    def test_ordinals_follow_pairs(self):
        pairs = [
            SentencePair("The museum opened.", "박물관이 열었다.", 0.6),
            SentencePair("Many people came.", None, 0.0),
        ]
        assert [issue.ordinal for issue in detect_pair_issues(pairs)] == [2]


class TestCompareTexts:
    """Tests for compare_texts and verify_sentences."""

    def test_whitespace_differences_match(self):
        assert compare_texts("Hello   world\n again", "Hello world again").is_match

    def test_typographic_variants_match(self):
        original = "“Hi” – he said, ‘ok’."
        assert compare_texts(original, '"Hi" - he said, \'ok\'.').is_match

    def test_difference_reported(self):
        comparison = compare_texts("The cat sat.", "The dog sat.")
        assert not comparison.is_match
        assert comparison.diff.startswith("position 4:")

    def test_prefix_difference_reported(self):
        comparison = compare_texts("The cat sat.", "The cat sat. Then")
        assert not comparison.is_match
        assert comparison.diff.startswith("texts differ after position 12")

    def test_verify_sentences(self):
        text = "Dr. Smith arrived.\n\nHe left."
        assert verify_sentences(text, ["Dr. Smith arrived.", "He left."]).is_match
        assert not verify_sentences(text, ["Dr. Smith arrived."]).is_match
