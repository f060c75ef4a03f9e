"""Tests for the Korean segmenter."""

from sentsplit.engines import KoreanSegmenter


def test_split_on_terminal_punctuation():
    segmenter = KoreanSegmenter()
    assert segmenter.segment("나는 학생이다. 너는 선생님이다.") == [
        "나는 학생이다.", "너는 선생님이다."
    ]


def test_split_on_sentence_final_syllable():
    segmenter = KoreanSegmenter()
    assert segmenter.segment("밥을 먹었어요 그리고 잤어요") == ["밥을 먹었어요", "그리고 잤어요"]


def test_non_final_syllables_do_not_split():
    segmenter = KoreanSegmenter()
    assert segmenter.count("여러분 오늘 만나서 정말 반갑습니다") == 1


def test_custom_endings():
    segmenter = KoreanSegmenter("다")
    assert segmenter.segment("먹었어요 그리고 잤다 끝") == ["먹었어요 그리고 잤다", "끝"]


def test_indices():
    segmenter = KoreanSegmenter()
    assert segmenter.segment_with_indices("가다.  나다.") == [("가다.", 0, 3), ("나다.", 5, 8)]


def test_blank_input():
    assert KoreanSegmenter().segment("  ") == []
