"""
Tests for characters.py - script classification.
"""

import pytest

from kensaku.characters import (
    CharType,
    all_words_with_ct,
    as_hiragana,
    ends_with_hiragana,
    get_text_type,
    has_kana,
    has_kanji,
    is_hiragana,
    is_japanese,
    is_kana,
    is_kanji,
    is_katakana,
    kanji_count,
)


class TestEmptyString:
    """Every whole-string test holds vacuously for the empty string."""

    @pytest.mark.parametrize("func", [is_kanji, is_kana, is_hiragana, is_katakana])
    def test_vacuous_true(self, func):
        assert func("") is True

    def test_ends_with_hiragana_needs_text(self):
        assert ends_with_hiragana("") is False


class TestIsKanji:

    def test_kanji_word(self):
        assert is_kanji("日本語")

    def test_mixed_word(self):
        assert not is_kanji("食べる")

    def test_iteration_mark_is_not_kanji(self):
        assert not is_kanji("々")

    @pytest.mark.parametrize("cp,expected", [
        (0x3400, True), (0x4DB5, True), (0x4DB6, False),
        (0x4E00, True), (0x9FCB, True), (0x9FCC, False),
        (0xF900, True), (0xFA6A, True), (0xFA6B, False),
        (0x33FF, False),
    ])
    def test_range_boundaries(self, cp, expected):
        assert is_kanji(chr(cp)) is expected


class TestKana:

    def test_hiragana_partition(self):
        """Hiragana text is kana and hiragana, never katakana."""
        for word in ["ひらがな", "たべる", "ぁ", "ん", "゛", "゜", "か゛"]:
            assert is_kana(word)
            assert is_hiragana(word)
            assert not is_katakana(word)

    def test_katakana_partition(self):
        for word in ["カタカナ", "テスト", "ァ", "ヶ"]:
            assert is_kana(word)
            assert is_katakana(word)
            assert not is_hiragana(word)

    def test_hiragana_marks(self):
        assert is_hiragana("ゝゞ")
        assert is_hiragana("らーめん")
        assert is_hiragana("ゔ")

    def test_katakana_marks(self):
        assert is_katakana("ヽヾ")
        assert is_katakana("ラーメン")
        assert is_katakana("コーヒー・ショップ")

    def test_mixed_kana(self):
        assert is_kana("ひらカタ")
        assert not is_hiragana("ひらカタ")
        assert not is_katakana("ひらカタ")

    def test_latin_is_not_kana(self):
        assert not is_kana("kana")
        assert not is_hiragana("a")
        assert not is_katakana("a")


class TestEndsWithHiragana:

    def test_okurigana(self):
        assert ends_with_hiragana("食べる")

    def test_kanji_only(self):
        assert not ends_with_hiragana("食")

    def test_katakana_ending(self):
        assert not ends_with_hiragana("ひらカ")

    def test_long_vowel_ending(self):
        assert ends_with_hiragana("すごー")


class TestDeterminism:

    def test_repeated_calls(self):
        for func in [is_kanji, is_kana, is_hiragana, is_katakana, ends_with_hiragana]:
            results = {func("上げる") for _ in range(5)}
            assert len(results) == 1


class TestHelpers:

    def test_has_kanji(self):
        assert has_kanji("食べる")
        assert not has_kanji("たべる")

    def test_has_kana(self):
        assert has_kana("食べる")
        assert not has_kana("食")

    def test_kanji_count(self):
        assert kanji_count("今日は天気") == 4
        assert kanji_count("") == 0

    def test_is_japanese(self):
        assert is_japanese("今日は、天気。")
        assert not is_japanese("water")

    def test_text_type(self):
        assert get_text_type("水") == CharType.KANJI
        assert get_text_type("みず") == CharType.KANA
        assert get_text_type("水を") == CharType.OTHER
        assert get_text_type("") == CharType.KANJI

    def test_all_words_with_ct(self):
        assert all_words_with_ct("今日は天気", CharType.KANJI) == ["今日", "天気"]
        assert all_words_with_ct("今日は天気です", CharType.KANA) == ["は", "です"]
        assert all_words_with_ct("abc", CharType.KANJI) == []


class TestAsHiragana:

    def test_katakana(self):
        assert as_hiragana("ジョウ") == "じょう"
        assert as_hiragana("ヴァ") == "ゔぁ"

    def test_iteration_marks(self):
        assert as_hiragana("ヽヾ") == "ゝゞ"

    def test_kept_characters(self):
        assert as_hiragana("ラーメン・上") == "らーめん・上"
        assert as_hiragana("ひらがな") == "ひらがな"
        assert as_hiragana("") == ""
