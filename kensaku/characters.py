"""
Character handling for Kensaku.

Provides script classification used to route and validate queries:
kanji-only, kana-only, hiragana-only, katakana-only and trailing-hiragana
tests, plus a few helpers built on them.

Every test is an explicit code point range membership check. The range
tables below are the single source of truth for what counts as kanji,
hiragana or katakana.
"""

from enum import Enum
from typing import List, Tuple

# ============================================================================
# Code Point Range Tables
# ============================================================================

# CJK unified ideographs (extension A, URO, compatibility ideographs)
KANJI_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x3400, 0x4DB5),
    (0x4E00, 0x9FCB),
    (0xF900, 0xFA6A),
)

# Hiragana and katakana blocks
KANA_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x3040, 0x309F),
    (0x30A0, 0x30FF),
)

# ぁ-ゔ, sound marks ゛゜, iteration marks ゝゞ, long vowel mark ー
HIRAGANA_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x3041, 0x3094),
    (0x309B, 0x309E),
    (0x30FC, 0x30FC),
)

# ァ-・ (middle dot included), ー, iteration marks ヽヾ
KATAKANA_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x30A1, 0x30FE),
)

# CJK symbols and punctuation, full-width forms
SYMBOL_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x3000, 0x303F),
    (0xFF00, 0xFFEF),
)


def _in_ranges(char: str, ranges: Tuple[Tuple[int, int], ...]) -> bool:
    cp = ord(char)
    for low, high in ranges:
        if low <= cp <= high:
            return True
    return False


def _all_in(text: str, ranges: Tuple[Tuple[int, int], ...]) -> bool:
    return all(_in_ranges(char, ranges) for char in text)


# ============================================================================
# Character Testing Functions
# ============================================================================

def is_kanji(text: str) -> bool:
    """Check if text consists entirely of kanji. Empty text is kanji."""
    return _all_in(text, KANJI_RANGES)


def is_kana(text: str) -> bool:
    """Check if text consists entirely of kana (hiragana or katakana)."""
    return _all_in(text, KANA_RANGES)


def is_hiragana(text: str) -> bool:
    """Check if text consists entirely of hiragana."""
    return _all_in(text, HIRAGANA_RANGES)


def is_katakana(text: str) -> bool:
    """Check if text consists entirely of katakana."""
    return _all_in(text, KATAKANA_RANGES)


def ends_with_hiragana(text: str) -> bool:
    """
    Check if text ends in hiragana (e.g. okurigana after a kanji stem).

    Args:
        text: Text to test.

    Returns:
        True if text is non-empty and its last character is hiragana.
    """
    return bool(text) and _in_ranges(text[-1], HIRAGANA_RANGES)


def is_symbol(text: str) -> bool:
    """Check if text consists entirely of CJK symbols or full-width forms."""
    return _all_in(text, SYMBOL_RANGES)


def has_kanji(text: str) -> bool:
    """Check if text contains at least one kanji."""
    return any(_in_ranges(char, KANJI_RANGES) for char in text)


def has_kana(text: str) -> bool:
    """Check if text contains at least one kana."""
    return any(_in_ranges(char, KANA_RANGES) for char in text)


def kanji_count(text: str) -> int:
    """Count kanji characters in text."""
    return sum(1 for char in text if _in_ranges(char, KANJI_RANGES))


def is_japanese(text: str) -> bool:
    """Check if every character of text is kana, kanji or a CJK symbol."""
    return all(
        is_kana(char) or is_kanji(char) or is_symbol(char)
        for char in text
    )


# ============================================================================
# Kana Conversion
# ============================================================================

# Katakana that have a hiragana counterpart 0x60 code points lower
_HIRAGANA_SHIFT = 0x60
_SHIFTABLE_KATAKANA: Tuple[Tuple[int, int], ...] = (
    (0x30A1, 0x30F6),
    (0x30FD, 0x30FE),
)


def as_hiragana(text: str) -> str:
    """
    Convert katakana to hiragana.

    Args:
        text: Text to convert.

    Returns:
        Text with katakana converted to hiragana. ー, ・ and non-kana
        characters are kept as they are.
    """
    result = []
    for char in text:
        if _in_ranges(char, _SHIFTABLE_KATAKANA):
            char = chr(ord(char) - _HIRAGANA_SHIFT)
        result.append(char)
    return ''.join(result)


# ============================================================================
# Text Types
# ============================================================================

class CharType(Enum):
    """Coarse script type of a character or string."""
    KANA = "kana"
    KANJI = "kanji"
    OTHER = "other"


def get_text_type(text: str) -> CharType:
    """
    Get the script type of text.

    Kanji wins over kana, so the empty string is KANJI.
    """
    if is_kanji(text):
        return CharType.KANJI
    if is_kana(text):
        return CharType.KANA
    return CharType.OTHER


def all_words_with_ct(text: str, ct: CharType) -> List[str]:
    """
    Split text into the maximal runs of characters of type ct.

    Example:
        >>> all_words_with_ct("今日は天気", CharType.KANJI)
        ['今日', '天気']
    """
    words = []
    current = []
    for char in text:
        if get_text_type(char) == ct:
            current.append(char)
        elif current:
            words.append(''.join(current))
            current = []
    if current:
        words.append(''.join(current))
    return words
