"""
Consolidated constants for Kensaku.

Language codes stored in the ``language`` columns of senses and sentence
translations, dialect codes of senses, plus the fixed limits used by the
ranking queries.
"""

from enum import Enum, IntEnum
from typing import Optional


# ============================================================================
# Language Codes
# ============================================================================

class Language(IntEnum):
    """Language codes as stored in ``sense.language`` and
    ``sentence_translation.language``."""
    ENGLISH = 0
    GERMAN = 1
    RUSSIAN = 2
    SPANISH = 3
    SWEDISH = 4
    FRENCH = 5
    DUTCH = 6
    HUNGARIAN = 7
    SLOVENIAN = 8


# ISO 639-1 codes accepted by the command line
LANGUAGE_CODES = {
    'en': Language.ENGLISH,
    'de': Language.GERMAN,
    'ru': Language.RUSSIAN,
    'es': Language.SPANISH,
    'sv': Language.SWEDISH,
    'fr': Language.FRENCH,
    'nl': Language.DUTCH,
    'hu': Language.HUNGARIAN,
    'sl': Language.SLOVENIAN,
}


# ============================================================================
# Kanji
# ============================================================================

# Separates the root reading from the okurigana in a kun-yomi entry (e.g. "あ.げる")
KUN_SEPARATOR = '.'

# Number of (kanji, meaning) pairs returned by the meaning resolver
KANJI_MEANING_LIMIT = 4

# Maximum number of headword sequences kept in ``Kanji.kun_dicts``
KUN_DICT_LIMIT = 10


# ============================================================================
# Dialects
# ============================================================================

class Dialect(str, Enum):
    """JMdict dialect codes as stored in ``sense.dialect``."""
    HOKKAIDO = "hob"
    KANSAI = "ksb"
    KANTOU = "ktb"
    KYOTO = "kyb"
    KYUUSHUU = "kyu"
    NAGANO = "nab"
    OSAKA = "osb"
    RYUUKYUU = "rkb"
    TOUHOKU = "thb"
    TOSA = "tsb"
    TSUGARU = "tsug"

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["Dialect"]:
        """Get the dialect for a code, or None if code is empty or unknown."""
        if not code:
            return None
        try:
            return cls(code)
        except ValueError:
            return None
