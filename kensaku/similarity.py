"""
String similarity for ranking search results.

Implements trigram distance: each string is lower-cased, split into words on
non-alphanumeric characters, every word is padded with two leading blanks
and one trailing blank, and the set of its three-character windows is taken.
Similarity is the size of the intersection of the two trigram sets over the
size of their union; distance is ``1 - similarity``.

Japanese text has no spaces, so a whole clause counts as a single word and
its trigrams are runs of three characters. Kanji and kana are alphanumeric
for ``str.isalnum``.

The distance is registered as the SQL function ``similarity_distance`` on
every database connection (see ``kensaku.db.connection``), so queries can
``ORDER BY`` it after their filters have narrowed the candidate rows.
"""

import re
from functools import lru_cache
from typing import FrozenSet, Optional

# Name of the SQL function registered on each connection
SQL_FUNCTION_NAME = "similarity_distance"

_WORD_SPLIT_PATTERN = re.compile(r"[\W_]+")


@lru_cache(maxsize=4096)
def trigrams(text: str) -> FrozenSet[str]:
    """
    Get the trigram set of a string.

    Example:
        >>> sorted(trigrams("cat"))
        ['  c', ' ca', 'at ', 'cat']
    """
    result = set()
    for word in _WORD_SPLIT_PATTERN.split(text.lower()):
        if not word:
            continue
        padded = f"  {word} "
        for i in range(len(padded) - 2):
            result.add(padded[i:i + 3])
    return frozenset(result)


def similarity(a: str, b: str) -> float:
    """
    Trigram similarity of two strings, between 0.0 and 1.0.

    Two strings without any trigrams (e.g. both empty) have similarity 0.0.
    """
    ta = trigrams(a)
    tb = trigrams(b)
    union = len(ta | tb)
    if union == 0:
        return 0.0
    return len(ta & tb) / union


def distance(a: Optional[str], b: Optional[str]) -> float:
    """
    Trigram distance of two strings; smaller values are closer matches.

    Symmetric, 0.0 for strings with identical trigram sets and 1.0 for
    strings sharing none. ``None`` is treated as the empty string.
    """
    return 1.0 - similarity(a or "", b or "")
