"""
Kanji module for Kensaku.

Handles kanji lookups: by literal, by nearest meaning, the derivation
of dictionary headwords from a kanji's kun-yomi readings, and word
search by a kanji together with one of its readings.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from sqlalchemy import Float, case, func, select, true
from sqlalchemy.orm import Session, aliased

from kensaku.characters import as_hiragana, is_kana, is_kanji
from kensaku.constants import KANJI_MEANING_LIMIT, KUN_DICT_LIMIT, KUN_SEPARATOR
from kensaku.db.models import DictEntry, Kanji
from kensaku.lookup import find_words, load_words
from kensaku.models import WordResult

logger = logging.getLogger(__name__)


@dataclass
class KanjiMatch:
    """A kanji matched through one of its meanings."""
    kanji: Kanji
    meaning: str
    distance: float


# ============================================================================
# Lookup by Literal
# ============================================================================

def find_kanji_by_literal(session: Session, text: str) -> List[Kanji]:
    """
    Get the kanji rows for every distinct kanji character in text.

    Args:
        session: Database session.
        text: Query text; non-kanji characters are skipped.

    Returns:
        Kanji rows in order of first appearance in text.
    """
    literals = []
    for char in text:
        if is_kanji(char) and char not in literals:
            literals.append(char)
    if not literals:
        return []

    rows = session.execute(
        select(Kanji).where(Kanji.literal.in_(literals)).order_by(Kanji.id)
    ).scalars().all()

    by_literal = {}
    for row in rows:
        by_literal.setdefault(row.literal, row)
    return [by_literal[lit] for lit in literals if lit in by_literal]


# ============================================================================
# Kun-yomi Headword Derivation
# ============================================================================

def literal_reading(kun: str) -> str:
    """
    Get the root of a kun-yomi entry, without okurigana or affix marks.

    Example:
        >>> literal_reading("-あ.げる")
        'あ'
    """
    return kun.replace('-', '').split(KUN_SEPARATOR, 1)[0]


def kun_kana(kun: str) -> str:
    """Get the plain kana spelling of a kun-yomi entry ("あ.げる" -> "あげる")."""
    return kun.replace('-', '').replace(KUN_SEPARATOR, '')


def kun_candidates(literal: str, kunyomi: Iterable[str]) -> List[str]:
    """
    Build the headword readings derivable from kun-yomi entries.

    Only entries with a root/okurigana separator are used: the kanji literal
    takes the place of the root, followed by the okurigana.

    Example:
        >>> kun_candidates("上", ["あ.げる", "うえ", "のぼ.る"])
        ['上げる', '上る']
    """
    candidates = []
    for kun in kunyomi:
        if KUN_SEPARATOR not in kun:
            continue
        okurigana = kun.split(KUN_SEPARATOR, 1)[1]
        candidate = literal + okurigana
        if candidate not in candidates:
            candidates.append(candidate)
    return candidates


def get_kun_dicts(session: Session, kanji_id: int) -> List[DictEntry]:
    """
    Get every dictionary row whose reading derives from a kanji's kun-yomi.

    Args:
        session: Database session.
        kanji_id: Kanji primary key.

    Returns:
        Matching DictEntry rows ordered by id. Empty if the kanji does not
        exist or has no kun-yomi with okurigana.
    """
    kanji = session.get(Kanji, kanji_id)
    if kanji is None:
        return []

    candidates = kun_candidates(kanji.literal, kanji.kunyomi or [])
    if not candidates:
        return []

    return list(session.execute(
        select(DictEntry)
        .where(DictEntry.reading.in_(candidates))
        .order_by(DictEntry.id)
    ).scalars().all())


def order_kun_dicts(
    entries: Iterable[DictEntry],
    kunyomi: Iterable[str],
    kana_readings: Optional[Dict[int, Set[str]]] = None,
) -> List[DictEntry]:
    """
    Sort kun-yomi headwords by relevance.

    Headwords read exactly like one of the kun-yomi come first, in kun-yomi
    order. After them come headwords with priority tags, then headwords with
    a JLPT level (higher levels first), then the rest by id.

    Args:
        entries: DictEntry rows to sort.
        kunyomi: The kanji's kun-yomi entries.
        kana_readings: Kana readings of each entry's sequence.
    """
    kana_readings = kana_readings or {}
    spellings = []
    for kun in kunyomi:
        spelling = kun_kana(kun)
        if spelling not in spellings:
            spellings.append(spelling)

    def key(entry: DictEntry):
        readings = kana_readings.get(entry.sequence, set())
        kun_rank = next(
            (i for i, s in enumerate(spellings) if s == entry.reading or s in readings),
            len(spellings),
        )
        return (
            kun_rank,
            0 if entry.priorities else 1,
            0 if entry.jlpt_lvl is not None else 1,
            -(entry.jlpt_lvl or 0),
            entry.id,
        )

    return sorted(entries, key=key)


def _kana_readings(session: Session, sequences: Iterable[int]) -> Dict[int, Set[str]]:
    readings: Dict[int, Set[str]] = {}
    for sequence, reading in session.execute(
        select(DictEntry.sequence, DictEntry.reading)
        .where(DictEntry.sequence.in_(list(sequences)), DictEntry.kanji.is_(False))
    ):
        readings.setdefault(sequence, set()).add(reading)
    return readings


def kun_dict_sequences(
    session: Session,
    kanji_id: int,
    limit: int = KUN_DICT_LIMIT,
) -> List[int]:
    """
    Get the headword sequences derived from a kanji's kun-yomi.

    This is the value stored in ``Kanji.kun_dicts``: distinct sequences in
    relevance order (see order_kun_dicts), at most limit of them.
    """
    entries = get_kun_dicts(session, kanji_id)
    if not entries:
        return []

    kanji = session.get(Kanji, kanji_id)
    kana_readings = _kana_readings(session, {e.sequence for e in entries})

    sequences = []
    for entry in order_kun_dicts(entries, kanji.kunyomi or [], kana_readings):
        if entry.sequence not in sequences:
            sequences.append(entry.sequence)
    return sequences[:limit]


# ============================================================================
# Word Search by Kanji Reading
# ============================================================================

@dataclass
class KanjiReading:
    """A query naming one kanji and one of its readings, e.g. "上 あ.げる"."""
    literal: str
    reading: str


def parse_kanji_reading(query: str) -> Optional[KanjiReading]:
    """
    Parse a "literal reading" query.

    The query must be a single kanji and a kana reading separated by
    whitespace. The reading may carry kun-yomi marks ("." and "-").

    Returns:
        KanjiReading, or None if query has another shape.
    """
    parts = query.split()
    if len(parts) != 2:
        return None
    literal, reading = parts
    if len(literal) != 1 or not is_kanji(literal):
        return None
    spelling = kun_kana(reading)
    if not spelling or not is_kana(spelling):
        return None
    return KanjiReading(literal=literal, reading=reading)


def has_reading(kanji: Kanji, reading: str) -> bool:
    """Check if reading is one of the kanji's kun-yomi or on-yomi."""
    if reading in (kanji.kunyomi or []):
        return True
    return as_hiragana(reading) in {as_hiragana(on) for on in kanji.onyomi or []}


def kanji_reading_sequences(
    session: Session,
    literal: str,
    reading: str,
    anchored: bool = True,
) -> List[int]:
    """
    Find headwords written with literal and read with reading.

    Anchored matching wants the written form to start with literal and the
    kana reading to start with the reading; a reading marked as a suffix
    ("-あ.げる") must end the kana reading instead. Unanchored matching only
    wants both to appear somewhere.

    Returns:
        Sequences, exact kana matches first, then main headwords, then by id.
    """
    spelling = as_hiragana(kun_kana(reading))
    written = aliased(DictEntry)
    spoken = aliased(DictEntry)

    if not anchored:
        written_match = written.reading.contains(literal, autoescape=True)
        spoken_match = spoken.reading.contains(spelling, autoescape=True)
    elif reading.startswith('-'):
        written_match = written.reading.contains(literal, autoescape=True)
        spoken_match = spoken.reading.endswith(spelling, autoescape=True)
    else:
        written_match = written.reading.startswith(literal, autoescape=True)
        spoken_match = spoken.reading.startswith(spelling, autoescape=True)

    stmt = (
        select(written.sequence)
        .join(spoken, spoken.sequence == written.sequence)
        .where(written.kanji.is_(True), spoken.kanji.is_(False), written_match, spoken_match)
        .group_by(written.sequence)
        .order_by(
            func.min(case((spoken.reading == spelling, 0), else_=1)),
            func.max(written.is_main).desc(),
            func.min(written.id),
        )
    )
    return list(session.execute(stmt).scalars())


def search_words_by_kanji_reading(
    session: Session,
    kanji_reading: KanjiReading,
    language: int,
    offset: int,
    limit: int,
) -> List[WordResult]:
    """
    Search dictionary words by a kanji and one of its readings.

    When the reading does not belong to the kanji, or no headword uses the
    kanji with that reading, the root of the reading is looked up as a plain
    word instead.

    Args:
        session: Database session.
        kanji_reading: Parsed query.
        language: Language of the returned senses.
        offset: Words to skip.
        limit: Maximum words to return.
    """
    literal, reading = kanji_reading.literal, kanji_reading.reading
    kanji = next(iter(find_kanji_by_literal(session, literal)), None)

    sequences = []
    if kanji is not None and has_reading(kanji, reading):
        sequences = kanji_reading_sequences(session, literal, reading)
        # Widen the match when the anchored pass finds almost nothing
        if len(sequences) <= 2:
            sequences = kanji_reading_sequences(session, literal, reading, anchored=False)

    if not sequences:
        logger.debug(f"No headwords for {literal} {reading!r}, searching {literal_reading(reading)!r}")
        return find_words(session, literal_reading(reading), language, offset, limit)

    logger.debug(f"Kanji reading search {literal} {reading!r}: {len(sequences)} sequences")
    return load_words(session, sequences[offset:offset + limit], language)


# ============================================================================
# Lookup by Meaning
# ============================================================================

def match_kanji_by_meaning(
    session: Session,
    query: str,
    limit: int = KANJI_MEANING_LIMIT,
) -> List[KanjiMatch]:
    """
    Rank every (kanji, meaning) pair by similarity to query.

    A kanji matching through several meanings appears once per meaning.

    Args:
        session: Database session.
        query: Free-text meaning, e.g. "water".
        limit: Number of pairs to return.

    Returns:
        KanjiMatch list ordered by non-decreasing distance.
    """
    meanings = func.json_each(Kanji.meaning).table_valued("key", "value", name="meanings")
    dist = func.similarity_distance(query, meanings.c.value, type_=Float)

    rows = session.execute(
        select(Kanji, meanings.c.value, dist.label("distance"))
        .select_from(Kanji)
        .join(meanings, true())
        .order_by(dist, Kanji.id, meanings.c["key"])
        .limit(limit)
    ).all()

    logger.debug(f"Meaning query {query!r} matched {len(rows)} kanji meanings")
    return [KanjiMatch(kanji=k, meaning=m, distance=d) for k, m, d in rows]


def find_kanji_by_meaning(session: Session, query: str) -> List[Kanji]:
    """Get up to four kanji whose meanings are closest to query."""
    return [match.kanji for match in match_kanji_by_meaning(session, query)]
