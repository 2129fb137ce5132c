"""
Structured lookups for dictionary words and proper names.

Japanese queries are matched against readings (exact or prefix), anything
else against glosses of the requested language. Name queries are routed by
script: kana to the kana column, kanji-bearing text to the kanji column,
and romaji to the transcription.
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy import case, func, or_, select
from sqlalchemy.orm import Session, aliased

from kensaku.characters import has_kanji, is_japanese, is_kana
from kensaku.db.models import DictEntry, Name, Sense
from kensaku.models import DictEntryResult, NameResult, SenseResult, WordResult

logger = logging.getLogger(__name__)


def array_contains(column, value: int):
    """EXISTS clause: the JSON array in column holds value."""
    elements = func.json_each(column).table_valued("value")
    return select(elements.c.value).where(elements.c.value == value).exists()


def sequences_with_pos(pos: int):
    """Subquery of sense sequences whose simplified POS tags contain pos."""
    pos_sense = aliased(Sense)
    return select(pos_sense.sequence).where(array_contains(pos_sense.pos_simplified, pos))


# ============================================================================
# Dictionary Words
# ============================================================================

def _reading_sequences(query: str):
    rank = case((DictEntry.reading == query, 0), else_=1)
    return (
        select(DictEntry.sequence)
        .where(or_(
            DictEntry.reading == query,
            DictEntry.reading.startswith(query, autoescape=True),
        ))
        .group_by(DictEntry.sequence)
        .order_by(func.min(rank), func.max(DictEntry.is_main).desc(), func.min(DictEntry.id))
    )


def _gloss_sequences(query: str, language: int):
    folded = query.lower()
    rank = case((func.lower(Sense.gloss) == folded, 0), else_=1)
    return (
        select(Sense.sequence)
        .where(Sense.language == language)
        .where(or_(
            func.lower(Sense.gloss) == folded,
            Sense.gloss.istartswith(query, autoescape=True),
        ))
        .group_by(Sense.sequence)
        .order_by(func.min(rank), func.min(Sense.gloss_pos), Sense.sequence)
    )


def load_words(session: Session, sequences: List[int], language: int) -> List[WordResult]:
    """
    Build WordResults for headword sequences.

    Args:
        session: Database session.
        sequences: Sequences in the order the results should have.
        language: Language of the senses to include.
    """
    if not sequences:
        return []

    readings: Dict[int, List[DictEntryResult]] = {seq: [] for seq in sequences}
    for entry in session.execute(
        select(DictEntry).where(DictEntry.sequence.in_(sequences)).order_by(DictEntry.id)
    ).scalars():
        readings[entry.sequence].append(DictEntryResult.from_entry(entry))

    senses: Dict[int, List[SenseResult]] = {seq: [] for seq in sequences}
    for sense in session.execute(
        select(Sense)
        .where(Sense.sequence.in_(sequences), Sense.language == language)
        .order_by(Sense.gloss_pos, Sense.id)
    ).scalars():
        senses[sense.sequence].append(SenseResult.from_sense(sense))

    return [
        WordResult(sequence=seq, readings=readings[seq], senses=senses[seq])
        for seq in sequences
    ]


def find_words(
    session: Session,
    query: str,
    language: int,
    offset: int,
    limit: int,
    pos: Optional[int] = None,
) -> List[WordResult]:
    """
    Look up dictionary words.

    Args:
        session: Database session.
        query: Reading (kana/kanji) or gloss text.
        language: Language code for gloss matching and returned senses.
        offset: Words to skip.
        limit: Maximum words to return.
        pos: Optional simplified part-of-speech tag the word must have.

    Returns:
        WordResults, exact matches before prefix matches.
    """
    if is_japanese(query):
        stmt = _reading_sequences(query)
        sequence_col = DictEntry.sequence
    else:
        stmt = _gloss_sequences(query, language)
        sequence_col = Sense.sequence

    if pos is not None:
        stmt = stmt.where(sequence_col.in_(sequences_with_pos(pos)))

    sequences = list(session.execute(stmt.offset(offset).limit(limit)).scalars())
    logger.debug(f"Word lookup {query!r}: {len(sequences)} sequences")
    return load_words(session, sequences, language)


# ============================================================================
# Names
# ============================================================================

def find_names(
    session: Session,
    query: str,
    offset: int,
    limit: int,
    name_type: Optional[int] = None,
) -> List[NameResult]:
    """
    Look up proper names.

    Kana queries match kana prefixes, kanji-bearing queries match kanji
    prefixes, and anything else matches the transcription case-insensitively.
    """
    if query and is_kana(query):
        exact = Name.kana == query
        match = or_(exact, Name.kana.startswith(query, autoescape=True))
    elif has_kanji(query):
        exact = Name.kanji == query
        match = or_(exact, Name.kanji.startswith(query, autoescape=True))
    else:
        exact = func.lower(Name.transcription) == query.lower()
        match = exact

    stmt = select(Name).where(match)
    if name_type is not None:
        stmt = stmt.where(array_contains(Name.name_type, name_type))

    stmt = stmt.order_by(case((exact, 0), else_=1), Name.id).offset(offset).limit(limit)
    names = session.execute(stmt).scalars().all()
    logger.debug(f"Name lookup {query!r}: {len(names)} names")
    return [NameResult.from_name(name) for name in names]
