"""
Example sentence search for Kensaku.

Two strategies, both returning ``(content, furigana, translation, id)``
rows for one translation language:

- by translation: every translation in the language is ranked by its
  similarity to the query; no pre-filter.
- by Japanese: only sentences containing the query literally survive, and
  those are ranked by similarity of the Japanese content to the query.

Filters live in the SQL ``WHERE`` clause so the similarity function only
runs on rows that pass them. Ties are broken by sentence id and then
translation id, which keeps pages consistent across calls.
"""

import logging
from typing import List, NamedTuple

from sqlalchemy import Float, func, select
from sqlalchemy.orm import Session

from kensaku.db.models import Sentence, SentenceTranslation, SentenceVocabulary

logger = logging.getLogger(__name__)


class SentenceRow(NamedTuple):
    content: str
    furigana: str
    translation: str
    id: int


def _sentence_query(language: int):
    return (
        select(
            Sentence.content,
            Sentence.furigana,
            SentenceTranslation.content,
            Sentence.id,
        )
        .join(SentenceTranslation, SentenceTranslation.sentence_id == Sentence.id)
        .where(SentenceTranslation.language == language)
    )


def _page(session: Session, stmt, offset: int, limit: int) -> List[SentenceRow]:
    rows = session.execute(stmt.offset(offset).limit(limit)).all()
    return [SentenceRow(*row) for row in rows]


def search_sentence_foreign(
    session: Session,
    query: str,
    offset: int,
    limit: int,
    language: int,
) -> List[SentenceRow]:
    """
    Search sentences by their translation.

    Args:
        session: Database session.
        query: Text in the translation language.
        offset: Rows to skip.
        limit: Maximum rows to return.
        language: Translation language code.

    Returns:
        One page of rows ordered by non-decreasing distance between query and
        the translation.
    """
    dist = func.similarity_distance(query, SentenceTranslation.content, type_=Float)
    stmt = _sentence_query(language).order_by(dist, Sentence.id, SentenceTranslation.id)

    results = _page(session, stmt, offset, limit)
    logger.debug(f"Foreign sentence search {query!r} lang={language}: {len(results)} rows")
    return results


def search_sentence_jp(
    session: Session,
    query: str,
    offset: int,
    limit: int,
    language: int,
) -> List[SentenceRow]:
    """
    Search sentences by their Japanese content.

    Only sentences whose content contains query as a literal substring are
    considered; they are ranked by distance between query and the content.
    """
    dist = func.similarity_distance(query, Sentence.content, type_=Float)
    stmt = _sentence_query(language)
    # Every content contains the empty string
    if query:
        stmt = stmt.where(func.instr(Sentence.content, query) > 0)
    stmt = stmt.order_by(dist, Sentence.id, SentenceTranslation.id)

    results = _page(session, stmt, offset, limit)
    logger.debug(f"Japanese sentence search {query!r} lang={language}: {len(results)} rows")
    return results


def sentence_vocabulary(session: Session, sentence_id: int) -> List[SentenceVocabulary]:
    """Get the headword anchors of a sentence, ordered by position."""
    return list(session.execute(
        select(SentenceVocabulary)
        .where(SentenceVocabulary.sentence_id == sentence_id)
        .order_by(SentenceVocabulary.start, SentenceVocabulary.id)
    ).scalars().all())
