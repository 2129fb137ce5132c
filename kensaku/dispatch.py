"""
Query dispatcher for Kensaku.

Routes one validated search request to exactly one search strategy and wraps
the rows in a SearchResponse.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Union

from pydantic import ValidationError
from sqlalchemy.orm import Session

from kensaku.kanji import (
    find_kanji_by_literal, get_kun_dicts, match_kanji_by_meaning, parse_kanji_reading,
    search_words_by_kanji_reading,
)
from kensaku.lookup import find_names, find_words
from kensaku.models import (
    DictEntryResult, KanjiResult, SearchDomain, SearchRequest, SearchResponse,
    SentenceResult,
)
from kensaku.sentences import search_sentence_foreign, search_sentence_jp

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a search request is malformed."""


def parse_request(request: Union[SearchRequest, Mapping[str, Any]]) -> SearchRequest:
    """
    Validate raw input into a SearchRequest.

    Raises:
        InvalidArgumentError: If a field is missing or out of range, or the
            domain is unknown.
    """
    if isinstance(request, SearchRequest):
        return request
    try:
        return SearchRequest.model_validate(dict(request))
    except (ValidationError, TypeError) as e:
        raise InvalidArgumentError(str(e)) from e


# ============================================================================
# Domain Handlers
# ============================================================================

def _words(session: Session, req: SearchRequest) -> List:
    kanji_reading = parse_kanji_reading(req.query)
    if kanji_reading is not None:
        return search_words_by_kanji_reading(
            session, kanji_reading, req.language, req.offset, req.limit,
        )
    return find_words(session, req.query, req.language, req.offset, req.limit)


def _names(session: Session, req: SearchRequest) -> List:
    return find_names(session, req.query, req.offset, req.limit)


def _kanji_by_literal(session: Session, req: SearchRequest) -> List:
    kanji = find_kanji_by_literal(session, req.query)[req.offset:req.offset + req.limit]
    return [
        KanjiResult.from_kanji(
            k,
            kun_words=[DictEntryResult.from_entry(e) for e in get_kun_dicts(session, k.id)],
        )
        for k in kanji
    ]


def _kanji_by_meaning(session: Session, req: SearchRequest) -> List:
    # Fixed-size window; offset and limit do not apply
    return [
        KanjiResult.from_kanji(m.kanji, matched_meaning=m.meaning, distance=m.distance)
        for m in match_kanji_by_meaning(session, req.query)
    ]


def _sentences_jp(session: Session, req: SearchRequest) -> List:
    rows = search_sentence_jp(session, req.query, req.offset, req.limit, req.language)
    return [SentenceResult.from_row(row) for row in rows]


def _sentences_foreign(session: Session, req: SearchRequest) -> List:
    rows = search_sentence_foreign(session, req.query, req.offset, req.limit, req.language)
    return [SentenceResult.from_row(row) for row in rows]


HANDLERS: Dict[SearchDomain, Callable[[Session, SearchRequest], List]] = {
    SearchDomain.DICT_LOOKUP: _words,
    SearchDomain.KANJI_BY_LITERAL: _kanji_by_literal,
    SearchDomain.KANJI_BY_MEANING: _kanji_by_meaning,
    SearchDomain.NAME_LOOKUP: _names,
    SearchDomain.SENTENCE_BY_JAPANESE: _sentences_jp,
    SearchDomain.SENTENCE_BY_TRANSLATION: _sentences_foreign,
}


def dispatch(
    session: Session,
    request: Union[SearchRequest, Mapping[str, Any]],
) -> SearchResponse:
    """
    Run a search request against the store.

    Args:
        session: Database session.
        request: SearchRequest or a mapping with ``query``, ``domain`` and
            optionally ``language``, ``offset`` and ``limit``.

    Returns:
        SearchResponse holding one page of results.

    Raises:
        InvalidArgumentError: If the request is malformed.
    """
    req = parse_request(request)
    logger.debug(
        f"Dispatching {req.domain.value} query={req.query!r} "
        f"lang={req.language} offset={req.offset} limit={req.limit}"
    )

    results = HANDLERS[req.domain](session, req)

    return SearchResponse(
        domain=req.domain,
        query=req.query,
        offset=req.offset,
        limit=req.limit,
        count=len(results),
        results=results,
    )
