"""
Kensaku: search core for a Japanese dictionary and example-sentence corpus.

Resolves free-text queries against dictionary words, kanji, proper names and
example sentences.
"""

from typing import Optional

__version__ = "0.1.0"


def search(
    query: str,
    domain: str,
    language: Optional[int] = None,
    offset: int = 0,
    limit: Optional[int] = None,
    session=None,
):
    """
    Run a single search.

    This is the main high-level API.

    Args:
        query: Free-text query.
        domain: One of the SearchDomain values, e.g. "kanji-by-meaning".
        language: Language code for glosses and translations.
            Defaults to settings.DEFAULT_LANGUAGE.
        offset: Number of results to skip.
        limit: Maximum number of results. Defaults to settings.DEFAULT_LIMIT.
        session: Optional database session. If None, one is opened on the
            configured database and closed afterwards.

    Returns:
        SearchResponse.

    Example:
        >>> import kensaku
        >>> response = kensaku.search("water", "kanji-by-meaning")
        >>> [k.literal for k in response.results]
        ['水', ...]
    """
    from kensaku.db.connection import get_session
    from kensaku.dispatch import dispatch

    request = {'query': query, 'domain': domain, 'offset': offset}
    if language is not None:
        request['language'] = language
    if limit is not None:
        request['limit'] = limit

    if session is not None:
        return dispatch(session, request)

    session = get_session()
    try:
        return dispatch(session, request)
    finally:
        session.close()
