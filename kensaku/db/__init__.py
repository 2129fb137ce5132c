"""Entity store: ORM models and connection handling."""

from kensaku.db.connection import get_session, get_session_factory, get_engine, create_db_engine
from kensaku.db.models import (
    Base, DictEntry, Sense, Kanji, Name,
    Sentence, SentenceTranslation, SentenceVocabulary,
)

__all__ = [
    'get_session', 'get_session_factory', 'get_engine', 'create_db_engine',
    'Base', 'DictEntry', 'Sense', 'Kanji', 'Name',
    'Sentence', 'SentenceTranslation', 'SentenceVocabulary',
]
