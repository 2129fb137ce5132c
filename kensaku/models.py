"""
Pydantic models for Kensaku requests and responses.

These models are the boundary of the search core:
- ``SearchRequest`` validates raw input before any query runs
- result models give type-safe, JSON-serializable views of store rows

Usage:
    from kensaku.models import SearchRequest, SearchResponse

    request = SearchRequest(query="水", domain="kanji-by-literal")
    response = dispatch(session, request)
    print(response.model_dump_json())
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from kensaku.constants import Dialect
from kensaku.settings import DEFAULT_LANGUAGE, DEFAULT_LIMIT, MAX_LIMIT


class SearchDomain(str, Enum):
    """Entity domain a query is resolved against."""
    DICT_LOOKUP = "dict-lookup"
    KANJI_BY_LITERAL = "kanji-by-literal"
    KANJI_BY_MEANING = "kanji-by-meaning"
    NAME_LOOKUP = "name-lookup"
    SENTENCE_BY_JAPANESE = "sentence-by-japanese"
    SENTENCE_BY_TRANSLATION = "sentence-by-translation"


class SearchRequest(BaseModel):
    """A validated search request."""
    query: str = Field(..., description="Free-text query")
    domain: SearchDomain = Field(..., description="Entity domain to search")
    language: int = Field(DEFAULT_LANGUAGE, ge=0, description="Language code for glosses and translations")
    offset: int = Field(0, ge=0, description="Number of results to skip")
    limit: int = Field(DEFAULT_LIMIT, gt=0, le=MAX_LIMIT, description="Maximum number of results")


# =============================================================================
# Result Models
# =============================================================================

class DictEntryResult(BaseModel):
    """One reading or surface form of a headword."""
    sequence: int = Field(..., description="Headword sequence number")
    reading: str = Field(..., description="Reading or surface form")
    kanji: bool = Field(False, description="True if this is a kanji writing")
    priorities: List[str] = Field(default_factory=list, description="Priority tags")
    jlpt_lvl: Optional[int] = Field(None, description="JLPT level")
    is_main: bool = Field(False, description="True for the canonical variant")

    @classmethod
    def from_entry(cls, entry) -> "DictEntryResult":
        """Create DictEntryResult from a DictEntry row."""
        return cls(
            sequence=entry.sequence,
            reading=entry.reading,
            kanji=entry.kanji,
            priorities=entry.priorities or [],
            jlpt_lvl=entry.jlpt_lvl,
            is_main=entry.is_main,
        )


class SenseResult(BaseModel):
    gloss_pos: int
    gloss: str
    part_of_speech: List[str] = Field(default_factory=list)
    misc: Optional[str] = None
    dialect: Optional[Dialect] = None
    field: Optional[str] = None
    xref: Optional[str] = None
    antonym: Optional[str] = None

    @classmethod
    def from_sense(cls, sense) -> "SenseResult":
        return cls(
            gloss_pos=sense.gloss_pos,
            gloss=sense.gloss,
            part_of_speech=sense.part_of_speech or [],
            misc=sense.misc,
            dialect=Dialect.from_code(sense.dialect),
            field=sense.field,
            xref=sense.xref,
            antonym=sense.antonym,
        )


class WordResult(BaseModel):
    """A dictionary headword with all its readings and senses."""
    sequence: int = Field(..., description="Headword sequence number")
    readings: List[DictEntryResult] = Field(default_factory=list, description="Readings and writings")
    senses: List[SenseResult] = Field(default_factory=list, description="Glosses in the requested language")


class KanjiResult(BaseModel):
    """A kanji with its readings and meanings."""
    literal: str = Field(..., description="The kanji character")
    meaning: List[str] = Field(default_factory=list, description="Meanings")
    grade: Optional[int] = None
    stroke_count: int = 0
    frequency: Optional[int] = None
    jlpt: Optional[int] = None
    onyomi: List[str] = Field(default_factory=list)
    kunyomi: List[str] = Field(default_factory=list)

    # Filled by literal lookups
    kun_words: List[DictEntryResult] = Field(
        default_factory=list,
        description="Headwords derived from the kun-yomi readings",
    )

    # Filled by meaning lookups
    matched_meaning: Optional[str] = Field(None, description="Meaning the query matched")
    distance: Optional[float] = Field(None, description="Similarity distance to the query")

    @classmethod
    def from_kanji(cls, kanji, **extra) -> "KanjiResult":
        """Create KanjiResult from a Kanji row."""
        return cls(
            literal=kanji.literal,
            meaning=kanji.meaning or [],
            grade=kanji.grade,
            stroke_count=kanji.stroke_count,
            frequency=kanji.frequency,
            jlpt=kanji.jlpt,
            onyomi=kanji.onyomi or [],
            kunyomi=kanji.kunyomi or [],
            **extra,
        )


class NameResult(BaseModel):
    sequence: int
    kana: str
    kanji: Optional[str] = None
    transcription: str
    name_type: List[int] = Field(default_factory=list)

    @classmethod
    def from_name(cls, name) -> "NameResult":
        return cls(
            sequence=name.sequence,
            kana=name.kana,
            kanji=name.kanji,
            transcription=name.transcription,
            name_type=name.name_type or [],
        )


class SentenceResult(BaseModel):
    """An example sentence with one translation."""
    id: int = Field(..., description="Sentence id")
    content: str = Field(..., description="Japanese sentence")
    furigana: str = Field(..., description="Reading annotation")
    translation: str = Field(..., description="Translation in the requested language")

    @classmethod
    def from_row(cls, row) -> "SentenceResult":
        """Create SentenceResult from a SentenceRow."""
        return cls(
            id=row.id,
            content=row.content,
            furigana=row.furigana,
            translation=row.translation,
        )


class SearchResponse(BaseModel):
    """
    Results of one dispatched search.

    Example response:
        {
            "domain": "kanji-by-meaning",
            "query": "water",
            "offset": 0,
            "limit": 10,
            "count": 1,
            "results": [{"literal": "水", "meaning": ["water"], ...}]
        }
    """
    domain: SearchDomain
    query: str
    offset: int
    limit: int
    count: int = Field(..., description="Number of results in this page")
    results: List[Union[WordResult, KanjiResult, NameResult, SentenceResult]] = Field(default_factory=list)
