"""
SQLAlchemy ORM models for the Kensaku entity store.

Tables mirror the bulk-loaded lexicographic data: dictionary readings,
senses, kanji, proper names and example sentences with their translations.
Array-valued attributes are stored as JSON arrays; order is preserved and
duplicates are allowed.
"""

from typing import List, Optional

from sqlalchemy import JSON, Boolean, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class DictEntry(Base):
    """One reading or surface form of a dictionary headword.

    All rows sharing a ``sequence`` belong to the same lexical item. ``kanji``
    and ``no_kanji`` partition the rows into kanji writings and kana readings.
    """
    __tablename__ = "dict"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    sequence: Mapped[int] = mapped_column(Integer, nullable=False)
    reading: Mapped[str] = mapped_column(Text, nullable=False)
    kanji: Mapped[bool] = mapped_column(Boolean, nullable=False)
    no_kanji: Mapped[bool] = mapped_column(Boolean, nullable=False)
    priorities: Mapped[Optional[List[str]]] = mapped_column(JSON)
    information: Mapped[Optional[List[int]]] = mapped_column(JSON)
    kanji_info: Mapped[Optional[List[int]]] = mapped_column(JSON)
    jlpt_lvl: Mapped[Optional[int]] = mapped_column(Integer)
    is_main: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<DictEntry seq={self.sequence} reading={self.reading!r}>"


class Sense(Base):
    """A single gloss of a dictionary entry in one language."""
    __tablename__ = "sense"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Matches DictEntry.sequence; not a foreign key
    sequence: Mapped[int] = mapped_column(Integer, nullable=False)
    language: Mapped[int] = mapped_column(Integer, nullable=False)
    gloss_pos: Mapped[int] = mapped_column(Integer, nullable=False)
    gloss: Mapped[str] = mapped_column(Text, nullable=False)
    misc: Mapped[Optional[str]] = mapped_column(Text)
    part_of_speech: Mapped[Optional[List[str]]] = mapped_column(JSON)
    dialect: Mapped[Optional[str]] = mapped_column(Text)
    xref: Mapped[Optional[str]] = mapped_column(Text)
    gtype: Mapped[Optional[int]] = mapped_column(Integer)
    field: Mapped[Optional[str]] = mapped_column(Text)
    information: Mapped[Optional[str]] = mapped_column(Text)
    antonym: Mapped[Optional[str]] = mapped_column(Text)
    pos_simplified: Mapped[Optional[List[int]]] = mapped_column(JSON)

    def __repr__(self) -> str:
        return f"<Sense seq={self.sequence} lang={self.language} gloss={self.gloss!r}>"


class Kanji(Base):
    """A kanji character with its readings and meanings.

    ``kunyomi`` entries may contain a ``.`` separating the root reading from
    the okurigana, e.g. ``"あ.げる"``.
    """
    __tablename__ = "kanji"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    literal: Mapped[str] = mapped_column(String(1), nullable=False)
    meaning: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    grade: Mapped[Optional[int]] = mapped_column(Integer)
    stroke_count: Mapped[int] = mapped_column(Integer, nullable=False)
    frequency: Mapped[Optional[int]] = mapped_column(Integer)
    jlpt: Mapped[Optional[int]] = mapped_column(Integer)
    variant: Mapped[Optional[List[str]]] = mapped_column(JSON)
    onyomi: Mapped[Optional[List[str]]] = mapped_column(JSON)
    kunyomi: Mapped[Optional[List[str]]] = mapped_column(JSON)
    chinese: Mapped[Optional[str]] = mapped_column(Text)
    korean_r: Mapped[Optional[List[str]]] = mapped_column(JSON)
    korean_h: Mapped[Optional[List[str]]] = mapped_column(JSON)
    natori: Mapped[Optional[List[str]]] = mapped_column(JSON)
    kun_dicts: Mapped[Optional[List[int]]] = mapped_column(JSON)

    def __repr__(self) -> str:
        return f"<Kanji {self.literal}>"


class Name(Base):
    """A proper name (person, place, company...)."""
    __tablename__ = "name"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    sequence: Mapped[int] = mapped_column(Integer, nullable=False)
    kana: Mapped[str] = mapped_column(Text, nullable=False)
    kanji: Mapped[Optional[str]] = mapped_column(Text)
    transcription: Mapped[str] = mapped_column(Text, nullable=False)
    name_type: Mapped[Optional[List[int]]] = mapped_column(JSON)
    xref: Mapped[Optional[str]] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<Name {self.kanji or self.kana} ({self.transcription})>"


class Sentence(Base):
    """An example sentence with its furigana annotation."""
    __tablename__ = "sentence"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    furigana: Mapped[str] = mapped_column(Text, nullable=False)

    translations: Mapped[List["SentenceTranslation"]] = relationship(
        back_populates="sentence", order_by="SentenceTranslation.id"
    )
    vocabulary: Mapped[List["SentenceVocabulary"]] = relationship(
        back_populates="sentence", order_by="SentenceVocabulary.start"
    )


class SentenceTranslation(Base):
    __tablename__ = "sentence_translation"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    sentence_id: Mapped[int] = mapped_column(ForeignKey("sentence.id"), nullable=False)
    language: Mapped[int] = mapped_column(Integer, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    sentence: Mapped[Sentence] = relationship(back_populates="translations")


class SentenceVocabulary(Base):
    """Anchors a dictionary headword occurrence at a character offset."""
    __tablename__ = "sentence_vocabulary"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    sentence_id: Mapped[int] = mapped_column(ForeignKey("sentence.id"), nullable=False)
    dict_sequence: Mapped[int] = mapped_column(Integer, nullable=False)
    start: Mapped[int] = mapped_column(Integer, nullable=False)

    sentence: Mapped[Sentence] = relationship(back_populates="vocabulary")


Index("index_reading_dict", DictEntry.reading)
Index("index_seq_dict", DictEntry.sequence)
Index("index_seq_sense", Sense.sequence)
Index("index_lang_sense", Sense.language)
Index("index_literal_kanji", Kanji.literal)
Index("index_kana_name", Name.kana)
Index("index_kanji_name", Name.kanji)
Index("index_transcription_name", Name.transcription)
Index("index_sentence_translation_language", SentenceTranslation.language)
Index("index_sentence_translation_sentence", SentenceTranslation.sentence_id)
Index("index_sentence_vocabulary_sentence", SentenceVocabulary.sentence_id)
