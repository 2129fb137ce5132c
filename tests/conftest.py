"""
Shared fixtures: an in-memory database seeded with a small corpus.
"""

import pytest
from sqlalchemy.orm import Session

from kensaku.db.connection import MEMORY_URL, create_db_engine
from kensaku.db.models import (
    Base, DictEntry, Sense, Kanji, Name,
    Sentence, SentenceTranslation, SentenceVocabulary,
)

EN = 0
DE = 1

NOUN = 0
VERB = 1

SURNAME = 1
GIVEN = 2
PLACE = 3


KANJI = [
    Kanji(id=1, literal="上", meaning=["above", "up"], stroke_count=3, grade=1, jlpt=5,
          onyomi=["ジョウ", "ショウ"],
          kunyomi=["うえ", "-うえ", "うわ-", "かみ", "あ.げる", "-あ.げる", "あ.がる", "のぼ.る", "たてまつ.る"]),
    Kanji(id=2, literal="水", meaning=["water"], stroke_count=4, grade=1, jlpt=5,
          onyomi=["スイ"], kunyomi=["みず", "みず-"]),
    Kanji(id=3, literal="氷", meaning=["icicle", "ice", "hail", "freeze", "congeal"], stroke_count=5,
          grade=3, onyomi=["ヒョウ"], kunyomi=["こおり", "ひ", "こお.る"]),
    Kanji(id=4, literal="川", meaning=["stream", "river"], stroke_count=3, grade=1,
          onyomi=["セン"], kunyomi=["かわ"]),
    Kanji(id=5, literal="食", meaning=["eat", "food"], stroke_count=9, grade=2,
          onyomi=["ショク", "ジキ"], kunyomi=["く.う", "く.らう", "た.べる", "は.む"]),
]


def _entry(id, sequence, reading, kanji, is_main=False, jlpt_lvl=None):
    return DictEntry(
        id=id, sequence=sequence, reading=reading, kanji=kanji, no_kanji=False,
        priorities=["ichi1"] if is_main else [], jlpt_lvl=jlpt_lvl, is_main=is_main,
    )


DICT = [
    _entry(1, 1000, "上げる", True, is_main=True),
    _entry(2, 1000, "あげる", False),
    _entry(3, 1001, "上がる", True),
    _entry(4, 1001, "あがる", False),
    _entry(5, 1002, "上る", True),
    _entry(6, 1002, "のぼる", False),
    _entry(7, 1003, "上", True),
    _entry(8, 1003, "うえ", False),
    _entry(9, 2000, "食べる", True, is_main=True, jlpt_lvl=5),
    _entry(10, 2000, "たべる", False, jlpt_lvl=5),
    _entry(11, 2001, "食べ物", True),
    _entry(12, 2001, "たべもの", False),
    _entry(13, 3000, "水", True, is_main=True),
    _entry(14, 3000, "みず", False),
    # Would only match if kun-yomi without okurigana were expanded
    _entry(15, 3099, "水みず", True),
]


def _sense(id, sequence, language, gloss, gloss_pos=0, pos=NOUN):
    return Sense(
        id=id, sequence=sequence, language=language, gloss_pos=gloss_pos, gloss=gloss,
        part_of_speech=["v1"] if pos == VERB else ["n"], pos_simplified=[pos],
    )


SENSES = [
    _sense(1, 1000, EN, "to raise", pos=VERB),
    _sense(2, 1000, DE, "heben", pos=VERB),
    _sense(3, 1001, EN, "to rise", pos=VERB),
    _sense(4, 1002, EN, "to ascend", pos=VERB),
    _sense(5, 1003, EN, "above"),
    _sense(6, 1003, EN, "up", gloss_pos=1),
    _sense(7, 2000, EN, "to eat", pos=VERB),
    _sense(8, 2000, DE, "essen", pos=VERB),
    _sense(9, 2001, EN, "food"),
    _sense(10, 3000, EN, "water"),
    _sense(11, 3000, DE, "Wasser"),
]


NAMES = [
    Name(id=1, sequence=5000, kana="たなか", kanji="田中", transcription="Tanaka", name_type=[SURNAME]),
    Name(id=2, sequence=5001, kana="たなべ", kanji="田辺", transcription="Tanabe", name_type=[SURNAME]),
    Name(id=3, sequence=5002, kana="たなか", kanji="田仲", transcription="Tanaka", name_type=[GIVEN, SURNAME]),
    Name(id=4, sequence=5003, kana="ゆき", kanji=None, transcription="Yuki", name_type=[GIVEN]),
    Name(id=5, sequence=5004, kana="おおさか", kanji="大阪", transcription="Oosaka", name_type=[PLACE]),
]


SENTENCES = [
    (1, "水を飲みたい。", "[水|みず]を[飲|の]みたい。",
     {EN: "I want to drink water.", DE: "Ich möchte Wasser trinken."}),
    (2, "冷たい水が好きです。", "[冷|つめ]たい[水|みず]が[好|す]きです。",
     {EN: "I like cold water.", DE: "Ich mag kaltes Wasser."}),
    (3, "川の水はきれいだ。", "[川|かわ]の[水|みず]はきれいだ。",
     {EN: "The water of the river is clean."}),
    (4, "ご飯を食べる。", "ご[飯|はん]を[食|た]べる。",
     {EN: "I eat rice.", DE: "Ich esse Reis."}),
    (5, "彼は水泳が得意だ。", "[彼|かれ]は[水泳|すいえい]が[得意|とくい]だ。",
     {EN: "He is good at swimming."}),
    (6, "明日は雨です。", "[明日|あした]は[雨|あめ]です。",
     {EN: "It will rain tomorrow."}),
    (7, "水", "[水|みず]",
     {EN: "Water"}),
]

VOCABULARY = [
    (1, 3000, 0),
    (2, 3000, 3),
    (3, 3000, 2),
    (4, 2000, 3),
]


def seed(session: Session):
    """Load the test corpus."""
    session.add_all(KANJI)
    session.add_all(DICT)
    session.add_all(SENSES)
    session.add_all(NAMES)

    translation_id = 1
    for sentence_id, content, furigana, translations in SENTENCES:
        session.add(Sentence(id=sentence_id, content=content, furigana=furigana))
        for language, text in translations.items():
            session.add(SentenceTranslation(
                id=translation_id, sentence_id=sentence_id, language=language, content=text,
            ))
            translation_id += 1

    for i, (sentence_id, seq, start) in enumerate(VOCABULARY, start=1):
        session.add(SentenceVocabulary(id=i, sentence_id=sentence_id, dict_sequence=seq, start=start))


@pytest.fixture(scope="session")
def db_engine():
    """In-memory engine with schema and seed data."""
    engine = create_db_engine(MEMORY_URL, echo=False)
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        seed(session)
        session.commit()
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Fresh session on the seeded database."""
    session = Session(db_engine)
    yield session
    session.close()
