"""
Tests for similarity.py - trigram distance.
"""

from sqlalchemy import func, select

from kensaku.similarity import distance, similarity, trigrams


class TestTrigrams:

    def test_padding(self):
        assert sorted(trigrams("cat")) == ["  c", " ca", "at ", "cat"]

    def test_case_folding(self):
        assert trigrams("Water") == trigrams("water")

    def test_words_split_on_punctuation(self):
        assert trigrams("cat, dog") == trigrams("cat") | trigrams("dog")

    def test_empty(self):
        assert trigrams("") == frozenset()

    def test_japanese_clause(self):
        grams = trigrams("水を飲む")
        assert "  水" in grams
        assert "水を飲" in grams
        assert "飲む " in grams


class TestDistance:

    def test_identical(self):
        assert distance("water", "water") == 0.0

    def test_disjoint(self):
        assert distance("water", "fire") == 1.0

    def test_symmetric(self):
        assert distance("ice", "icicle") == distance("icicle", "ice")

    def test_closer_match_is_smaller(self):
        assert distance("water", "waters") < distance("water", "wander")

    def test_empty_strings(self):
        assert distance("", "") == 1.0
        assert distance("", "water") == 1.0

    def test_none_as_empty(self):
        assert distance(None, "water") == 1.0

    def test_similarity_bounds(self):
        assert 0.0 <= similarity("ice", "icicle") <= 1.0


class TestSqlFunction:

    def test_registered_on_connection(self, db_session):
        """The distance is callable from SQL on every connection."""
        value = db_session.execute(select(func.similarity_distance("ice", "icicle"))).scalar()
        assert value == distance("ice", "icicle")
