"""
Tests for plus/minus query parsing
"""

import pytest

from SearchServer.errors import ErrorKind, InvalidQueryError
from SearchServer.preprocessing.preprocess import StopWordsPreprocessor
from SearchServer.query.parser import Query, QueryParser


@pytest.fixture
def parser():
    return QueryParser(StopWordsPreprocessor("and in on the"))


def test_plus_and_minus_words(parser):
    query = parser.parse("fluffy cat -groomed")
    assert query.plus_words == {"fluffy", "cat"}
    assert query.minus_words == {"groomed"}


def test_words_are_deduplicated_and_sorted(parser):
    query = parser.parse("tail cat tail -dog -dog fluffy")
    assert query.sorted_plus_words() == ["cat", "fluffy", "tail"]
    assert query.sorted_minus_words() == ["dog"]


def test_stop_words_are_dropped_whatever_the_sign(parser):
    query = parser.parse("the cat -in -dog and")
    assert query == Query({"cat"}, {"dog"})


def test_empty_query(parser):
    assert parser.parse("") == Query()
    assert parser.parse("   ") == Query()


@pytest.mark.parametrize("raw_query", ["-", "cat -", "fluffy - tail"])
def test_empty_negation(parser, raw_query):
    with pytest.raises(InvalidQueryError) as excinfo:
        parser.parse(raw_query)
    assert excinfo.value.kind is ErrorKind.EMPTY_NEGATION


@pytest.mark.parametrize("raw_query", ["--cat", "fluffy --cat", "---"])
def test_double_negation(parser, raw_query):
    with pytest.raises(InvalidQueryError) as excinfo:
        parser.parse(raw_query)
    assert excinfo.value.kind is ErrorKind.DOUBLE_NEGATION


@pytest.mark.parametrize("raw_query", ["ca\x01t", "-do\x1fg", "cat\tdog"])
def test_control_characters(parser, raw_query):
    with pytest.raises(InvalidQueryError) as excinfo:
        parser.parse(raw_query)
    assert excinfo.value.kind is ErrorKind.INVALID_CHARACTERS


def test_hyphen_inside_word_is_not_negation(parser):
    query = parser.parse("well-groomed -half-life")
    assert query.plus_words == {"well-groomed"}
    assert query.minus_words == {"half-life"}


def test_parse_word(parser):
    word = parser.parse_word("-the")
    assert word.data == "the"
    assert word.is_minus
    assert word.is_stop
