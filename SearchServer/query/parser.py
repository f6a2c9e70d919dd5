from typing import List, Set

from ..errors import ErrorKind, InvalidQueryError
from ..preprocessing.preprocess import StopWordsPreprocessor
from ..preprocessing.tokenizer import WhitespaceTokenizer, is_valid_word


class QueryWord:
    def __init__(self, data: str, is_minus: bool, is_stop: bool):
        self.data = data
        self.is_minus = is_minus
        self.is_stop = is_stop

    def __repr__(self):
        sign = "-" if self.is_minus else "+"
        return f"QueryWord({sign}{self.data}{', stop' if self.is_stop else ''})"


class Query:
    """
    A parsed query: the words a document should contain (plus words) and
    the words that exclude a document outright (minus words).

    Both sets are deduplicated and free of stop words. Iteration helpers
    return the words sorted so that matching output is deterministic.
    """

    def __init__(self, plus_words: Set[str] = None, minus_words: Set[str] = None):
        self.plus_words = set(plus_words or ())
        self.minus_words = set(minus_words or ())

    def sorted_plus_words(self) -> List[str]:
        return sorted(self.plus_words)

    def sorted_minus_words(self) -> List[str]:
        return sorted(self.minus_words)

    def __eq__(self, other):
        if not isinstance(other, Query):
            return NotImplemented
        return self.plus_words == other.plus_words and self.minus_words == other.minus_words

    def __repr__(self):
        return f"Query(plus={self.sorted_plus_words()}, minus={self.sorted_minus_words()})"


class QueryParser:
    """
    Parser for plus/minus queries with the following syntax:
    query: word (' ' word)*
    word: ['-'] TERM

    A word prefixed with '-' excludes every document containing TERM.
    Stop words are dropped whatever their sign.
    """

    def __init__(self, stop_words: StopWordsPreprocessor, tokenizer: WhitespaceTokenizer = None):
        self.stop_words = stop_words
        self.tokenizer = tokenizer or WhitespaceTokenizer()

    def parse_word(self, text: str) -> QueryWord:
        is_minus = False
        data = text
        if data.startswith("-"):
            is_minus = True
            data = data[1:]

        if not data:
            raise InvalidQueryError(ErrorKind.EMPTY_NEGATION, text)
        if data.startswith("-"):
            raise InvalidQueryError(ErrorKind.DOUBLE_NEGATION, text)
        if not is_valid_word(data):
            raise InvalidQueryError(ErrorKind.INVALID_CHARACTERS, text)

        return QueryWord(data, is_minus, self.stop_words.is_stop_word(data))

    def parse(self, text: str) -> Query:
        """
        Parse raw query text.

        Args:
            text: Raw query, words separated by spaces

        Returns:
            Parsed Query

        Raises:
            InvalidQueryError: If a word is a bare '-', starts with '--'
                or contains control characters
        """
        query = Query()
        for word in self.tokenizer.split(text):
            query_word = self.parse_word(word)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                query.minus_words.add(query_word.data)
            else:
                query.plus_words.add(query_word.data)
        return query
