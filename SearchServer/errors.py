"""
Errors raised by the search server.

Every error carries an ErrorKind so callers can tell failures apart
without looking at the message text.
"""

from enum import Enum


class ErrorKind(Enum):
    NEGATIVE_ID = "negative document id"
    DUPLICATE_ID = "duplicate document id"
    INVALID_CHARACTERS = "invalid characters"
    EMPTY_NEGATION = "no text after minus"
    DOUBLE_NEGATION = "more than one minus"
    NOT_FOUND = "document not found"
    OUT_OF_RANGE = "document index out of range"
    INVALID_STOP_WORD = "invalid stop word"


class SearchServerError(Exception):
    """Base class for all search server errors."""

    def __init__(self, kind: ErrorKind, message: str = None):
        self.kind = kind
        super().__init__(message or kind.value)


class InvalidDocumentError(SearchServerError, ValueError):
    """Raised when a document is rejected at ingestion."""

    def __init__(self, kind: ErrorKind, document_id, message: str = None):
        self.document_id = document_id
        super().__init__(kind, message or f"{kind.value}: {document_id}")


class InvalidQueryError(SearchServerError, ValueError):
    """Raised when a query word breaks the query syntax."""

    def __init__(self, kind: ErrorKind, word: str, message: str = None):
        self.word = word
        super().__init__(kind, message or f"{kind.value}: {word!r}")


class InvalidStopWordsError(SearchServerError, ValueError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(ErrorKind.INVALID_STOP_WORD, f"invalid stop word: {word!r}")


class DocumentNotFoundError(SearchServerError, KeyError):
    def __init__(self, document_id):
        self.document_id = document_id
        super().__init__(ErrorKind.NOT_FOUND, f"document not found: {document_id}")

    def __str__(self):
        # KeyError would repr() the message otherwise
        return self.args[0]


class DocumentIndexOutOfRangeError(SearchServerError, IndexError):
    def __init__(self, index, document_count):
        self.index = index
        self.document_count = document_count
        super().__init__(
            ErrorKind.OUT_OF_RANGE,
            f"document index {index} out of range [0, {document_count})"
        )
