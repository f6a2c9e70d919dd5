"""
SearchServer - in-process full-text search over short documents.

Documents are ranked by TF-IDF relevance to plus/minus queries; stop words
are never indexed nor queried.
"""

from .document import DocumentResult, DocumentStatus
from .errors import (
    DocumentIndexOutOfRangeError,
    DocumentNotFoundError,
    ErrorKind,
    InvalidDocumentError,
    InvalidQueryError,
    InvalidStopWordsError,
    SearchServerError,
)
from .tfidf_search.tfidf_search import SearchServer

__all__ = [
    "DocumentIndexOutOfRangeError",
    "DocumentNotFoundError",
    "DocumentResult",
    "DocumentStatus",
    "ErrorKind",
    "InvalidDocumentError",
    "InvalidQueryError",
    "InvalidStopWordsError",
    "SearchServer",
    "SearchServerError",
]
