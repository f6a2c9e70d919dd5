from functools import cmp_to_key
from typing import Callable, Dict, Iterable, Iterator, List, Sequence, Tuple, Union

from .inverted_index import InvertedIndex
from ..document import DocumentData, DocumentResult, DocumentStatus, compute_average_rating
from ..errors import (
    DocumentIndexOutOfRangeError,
    DocumentNotFoundError,
    ErrorKind,
    InvalidDocumentError,
)
from ..preprocessing.preprocess import PreprocessingPipeline, StopWordsPreprocessor
from ..preprocessing.tokenizer import WhitespaceTokenizer, is_valid_word
from ..query.parser import Query, QueryParser

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


class SearchServer:
    """
    In-memory full-text search over short documents.

    Documents are indexed by their words with stop words removed. Queries
    are ranked by TF-IDF relevance; words prefixed with '-' exclude every
    document that contains them.
    """

    def __init__(self, stop_words: Union[str, Iterable[str]] = "",
                 max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT,
                 relevance_epsilon: float = RELEVANCE_EPSILON):
        """
        Initialize the search server.

        Args:
            stop_words: Space-separated string or iterable of words that are
                never indexed nor queried
            max_result_document_count: Maximum number of results returned by
                find_top_documents
            relevance_epsilon: Relevance values closer than this are treated
                as equal and ordered by rating instead

        Raises:
            InvalidStopWordsError: If a stop word contains control characters
            ValueError: If max_result_document_count or relevance_epsilon is negative
        """
        self.stop_words = StopWordsPreprocessor(stop_words)
        self.tokenizer = WhitespaceTokenizer()
        self.pipeline = PreprocessingPipeline([self.stop_words], name="IndexingPipeline")
        if max_result_document_count < 0:
            raise ValueError(f"max_result_document_count must not be negative: {max_result_document_count}")
        if relevance_epsilon < 0:
            raise ValueError(f"relevance_epsilon must not be negative: {relevance_epsilon}")

        self.query_parser = QueryParser(self.stop_words, self.tokenizer)
        self.max_result_document_count = max_result_document_count
        self.relevance_epsilon = relevance_epsilon

        self.inverted_index = InvertedIndex()
        self.documents: Dict[int, DocumentData] = {}
        self.document_ids: List[int] = []

    def split_into_words_no_stop(self, text: str) -> List[str]:
        return self.pipeline.get_terms(self.tokenizer.tokenize(text), text)

    def add_document(self, document_id: int, document: str,
                     status: DocumentStatus = DocumentStatus.ACTUAL,
                     ratings: Sequence[int] = ()):
        """
        Add a document to the index.

        Nothing is changed if any of the checks fails.

        Args:
            document_id: Non-negative, unused document id
            document: Document text, words separated by spaces
            status: Lifecycle status of the document
            ratings: Rating values, averaged into the document rating

        Raises:
            InvalidDocumentError: If the id is negative or already used, or
                the text contains control characters
        """
        if document_id < 0:
            raise InvalidDocumentError(ErrorKind.NEGATIVE_ID, document_id)
        if document_id in self.documents:
            raise InvalidDocumentError(ErrorKind.DUPLICATE_ID, document_id)
        if not is_valid_word(document):
            raise InvalidDocumentError(ErrorKind.INVALID_CHARACTERS, document_id)

        words = self.split_into_words_no_stop(document)
        self.inverted_index.add_document(document_id, words)
        self.documents[document_id] = DocumentData(compute_average_rating(list(ratings)), status)
        self.document_ids.append(document_id)

    def get_document_count(self) -> int:
        return len(self.documents)

    def get_document_id(self, index: int) -> int:
        """Return the id of the document added at position index."""
        if not 0 <= index < len(self.document_ids):
            raise DocumentIndexOutOfRangeError(index, len(self.document_ids))
        return self.document_ids[index]

    def get_word_frequencies(self, document_id: int) -> Dict[str, float]:
        return self.inverted_index.get_word_frequencies(document_id)

    def __len__(self):
        return self.get_document_count()

    def __iter__(self) -> Iterator[int]:
        return iter(self.document_ids)

    def parse_query(self, raw_query: str) -> Query:
        return self.query_parser.parse(raw_query)

    def find_top_documents(self, raw_query: str,
                           document_predicate: Union[DocumentPredicate, DocumentStatus, None] = None
                           ) -> List[DocumentResult]:
        """
        Find the documents most relevant to a query.

        Args:
            raw_query: Query text; words prefixed with '-' exclude documents
            document_predicate: Either a predicate (document_id, status, rating) -> bool,
                a DocumentStatus to keep only documents with that status, or
                None to keep only ACTUAL documents

        Returns:
            At most max_result_document_count results, by descending relevance,
            then descending rating for relevance ties

        Raises:
            InvalidQueryError: If the query is malformed
        """
        if document_predicate is None:
            document_predicate = DocumentStatus.ACTUAL
        if isinstance(document_predicate, DocumentStatus):
            required_status = document_predicate
            document_predicate = lambda document_id, status, rating: status == required_status

        query = self.parse_query(raw_query)
        matched_documents = self._find_all_documents(query, document_predicate)

        matched_documents.sort(key=cmp_to_key(self._compare_results))
        return matched_documents[:self.max_result_document_count]

    def _find_all_documents(self, query: Query, document_predicate: DocumentPredicate) -> List[DocumentResult]:
        document_to_relevance: Dict[int, float] = {}
        document_count = self.get_document_count()

        for word in query.sorted_plus_words():
            if word not in self.inverted_index:
                continue
            idf = self.inverted_index.get_inverse_document_frequency(word, document_count)
            for document_id, term_freq in self.inverted_index.get_postings(word).items():
                document_to_relevance[document_id] = document_to_relevance.get(document_id, 0.0) + term_freq * idf

        for word in query.sorted_minus_words():
            for document_id in self.inverted_index.get_postings(word):
                document_to_relevance.pop(document_id, None)

        results = []
        for document_id in sorted(document_to_relevance):
            data = self.documents[document_id]
            if document_predicate(document_id, data.status, data.rating):
                results.append(DocumentResult(document_id, document_to_relevance[document_id], data.rating))
        return results

    def _compare_results(self, lhs: DocumentResult, rhs: DocumentResult) -> int:
        if abs(lhs.relevance - rhs.relevance) < self.relevance_epsilon:
            return rhs.rating - lhs.rating
        return -1 if lhs.relevance > rhs.relevance else 1

    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        Report which plus words of a query a document contains.

        Args:
            raw_query: Query text
            document_id: Id of an added document

        Returns:
            (matched words in sorted order, document status); the word list
            is empty if the document contains any minus word

        Raises:
            DocumentNotFoundError: If no document with this id was added
            InvalidQueryError: If the query is malformed
        """
        query = self.parse_query(raw_query)
        if document_id not in self.documents:
            raise DocumentNotFoundError(document_id)

        status = self.documents[document_id].status

        for word in query.sorted_minus_words():
            if self.inverted_index.contains(word, document_id):
                return [], status

        matched_words = [word for word in query.sorted_plus_words()
                         if self.inverted_index.contains(word, document_id)]
        return matched_words, status
