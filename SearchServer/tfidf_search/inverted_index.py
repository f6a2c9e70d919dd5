import math
from collections import defaultdict
from typing import Dict, List


class InvertedIndex:
    """Inverted index mapping words to the documents containing them."""

    def __init__(self):
        self.index = defaultdict(dict)  # {word: {doc_id: term_frequency}}
        self.doc_to_words = {}  # {doc_id: {word: term_frequency}}

    def add_document(self, doc_id: int, words: List[str]):
        """
        Add the words of a document to the inverted index.

        Each occurrence of a word adds 1 / len(words) to that word's
        frequency in the document, so a document's term frequencies sum
        to one. A document without words contributes nothing.

        Args:
            doc_id: Identifier of the document
            words: Document words with stop words already removed
        """
        word_freq = self.doc_to_words.setdefault(doc_id, {})
        if not words:
            return

        inv_word_count = 1.0 / len(words)
        for word in words:
            doc_freqs = self.index[word]
            doc_freqs[doc_id] = doc_freqs.get(doc_id, 0.0) + inv_word_count
            word_freq[word] = doc_freqs[doc_id]

    def __contains__(self, word: str) -> bool:
        return word in self.index

    def get_postings(self, word: str) -> Dict[int, float]:
        """Return {doc_id: term_frequency} for a word, empty if the word is not indexed."""
        return self.index.get(word, {})

    def contains(self, word: str, doc_id: int) -> bool:
        return doc_id in self.index.get(word, {})

    def get_document_frequency(self, word: str) -> int:
        """
        Get the number of documents containing the given word.

        Args:
            word: The word to check

        Returns:
            Number of documents containing the word
        """
        return len(self.index.get(word, {}))

    def get_inverse_document_frequency(self, word: str, document_count: int) -> float:
        """
        Calculate the inverse document frequency for a word.
        IDF(t) = ln(N/DF(t))

        Args:
            word: The word to calculate IDF for
            document_count: Total number of documents N

        Returns:
            IDF value for the word, 0 if no document contains it
        """
        df = self.get_document_frequency(word)
        if df == 0:
            return 0.0
        return math.log(document_count / df)

    def get_word_frequencies(self, doc_id: int) -> Dict[str, float]:
        return dict(self.doc_to_words.get(doc_id, {}))
