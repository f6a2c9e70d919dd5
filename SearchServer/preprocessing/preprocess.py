from abc import ABC, abstractmethod
from typing import Iterable, List, Union

from .tokenizer import Token, WhitespaceTokenizer, is_valid_word
from ..errors import InvalidStopWordsError


class TokenPreprocessor(ABC):
    @abstractmethod
    def preprocess(self, token: Token, document: str) -> Token:
        raise NotImplementedError()

    def preprocess_all(self, tokens: List[Token], document: str) -> List[Token]:
        return [self.preprocess(token, document) for token in tokens]


class StopWordsPreprocessor(TokenPreprocessor):
    """Preprocessor for removing stop words."""

    def __init__(self, stop_words: Union[str, Iterable[str]] = ""):
        """
        Initialize preprocessor for removing stop words.

        Args:
            stop_words: Either a single string of space-separated stop words
                or any iterable of stop words. Empty entries are ignored.

        Raises:
            InvalidStopWordsError: If a stop word contains control characters
        """
        if isinstance(stop_words, str):
            stop_words = WhitespaceTokenizer().split(stop_words)

        self.stop_words = set()
        for word in stop_words:
            if not word:
                continue
            if not is_valid_word(word):
                raise InvalidStopWordsError(word)
            self.stop_words.add(word)

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def preprocess(self, token: Token, document: str) -> Token:
        """
        If token is a stop word, replace its processed_form with empty string.

        Args:
            token: Token to process
            document: Original document

        Returns:
            Processed token
        """
        if self.is_stop_word(token.processed_form):
            token.processed_form = ""
        return token


class PreprocessingPipeline:
    """Pipeline of token preprocessors."""

    def __init__(self, preprocessors, name="Default Pipeline"):
        self.preprocessors = preprocessors
        self.name = name

    def preprocess(self, tokens: List[Token], document: str) -> List[Token]:
        """
        Apply all preprocessors to the tokens.

        Args:
            tokens: List of tokens to preprocess
            document: Original document text

        Returns:
            List of preprocessed tokens
        """
        for preprocessor in self.preprocessors:
            preprocessor.preprocess_all(tokens, document)

        return tokens

    def get_terms(self, tokens: List[Token], document: str) -> List[str]:
        """Preprocess tokens and return the non-empty processed forms in order."""
        return [token.processed_form for token in self.preprocess(tokens, document)
                if token.processed_form]
