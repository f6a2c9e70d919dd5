from typing import List


class Token:
    """
    A single word of a document or query.

    processed_form starts out equal to the raw word; preprocessors may
    rewrite it, and an empty processed_form means the token was dropped.
    """

    def __init__(self, text: str, position: int):
        self.text = text
        self.processed_form = text
        self.position = position

    def __repr__(self):
        return f"Token({self.text!r}, position={self.position})"


def is_valid_word(word: str) -> bool:
    """A word is valid if it contains no control characters (code points below 0x20)."""
    return not any(ord(c) < 0x20 for c in word)


class WhitespaceTokenizer:
    """Splits text into words on the space character."""

    def split(self, text: str) -> List[str]:
        return [word for word in text.split(" ") if word]

    def tokenize(self, text: str) -> List[Token]:
        return [Token(word, position) for position, word in enumerate(self.split(text))]
