from enum import Enum
from typing import Sequence


class DocumentStatus(Enum):
    ACTUAL = 0
    IRRELEVANT = 1
    BANNED = 2
    REMOVED = 3


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Average rating of a document: the floor of the mean of its ratings.

    Args:
        ratings: Rating values supplied with the document

    Returns:
        Integer average rating, 0 if no ratings were given
    """
    if not ratings:
        return 0
    return sum(ratings) // len(ratings)


class DocumentData:
    """Metadata kept for every ingested document."""

    __slots__ = ("rating", "status")

    def __init__(self, rating: int, status: DocumentStatus):
        self.rating = rating
        self.status = status

    def __repr__(self):
        return f"DocumentData(rating={self.rating}, status={self.status.name})"


class DocumentResult:
    """
    A single ranked search result.

    Results are built fresh for every query and belong to the caller.
    """

    __slots__ = ("id", "relevance", "rating")

    def __init__(self, document_id: int = 0, relevance: float = 0.0, rating: int = 0):
        self.id = document_id
        self.relevance = relevance
        self.rating = rating

    def __eq__(self, other):
        if not isinstance(other, DocumentResult):
            return NotImplemented
        return (self.id, self.relevance, self.rating) == (other.id, other.relevance, other.rating)

    def __repr__(self):
        return f"DocumentResult(id={self.id}, relevance={self.relevance}, rating={self.rating})"

    def __str__(self):
        return f"{{ document_id = {self.id}, relevance = {self.relevance}, rating = {self.rating} }}"
