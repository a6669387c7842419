from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.slides import ValidationIssue


class SlidezError(Exception):
    pass


class UnknownTransitionError(SlidezError, ValueError):
    pass


class EmptyDeckError(SlidezError, ValueError):
    pass


class DeckValidationError(SlidezError):
    def __init__(self, issue: "ValidationIssue") -> None:
        super().__init__(issue.message)
        self.issue = issue
