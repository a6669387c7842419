"""Model classes for slides, from manifest entries to loaded slides."""

from dataclasses import dataclass, field
from enum import Enum

from .scalars import TransitionName


@dataclass(frozen=True)
class SlideEntry:
    """Line of a deck manifest, as parsed and before any validation."""

    filename: str
    """Name of the markdown file, relative to the deck directory."""

    before_transition: str | None = None
    """Raw name of the effect revealing this slide."""

    after_transition: str | None = None
    """Raw name of the effect hiding this slide."""

    unknown_directives: tuple[str, ...] = field(default_factory=tuple)
    """Tokens containing a colon that are neither `before:` nor `after:`."""


@dataclass(frozen=True)
class Slide:
    """Validated slide with its content loaded.

    The order of slides in a deck is significant: transitions are selected by looking \
    at adjacent slides.
    """

    filename: str
    content: str
    before_transition: TransitionName | None = None
    after_transition: TransitionName | None = None


class ValidationIssueKind(Enum):
    MISSING_SLIDES_TXT = "missing_slides_txt"
    INVALID_DIRECTIVE = "invalid_directive"
    INVALID_PATH = "invalid_path"
    INVALID_TRANSITION = "invalid_transition"
    MISSING_FILE = "missing_file"
    EMPTY_DECK = "empty_deck"
    UNREADABLE_FILE = "unreadable_file"


@dataclass(frozen=True)
class ValidationIssue:
    """Reason why a deck manifest was rejected."""

    kind: ValidationIssueKind
    message: str
    filename: str | None = None
    line: int | None = None
    """1-based line of the manifest the issue was found on."""
