from logging import getLogger
from pathlib import Path

from pydantic import ValidationError

from ..exceptions import DeckValidationError
from ..models import Slide, SlideEntry, ValidationIssue, ValidationIssueKind
from ..models.definitions import SlideEntryDefinition
from .manifest import MANIFEST_NAME, parse_slides_text
from .protocols import DeckLoaderProtocol

_logger = getLogger(__name__)


def validate_slide_entry(entry: SlideEntry, line: int) -> SlideEntryDefinition:
    """Validate a single manifest entry.

    Args:
        entry: Entry as parsed from the manifest.
        line: 1-based line of the entry, used in error reports.

    Raises:
        DeckValidationError: Raised if the entry has unknown directives, an invalid \
            file name or an unknown effect name.

    Returns:
        The validated entry.
    """
    if entry.unknown_directives or ":" in entry.filename:
        raise DeckValidationError(
            ValidationIssue(
                kind=ValidationIssueKind.INVALID_DIRECTIVE,
                message=f"Malformed directive in: {entry.filename}",
                filename=entry.filename,
                line=line,
            )
        )
    try:
        return SlideEntryDefinition(
            filename=entry.filename,
            before_transition=entry.before_transition,
            after_transition=entry.after_transition,
        )
    except ValidationError as e:
        raise DeckValidationError(_issue_from_error(entry, line, e)) from e


def _issue_from_error(
    entry: SlideEntry, line: int, error: ValidationError
) -> ValidationIssue:
    first = error.errors()[0]
    match first["loc"]:
        case ("filename", *_):
            if first["type"] == "value_error":
                message = str(first["ctx"]["error"])
            else:
                message = "Filename cannot be empty"
            kind = ValidationIssueKind.INVALID_PATH
        case ("before_transition", *_):
            message = f"Invalid before transition: {entry.before_transition}"
            kind = ValidationIssueKind.INVALID_TRANSITION
        case _:
            message = f"Invalid after transition: {entry.after_transition}"
            kind = ValidationIssueKind.INVALID_TRANSITION
    return ValidationIssue(
        kind=kind, message=message, filename=entry.filename, line=line
    )


def validate_deck(deck_dir: Path) -> list[SlideEntryDefinition]:
    """Validate the manifest of a deck and check that every slide file exists.

    Args:
        deck_dir: Directory containing the `slides.txt` manifest.

    Raises:
        DeckValidationError: Raised on the first problem found, in manifest order.

    Returns:
        Validated entries, in manifest order.
    """
    manifest = deck_dir / MANIFEST_NAME
    if not manifest.is_file():
        raise DeckValidationError(
            ValidationIssue(
                kind=ValidationIssueKind.MISSING_SLIDES_TXT,
                message=f"{MANIFEST_NAME} not found in {deck_dir}",
            )
        )
    entries = parse_slides_text(_read_text(manifest, None))
    definitions = []
    for line, entry in enumerate(entries, start=1):
        definition = validate_slide_entry(entry, line)
        if not (deck_dir / definition.filename).is_file():
            raise DeckValidationError(
                ValidationIssue(
                    kind=ValidationIssueKind.MISSING_FILE,
                    message=f"Slide file not found: {definition.filename}",
                    filename=definition.filename,
                    line=line,
                )
            )
        definitions.append(definition)
    if not definitions:
        raise DeckValidationError(
            ValidationIssue(
                kind=ValidationIssueKind.EMPTY_DECK,
                message=f"{MANIFEST_NAME} in {deck_dir} does not list any slide",
            )
        )
    return definitions


def _read_text(path: Path, line: int | None) -> str:
    try:
        return path.read_text(encoding="utf8")
    except (OSError, UnicodeDecodeError) as e:
        raise DeckValidationError(
            ValidationIssue(
                kind=ValidationIssueKind.UNREADABLE_FILE,
                message=f"Cannot read {path.name}: {e}",
                filename=path.name,
                line=line,
            )
        ) from e


class DeckLoader(DeckLoaderProtocol):
    def load(self, deck_dir: Path) -> list[Slide]:
        """Validate the deck in `deck_dir` and read its slides.

        Args:
            deck_dir: Directory containing the `slides.txt` manifest.

        Raises:
            DeckValidationError: Raised if the deck is invalid or if a slide file \
                cannot be read as UTF-8 text.

        Returns:
            The slides, in manifest order.
        """
        definitions = validate_deck(deck_dir)
        slides = [
            Slide(
                filename=definition.filename,
                content=_read_text(deck_dir / definition.filename, line),
                before_transition=definition.before_transition,
                after_transition=definition.after_transition,
            )
            for line, definition in enumerate(definitions, start=1)
        ]
        _logger.debug("Loaded %d slides from %s", len(slides), deck_dir)
        return slides
