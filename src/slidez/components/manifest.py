"""Parse `slides.txt` manifests into raw entries.

Parsing never fails: malformed lines are kept as entries with their problems recorded \
(unknown directives, missing file name) and rejected later by the validation step.
"""

from ..models import SlideEntry

BEFORE_PREFIX = "before:"
AFTER_PREFIX = "after:"
MANIFEST_NAME = "slides.txt"


def parse_slide_entry(line: str) -> SlideEntry:
    filename = ""
    before: str | None = None
    after: str | None = None
    unknown: list[str] = []
    for token in line.split():
        if token.startswith(BEFORE_PREFIX):
            before = token.removeprefix(BEFORE_PREFIX)
        elif token.startswith(AFTER_PREFIX):
            after = token.removeprefix(AFTER_PREFIX)
        elif ":" in token:
            unknown.append(token)
            filename = filename or token
        elif not filename:
            filename = token
    return SlideEntry(
        filename=filename,
        before_transition=before,
        after_transition=after,
        unknown_directives=tuple(unknown),
    )


def parse_slides_text(content: str) -> list[SlideEntry]:
    return [
        parse_slide_entry(stripped)
        for line in content.splitlines()
        if (stripped := line.strip())
    ]
