"""Model classes to validate deck manifests.

All classes in this module are using the Pydantic library. A manifest is a \
`slides.txt` file listing one slide per line:

    intro.md before:tvon
    agenda.md
    details.md before:diagonal
    outro.md after:tvoff

The first token of a line is the markdown file of the slide, relative to the deck \
directory. The optional `before:` and `after:` directives name the effects revealing \
and hiding the slide.
"""

from pathlib import PurePosixPath, PureWindowsPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .scalars import TransitionName


class SlideEntryDefinition(BaseModel):
    """Validated manifest entry."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(min_length=1)
    """Name of the slide file. Must be a plain file name, without directories."""

    before_transition: TransitionName | None = None
    after_transition: TransitionName | None = None

    @field_validator("filename")
    @classmethod
    def _plain_file_name(cls, value: str) -> str:
        if not value.strip():
            msg = "Filename cannot be empty"
            raise ValueError(msg)
        if "/" in value or "\\" in value:
            absolute = (
                PurePosixPath(value).is_absolute()
                or PureWindowsPath(value).is_absolute()
            )
            if absolute:
                msg = f"Absolute paths are not allowed: {value}"
                raise ValueError(msg)
            msg = f"Subdirectories are not allowed: {value}"
            raise ValueError(msg)
        return value
