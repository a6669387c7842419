"""Provide protocols for the components a presentation is assembled from."""

from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from ..models import Slide
    from .input_handler import KeyAction
    from .screen import ScreenBuffer


class DeckLoaderProtocol(Protocol):
    """Load a deck from its directory."""

    def load(self, deck_dir: Path) -> list["Slide"]:
        """Validate the manifest of `deck_dir` and load its slides.

        Args:
            deck_dir: Directory containing a `slides.txt` manifest.

        Returns:
            The slides, in manifest order.
        """
        ...


class InputHandlerProtocol(Protocol):
    def parse_key(self, key: str) -> "KeyAction": ...

    def reset(self) -> None: ...


class SlideRendererProtocol(Protocol):
    show_header: bool
    show_footer: bool

    def render(
        self,
        slide: "Slide",
        slide_number: int,
        total_slides: int,
        width: int,
        height: int,
    ) -> "ScreenBuffer": ...

    def render_help(self, width: int, height: int) -> "ScreenBuffer": ...


class KeyboardProtocol(Protocol):
    """Source of key names. Acquires the terminal while used as a context manager."""

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None: ...

    def read_keys(self, timeout: float) -> list[str]: ...
