from typing import TYPE_CHECKING

from .protocols import (
    DeckLoaderProtocol,
    InputHandlerProtocol,
    KeyboardProtocol,
    SlideRendererProtocol,
)

if TYPE_CHECKING:
    from ..configuring.settings import PresenterSettings


class PresenterSettingsFactory:
    def __init__(self, settings: "PresenterSettings") -> None:
        self._settings = settings

    def deck_loader(self) -> DeckLoaderProtocol:
        from .deck_loader import DeckLoader

        return DeckLoader()

    def input_handler(self) -> InputHandlerProtocol:
        from .input_handler import InputHandler

        return InputHandler()

    def renderer(self, default_title: str | None = None) -> SlideRendererProtocol:
        from .renderer import SlideRenderer

        return SlideRenderer(
            theme=self._settings.theme,
            title=self._settings.title or default_title,
            show_header=self._settings.show_header,
            show_footer=self._settings.show_footer,
        )

    def keyboard(self) -> KeyboardProtocol:
        from .keyboard import TerminalKeyboard

        return TerminalKeyboard()
