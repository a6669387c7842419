"""Host loop of a presentation.

[`Presenter`][slidez.presenting.Presenter] owns everything a running presentation \
needs and is driven by three calls: `handle_key` for each key press, `tick` with the \
time elapsed since the previous tick and `frame` to get the screen to display. \
[`present`][slidez.presenting.present] wires it to a terminal.
"""

from logging import getLogger
from pathlib import Path
from time import monotonic

from .components.factory import PresenterSettingsFactory
from .components.input_handler import InputAction
from .components.screen import ScreenBuffer
from .configuring.settings import PresenterSettings
from .exceptions import SlidezError
from .models import Backward, Forward, Jump, Quit, Slide
from .runtime.navigation import create_navigation_state_machine
from .runtime.orchestrator import create_transition_orchestrator
from .runtime.player import TransitionPlayer

_logger = getLogger(__name__)

IDLE_TIMEOUT = 0.25
"""Seconds to wait for a key when no transition plays."""


class Presenter:
    def __init__(
        self,
        deck_dir: Path,
        settings: PresenterSettings,
        factory: PresenterSettingsFactory | None = None,
    ) -> None:
        factory = factory or PresenterSettingsFactory(settings)
        self._deck_dir = deck_dir
        self._settings = settings
        self._loader = factory.deck_loader()
        self._input_handler = factory.input_handler()
        self._renderer = factory.renderer(default_title=deck_dir.resolve().name)
        self._running = True
        self._show_help = False
        self._use_slides(self._loader.load(deck_dir), 0)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def animating(self) -> bool:
        return self._player.plan is not None

    @property
    def slides(self) -> list[Slide]:
        return self._slides

    @property
    def player(self) -> TransitionPlayer:
        return self._player

    def start(self) -> None:
        self._player.start()

    def stop(self) -> None:
        self._running = False

    def handle_key(self, key: str) -> None:
        if key == "ctrl+c":
            self.stop()
            return
        key_action = self._input_handler.parse_key(key)
        if key_action.action not in (InputAction.JUMP, InputAction.JUMP_MODE):
            self._input_handler.reset()
        match key_action.action:
            case InputAction.FORWARD:
                self._player.dispatch(Forward())
            case InputAction.BACKWARD:
                self._player.dispatch(Backward())
            case InputAction.JUMP if key_action.slide_number is not None:
                self._player.dispatch(Jump(key_action.slide_number - 1))
            case InputAction.QUIT:
                self._player.dispatch(Quit(on_quit=self.stop))
            case InputAction.CANCEL:
                self._show_help = False
                self._player.cancel()
            case InputAction.HELP:
                self._show_help = not self._show_help
            case InputAction.RELOAD:
                self.reload()
            case InputAction.TOGGLE_HEADER:
                self._renderer.show_header = not self._renderer.show_header
            case InputAction.TOGGLE_FOOTER:
                self._renderer.show_footer = not self._renderer.show_footer

    def reload(self) -> None:
        """Load the deck again, staying on the same slide when it still exists.

        The current deck is kept if the new one is invalid.
        """
        try:
            slides = self._loader.load(self._deck_dir)
        except SlidezError as e:
            _logger.error("Could not reload the deck: %s", e)
            return
        index = min(self._player.state.current_index, len(slides) - 1)
        self._use_slides(slides, index)
        _logger.info("Reloaded %d slides", len(slides))

    def tick(self, elapsed_ms: float) -> None:
        self._player.tick(elapsed_ms)

    def frame(self, width: int, height: int) -> ScreenBuffer:
        if self._show_help:
            return self._renderer.render_help(width, height)
        state = self._player.state
        buffer = self._renderer.render(
            self._slides[state.display_index],
            state.display_index + 1,
            len(self._slides),
            width,
            height,
        )
        self._player.render(buffer, self._settings.background)
        return buffer

    def _use_slides(self, slides: list[Slide], index: int) -> None:
        self._slides = slides
        self._player = TransitionPlayer(
            create_navigation_state_machine(slides),
            create_transition_orchestrator(slides),
        )
        if index:
            self._player.dispatch(Jump(index))


def present(deck_dir: Path, settings: PresenterSettings) -> None:
    """Present the deck in `deck_dir` full screen until the user quits.

    Args:
        deck_dir: Directory containing the `slides.txt` manifest.
        settings: Settings of the presentation.
    """
    from rich.console import Console
    from rich.live import Live

    factory = PresenterSettingsFactory(settings)
    presenter = Presenter(deck_dir, settings, factory)
    console = Console()
    frame_time = 1 / settings.fps
    with (
        factory.keyboard() as keyboard,
        Live(console=console, screen=True, auto_refresh=False) as live,
    ):
        presenter.start()
        last = monotonic()
        while presenter.running:
            timeout = frame_time if presenter.animating else IDLE_TIMEOUT
            for key in keyboard.read_keys(timeout):
                presenter.handle_key(key)
            now = monotonic()
            presenter.tick((now - last) * 1000)
            last = now
            if presenter.running:
                live.update(
                    presenter.frame(console.width, console.height), refresh=True
                )
