"""Map key names to presenter actions."""

from dataclasses import dataclass
from enum import Enum

from .protocols import InputHandlerProtocol


class InputAction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    QUIT = "quit"
    CANCEL = "cancel"
    JUMP = "jump"
    JUMP_MODE = "jump_mode"
    HELP = "help"
    RELOAD = "reload"
    TOGGLE_HEADER = "toggle_header"
    TOGGLE_FOOTER = "toggle_footer"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyAction:
    action: InputAction
    slide_number: int | None = None
    """1-based slide number typed by the user, for jumps only."""


FORWARD_KEYS = frozenset({"n", "right", "space", "pagedown", "down"})
BACKWARD_KEYS = frozenset({"p", "left", "pageup", "up"})
QUIT_KEYS = frozenset({"q"})
RELOAD_KEYS = frozenset({"r", "R"})
TOGGLE_HEADER_KEYS = frozenset({"h", "H"})
TOGGLE_FOOTER_KEYS = frozenset({"f", "F"})

_DIGITS = frozenset("0123456789")

_SIMPLE_ACTIONS = (
    (FORWARD_KEYS, InputAction.FORWARD),
    (BACKWARD_KEYS, InputAction.BACKWARD),
    (QUIT_KEYS, InputAction.QUIT),
    (RELOAD_KEYS, InputAction.RELOAD),
    (TOGGLE_HEADER_KEYS, InputAction.TOGGLE_HEADER),
    (TOGGLE_FOOTER_KEYS, InputAction.TOGGLE_FOOTER),
    (frozenset({"escape"}), InputAction.CANCEL),
    (frozenset({"?"}), InputAction.HELP),
)


class InputHandler(InputHandlerProtocol):
    """Stateful key parser.

    Digits jump directly to the slide they name. After a `:`, digits accumulate \
    instead, so that slides past the ninth can be reached: `:`, `1`, `2` jumps to \
    slide 1 then to slide 12.
    """

    def __init__(self) -> None:
        self._jump_mode = False
        self._jump_buffer = ""

    @property
    def jump_mode(self) -> bool:
        return self._jump_mode

    @property
    def jump_buffer(self) -> str:
        return self._jump_buffer

    def parse_key(self, key: str) -> KeyAction:
        for keys, action in _SIMPLE_ACTIONS:
            if key in keys:
                return KeyAction(action)
        if key == ":":
            self._jump_mode = True
            self._jump_buffer = ""
            return KeyAction(InputAction.JUMP_MODE)
        if key in _DIGITS:
            if self._jump_mode:
                self._jump_buffer += key
                return KeyAction(InputAction.JUMP, int(self._jump_buffer))
            return KeyAction(InputAction.JUMP, int(key))
        return KeyAction(InputAction.UNKNOWN)

    def reset(self) -> None:
        self._jump_mode = False
        self._jump_buffer = ""
