"""Read key presses from a terminal with blessed."""

from collections.abc import Sequence
from contextlib import ExitStack
from types import TracebackType
from typing import Self

from blessed import Terminal
from blessed.keyboard import Keystroke

from .protocols import KeyboardProtocol

_SEQUENCE_NAMES = {
    "KEY_RIGHT": "right",
    "KEY_LEFT": "left",
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_PGUP": "pageup",
    "KEY_PGDOWN": "pagedown",
    "KEY_HOME": "home",
    "KEY_END": "end",
    "KEY_ESCAPE": "escape",
    "KEY_ENTER": "enter",
    "KEY_TAB": "tab",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "delete",
}

_SPECIAL_CHARACTERS = {
    " ": "space",
    "\x03": "ctrl+c",
}

UNKNOWN_KEY = "unknown"

_ESCAPE = "\x1b"
_CSI_PARAMETERS = frozenset(chr(code) for code in range(0x20, 0x40))


def key_name(keystroke: Keystroke) -> str:
    """Name a single keystroke the way the keymap expects it.

    Sequences blessed knows are named after their `KEY_*` name, lowercased and without \
    prefix when the keymap has no short name for them (`KEY_F5` becomes `f5`). \
    Characters are named after themselves.

    Args:
        keystroke: Keystroke returned by `Terminal.inkey`.

    Returns:
        Name of the key.
    """
    if keystroke.is_sequence:
        name = keystroke.name
        if not name:
            return UNKNOWN_KEY
        return _SEQUENCE_NAMES.get(name, name.removeprefix("KEY_").lower())
    text = str(keystroke)
    return _SPECIAL_CHARACTERS.get(text, text)


def key_names(keystrokes: Sequence[Keystroke]) -> list[str]:
    """Name a batch of keystrokes read in one go.

    An escape sequence blessed does not recognize (modified arrows on some terminals, \
    for instance) comes back as an escape keystroke followed by its remaining \
    characters. Such runs are folded into a single unknown key so that their digits \
    never reach the keymap.

    Args:
        keystrokes: Keystrokes, in the order they were read.

    Returns:
        Key names, in the order they were pressed.
    """
    names = []
    i = 0
    while i < len(keystrokes):
        keystroke = keystrokes[i]
        i += 1
        if str(keystroke) == _ESCAPE and i < len(keystrokes):
            end = _unknown_sequence_end(keystrokes, i)
            if end is not None:
                names.append(UNKNOWN_KEY)
                i = end
                continue
        names.append(key_name(keystroke))
    return names


def _unknown_sequence_end(keystrokes: Sequence[Keystroke], start: int) -> int | None:
    """Index after the CSI or SS3 sequence that starts at `start`, if any."""
    introducer = keystrokes[start]
    if introducer.is_sequence or str(introducer) not in ("[", "O"):
        return None
    i = start + 1
    if str(introducer) == "[":
        while (
            i < len(keystrokes)
            and not keystrokes[i].is_sequence
            and str(keystrokes[i]) in _CSI_PARAMETERS
        ):
            i += 1
    return min(i + 1, len(keystrokes))


class TerminalKeyboard(KeyboardProtocol):
    """Keyboard reading from the terminal.

    Must be used as a context manager: the terminal is switched to cbreak mode on \
    entry and restored on exit.
    """

    def __init__(self, terminal: Terminal | None = None) -> None:
        self._terminal = terminal or Terminal()
        self._stack = ExitStack()

    def __enter__(self) -> Self:
        self._stack.enter_context(self._terminal.cbreak())
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self._stack.close()

    def read_keys(self, timeout: float) -> list[str]:
        keystrokes = []
        keystroke = self._terminal.inkey(timeout=timeout)
        while keystroke:
            keystrokes.append(keystroke)
            keystroke = self._terminal.inkey(timeout=0)
        return key_names(keystrokes)
