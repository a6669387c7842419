from blessed.keyboard import Keystroke, get_keyboard_codes
from pytest import mark

from slidez.components.input_handler import InputAction, InputHandler, KeyAction
from slidez.components.keyboard import key_names


@mark.parametrize(
    ("key", "action"),
    [
        ("n", InputAction.FORWARD),
        ("right", InputAction.FORWARD),
        ("space", InputAction.FORWARD),
        ("pagedown", InputAction.FORWARD),
        ("down", InputAction.FORWARD),
        ("p", InputAction.BACKWARD),
        ("left", InputAction.BACKWARD),
        ("pageup", InputAction.BACKWARD),
        ("up", InputAction.BACKWARD),
        ("q", InputAction.QUIT),
        ("escape", InputAction.CANCEL),
        ("?", InputAction.HELP),
        ("r", InputAction.RELOAD),
        ("R", InputAction.RELOAD),
        ("h", InputAction.TOGGLE_HEADER),
        ("F", InputAction.TOGGLE_FOOTER),
        ("x", InputAction.UNKNOWN),
        ("enter", InputAction.UNKNOWN),
    ],
)
def test_keymap(key: str, action: InputAction) -> None:
    assert InputHandler().parse_key(key) == KeyAction(action)


def test_digit_jumps_directly() -> None:
    handler = InputHandler()
    assert handler.parse_key("3") == KeyAction(InputAction.JUMP, 3)
    assert handler.parse_key("4") == KeyAction(InputAction.JUMP, 4)
    assert not handler.jump_mode


def test_jump_mode_accumulates_digits() -> None:
    handler = InputHandler()
    assert handler.parse_key(":") == KeyAction(InputAction.JUMP_MODE)
    assert handler.jump_mode
    assert handler.parse_key("1") == KeyAction(InputAction.JUMP, 1)
    assert handler.parse_key("2") == KeyAction(InputAction.JUMP, 12)
    assert handler.jump_buffer == "12"


def test_colon_restarts_jump_buffer() -> None:
    handler = InputHandler()
    handler.parse_key(":")
    handler.parse_key("4")
    handler.parse_key(":")
    assert handler.jump_buffer == ""
    assert handler.parse_key("7") == KeyAction(InputAction.JUMP, 7)


def test_reset_leaves_jump_mode() -> None:
    handler = InputHandler()
    handler.parse_key(":")
    handler.parse_key("1")
    handler.reset()
    assert not handler.jump_mode
    assert handler.jump_buffer == ""
    assert handler.parse_key("2") == KeyAction(InputAction.JUMP, 2)


_CODES = {name: code for code, name in get_keyboard_codes().items()}


def sequence(ucs: str, name: str) -> Keystroke:
    return Keystroke(ucs, code=_CODES.get(name, -1), name=name)


def characters(text: str) -> list[Keystroke]:
    return [Keystroke(char) for char in text]


def test_plain_characters() -> None:
    assert key_names(characters("nq? ")) == ["n", "q", "?", "space"]


def test_known_sequences() -> None:
    keystrokes = [
        sequence("\x1b[C", "KEY_RIGHT"),
        sequence("\x1b[D", "KEY_LEFT"),
        sequence("\x1bOA", "KEY_UP"),
        sequence("\x1b[6~", "KEY_PGDOWN"),
        sequence("\x1b", "KEY_ESCAPE"),
    ]
    assert key_names(keystrokes) == ["right", "left", "up", "pagedown", "escape"]


def test_lone_escape() -> None:
    escape = sequence("\x1b", "KEY_ESCAPE")
    assert key_names([escape]) == ["escape"]
    assert key_names([escape, *characters("q")]) == ["escape", "q"]


def test_function_key_is_not_a_digit() -> None:
    assert key_names([sequence("\x1b[15~", "KEY_F5")]) == ["f5"]


def test_unrecognized_sequence_is_a_single_key() -> None:
    escape = sequence("\x1b", "KEY_ESCAPE")
    keystrokes = [escape, *characters("[1;5C"), *characters("n")]
    assert key_names(keystrokes) == ["unknown", "n"]
    keystrokes = [escape, *characters("[15~")]
    assert key_names(keystrokes) == ["unknown"]


def test_modified_arrow_never_jumps() -> None:
    handler = InputHandler()
    for keystrokes in (
        [sequence("\x1b", "KEY_ESCAPE"), *characters("[1;5C")],
        [sequence("\x1b", "KEY_ESCAPE"), *characters("[1;2D")],
        [sequence("\x1b[15~", "KEY_F5")],
    ):
        actions = [handler.parse_key(name) for name in key_names(keystrokes)]
        assert all(action.action is InputAction.UNKNOWN for action in actions)


def test_control_characters() -> None:
    keystrokes = [sequence("\n", "KEY_ENTER"), *characters("\x03")]
    assert key_names(keystrokes) == ["enter", "ctrl+c"]
