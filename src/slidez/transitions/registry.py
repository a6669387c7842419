from typing import cast

from ..exceptions import UnknownTransitionError
from ..models import TRANSITION_NAMES, Transition, TransitionName
from .effects import (
    BLANK_FRAME,
    BOTTOM_WIPE,
    DIAGONAL,
    LEFT_WIPE,
    RIGHT_WIPE,
    TOP_WIPE,
    TV_TURN_OFF,
    TV_TURN_ON,
)

_TRANSITIONS: dict[TransitionName, Transition] = {
    "diagonal": DIAGONAL,
    "leftwipe": LEFT_WIPE,
    "rightwipe": RIGHT_WIPE,
    "topwipe": TOP_WIPE,
    "bottomwipe": BOTTOM_WIPE,
    "tvon": TV_TURN_ON,
    "tvoff": TV_TURN_OFF,
}


def is_valid_transition_name(name: str) -> bool:
    return name in TRANSITION_NAMES


def get_transition(name: str) -> Transition:
    """Get the effect registered under `name`.

    Args:
        name: One of the effect names listed in \
            [`TRANSITION_NAMES`][slidez.models.scalars.TRANSITION_NAMES].

    Raises:
        UnknownTransitionError: Raised if `name` is not a known effect. Manifests are \
            validated before slides reach this point, so this is a data integrity bug.

    Returns:
        The effect.
    """
    if not is_valid_transition_name(name):
        msg = f"unknown transition {name!r}"
        raise UnknownTransitionError(msg)
    return _TRANSITIONS[cast(TransitionName, name)]


def get_blank_frame() -> Transition:
    return BLANK_FRAME
