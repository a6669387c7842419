"""Model aliases to disambiguate multi-usage types."""

from typing import Literal, get_args

TransitionName = Literal[
    "diagonal", "leftwipe", "rightwipe", "topwipe", "bottomwipe", "tvon", "tvoff"
]
"""Closed set of the effect names a slide can declare."""

TRANSITION_NAMES: tuple[TransitionName, ...] = get_args(TransitionName)
"""Effect names, in declaration order."""