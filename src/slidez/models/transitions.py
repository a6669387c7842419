"""Model classes describing transition effects and how they are played."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .scalars import TransitionName

VisibilityMask = tuple[tuple[bool, ...], ...]
"""Grid of booleans indexed by row then column.

`True` means the destination content shows through the cell, `False` means the cell \
is occluded and painted with the background.
"""


@dataclass(frozen=True)
class TransitionFrame:
    """State of an effect at a given progress."""

    progress: float
    """Progress of the effect, from 0 to 100."""

    mask: VisibilityMask

    @property
    def is_complete(self) -> bool:
        return self.progress >= 100


class Transition(Protocol):
    """Effect producing a visibility mask for any progress and screen size."""

    @property
    def hides(self) -> bool:
        """Whether the terminal state of the effect is fully hidden."""
        ...

    def get_frame(self, progress: float, width: int, height: int) -> TransitionFrame:
        """Compute the frame of the effect at `progress`."""
        ...

    def get_duration(self) -> int:
        """Duration of the effect, in milliseconds."""
        ...


class StepKind(Enum):
    BEFORE = "before"
    """Reveal the destination slide."""

    AFTER = "after"
    """Hide the source slide."""

    BLANK = "blank"
    """Fully hidden pause between a hide and the next slide."""


@dataclass(frozen=True)
class TransitionStep:
    kind: StepKind
    transition: Transition


class PlanType(Enum):
    INSTANT = "instant"
    OVERLAPPING = "overlapping"
    SEQUENTIAL = "sequential"


@dataclass(frozen=True)
class TransitionPlan:
    """Ordered steps to play for one navigation.

    Plans are built fresh for every navigation and never cached.
    """

    type: PlanType
    steps: tuple[TransitionStep, ...] = ()


class NavigationIntent(Enum):
    NAVIGATION = "navigation"
    QUIT = "quit"


@dataclass(frozen=True)
class TransitionDecision:
    """Output of the transition selection policy."""

    type: PlanType
    transition_name: TransitionName | None = None
    has_blank_delay: bool = False


INSTANT = TransitionDecision(PlanType.INSTANT)
"""Decision shared by every navigation that should not animate."""
