"""Model classes for the navigation state machine.

Events are small frozen dataclasses and the machine picks its branch with a `match` \
statement on their class. The state is frozen as well: every reduction replaces it.
"""

from collections.abc import Callable
from dataclasses import dataclass

from .scalars import TransitionName
from .transitions import StepKind

QuitCallback = Callable[[], None]


@dataclass(frozen=True)
class NavigationState:
    current_index: int = 0
    """Last committed slide index."""

    target_index: int | None = None
    """Slide being transitioned to. Set if and only if a transition is in progress."""

    is_transitioning: bool = False

    display_index: int = 0
    """Slide to render. It can be the target during a reveal, or the source during \
    a hide."""

    quit_pending: bool = False
    """Whether `on_quit` should be called when the transition completes."""

    on_quit: QuitCallback | None = None

    transition_kind: StepKind | None = None
    transition_name: TransitionName | None = None


@dataclass(frozen=True)
class Forward:
    pass


@dataclass(frozen=True)
class Backward:
    pass


@dataclass(frozen=True)
class Jump:
    index: int
    """Requested 0-based slide index. Clamped to the deck bounds."""


@dataclass(frozen=True)
class Quit:
    on_quit: QuitCallback | None = None


@dataclass(frozen=True)
class TransitionComplete:
    pass


@dataclass(frozen=True)
class CancelTransition:
    pass


NavigationEvent = (
    Forward | Backward | Jump | Quit | TransitionComplete | CancelTransition
)
