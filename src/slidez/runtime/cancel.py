"""Resolve which slide to settle on when an animation is cut short on screen."""

from dataclasses import dataclass

from ..models import StepKind, TransitionFrame


@dataclass(frozen=True)
class CancelState:
    transition_active: bool
    transition_frame: TransitionFrame | None
    transition_kind: StepKind | None
    from_index: int
    to_index: int


@dataclass(frozen=True)
class CancelResult:
    current_index: int
    transition_active: bool
    transition_frame: TransitionFrame | None
    transition_kind: StepKind | None


def resolve_cancel(state: CancelState) -> CancelResult:
    """Settle an interrupted transition.

    An interrupted reveal goes back to the slide it started from, since the \
    destination was never fully shown. An interrupted hide or blank pause moves on to \
    the destination, since the source was already on its way out.

    Args:
        state: Rendering state at the time of the interruption.

    Returns:
        The index to display and a cleared transition.
    """
    if not state.transition_active:
        return CancelResult(
            current_index=state.to_index,
            transition_active=False,
            transition_frame=state.transition_frame,
            transition_kind=state.transition_kind,
        )
    if state.transition_kind is StepKind.BEFORE:
        return CancelResult(state.from_index, False, None, None)
    return CancelResult(state.to_index, False, None, None)
