"""Navigation state machine.

The machine is the only owner of the navigation state. Every change goes through \
[`dispatch`][slidez.runtime.navigation.NavigationStateMachine.dispatch], which \
replaces the frozen [`NavigationState`][slidez.models.navigation.NavigationState] \
with a new one.

Only one transition can be in flight: any navigation event received during a \
transition abandons it and commits its own destination immediately, without \
animating.
"""

from collections.abc import Sequence
from dataclasses import replace
from logging import getLogger

from ..exceptions import EmptyDeckError
from ..models import (
    Backward,
    CancelTransition,
    Forward,
    Jump,
    NavigationEvent,
    NavigationIntent,
    NavigationState,
    PlanType,
    Quit,
    Slide,
    StepKind,
    TransitionComplete,
)
from ..models.navigation import QuitCallback
from .selection import TransitionSelector

_logger = getLogger(__name__)


def _settled(state: NavigationState, index: int) -> NavigationState:
    return replace(
        state,
        current_index=index,
        target_index=None,
        is_transitioning=False,
        display_index=index,
        quit_pending=False,
        on_quit=None,
        transition_kind=None,
        transition_name=None,
    )


class NavigationStateMachine:
    def __init__(self, slides: Sequence[Slide]) -> None:
        if not slides:
            msg = "cannot navigate a deck without slides"
            raise EmptyDeckError(msg)
        self._total_slides = len(slides)
        self._slides = slides
        self._selector = TransitionSelector(slides)
        self._state = NavigationState()

    @property
    def total_slides(self) -> int:
        return self._total_slides

    def get_state(self) -> NavigationState:
        return self._state

    def dispatch(self, event: NavigationEvent) -> None:
        """Reduce `event` into a new state.

        Quit callbacks are called once the new state is in place, so a callback can \
        safely inspect the machine or raise.

        Args:
            event: Event to reduce.

        Raises:
            TypeError: Raised if `event` is not a navigation event.
        """
        previous = self._state
        callback: QuitCallback | None = None
        match event:
            case Forward():
                self._state = self._forward(previous)
            case Backward():
                self._state = self._backward(previous)
            case Jump(index=index):
                self._state = _settled(previous, self._clamp(index))
            case Quit(on_quit=on_quit):
                self._state, callback = self._quit(previous, on_quit)
            case TransitionComplete():
                self._state, callback = self._complete(previous)
            case CancelTransition():
                if previous.is_transitioning:
                    self._state = _settled(previous, previous.current_index)
            case _:
                msg = f"unsupported navigation event {event!r}"
                raise TypeError(msg)
        if self._state != previous:
            _logger.debug("%s: %s -> %s", type(event).__name__, previous, self._state)
        if callback is not None:
            callback()

    def _clamp(self, index: int) -> int:
        return max(0, min(index, self._total_slides - 1))

    def _forward(self, state: NavigationState) -> NavigationState:
        if state.is_transitioning:
            origin = (
                state.target_index
                if state.target_index is not None
                else state.current_index
            )
            return _settled(state, self._clamp(origin + 1))

        target = state.current_index + 1
        if target >= self._total_slides:
            return state

        decision = self._selector.get_transition_for_navigation(
            state.current_index, target, NavigationIntent.NAVIGATION
        )
        match decision.type:
            case PlanType.OVERLAPPING:
                return replace(
                    state,
                    target_index=target,
                    is_transitioning=True,
                    display_index=target,
                    transition_kind=StepKind.BEFORE,
                    transition_name=decision.transition_name,
                )
            case PlanType.SEQUENTIAL:
                return replace(
                    state,
                    target_index=target,
                    is_transitioning=True,
                    display_index=state.current_index,
                    transition_kind=StepKind.AFTER,
                    transition_name=decision.transition_name,
                )
            case _:
                return _settled(state, target)

    def _backward(self, state: NavigationState) -> NavigationState:
        origin = (
            state.target_index
            if state.is_transitioning and state.target_index is not None
            else state.current_index
        )
        return _settled(state, self._clamp(origin - 1))

    def _quit(
        self, state: NavigationState, on_quit: QuitCallback | None
    ) -> tuple[NavigationState, QuitCallback | None]:
        # Quitting again while the quit effect plays skips the rest of it.
        if state.quit_pending:
            return _settled(state, state.current_index), on_quit or state.on_quit

        if state.is_transitioning and state.target_index is not None:
            state = _settled(state, state.target_index)

        after = self._slides[state.current_index].after_transition
        if after is None:
            return state, on_quit
        return (
            replace(
                state,
                target_index=state.current_index,
                is_transitioning=True,
                display_index=state.current_index,
                quit_pending=True,
                on_quit=on_quit,
                transition_kind=StepKind.AFTER,
                transition_name=after,
            ),
            None,
        )

    def _complete(
        self, state: NavigationState
    ) -> tuple[NavigationState, QuitCallback | None]:
        if not state.is_transitioning:
            return state, None
        if state.quit_pending:
            return _settled(state, state.current_index), state.on_quit
        target = (
            state.target_index
            if state.target_index is not None
            else state.current_index
        )
        return _settled(state, target), None


def create_navigation_state_machine(
    slides: Sequence[Slide],
) -> NavigationStateMachine:
    return NavigationStateMachine(slides)
