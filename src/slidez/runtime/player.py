"""Play transition plans as the host ticks.

The player sits between the host loop and the navigation state machine. It forwards \
navigation events, builds a plan whenever the machine starts a transition, advances \
the plan with the elapsed time the host reports and tells the machine when the last \
step is over. It never schedules anything itself: a host that stops ticking simply \
leaves the animation frozen.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Any

from ..models import (
    CancelTransition,
    Jump,
    NavigationEvent,
    NavigationIntent,
    NavigationState,
    StepKind,
    TransitionComplete,
    TransitionFrame,
    TransitionPlan,
    TransitionStep,
    VisibilityMask,
)
from ..transitions.masking import (
    CellBuffer,
    apply_visibility_mask,
    invert_visibility_mask,
)
from .cancel import CancelState, resolve_cancel
from .navigation import NavigationStateMachine
from .orchestrator import TransitionOrchestrator

_logger = getLogger(__name__)


@dataclass(frozen=True)
class CompositeFrame:
    kind: StepKind
    frame: TransitionFrame
    paint_mask: VisibilityMask
    """Mask to apply on the slide currently rendered. Hidden cells get painted."""


class TransitionPlayer:
    def __init__(
        self, machine: NavigationStateMachine, orchestrator: TransitionOrchestrator
    ) -> None:
        self._machine = machine
        self._orchestrator = orchestrator
        self._plan: TransitionPlan | None = None
        self._planned_for: tuple[int, int | None, bool] | None = None
        self._step_index = 0
        self._elapsed = 0.0

    @property
    def state(self) -> NavigationState:
        return self._machine.get_state()

    @property
    def plan(self) -> TransitionPlan | None:
        return self._plan

    @property
    def active_step(self) -> TransitionStep | None:
        if self._plan is None or self._step_index >= len(self._plan.steps):
            return None
        return self._plan.steps[self._step_index]

    @property
    def progress(self) -> float:
        step = self.active_step
        if step is None:
            return 0.0
        return min(100.0, 100 * self._elapsed / self._orchestrator.get_duration(step))

    def dispatch(self, event: NavigationEvent) -> None:
        self._machine.dispatch(event)
        self._sync()

    def start(self) -> None:
        """Play the opening effect of the slide on screen, if it declares one.

        The navigation state machine is not involved: it stays idle, and the opening \
        effect is dropped as soon as any event is dispatched.
        """
        state = self._machine.get_state()
        if state.is_transitioning:
            return
        self._reset()
        plan = self._orchestrator.build_plan(
            -1, state.current_index, NavigationIntent.NAVIGATION
        )
        if plan.steps:
            self._plan = plan

    def cancel(self) -> None:
        """Stop the transition in flight, if any.

        A pending quit is aborted and the presentation stays on the current slide. \
        Otherwise the slide to settle on is picked by \
        [`resolve_cancel`][slidez.runtime.cancel.resolve_cancel].
        """
        state = self._machine.get_state()
        if not state.is_transitioning:
            return
        if state.quit_pending:
            self.dispatch(CancelTransition())
            return
        step = self.active_step
        result = resolve_cancel(
            CancelState(
                transition_active=step is not None,
                transition_frame=None,
                transition_kind=step.kind if step is not None else None,
                from_index=state.current_index,
                to_index=(
                    state.target_index
                    if state.target_index is not None
                    else state.current_index
                ),
            )
        )
        if result.current_index == state.current_index:
            self.dispatch(CancelTransition())
        else:
            self.dispatch(Jump(result.current_index))

    def tick(self, elapsed_ms: float) -> None:
        """Advance the active plan by `elapsed_ms` milliseconds.

        Time left over when a step completes carries into the next step.

        Args:
            elapsed_ms: Time elapsed since the previous tick.

        Raises:
            ValueError: Raised if `elapsed_ms` is negative.
        """
        if elapsed_ms < 0:
            msg = f"elapsed time must be positive, got {elapsed_ms}"
            raise ValueError(msg)
        if self._plan is None:
            return
        self._elapsed += elapsed_ms
        while (step := self.active_step) is not None:
            duration = self._orchestrator.get_duration(step)
            if self._elapsed < duration:
                return
            self._elapsed -= duration
            self._step_index += 1
            _logger.debug("Finished %s step", step.kind.value)
        self._finish()

    def current_frame(self, width: int, height: int) -> CompositeFrame | None:
        step = self.active_step
        if step is None:
            return None
        frame = self._orchestrator.get_frame(step, self.progress, width, height)
        if step.kind is StepKind.AFTER and not step.transition.hides:
            paint_mask = invert_visibility_mask(frame.mask)
        else:
            paint_mask = frame.mask
        return CompositeFrame(kind=step.kind, frame=frame, paint_mask=paint_mask)

    def render(self, buffer: CellBuffer[Any], background: Any) -> None:
        composite = self.current_frame(buffer.width, buffer.height)
        if composite is not None:
            apply_visibility_mask(buffer, composite.paint_mask, background)

    def _sync(self) -> None:
        state = self._machine.get_state()
        if not state.is_transitioning:
            self._reset()
            return
        key = (state.current_index, state.target_index, state.quit_pending)
        if self._plan is not None and key == self._planned_for:
            return
        target = (
            state.target_index
            if state.target_index is not None
            else state.current_index
        )
        intent = (
            NavigationIntent.QUIT
            if state.quit_pending
            else NavigationIntent.NAVIGATION
        )
        self._reset()
        self._plan = self._orchestrator.build_plan(state.current_index, target, intent)
        self._planned_for = key
        _logger.debug(
            "Playing %s transition from %d to %d",
            self._plan.type.value,
            state.current_index,
            target,
        )
        if not self._plan.steps:
            self._finish()

    def _reset(self) -> None:
        self._plan = None
        self._planned_for = None
        self._step_index = 0
        self._elapsed = 0.0

    def _finish(self) -> None:
        self._reset()
        self._machine.dispatch(TransitionComplete())
