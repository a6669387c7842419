from collections.abc import Sequence

from ..models import (
    NavigationIntent,
    PlanType,
    Slide,
    StepKind,
    TransitionFrame,
    TransitionPlan,
    TransitionStep,
)
from ..transitions.effects import BLANK_FRAME_DURATION
from ..transitions.registry import get_blank_frame, get_transition
from .selection import TransitionSelector

INSTANT_PLAN = TransitionPlan(PlanType.INSTANT)


class TransitionOrchestrator:
    """Turn selection decisions into playable steps.

    The orchestrator keeps no state between calls: plans only depend on the slides \
    it was created with.
    """

    def __init__(self, slides: Sequence[Slide]) -> None:
        self._selector = TransitionSelector(slides)

    def build_plan(
        self, from_index: int, to_index: int, intent: NavigationIntent
    ) -> TransitionPlan:
        decision = self._selector.get_transition_for_navigation(
            from_index, to_index, intent
        )
        if decision.type is PlanType.INSTANT or decision.transition_name is None:
            return INSTANT_PLAN
        transition = get_transition(decision.transition_name)
        if decision.type is PlanType.OVERLAPPING:
            return TransitionPlan(
                PlanType.OVERLAPPING, (TransitionStep(StepKind.BEFORE, transition),)
            )
        steps = [TransitionStep(StepKind.AFTER, transition)]
        if decision.has_blank_delay:
            steps.append(TransitionStep(StepKind.BLANK, get_blank_frame()))
        return TransitionPlan(PlanType.SEQUENTIAL, tuple(steps))

    def get_frame(
        self, step: TransitionStep, progress: float, width: int, height: int
    ) -> TransitionFrame:
        return step.transition.get_frame(progress, width, height)

    def get_duration(self, step: TransitionStep) -> int:
        if step.kind is StepKind.BLANK:
            return BLANK_FRAME_DURATION
        return step.transition.get_duration()

    def get_blank_duration(self) -> int:
        return BLANK_FRAME_DURATION


def create_transition_orchestrator(slides: Sequence[Slide]) -> TransitionOrchestrator:
    return TransitionOrchestrator(slides)
