"""Transition selection policy.

The policy looks at the `after` effect of the slide being left and the `before` \
effect of the slide being entered, and decides between three shapes:

- instant: no animation at all
- overlapping: the destination is revealed over the source by its `before` effect
- sequential: the source is hidden by its `after` effect, followed by a short blank \
    pause before the destination appears

When both effects are declared, the outgoing one wins and the incoming one is dropped, \
so that a transition never takes the time of two effects.
"""

from collections.abc import Sequence

from ..models import NavigationIntent, PlanType, Slide, TransitionDecision
from ..models.transitions import INSTANT


class TransitionSelector:
    def __init__(self, slides: Sequence[Slide]) -> None:
        self._slides = slides

    def get_transition_for_navigation(
        self, from_index: int, to_index: int, intent: NavigationIntent
    ) -> TransitionDecision:
        """Decide how to move from `from_index` to `to_index`.

        Args:
            from_index: Index of the slide being left. Negative at presentation start.
            to_index: Index of the slide being entered.
            intent: Whether the user navigates or quits.

        Returns:
            The shape of the transition and the effect to play, if any.
        """
        if not 0 <= to_index < len(self._slides):
            return INSTANT

        next_slide = self._slides[to_index]

        if from_index < 0:
            if next_slide.before_transition is not None:
                return TransitionDecision(
                    PlanType.OVERLAPPING, next_slide.before_transition
                )
            return INSTANT

        if from_index == to_index:
            slide = self._slides[from_index]
            if slide.after_transition is not None and intent is NavigationIntent.QUIT:
                return TransitionDecision(PlanType.SEQUENTIAL, slide.after_transition)
            return INSTANT

        after = self._slides[from_index].after_transition
        before = next_slide.before_transition

        if after is not None:
            return TransitionDecision(
                PlanType.SEQUENTIAL, after, has_blank_delay=True
            )
        if before is not None:
            return TransitionDecision(PlanType.OVERLAPPING, before)
        return INSTANT
