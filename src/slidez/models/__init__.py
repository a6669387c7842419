"""Modules containing model classes for different parts of slidez.

The intent is that the classes defined in this package should not end up containing \
too much logic: the transition effects, the selection policy and the navigation \
reducer live in [`transitions`][slidez.transitions] and \
[`runtime`][slidez.runtime].

- [`definitions`][slidez.models.definitions] contains Pydantic models that validate \
    the entries of a deck manifest
- [`navigation`][slidez.models.navigation] contains the navigation state and the \
    events that the navigation state machine consumes
- [`scalars`][slidez.models.scalars] contains models for non-container types, mostly \
    aliases that help disambiguate types used in different contexts
- [`slides`][slidez.models.slides] contains the loaded slides and manifest entries
- [`transitions`][slidez.models.transitions] contains masks, frames, steps and plans
"""

from .navigation import (
    Backward,
    CancelTransition,
    Forward,
    Jump,
    NavigationEvent,
    NavigationState,
    Quit,
    TransitionComplete,
)
from .scalars import TRANSITION_NAMES, TransitionName
from .slides import Slide, SlideEntry, ValidationIssue, ValidationIssueKind
from .transitions import (
    NavigationIntent,
    PlanType,
    StepKind,
    Transition,
    TransitionDecision,
    TransitionFrame,
    TransitionPlan,
    TransitionStep,
    VisibilityMask,
)

__all__ = [
    "TRANSITION_NAMES",
    "Backward",
    "CancelTransition",
    "Forward",
    "Jump",
    "NavigationEvent",
    "NavigationIntent",
    "NavigationState",
    "PlanType",
    "Quit",
    "Slide",
    "SlideEntry",
    "StepKind",
    "Transition",
    "TransitionComplete",
    "TransitionDecision",
    "TransitionFrame",
    "TransitionName",
    "TransitionPlan",
    "TransitionStep",
    "ValidationIssue",
    "ValidationIssueKind",
    "VisibilityMask",
]
