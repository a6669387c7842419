from pytest import raises

import slidez
from slidez.exceptions import SlidezError, UnknownTransitionError

from .conftest import make_slide


def test_public_api() -> None:
    slides = [make_slide("a", before="tvon"), make_slide("b")]
    machine = slidez.create_navigation_state_machine(slides)
    orchestrator = slidez.create_transition_orchestrator(slides)
    assert machine.get_state().current_index == 0
    assert orchestrator.get_blank_duration() == 100
    assert slidez.is_valid_transition_name("tvoff")
    assert slidez.get_transition("tvoff").hides
    mask = ((True, False),)
    assert slidez.invert_visibility_mask(mask) == ((False, True),)
    assert callable(slidez.apply_visibility_mask)


def test_unknown_transition() -> None:
    with raises(UnknownTransitionError) as excinfo:
        slidez.get_transition("sparkle")
    assert isinstance(excinfo.value, SlidezError)
    assert isinstance(excinfo.value, ValueError)


def test_unknown_attribute() -> None:
    with raises(AttributeError):
        slidez.does_not_exist  # noqa: B018
