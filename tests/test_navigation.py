from unittest.mock import Mock

from pytest import raises

from slidez.exceptions import EmptyDeckError
from slidez.models import (
    Backward,
    CancelTransition,
    Forward,
    Jump,
    NavigationState,
    Quit,
    Slide,
    StepKind,
    TransitionComplete,
)
from slidez.runtime.navigation import (
    NavigationStateMachine,
    create_navigation_state_machine,
)

from .conftest import make_slide


def assert_consistent(state: NavigationState, total_slides: int) -> None:
    assert 0 <= state.display_index < total_slides
    assert (state.target_index is not None) == state.is_transitioning
    if not state.is_transitioning:
        assert 0 <= state.current_index < total_slides
        assert state.display_index == state.current_index


def test_initial_state() -> None:
    machine = create_navigation_state_machine([make_slide("a")])
    assert machine.get_state() == NavigationState()


def test_empty_deck_is_rejected() -> None:
    with raises(EmptyDeckError):
        create_navigation_state_machine([])


def test_instant_navigation(plain_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(plain_slides)
    for event in [Forward()] * 4 + [Backward()]:
        machine.dispatch(event)
        assert not machine.get_state().is_transitioning
        assert_consistent(machine.get_state(), len(plain_slides))
    assert machine.get_state().current_index == 3


def test_forward_at_last_slide_is_a_no_op(plain_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(plain_slides)
    machine.dispatch(Jump(4))
    before = machine.get_state()
    machine.dispatch(Forward())
    assert machine.get_state() == before


def test_backward_stops_at_first_slide(plain_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(plain_slides)
    machine.dispatch(Backward())
    assert machine.get_state().current_index == 0


def test_jump_is_clamped(plain_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(plain_slides)
    machine.dispatch(Jump(100))
    assert machine.get_state().current_index == 4
    machine.dispatch(Jump(-3))
    assert machine.get_state().current_index == 0


def test_jump_never_animates(transition_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(transition_slides)
    machine.dispatch(Jump(1))
    state = machine.get_state()
    assert state.current_index == 1
    assert not state.is_transitioning


def test_forward_with_before_reveals_target(transition_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(transition_slides)
    machine.dispatch(Forward())
    state = machine.get_state()
    assert state.is_transitioning
    assert state.current_index == 0
    assert state.target_index == 1
    assert state.display_index == 1
    assert state.transition_kind is StepKind.BEFORE
    assert state.transition_name == "diagonal"
    assert_consistent(state, 3)

    machine.dispatch(TransitionComplete())
    state = machine.get_state()
    assert state.current_index == 1
    assert not state.is_transitioning
    assert state.transition_kind is None
    assert_consistent(state, 3)


def test_forward_with_after_keeps_source_displayed() -> None:
    machine = create_navigation_state_machine(
        [make_slide("a", after="rightwipe"), make_slide("b")]
    )
    machine.dispatch(Forward())
    state = machine.get_state()
    assert state.is_transitioning
    assert state.target_index == 1
    assert state.display_index == 0
    assert state.transition_kind is StepKind.AFTER
    assert state.transition_name == "rightwipe"

    machine.dispatch(TransitionComplete())
    assert machine.get_state().current_index == 1
    assert machine.get_state().display_index == 1


def test_forward_during_transition_redirects_past_target(
    transition_slides: list[Slide],
) -> None:
    machine = create_navigation_state_machine(transition_slides)
    machine.dispatch(Forward())
    machine.dispatch(Forward())
    state = machine.get_state()
    assert state.current_index == 2
    assert not state.is_transitioning
    assert_consistent(state, 3)


def test_forward_during_transition_to_last_slide_is_clamped() -> None:
    machine = create_navigation_state_machine(
        [make_slide("a"), make_slide("b", before="tvon")]
    )
    machine.dispatch(Forward())
    machine.dispatch(Forward())
    assert machine.get_state().current_index == 1
    assert not machine.get_state().is_transitioning


def test_backward_during_transition_cancels(transition_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(transition_slides)
    machine.dispatch(Forward())
    machine.dispatch(Backward())
    state = machine.get_state()
    assert state.current_index == 0
    assert not state.is_transitioning


def test_jump_during_transition_cancels(transition_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(transition_slides)
    machine.dispatch(Forward())
    machine.dispatch(Jump(2))
    state = machine.get_state()
    assert state.current_index == 2
    assert not state.is_transitioning


def test_cancel_transition_returns_to_committed_slide(
    transition_slides: list[Slide],
) -> None:
    machine = create_navigation_state_machine(transition_slides)
    machine.dispatch(Forward())
    machine.dispatch(CancelTransition())
    state = machine.get_state()
    assert state.current_index == 0
    assert state.display_index == 0
    assert not state.is_transitioning


def test_cancel_and_complete_are_ignored_when_idle(
    transition_slides: list[Slide],
) -> None:
    machine = create_navigation_state_machine(transition_slides)
    before = machine.get_state()
    machine.dispatch(CancelTransition())
    machine.dispatch(TransitionComplete())
    assert machine.get_state() == before


def test_quit_with_after_transition(transition_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(transition_slides)
    machine.dispatch(Jump(2))
    on_quit = Mock()
    machine.dispatch(Quit(on_quit))
    state = machine.get_state()
    assert state.is_transitioning
    assert state.quit_pending
    assert state.transition_name == "tvoff"
    assert state.display_index == 2
    on_quit.assert_not_called()
    assert_consistent(state, 3)

    machine.dispatch(TransitionComplete())
    on_quit.assert_called_once_with()
    state = machine.get_state()
    assert not state.is_transitioning
    assert not state.quit_pending
    assert state.on_quit is None

    machine.dispatch(TransitionComplete())
    on_quit.assert_called_once_with()


def test_quit_without_after_transition_is_immediate(
    transition_slides: list[Slide],
) -> None:
    machine = create_navigation_state_machine(transition_slides)
    on_quit = Mock()
    machine.dispatch(Quit(on_quit))
    on_quit.assert_called_once_with()
    assert not machine.get_state().is_transitioning


def test_quit_again_skips_quit_transition(transition_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(transition_slides)
    machine.dispatch(Jump(2))
    on_quit = Mock()
    machine.dispatch(Quit(on_quit))
    machine.dispatch(Quit(on_quit))
    on_quit.assert_called_once_with()
    assert not machine.get_state().quit_pending


def test_quit_during_navigation_settles_on_target_first() -> None:
    machine = create_navigation_state_machine(
        [make_slide("a"), make_slide("b", before="tvon", after="tvoff")]
    )
    machine.dispatch(Forward())
    on_quit = Mock()
    machine.dispatch(Quit(on_quit))
    state = machine.get_state()
    assert state.current_index == 1
    assert state.quit_pending
    assert state.target_index == 1
    on_quit.assert_not_called()


def test_quit_callback_sees_settled_state(transition_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(transition_slides)
    machine.dispatch(Jump(2))
    seen: list[NavigationState] = []
    machine.dispatch(Quit(lambda: seen.append(machine.get_state())))
    machine.dispatch(TransitionComplete())
    assert len(seen) == 1
    assert not seen[0].is_transitioning


def test_after_transition_does_not_fire_on_backward() -> None:
    machine = create_navigation_state_machine(
        [make_slide("a"), make_slide("b", after="tvoff")]
    )
    machine.dispatch(Jump(1))
    machine.dispatch(Backward())
    assert machine.get_state().current_index == 0
    assert not machine.get_state().is_transitioning


def test_unknown_event_is_rejected(plain_slides: list[Slide]) -> None:
    machine = NavigationStateMachine(plain_slides)
    with raises(TypeError):
        machine.dispatch("forward")  # type: ignore[arg-type]


def test_rapid_input_keeps_invariants(transition_slides: list[Slide]) -> None:
    machine = create_navigation_state_machine(transition_slides)
    events = [
        Forward(),
        Forward(),
        Backward(),
        Forward(),
        TransitionComplete(),
        Forward(),
        Jump(0),
        Forward(),
        CancelTransition(),
        Forward(),
        Forward(),
        Forward(),
        TransitionComplete(),
    ]
    for event in events:
        machine.dispatch(event)
        assert_consistent(machine.get_state(), len(transition_slides))
