# -*- coding: utf-8 -*-
"""
Tests for StepNavigator.

Tests cover:
- 1-based positions with clamping
- Progress percentage
- Step marker states
- Step lifecycle calls
"""

import pytest

from ui.wizards.framework import BaseStep, StepNavigator, StepState, WizardContext


class DictContext(WizardContext):
    def __init__(self):
        super().__init__()
        self.data = {}

    def update_data(self, partial):
        self.data.update(partial)

    def get_data(self, key, default=None):
        return self.data.get(key, default)


class RecordingStep(BaseStep):
    def __init__(self, context, errors=None):
        super().__init__(context)
        self.shown = 0
        self.hidden = 0
        self.next_errors = list(errors or [])

    def setup_ui(self):
        pass

    def on_show(self):
        super().on_show()
        self.shown += 1

    def on_hide(self):
        self.hidden += 1

    def validate(self):
        return self.create_validation_result(self.next_errors)


@pytest.fixture
def navigator(qapp):
    context = DictContext()
    steps = [RecordingStep(context) for _ in range(4)]
    nav = StepNavigator(context, steps)
    nav.start()
    return nav


class TestPositions:
    """Test clamped navigation."""

    def test_starts_on_first_step(self, navigator):
        assert navigator.current_step == 1
        assert navigator.get_current_step() is navigator.steps[0]
        assert navigator.can_go_previous() is False

    def test_next_and_previous(self, navigator):
        assert navigator.next_step() is True
        assert navigator.current_step == 2
        assert navigator.previous_step() is True
        assert navigator.current_step == 1

    def test_previous_clamped_at_first(self, navigator):
        assert navigator.previous_step() is False
        assert navigator.current_step == 1

    def test_next_clamped_at_last(self, navigator):
        navigator.goto_step(4)
        assert navigator.next_step() is False
        assert navigator.current_step == 4
        assert navigator.is_last_step()

    @pytest.mark.parametrize("target, expected", [(0, 1), (-3, 1), (10, 4), (3, 3)])
    def test_goto_clamps(self, navigator, target, expected):
        navigator.goto_step(target)
        assert navigator.current_step == expected

    def test_position_kept_on_context(self, navigator):
        navigator.goto_step(3)
        assert navigator.context.current_step == 3

    def test_step_changed_signal(self, qtbot, navigator):
        with qtbot.waitSignal(navigator.step_changed) as blocker:
            navigator.next_step()
        assert blocker.args == [1, 2]

    def test_lifecycle_calls(self, navigator):
        first, second = navigator.steps[0], navigator.steps[1]
        navigator.next_step()
        assert first.hidden == 1
        assert second.shown == 1


class TestProgress:
    """Test progress and marker states."""

    @pytest.mark.parametrize("step, percent", [(1, 25.0), (2, 50.0), (3, 75.0), (4, 100.0)])
    def test_percentage(self, navigator, step, percent):
        navigator.goto_step(step)
        assert navigator.get_progress_percentage() == percent

    def test_no_steps(self, qapp):
        assert StepNavigator(DictContext(), []).get_progress_percentage() == 0.0

    def test_marker_states(self, navigator):
        navigator.goto_step(3)
        assert navigator.get_step_state(1) == StepState.COMPLETE
        assert navigator.get_step_state(2) == StepState.COMPLETE
        assert navigator.get_step_state(3) == StepState.CURRENT
        assert navigator.get_step_state(4) == StepState.PENDING


class TestStepErrors:
    """Test the step-local error list."""

    def test_invalid_step_shows_errors(self, navigator):
        step = navigator.steps[0]
        step.next_errors = ["Email is required"]
        assert step.attempt_continue() is False
        assert step.errors == ["Email is required"]
        assert step.error_box.isHidden() is False
        assert "• Email is required" in step.error_label.text()

    def test_valid_step_clears_errors(self, navigator):
        step = navigator.steps[0]
        step.set_errors(["old"])
        assert step.attempt_continue() is True
        assert step.errors == []
        assert step.error_box.isHidden() is True

    def test_errors_do_not_reach_context(self, navigator):
        step = navigator.steps[0]
        step.next_errors = ["Email is required"]
        step.attempt_continue()
        assert navigator.context.data == {}
