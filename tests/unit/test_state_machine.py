"""Unit tests for task status transitions."""

import pytest

from src.domain.task import TaskStatus
from src.modules.tasks.state_machine import apply_status, available_transitions, can_transition
from tests.unit.mocks import make_task


WORKING_STATES = [TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED, TaskStatus.CANCELLED]


@pytest.mark.unit
class TestLooseTransitions:
    """Tests for the default (loose) transition table."""

    @pytest.mark.parametrize("current", list(TaskStatus))
    @pytest.mark.parametrize("target", WORKING_STATES)
    def test_any_state_reaches_working_states(self, current, target):
        """Test every state may move to In Progress, Completed and Cancelled."""
        task = make_task("t1", status=current)

        updated = apply_status(task, target, strict=False)

        assert updated.status == target
        assert updated.model_dump(exclude={"status"}) == task.model_dump(exclude={"status"})

    def test_original_record_unchanged(self):
        """Test apply_status returns a new record."""
        task = make_task("t1")

        apply_status(task, TaskStatus.COMPLETED, strict=False)

        assert task.status == TaskStatus.NEW

    @pytest.mark.parametrize("current", WORKING_STATES)
    def test_no_return_to_new(self, current):
        """Test nothing transitions back to New."""
        task = make_task("t1", status=current)

        assert can_transition(current, TaskStatus.NEW, strict=False) is False
        with pytest.raises(ValueError, match="Cannot change status"):
            apply_status(task, TaskStatus.NEW, strict=False)

    @pytest.mark.parametrize("status", list(TaskStatus))
    def test_idempotent(self, status):
        """Test applying the same status twice equals applying it once."""
        task = make_task("t1", status=TaskStatus.NEW)

        once = apply_status(task, status, strict=False)
        twice = apply_status(once, status, strict=False)

        assert twice == once

    def test_available_transitions_from_new(self):
        """Test the change-status menu for a New task."""
        assert available_transitions(TaskStatus.NEW, strict=False) == WORKING_STATES

    def test_available_transitions_excludes_current(self):
        """Test the current status is not offered."""
        assert available_transitions(TaskStatus.COMPLETED, strict=False) == [
            TaskStatus.IN_PROGRESS,
            TaskStatus.CANCELLED,
        ]


@pytest.mark.unit
class TestStrictTransitions:
    """Tests for the strict transition table."""

    @pytest.mark.parametrize("terminal", [TaskStatus.COMPLETED, TaskStatus.CANCELLED])
    def test_terminal_states_locked(self, terminal):
        """Test Completed and Cancelled cannot move on in strict mode."""
        task = make_task("t1", status=terminal)

        assert available_transitions(terminal, strict=True) == []
        with pytest.raises(ValueError, match="Cannot change status"):
            apply_status(task, TaskStatus.IN_PROGRESS, strict=True)

    def test_terminal_reapply_allowed(self):
        """Test re-applying a terminal status is still a no-op success."""
        task = make_task("t1", status=TaskStatus.COMPLETED)

        assert apply_status(task, TaskStatus.COMPLETED, strict=True) == task

    def test_in_progress_can_complete(self):
        """Test non-terminal states still move forward in strict mode."""
        task = make_task("t1", status=TaskStatus.IN_PROGRESS)

        assert apply_status(task, TaskStatus.COMPLETED, strict=True).status == TaskStatus.COMPLETED

    def test_strict_follows_settings(self, monkeypatch):
        """Test the configured flag is used when no override is passed."""
        monkeypatch.setattr("src.modules.tasks.state_machine.settings.strict_status_transitions", True)

        assert can_transition(TaskStatus.CANCELLED, TaskStatus.IN_PROGRESS) is False
