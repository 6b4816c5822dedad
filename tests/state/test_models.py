"""Tests for state machine data models."""

import dataclasses
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from tickstate.errors import InvalidStateError
from tickstate.state.models import NOT_RUNNING, MachineStatus, State, StateTransition


class TestState:
    """Test State construction and hook dispatch."""

    def test_state_without_hooks(self):
        """Test that every phase is a no-op when hooks are absent."""
        state = State("Idle")

        state.enter()
        state.execute()
        state.exit()

        assert state.name == "Idle"
        assert not state.has_enter
        assert not state.has_execute
        assert not state.has_exit

    def test_hooks_dispatch_to_matching_phase(self):
        """Test each phase calls only its own hook."""
        on_enter, on_execute, on_exit = Mock(), Mock(), Mock()
        state = State("Load", on_enter=on_enter, on_execute=on_execute, on_exit=on_exit)

        state.enter()
        on_enter.assert_called_once_with()
        on_execute.assert_not_called()
        on_exit.assert_not_called()

        state.execute()
        state.execute()
        assert on_execute.call_count == 2

        state.exit()
        on_exit.assert_called_once_with()

    def test_partial_hooks(self):
        """Test that any single hook can be left out."""
        on_enter = Mock()
        state = State("Pause", on_enter=on_enter)

        state.execute()
        state.exit()
        state.enter()

        on_enter.assert_called_once_with()
        assert state.has_enter
        assert not state.has_exit

    def test_state_is_immutable(self):
        """Test that hooks cannot be replaced after construction."""
        state = State("Idle")

        with pytest.raises(dataclasses.FrozenInstanceError):
            state.on_enter = Mock()

        with pytest.raises(dataclasses.FrozenInstanceError):
            state.name = "Other"

    def test_hook_exception_propagates(self):
        """Test that a failing hook is not swallowed."""
        state = State("Broken", on_execute=Mock(side_effect=RuntimeError("boom")))

        with pytest.raises(RuntimeError, match="boom"):
            state.execute()

    @pytest.mark.parametrize("name", ["", None, 42])
    def test_invalid_name_rejected(self, name):
        """Test that names must be non-empty strings."""
        with pytest.raises(InvalidStateError) as exc_info:
            State(name)

        assert exc_info.value.field == "name"

    def test_non_callable_hook_rejected(self):
        """Test that hooks must be callable."""
        with pytest.raises(InvalidStateError) as exc_info:
            State("Idle", on_exit="not callable")

        assert exc_info.value.field == "on_exit"
        assert exc_info.value.context == {"state_name": "Idle"}


class TestMachineStatus:
    """Test the not-running sentinel."""

    def test_sentinel_is_not_a_string(self):
        assert NOT_RUNNING is MachineStatus.NOT_RUNNING
        assert not isinstance(NOT_RUNNING, str)
        assert NOT_RUNNING != "not_running"


class TestStateTransition:
    """Test transition records."""

    def test_start_transition(self):
        transition = StateTransition(
            machine="m",
            from_state=None,
            to_state="Idle",
            timestamp=datetime.now(timezone.utc)
        )
        assert transition.is_start

    def test_regular_transition(self):
        transition = StateTransition(
            machine="m",
            from_state="Idle",
            to_state="Load",
            timestamp=datetime.now(timezone.utc)
        )
        assert not transition.is_start
