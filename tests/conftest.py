"""Pytest configuration and shared fixtures."""

from typing import Callable, List

import pytest

from tickstate.state.machine import StateMachine
from tickstate.state.models import State


@pytest.fixture
def calls() -> List[str]:
    """Ordered record of hook invocations."""
    return []


@pytest.fixture
def recording_state(calls: List[str]) -> Callable[[str], State]:
    """Factory for states whose hooks append "<name>.<phase>" to calls."""
    def make(name: str) -> State:
        return State(
            name,
            on_enter=lambda: calls.append(f"{name}.enter"),
            on_execute=lambda: calls.append(f"{name}.execute"),
            on_exit=lambda: calls.append(f"{name}.exit"),
        )
    return make


@pytest.fixture
def machine(recording_state: Callable[[str], State]) -> StateMachine:
    """Machine with recording states A and B, not yet started."""
    return StateMachine("test-machine", [recording_state("A"), recording_state("B")])
