"""
State machine error classifications.

Every condition the machine reports to its host is one of these exceptions.
They are non-fatal: the machine keeps its last valid state after raising.
"""

from typing import Optional, Dict, Any


class StateMachineError(Exception):
    """Base class for conditions reported by a state machine."""

    def __init__(self, message: str, machine: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.machine = machine
        self.context = context or {}
        self.recoverable = True


class DuplicateStateNameError(StateMachineError):
    """A state with the same name is already registered."""

    def __init__(self, message: str, state_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.state_name = state_name


class StateNotFoundError(StateMachineError, KeyError):
    """No registered state matches the requested name."""

    def __init__(self, message: str, state_name: Optional[str] = None,
                 started: bool = False, **kwargs):
        super().__init__(message, **kwargs)
        self.state_name = state_name
        self.started = started

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class InvalidStateError(StateMachineError):
    """A state was constructed or registered with invalid values."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class ActiveStateRemovalError(StateMachineError):
    """The currently active state cannot be unregistered."""

    def __init__(self, message: str, state_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.state_name = state_name


class DuplicateMachineError(StateMachineError):
    """A machine with the same identity is already driven by the runtime."""


class MachineNotFoundError(StateMachineError, KeyError):
    """No machine with the requested identity is registered in the runtime."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
