"""
State machine and runtime module.

Defines named states with optional enter/execute/exit hooks, the machine
that owns them and performs host-initiated transitions, and a runtime that
ticks several independent machines.
"""

from .machine import StateMachine
from .models import NOT_RUNNING, MachineStatus, State, StateTransition
from .runtime import MachineRuntime

__all__ = [
    "MachineRuntime",
    "MachineStatus",
    "NOT_RUNNING",
    "State",
    "StateMachine",
    "StateTransition",
]
