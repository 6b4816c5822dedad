"""
tickstate - Minimal Finite State Machine Runtime

Named states with optional enter/execute/exit hooks, registered into a
machine that the host drives explicitly: go_to_state to transition, update
once per tick to run the active state.
"""

from .state import NOT_RUNNING, MachineRuntime, MachineStatus, State, StateMachine, StateTransition

__version__ = "0.1.0"

__all__ = [
    "MachineRuntime",
    "MachineStatus",
    "NOT_RUNNING",
    "State",
    "StateMachine",
    "StateTransition",
]
