"""
Error classification for the state machine runtime.

Machine errors describe conditions reported back to the host (duplicate
names, unknown targets); configuration errors describe unusable settings.
"""

from .machine_errors import (
    StateMachineError,
    DuplicateStateNameError,
    StateNotFoundError,
    InvalidStateError,
    ActiveStateRemovalError,
    DuplicateMachineError,
    MachineNotFoundError,
)
from .config_errors import ConfigurationError

__all__ = [
    # Machine errors
    "StateMachineError",
    "DuplicateStateNameError",
    "StateNotFoundError",
    "InvalidStateError",
    "ActiveStateRemovalError",
    "DuplicateMachineError",
    "MachineNotFoundError",
    # Configuration
    "ConfigurationError",
]
