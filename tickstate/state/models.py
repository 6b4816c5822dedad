"""
State machine data models.

This module defines the immutable State type, the discriminated
"not running" status, and the transition record produced on every
successful change of active state.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from ..errors import InvalidStateError

Hook = Callable[[], None]


class MachineStatus(Enum):
    """Machine status that is not a state name."""
    NOT_RUNNING = "not_running"


NOT_RUNNING = MachineStatus.NOT_RUNNING


@dataclass(frozen=True)
class State:
    """
    A named unit of behavior with optional enter/execute/exit hooks.

    Hooks are zero-argument callables supplied by the host; any of them may
    be left as None, in which case the matching phase does nothing. Hook
    exceptions are not caught.
    """

    name: str
    on_enter: Optional[Hook] = None
    on_execute: Optional[Hook] = None
    on_exit: Optional[Hook] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidStateError(
                "State name must be a non-empty string",
                field="name",
                value=self.name
            )
        for field_name in ("on_enter", "on_execute", "on_exit"):
            hook = getattr(self, field_name)
            if hook is not None and not callable(hook):
                raise InvalidStateError(
                    f"State hook {field_name} must be callable or None",
                    field=field_name,
                    value=hook,
                    context={"state_name": self.name}
                )

    @property
    def has_enter(self) -> bool:
        return self.on_enter is not None

    @property
    def has_execute(self) -> bool:
        return self.on_execute is not None

    @property
    def has_exit(self) -> bool:
        return self.on_exit is not None

    def enter(self) -> None:
        """Run the enter hook, once per transition into this state."""
        if self.on_enter is not None:
            self.on_enter()

    def execute(self) -> None:
        """Run the execute hook, once per tick while this state is active."""
        if self.on_execute is not None:
            self.on_execute()

    def exit(self) -> None:
        """Run the exit hook, once per transition out of this state."""
        if self.on_exit is not None:
            self.on_exit()


@dataclass(frozen=True)
class StateTransition:
    """A completed change of active state."""

    machine: str
    from_state: Optional[str]                        # None for the start transition
    to_state: str
    timestamp: datetime

    @property
    def is_start(self) -> bool:
        return self.from_state is None
