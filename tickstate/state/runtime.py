"""
Runtime driver for independent state machines.

A host loop that owns several machines (for example a scene loader and a
gameplay machine) registers them here and calls tick() once per frame.
Machines share nothing; the runtime only updates them in order.
"""

from typing import Union

import structlog

from ..errors import DuplicateMachineError, MachineNotFoundError
from .machine import StateMachine
from .models import MachineStatus


class MachineRuntime:
    """Drives a set of independent state machines one tick at a time."""

    def __init__(self) -> None:
        self.logger = structlog.get_logger(__name__)
        self.machines: dict[str, StateMachine] = {}
        self.tick_count = 0

    def register(self, machine: StateMachine) -> StateMachine:
        """Add a machine, keyed by its identity."""
        if machine.identity in self.machines:
            self.logger.warning(
                "Duplicate machine identity rejected",
                machine=machine.identity
            )
            raise DuplicateMachineError(
                f"Machine {machine.identity!r} is already registered",
                machine=machine.identity
            )

        self.machines[machine.identity] = machine
        self.logger.info(
            "Registered state machine",
            machine=machine.identity,
            states=machine.state_names()
        )
        return machine

    def get(self, identity: str) -> StateMachine:
        if identity not in self.machines:
            raise MachineNotFoundError(
                f"Machine {identity!r} is not registered",
                machine=identity
            )
        return self.machines[identity]

    def tick(self) -> None:
        """Update every registered machine once, in registration order."""
        self.tick_count += 1
        for machine in list(self.machines.values()):
            machine.update()

    def run(self, ticks: int) -> None:
        """Run a fixed number of ticks."""
        if ticks < 0:
            raise ValueError(f"ticks must be non-negative, got {ticks}")
        for _ in range(ticks):
            self.tick()

    def snapshot(self) -> dict[str, Union[str, MachineStatus]]:
        """Current state name (or NOT_RUNNING) for every machine."""
        return {
            identity: machine.current_state_name()
            for identity, machine in self.machines.items()
        }
