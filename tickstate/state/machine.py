"""
Core state machine logic.

A StateMachine owns a registry of named States and tracks at most one
active State. The host registers states, activates the first one with
go_to_state, then calls update once per tick. The machine never
transitions on its own.
"""

from datetime import datetime, timezone
from typing import Iterable, Iterator, Optional, Union

from ..config.defaults import MachineParams
from ..errors import (
    ActiveStateRemovalError,
    DuplicateStateNameError,
    InvalidStateError,
    StateNotFoundError,
)
from ..logging.config import get_state_logger, log_registry_event, log_state_transition
from .models import NOT_RUNNING, MachineStatus, State, StateTransition


class StateMachine:
    """Registry of named states plus the single active one."""

    def __init__(
        self,
        identity: str,
        states: Optional[Iterable[State]] = None,
        params: Optional[MachineParams] = None
    ) -> None:
        self.identity = identity
        self.params = params or MachineParams()
        # one lazy proxy per machine so it follows configure_logging calls
        # made before the machine is built
        self.logger = get_state_logger(__name__)
        self._states: dict[str, State] = {}
        self._active: Optional[State] = None

        for state in states or ():
            self.add_state(state)

    def __repr__(self) -> str:
        return f"StateMachine({self.identity!r}, current={self.current_state_name()!r})"

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, name: object) -> bool:
        return name in self._states

    def __iter__(self) -> Iterator[State]:
        return iter(list(self._states.values()))

    @property
    def is_running(self) -> bool:
        """True once any transition has succeeded."""
        return self._active is not None

    @property
    def current_state(self) -> Optional[State]:
        return self._active

    def current_state_name(self) -> Union[str, MachineStatus]:
        """Name of the active state, or NOT_RUNNING before the first transition."""
        if self._active is None:
            return NOT_RUNNING
        return self._active.name

    # Registry

    def add_state(self, state: State) -> None:
        """
        Register a state.

        Raises:
            InvalidStateError: state is not a State instance
            DuplicateStateNameError: a state with this name is already
                registered; the registry is left unchanged
        """
        if not isinstance(state, State):
            raise InvalidStateError(
                f"Expected a State, got {type(state).__name__}",
                field="state",
                value=state,
                machine=self.identity
            )

        if state.name in self._states:
            log_registry_event(
                self.logger,
                machine=self.identity,
                action="add",
                state_name=state.name,
                accepted=False,
                reason="duplicate_state_name"
            )
            raise DuplicateStateNameError(
                f"State {state.name!r} is already registered in {self.identity!r}",
                state_name=state.name,
                machine=self.identity
            )

        self._states[state.name] = state
        log_registry_event(
            self.logger,
            machine=self.identity,
            action="add",
            state_name=state.name,
            accepted=True
        )

    def remove_state(self, name: str) -> State:
        """
        Unregister and return a state.

        The active state cannot be removed; transition away from it first.
        """
        state = self._lookup(name, action="remove")

        if state is self._active:
            log_registry_event(
                self.logger,
                machine=self.identity,
                action="remove",
                state_name=name,
                accepted=False,
                reason="state_is_active"
            )
            raise ActiveStateRemovalError(
                f"State {name!r} is active in {self.identity!r} and cannot be removed",
                state_name=name,
                machine=self.identity
            )

        del self._states[name]
        log_registry_event(
            self.logger,
            machine=self.identity,
            action="remove",
            state_name=name,
            accepted=True
        )
        return state

    def get_state(self, name: str) -> State:
        """Return the registered state with this name."""
        return self._lookup(name, action="get")

    def has_state(self, name: str) -> bool:
        return name in self._states

    def state_names(self) -> list[str]:
        """Registered state names in registration order."""
        return list(self._states)

    # Transitions

    def go_to_state(self, name: str) -> Optional[StateTransition]:
        """
        Make the named state active.

        The target is looked up before anything else, so an unknown name
        leaves the machine exactly as it was. On success the previous state's
        exit hook runs, the active state switches, then the new state's enter
        hook runs. Going to the state that is already active does nothing.

        Returns:
            StateTransition if the active state changed, None for a re-entry

        Raises:
            StateNotFoundError: no state with this name is registered
        """
        target = self._lookup(name, action="go_to_state")
        previous = self._active

        if previous is not None and previous.name == target.name:
            self.logger.debug(
                "Already in requested state",
                machine=self.identity,
                state_name=name
            )
            return None

        if previous is not None:
            previous.exit()

        self._active = target
        target.enter()

        transition = StateTransition(
            machine=self.identity,
            from_state=previous.name if previous is not None else None,
            to_state=target.name,
            timestamp=datetime.now(timezone.utc)
        )

        if self.params.log_transitions:
            log_state_transition(
                self.logger,
                machine=self.identity,
                from_state=transition.from_state,
                to_state=transition.to_state,
                trigger="start" if transition.is_start else "go_to_state",
                context={"timestamp": transition.timestamp.isoformat()}
            )

        return transition

    def update(self) -> None:
        """Run the active state's execute hook. Does nothing before start."""
        if self._active is None:
            return

        if self.params.log_ticks:
            self.logger.debug(
                "Executing state",
                machine=self.identity,
                state_name=self._active.name
            )

        self._active.execute()

    def _lookup(self, name: str, action: str) -> State:
        state = self._states.get(name)
        if state is not None:
            return state

        started = self.is_running
        self.logger.warning(
            "State not found",
            machine=self.identity,
            state_name=name,
            action=action,
            current_state=self._active.name if started else None,
            known_states=self.state_names()
        )
        message = f"State {name!r} not found in {self.identity!r}"
        if action == "go_to_state":
            message = (f"Transition failed: {message}" if started
                       else f"{message}, machine not started")
        raise StateNotFoundError(
            message,
            state_name=name,
            started=started,
            machine=self.identity
        )
