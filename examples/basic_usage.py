#!/usr/bin/env python3
"""
Basic Usage Example - tickstate

This script demonstrates the basic usage of a state machine. It shows how to:
- Build states from plain functions
- Start the machine and tick it
- Transition between states
- Handle the errors a machine reports

Run: python examples/basic_usage.py
"""

from tickstate import NOT_RUNNING, State, StateMachine
from tickstate.config.loader import ConfigLoader
from tickstate.errors import DuplicateStateNameError, StateNotFoundError
from tickstate.logging.config import configure_logging_from_config


def main():
    """Main demonstration function."""
    loader = ConfigLoader.create()
    config = loader.merge_config({"logging": {"level": "DEBUG"}})
    configure_logging_from_config(config)

    print("🚦 TICKSTATE BASIC USAGE")
    print("=" * 60)

    ticks = {"green": 0}

    def count_green():
        ticks["green"] += 1

    machine = StateMachine(
        "Traffic Light",
        [
            State("red", on_enter=lambda: print("  stop")),
            State("green", on_enter=lambda: print("  go"), on_execute=count_green),
            State("amber", on_exit=lambda: print("  leaving amber")),
        ],
        params=loader.machine_params({"machine": {"log_ticks": True}}),
    )

    # Ticking before the first transition does nothing
    machine.update()
    assert machine.current_state_name() is NOT_RUNNING

    for name in ["red", "green", "amber", "red"]:
        machine.go_to_state(name)
        machine.update()
        machine.update()
        print(f"Now in {machine.current_state_name()}")

    print(f"Green ticks: {ticks['green']}")

    try:
        machine.go_to_state("blue")
    except StateNotFoundError as e:
        print(f"❌ {e} (still in {machine.current_state_name()})")

    try:
        machine.add_state(State("red"))
    except DuplicateStateNameError as e:
        print(f"❌ {e}")

    print("✅ Basic usage completed!")


if __name__ == "__main__":
    main()
