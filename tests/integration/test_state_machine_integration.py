"""
Integration tests for host-driven state machines.

Exercises full host loops: a scene-load sequence whose execute hook decides
when to leave, and a host that ticks a scene-load and a gameplay machine
together.
"""

from unittest.mock import Mock

from tickstate import NOT_RUNNING, MachineRuntime, State, StateMachine
from tickstate.config.loader import ConfigLoader


class TestSceneLoadSequence:
    """Idle → Load → Idle driven by the load's own execute hook."""

    def test_load_returns_to_idle_when_done(self):
        loading = {"visible": False, "frames_left": 3}
        exit_hook = Mock(side_effect=lambda: loading.update(visible=False))

        machine = StateMachine("Scene Load State Machine")

        def check_done():
            loading["frames_left"] -= 1
            if loading["frames_left"] == 0:
                machine.go_to_state("Idle")

        machine.add_state(State("Idle"))
        machine.add_state(State(
            "Load",
            on_enter=lambda: loading.update(visible=True),
            on_execute=check_done,
            on_exit=exit_hook,
        ))

        machine.go_to_state("Idle")
        machine.go_to_state("Load")
        assert loading["visible"] is True

        ticks = 0
        while machine.current_state_name() == "Load":
            machine.update()
            ticks += 1

        assert ticks == 3
        assert machine.current_state_name() == "Idle"
        assert loading["visible"] is False
        exit_hook.assert_called_once_with()

        # Idle has no hooks, so further ticks change nothing
        machine.update()
        exit_hook.assert_called_once_with()


class TestGameHost:
    """A host ticking two independent machines per frame."""

    def setup_method(self):
        self.panels = {"loading": False, "playing": False, "paused": False}
        self.play_ticks = 0
        self.frames_left = 2

        def set_panel(name, visible):
            return lambda: self.panels.update({name: visible})

        def count_play():
            self.play_ticks += 1

        def execute_load():
            self.frames_left -= 1
            if self.frames_left <= 0:
                self.gameplay.go_to_state("Play")
                self.scene_load.go_to_state("Idle")

        self.scene_load = StateMachine("Scene Load State Machine", [
            State("Idle"),
            State("Load", set_panel("loading", True), execute_load, set_panel("loading", False)),
        ])
        # Both machines use "Idle"; names are only unique per machine
        self.gameplay = StateMachine("Game State Machine", [
            State("Idle"),
            State("Play", set_panel("playing", True), count_play, set_panel("playing", False)),
            State("Pause", on_enter=set_panel("paused", True), on_exit=set_panel("paused", False)),
        ])

        self.runtime = MachineRuntime()
        self.runtime.register(self.scene_load)
        self.runtime.register(self.gameplay)

    def test_full_session(self):
        assert self.runtime.snapshot() == {
            "Scene Load State Machine": NOT_RUNNING,
            "Game State Machine": NOT_RUNNING,
        }

        self.scene_load.go_to_state("Idle")
        self.gameplay.go_to_state("Idle")
        self.runtime.tick()

        self.scene_load.go_to_state("Load")
        assert self.panels["loading"] is True

        self.runtime.run(2)

        assert self.runtime.snapshot() == {
            "Scene Load State Machine": "Idle",
            "Game State Machine": "Play",
        }
        assert self.panels == {"loading": False, "playing": True, "paused": False}
        # gameplay ticks after scene load within the same frame
        assert self.play_ticks == 1

        self.gameplay.go_to_state("Pause")
        self.runtime.run(5)
        assert self.panels == {"loading": False, "playing": False, "paused": True}
        assert self.play_ticks == 1

        self.gameplay.go_to_state("Play")
        self.runtime.tick()
        assert self.panels == {"loading": False, "playing": True, "paused": False}
        assert self.play_ticks == 2
        assert self.runtime.tick_count == 9

    def test_pressing_play_twice_does_not_reenter(self):
        enter = Mock()
        machine = StateMachine("buttons", [State("Play", on_enter=enter), State("Pause")])

        machine.go_to_state("Play")
        machine.go_to_state("Play")

        enter.assert_called_once_with()


class TestConfiguredMachine:
    """Machines built from loaded configuration."""

    def test_params_from_config_file(self, tmp_path):
        (tmp_path / "tickstate.yaml").write_text("machine:\n  log_ticks: true\n")
        params = ConfigLoader.create(tmp_path).machine_params()
        machine = StateMachine("configured", [State("Idle")], params=params)
        machine.logger = Mock()

        machine.go_to_state("Idle")
        machine.update()

        machine.logger.debug.assert_called_with(
            "Executing state", machine="configured", state_name="Idle"
        )
