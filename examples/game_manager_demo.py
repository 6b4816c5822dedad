#!/usr/bin/env python3
"""
Game Manager Demo - tickstate

A host that drives two independent state machines every frame:
- a scene-load machine: Idle → Load Scene → Idle once the load completes
- a gameplay machine: Idle → Play ⇄ Pause

Scene loading and UI panels are simulated; the point is how hooks close
over host state and how the host requests every transition itself.

Run: python examples/game_manager_demo.py
"""

from dataclasses import dataclass, field

from tickstate import MachineRuntime, State, StateMachine
from tickstate.logging.config import configure_logging, get_logger

STATE_SCENE_LOAD_IDLE = "State Idle"
STATE_LOAD_SCENE = "State Load Scene"

STATE_GAME_IDLE = "State Idle"
STATE_PLAY_GAME = "Play Game State"
STATE_PAUSE_GAME = "Pause Game State"

logger = get_logger(__name__)


@dataclass
class SceneLoad:
    """Stand-in for an asynchronous scene load that finishes after N frames."""
    scene_name: str
    frames_remaining: int

    @property
    def is_done(self) -> bool:
        return self.frames_remaining <= 0

    def advance(self) -> None:
        self.frames_remaining -= 1


@dataclass
class Panels:
    """Visibility flags for the UI panels the states toggle."""
    loading_screen: bool = False
    playing_menu: bool = False
    pause_menu: bool = False
    history: list = field(default_factory=list)

    def set(self, panel: str, visible: bool) -> None:
        setattr(self, panel, visible)
        self.history.append((panel, visible))


class GameManager:
    """Owns the scene-load and gameplay machines and ticks them each frame."""

    def __init__(self, scene_name: str = "Level 1", load_frames: int = 3) -> None:
        self.scene_name = scene_name
        self.load_frames = load_frames
        self.scene_load = None
        self.panels = Panels()
        self.frame = 0

        # A state with no hooks never runs anything, which is what idling needs
        self.scene_load_machine = StateMachine("Scene Load State Machine", [
            State(STATE_SCENE_LOAD_IDLE),
            State(
                STATE_LOAD_SCENE,
                on_enter=self.enter_load_scene,
                on_execute=self.execute_load_scene,
                on_exit=self.exit_load_scene,
            ),
        ])
        self.scene_load_machine.go_to_state(STATE_SCENE_LOAD_IDLE)

        # Any hook can be left out
        self.gameplay_machine = StateMachine("Game State Machine", [
            State(STATE_GAME_IDLE),
            State(
                STATE_PLAY_GAME,
                on_enter=self.enter_gameplay,
                on_execute=self.execute_gameplay,
                on_exit=self.exit_gameplay,
            ),
            State(
                STATE_PAUSE_GAME,
                on_enter=self.enter_pause,
                on_exit=self.exit_pause,
            ),
        ])
        self.gameplay_machine.go_to_state(STATE_GAME_IDLE)

        self.runtime = MachineRuntime()
        self.runtime.register(self.scene_load_machine)
        self.runtime.register(self.gameplay_machine)

    def update(self) -> None:
        """One frame."""
        self.frame += 1
        self.runtime.tick()

    # Scene load states

    def load_scene(self) -> None:
        self.scene_load_machine.go_to_state(STATE_LOAD_SCENE)

    def enter_load_scene(self) -> None:
        logger.info("Enter loading scene state", scene=self.scene_name)
        self.panels.set("loading_screen", True)
        self.scene_load = SceneLoad(self.scene_name, self.load_frames)

    def execute_load_scene(self) -> None:
        self.scene_load.advance()
        if self.scene_load.is_done:
            self.start_gameplay()
            self.scene_load_machine.go_to_state(STATE_SCENE_LOAD_IDLE)

    def exit_load_scene(self) -> None:
        logger.info("Exit loading scene state", scene=self.scene_name)
        self.panels.set("loading_screen", False)

    # Gameplay states

    def enter_gameplay(self) -> None:
        self.panels.set("playing_menu", True)

    def execute_gameplay(self) -> None:
        # score and timers would be tracked here
        pass

    def exit_gameplay(self) -> None:
        self.panels.set("playing_menu", False)

    def enter_pause(self) -> None:
        self.panels.set("pause_menu", True)

    def exit_pause(self) -> None:
        self.panels.set("pause_menu", False)

    # Button handlers

    def start_gameplay(self) -> None:
        self.gameplay_machine.go_to_state(STATE_PLAY_GAME)

    def pause_pressed(self) -> None:
        self.gameplay_machine.go_to_state(STATE_PAUSE_GAME)

    def continue_pressed(self) -> None:
        self.gameplay_machine.go_to_state(STATE_PLAY_GAME)


def main():
    """Main demonstration function."""
    configure_logging(level="INFO")

    print("🎮 TICKSTATE GAME MANAGER DEMO")
    print("=" * 60)

    manager = GameManager(load_frames=3)
    print(f"Start: {manager.runtime.snapshot()}")

    manager.load_scene()
    while manager.scene_load_machine.current_state_name() == STATE_LOAD_SCENE:
        manager.update()
        print(f"Frame {manager.frame}: {manager.runtime.snapshot()}")

    manager.pause_pressed()
    manager.update()
    print(f"Paused: {manager.runtime.snapshot()}")

    manager.continue_pressed()
    manager.update()
    print(f"Resumed: {manager.runtime.snapshot()}")

    print(f"Panel changes: {manager.panels.history}")
    print("✅ Game manager demo completed!")


if __name__ == "__main__":
    main()
