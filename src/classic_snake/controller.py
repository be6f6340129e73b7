# controller.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from .config import DEFAULT_DIFFICULTY
from .game import (
    Direction, GameState, RunState,
    new_game_state, reset_game, set_difficulty, set_direction,
    start_game, step_game, toggle_pause,
)

logger = logging.getLogger(__name__)

STATUS_TEXT = {
    RunState.IDLE: "Press Enter to start",
    RunState.RUNNING: "Playing...",
    RunState.PAUSED: "Paused",
    RunState.OVER: "Game over! Press R to reset",
}


@dataclass(frozen=True)
class GameOverInfo:
    score: int
    high_score: int
    new_record: bool


def _noop(*_args) -> None:
    return None


class GameController:
    """
    Owns one game: the run-state commands, the per-frame loop driver and
    the high score. Rendering and notifications go through callbacks so the
    whole thing runs without a display.
    """

    def __init__(
        self,
        store,
        on_render: Optional[Callable[[GameState], None]] = None,
        on_status: Optional[Callable[[str], None]] = None,
        on_game_over: Optional[Callable[[GameOverInfo], None]] = None,
        difficulty: str = DEFAULT_DIFFICULTY,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.on_render = on_render or _noop
        self.on_status = on_status or _noop
        self.on_game_over = on_game_over or _noop

        self.state = new_game_state(difficulty, rng)
        self.high_score = store.load()
        self.last_result: Optional[GameOverInfo] = None
        self.scheduled = False
        self._publish()

    # ----- Display outputs -----
    @property
    def score(self) -> int:
        return self.state.score

    @property
    def difficulty_name(self) -> str:
        return self.state.tier.name

    @property
    def status_text(self) -> str:
        return STATUS_TEXT[self.state.run_state]

    def _publish(self) -> None:
        self.on_status(self.status_text)
        self.on_render(self.state)

    # ----- Commands -----
    def start(self) -> bool:
        if not start_game(self.state):
            return False
        self.last_result = None
        self.scheduled = True
        self._publish()
        return True

    def toggle_pause(self) -> bool:
        if not toggle_pause(self.state):
            return False
        self.scheduled = self.state.run_state is RunState.RUNNING
        logger.info("Game %s", "resumed" if self.scheduled else "paused")
        self._publish()
        return True

    def reset(self) -> None:
        reset_game(self.state)
        self.last_result = None
        self.scheduled = False
        logger.info("Game reset")
        self._publish()

    def select_difficulty(self, level: str) -> bool:
        if not set_difficulty(self.state, level):
            return False
        logger.info("Difficulty set to %s", self.difficulty_name)
        self._publish()
        return True

    def handle_direction(self, direction: Direction) -> bool:
        if self.state.run_state is not RunState.RUNNING:
            return False
        return set_direction(self.state, direction)

    # ----- Loop driver -----
    def on_frame(self, now_ms: int) -> bool:
        """
        Per-frame callback. Applies at most one tick, and only once
        ``speed_ms`` has elapsed since the last one. Returns whether
        frames should keep being scheduled.
        """
        if self.state.run_state is not RunState.RUNNING:
            self.scheduled = False
            return False

        if now_ms - self.state.last_move >= self.state.speed_ms:
            alive = step_game(self.state, now_ms)
            if not alive:
                self._game_over()
            self.on_render(self.state)

        self.scheduled = self.state.run_state is RunState.RUNNING
        return self.scheduled

    def _game_over(self) -> None:
        score = self.state.score
        new_record = score > self.high_score
        if new_record:
            self.high_score = score
            self.store.save(score)
            logger.info("New high score: %d", score)
        self.last_result = GameOverInfo(score, self.high_score, new_record)
        self.on_status(self.status_text)
        self.on_game_over(self.last_result)
