"""
Tests for game.py - state lifecycle and the per-tick update.
"""
import random

import pytest

from classic_snake.config import (
    CFG, DIFFICULTY_LEVELS, GRID_W, GRID_H, START_POS,
    NONE, UP, DOWN, LEFT, RIGHT,
)
from classic_snake.game import (
    GameState,
    RunState,
    collides,
    is_opposite,
    new_game_state,
    obstacle_count,
    reset_game,
    set_difficulty,
    set_direction,
    start_game,
    step_game,
    toggle_pause,
)


def moving(state, snake, direction, food=(0, 0)):
    """Put the state mid-game with a given body and heading."""
    state.snake = list(snake)
    state.direction = direction
    state.pending = direction
    state.has_input = True
    state.food = food
    state.run_state = RunState.RUNNING
    return state


class TestLifecycle:

    def test_defaults(self, state):
        assert state.snake == [START_POS]
        assert state.direction == NONE
        assert state.pending == NONE
        assert state.obstacles == []
        assert state.score == 0
        assert state.run_state is RunState.IDLE
        assert state.speed_ms == DIFFICULTY_LEVELS["MEDIUM"].speed_ms
        assert state.food != START_POS

    def test_set_difficulty_sets_base_speed(self, state):
        assert set_difficulty(state, "EASY")
        assert state.speed_ms == 200
        assert set_difficulty(state, "hard")
        assert state.difficulty == "HARD"
        assert state.speed_ms == 100

    def test_set_difficulty_unknown_level(self, state):
        with pytest.raises(ValueError):
            set_difficulty(state, "NIGHTMARE")

    def test_set_difficulty_ignored_once_started(self, state):
        start_game(state)
        assert not set_difficulty(state, "EASY")
        assert state.difficulty == "MEDIUM"
        assert state.speed_ms == 150

    def test_reset_keeps_difficulty(self, state):
        set_difficulty(state, "EXPERT")
        start_game(state)
        moving(state, [(3, 3), (2, 3)], RIGHT)
        state.score = 40
        reset_game(state)
        assert state.difficulty == "EXPERT"
        assert state.speed_ms == 70
        assert state.snake == [START_POS]
        assert state.obstacles == []
        assert state.score == 0
        assert state.has_input is False
        assert state.run_state is RunState.IDLE

    def test_obstacle_schedule(self):
        assert [obstacle_count(k) for k in ("EASY", "MEDIUM", "HARD", "EXPERT")] == [0, 3, 5, 8]

    def test_start_generates_obstacles_once(self, state):
        assert start_game(state)
        first = list(state.obstacles)
        assert len(first) == 3
        assert not start_game(state)
        for _ in range(5):
            step_game(state)
        assert state.obstacles == first

    def test_expert_start_places_eight_clear_obstacles(self, rng):
        state = new_game_state("MEDIUM", rng)
        set_difficulty(state, "EXPERT")
        start_game(state)
        assert len(state.obstacles) == 8
        assert len(set(state.obstacles)) == 8
        assert START_POS not in state.obstacles
        assert state.food not in state.obstacles

    def test_pause_toggle(self, state):
        assert not toggle_pause(state)  # idle
        start_game(state)
        assert toggle_pause(state)
        assert state.run_state is RunState.PAUSED
        assert toggle_pause(state)
        assert state.run_state is RunState.RUNNING

    def test_no_start_from_over_without_reset(self, state):
        moving(state, [(0, 10)], LEFT)
        assert step_game(state) is False
        assert not start_game(state)
        assert not toggle_pause(state)
        reset_game(state)
        assert start_game(state)


class TestDirection:

    def test_is_opposite(self):
        assert is_opposite(UP, DOWN)
        assert is_opposite(LEFT, RIGHT)
        assert not is_opposite(UP, LEFT)

    @pytest.mark.parametrize("direction", [UP, DOWN, LEFT, RIGHT])
    def test_reverse_is_rejected(self, state, direction):
        set_direction(state, direction)
        step_game(state)
        reverse = (-direction[0], -direction[1])
        assert set_direction(state, reverse) is False
        step_game(state)
        assert state.direction == direction
        assert state.pending == direction

    def test_zero_intent_is_rejected(self, state):
        assert set_direction(state, NONE) is False
        assert state.has_input is False

    def test_turn_buffers_until_next_tick(self, state):
        state.food = (0, 0)
        set_direction(state, RIGHT)
        step_game(state)
        assert set_direction(state, UP)
        assert state.direction == RIGHT
        assert state.pending == UP
        step_game(state)
        assert state.direction == UP

    def test_right_up_down_scenario(self, state):
        state.food = (0, 0)
        set_direction(state, RIGHT)
        step_game(state)
        set_direction(state, UP)
        step_game(state)
        assert set_direction(state, DOWN) is False
        assert state.pending == UP
        assert state.direction == UP
        assert state.head == (START_POS[0] + 1, START_POS[1] - 1)


class TestStep:

    def test_no_move_before_first_input(self, state):
        snake = list(state.snake)
        assert step_game(state) is True
        assert state.snake == snake

    def test_plain_move_keeps_length(self, state):
        moving(state, [(5, 5), (4, 5), (3, 5)], RIGHT)
        assert step_game(state)
        assert state.snake == [(6, 5), (5, 5), (4, 5)]
        assert state.score == 0

    def test_eating_grows_scores_and_speeds_up(self, state):
        moving(state, [(5, 5), (4, 5)], RIGHT, food=(6, 5))
        speed = state.speed_ms
        assert step_game(state)
        assert state.snake == [(6, 5), (5, 5), (4, 5)]
        assert state.score == CFG.score_increment
        assert state.speed_ms == speed - CFG.speed_step_ms
        assert state.food not in state.snake

    def test_speed_floor(self, state):
        moving(state, [(5, 5)], RIGHT, food=(6, 5))
        state.speed_ms = CFG.min_move_ms + 2
        step_game(state)
        assert state.speed_ms == CFG.min_move_ms
        state.food = (7, 5)
        step_game(state)
        assert state.speed_ms == CFG.min_move_ms

    def test_expert_speed_below_floor_is_left_alone(self, rng):
        state = new_game_state("EXPERT", rng)
        moving(state, [(5, 5)], RIGHT, food=(6, 5))
        step_game(state)
        assert state.score == 10
        assert state.speed_ms == 70

    def test_records_tick_time(self, state):
        moving(state, [(5, 5)], RIGHT)
        step_game(state, now_ms=1234)
        assert state.last_move == 1234

    @pytest.mark.parametrize(
        "head, direction",
        [((0, 10), LEFT), ((GRID_W - 1, 3), RIGHT), ((4, 0), UP), ((4, GRID_H - 1), DOWN)],
    )
    def test_wall_collision_ends_game(self, state, head, direction):
        moving(state, [head], direction)
        assert step_game(state) is False
        assert state.run_state is RunState.OVER
        assert state.snake == [head]

    def test_self_collision(self, state):
        body = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
        moving(state, body, LEFT)
        set_direction(state, DOWN)
        assert step_game(state) is False
        assert state.run_state is RunState.OVER
        assert state.snake == body

    def test_moving_into_vacating_tail_is_safe(self, state):
        moving(state, [(5, 5), (6, 5), (6, 6), (5, 6)], LEFT)
        set_direction(state, DOWN)
        assert step_game(state) is True
        assert state.snake == [(5, 6), (5, 5), (6, 5), (6, 6)]

    def test_tail_counts_when_eating(self, state):
        # food sits on the tail cell, so the tail stays put this tick
        moving(state, [(5, 5), (6, 5), (6, 6), (5, 6)], LEFT, food=(5, 6))
        set_direction(state, DOWN)
        assert step_game(state) is False
        assert state.run_state is RunState.OVER

    def test_obstacle_collision(self, state):
        moving(state, [(5, 5)], RIGHT)
        state.obstacles = [(6, 5)]
        assert step_game(state) is False
        assert state.run_state is RunState.OVER

    def test_collides_helper(self, state):
        moving(state, [(5, 5), (5, 6), (5, 7)], UP)
        assert collides(state, (-1, 5), eating=False)
        assert not collides(state, (5, 7), eating=False)
        assert collides(state, (5, 7), eating=True)
        assert collides(state, (5, 6), eating=False)

    def test_over_is_terminal(self, state):
        moving(state, [(0, 0)], UP)
        assert step_game(state) is False
        assert step_game(state) is False
        assert state.snake == [(0, 0)]


def test_long_random_walk_keeps_invariants():
    state = new_game_state("HARD", random.Random(7))
    start_game(state)
    rng = random.Random(99)
    for _ in range(500):
        before = len(state.snake)
        score = state.score
        set_direction(state, rng.choice([UP, DOWN, LEFT, RIGHT]))
        if not step_game(state):
            break
        ate = state.score > score
        assert len(state.snake) == before + (1 if ate else 0)
        assert len(set(state.snake)) == len(state.snake)
        assert all(0 <= x < GRID_W and 0 <= y < GRID_H for x, y in state.snake)
        assert state.speed_ms >= min(CFG.min_move_ms, DIFFICULTY_LEVELS["HARD"].speed_ms)


def test_game_state_defaults_without_factory():
    state = GameState()
    assert state.head == START_POS
    assert state.tier.name == "Medium"
