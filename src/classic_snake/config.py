from dataclasses import dataclass
from typing import Dict, Optional

# ----- Window & grid -----
WIDTH, HEIGHT = 400, 400
CELL_SIZE = 20
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE
HUD_HEIGHT = 64

START_POS = (10, 10)

# ----- Colors -----
CANVAS_BG   = (248, 249, 250)
GRID        = (233, 236, 239)
SNAKE_HEAD  = (118, 75, 162)
SNAKE_BODY  = (102, 126, 234)
FOOD        = (255, 107, 107)
FOOD_SHINE  = (255, 135, 135)
OBSTACLE    = (51, 51, 51)
EYE         = (255, 255, 255)
HUD_BG      = (33, 37, 41)
TEXT        = (220, 220, 230)

# ----- Directions (dx, dy) -----
NONE = (0, 0)
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)


# ----- Difficulty tiers -----
@dataclass(frozen=True)
class Difficulty:
    name: str
    speed_ms: int       # base tick interval
    obstacles: int      # obstacles placed at game start


DIFFICULTY_LEVELS: Dict[str, Difficulty] = {
    "EASY":   Difficulty("Easy", 200, 0),
    "MEDIUM": Difficulty("Medium", 150, 3),
    "HARD":   Difficulty("Hard", 100, 5),
    "EXPERT": Difficulty("Expert", 70, 8),
}
DEFAULT_DIFFICULTY = "MEDIUM"


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    score_increment: int = 10
    speed_step_ms: int = 5
    min_move_ms: int = 80
    food_attempts: int = 100
    obstacle_attempts: int = 200
    fps: int = 60
    highscore_env: str = "CLASSIC_SNAKE_HIGHSCORE"


CFG = Config()


def difficulty_key(level: str) -> str:
    """Normalize a tier key ('expert' -> 'EXPERT'); ValueError if unknown."""
    key = str(level).strip().upper()
    if key not in DIFFICULTY_LEVELS:
        raise ValueError(
            f"Unknown difficulty: {level!r} (expected one of {', '.join(DIFFICULTY_LEVELS)})"
        )
    return key


