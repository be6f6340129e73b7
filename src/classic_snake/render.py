# render.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, GRID_W, GRID_H, HUD_HEIGHT,
    CANVAS_BG, GRID, SNAKE_HEAD, SNAKE_BODY, FOOD, FOOD_SHINE, OBSTACLE, EYE,
    HUD_BG, TEXT,
    UP, DOWN, LEFT, RIGHT,
)
from .controller import GameOverInfo
from .game import GameState

Color = Tuple[int, int, int]

EYE_SIZE = 3
EYE_OFFSET = 5


def cell_rect(gx: int, gy: int, inset: int = 0) -> pygame.Rect:
    return pygame.Rect(
        gx * CELL_SIZE + inset,
        gy * CELL_SIZE + inset,
        CELL_SIZE - 2 * inset,
        CELL_SIZE - 2 * inset,
    )


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Color, inset: int = 0) -> None:
    pygame.draw.rect(screen, color, cell_rect(gx, gy, inset))


def draw_grid(screen: pygame.Surface) -> None:
    for i in range(GRID_W + 1):
        x = i * CELL_SIZE
        pygame.draw.line(screen, GRID, (x, 0), (x, HEIGHT))
    for j in range(GRID_H + 1):
        y = j * CELL_SIZE
        pygame.draw.line(screen, GRID, (0, y), (WIDTH, y))


def eye_positions(gx: int, gy: int, direction: Tuple[int, int]):
    """Top-left pixels of the two eyes, facing the direction of travel."""
    left, top = gx * CELL_SIZE, gy * CELL_SIZE
    near = EYE_OFFSET - EYE_SIZE
    far = CELL_SIZE - EYE_OFFSET
    if direction == RIGHT:
        return [(left + far, top + EYE_OFFSET), (left + far, top + far - EYE_SIZE)]
    if direction == LEFT:
        return [(left + near, top + EYE_OFFSET), (left + near, top + far - EYE_SIZE)]
    if direction == DOWN:
        return [(left + EYE_OFFSET, top + far), (left + far, top + far)]
    if direction == UP:
        return [(left + EYE_OFFSET, top + near), (left + far, top + near)]
    return []  # not moving yet


def draw_snake(screen: pygame.Surface, state: GameState) -> None:
    for x, y in state.snake[1:]:
        draw_cell(screen, x, y, SNAKE_BODY, inset=1)
    hx, hy = state.head
    pygame.draw.rect(screen, SNAKE_HEAD, pygame.Rect(hx * CELL_SIZE, hy * CELL_SIZE, CELL_SIZE - 2, CELL_SIZE - 2))
    for ex, ey in eye_positions(hx, hy, state.direction):
        pygame.draw.rect(screen, EYE, pygame.Rect(ex, ey, EYE_SIZE, EYE_SIZE))


def draw_food(screen: pygame.Surface, food: Tuple[int, int]) -> None:
    cx = food[0] * CELL_SIZE + CELL_SIZE // 2
    cy = food[1] * CELL_SIZE + CELL_SIZE // 2
    pygame.draw.circle(screen, FOOD, (cx, cy), CELL_SIZE // 2 - 2)
    # small shine, up and to the left
    pygame.draw.circle(screen, FOOD_SHINE, (cx - 3, cy - 3), 3)


def draw_board(screen: pygame.Surface, state: GameState) -> None:
    board = pygame.Rect(0, 0, WIDTH, HEIGHT)
    screen.fill(CANVAS_BG, board)
    draw_grid(screen)
    for ox, oy in state.obstacles:
        draw_cell(screen, ox, oy, OBSTACLE)
    draw_food(screen, state.food)
    draw_snake(screen, state)


def draw_hud(
    screen: pygame.Surface,
    font: pygame.font.Font,
    score: int,
    high_score: int,
    difficulty: str,
    status: str,
) -> None:
    hud = pygame.Rect(0, HEIGHT, WIDTH, HUD_HEIGHT)
    screen.fill(HUD_BG, hud)
    top = font.render(f"Score: {score}   Best: {high_score}   {difficulty}", True, TEXT)
    bottom = font.render(status, True, TEXT)
    screen.blit(top, (8, HEIGHT + 8))
    screen.blit(bottom, (8, HEIGHT + 8 + top.get_height() + 6))


def _dim(screen: pygame.Surface) -> None:
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))


def _centered(screen: pygame.Surface, font: pygame.font.Font, lines) -> None:
    y = HEIGHT // 2 - 16 * (len(lines) - 1)
    for text, color in lines:
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(WIDTH // 2, y)))
        y += 30


def draw_paused(screen: pygame.Surface, font: pygame.font.Font) -> None:
    _dim(screen)
    _centered(screen, font, [("PAUSED", (240, 240, 250)), ("Press P to resume", (220, 220, 230))])


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, result: Optional[GameOverInfo]) -> None:
    _dim(screen)
    lines = [("GAME OVER", (240, 240, 250))]
    if result is not None:
        if result.new_record:
            lines.append((f"New high score: {result.score}!", (255, 215, 90)))
        else:
            lines.append((f"Score: {result.score}", (220, 220, 230)))
    lines.append(("Press R to restart", (220, 220, 230)))
    _centered(screen, font, lines)
