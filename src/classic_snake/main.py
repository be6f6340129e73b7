# main.py
import argparse
import logging
import random

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, HUD_HEIGHT, DIFFICULTY_LEVELS, DEFAULT_DIFFICULTY, CFG
from .controls import (
    START, PAUSE, RESET, QUIT,
    command_for_event, difficulty_for_event, direction_for_event,
)
from .controller import GameController
from .game import RunState
from .highscore import HighScoreStore, MemoryHighScoreStore
from .render import draw_board, draw_hud, draw_paused, draw_game_over

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="classic-snake", description="Classic grid Snake.")
    parser.add_argument(
        "--difficulty",
        type=str.upper,
        default=DEFAULT_DIFFICULTY,
        choices=list(DIFFICULTY_LEVELS),
        help="starting difficulty (can be changed with keys 1-4 while idle)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=CFG.seed,
        help="seed food/obstacle placement for a reproducible board",
    )
    parser.add_argument(
        "--highscore-file",
        type=str,
        default=None,
        help=f"where the high score is kept (default: ${CFG.highscore_env} or ~/.classic_snake/highscore.json)",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="keep the high score in memory only, for this session",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def make_store(args):
    if args.no_save:
        return MemoryHighScoreStore()
    return HighScoreStore(args.highscore_file)


def handle_event(controller: GameController, event) -> bool:
    """Route one pygame event. Return False to quit."""
    command = command_for_event(event)
    if command == QUIT:
        return False
    if command == START:
        controller.start()
    elif command == PAUSE:
        controller.toggle_pause()
    elif command == RESET:
        controller.reset()

    level = difficulty_for_event(event)
    if level is not None:
        controller.select_difficulty(level)

    direction = direction_for_event(event)
    if direction is not None:
        controller.handle_direction(direction)
    return True


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT + HUD_HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    store = make_store(args)
    controller = GameController(
        store,
        difficulty=args.difficulty,
        rng=random.Random(args.seed),
        on_status=lambda text: pygame.display.set_caption(f"Snake - {text}"),
    )
    logger.info("High score %d loaded", controller.high_score)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if not handle_event(controller, event):
                running = False
                break
        if not running:
            break

        # 2) update, gated on the tick interval
        if controller.scheduled:
            controller.on_frame(pygame.time.get_ticks())

        # 3) render
        state = controller.state
        draw_board(screen, state)
        draw_hud(
            screen, font,
            controller.score, controller.high_score,
            controller.difficulty_name, controller.status_text,
        )
        if state.run_state is RunState.PAUSED:
            draw_paused(screen, font)
        elif state.run_state is RunState.OVER:
            draw_game_over(screen, font, controller.last_result)
        pygame.display.flip()
        clock.tick(CFG.fps)  # high FPS; movement gated inside on_frame

    pygame.quit()


if __name__ == "__main__":
    main()
