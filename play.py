from __future__ import annotations

import argparse
import logging
import sys

import pygame

from gridsnake.game import Direction, SnakeGame
from gridsnake.provider import RandomProvider

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play wrap-around Snake in a pygame window")
    parser.add_argument("--size", type=int, default=20, help="Grid dimension (size x size)")
    parser.add_argument("--cell-size", type=int, default=20, help="Cell size in screen pixels")
    parser.add_argument("--speed", type=int, default=10, help="Ticks per second")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--no-collisions",
        action="store_true",
        help="Let the snake pass through itself instead of restarting",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args()


def draw(window, game: SnakeGame, cell_size: int) -> None:
    for index, cell in enumerate(game.cells):
        row, column = divmod(index, game.size)
        rect = pygame.Rect(column * cell_size, row * cell_size, cell_size, cell_size)
        pygame.draw.rect(window, cell.as_tuple(), rect)
    pygame.display.flip()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    game = SnakeGame(
        args.size,
        RandomProvider(seed=args.seed),
        collision_detection=not args.no_collisions,
    )

    pygame.init()
    window = pygame.display.set_mode((args.size * args.cell_size, args.size * args.cell_size))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            if event.type == pygame.KEYDOWN and event.key in KEY_DIRECTIONS:
                game.set_direction(KEY_DIRECTIONS[event.key])

        game.tick()
        draw(window, game, args.cell_size)
        clock.tick(args.speed)


if __name__ == "__main__":
    main()
