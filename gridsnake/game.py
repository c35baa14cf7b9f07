from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Tuple, Union

from gridsnake.provider import SnakeProvider

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

DEFAULT_MAX_FOOD_ATTEMPTS = 1000


@dataclass(frozen=True)
class Pixel:
    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"pixel channel out of range: {channel}")

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue


BLACK = Pixel(0, 0, 0)
FOOD_COLOR = Pixel(0, 255, 0)
SNAKE_COLOR = Pixel(0, 125, 255)


class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @classmethod
    def from_value(cls, value: Union[int, "Direction"]) -> "Direction":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"invalid direction: {value!r}") from None

    @property
    def offset(self) -> Tuple[int, int]:
        """Unit step as (row delta, column delta)."""
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def is_opposite(self, other: "Direction") -> bool:
        return other is self.opposite


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class SnakeGame:
    """Snake on a size x size torus, advanced one cell per ``tick()``.

    Every tick paints into a back buffer and only swaps it in when the move
    is valid. A self-collision throws the back buffer away and restarts the
    game, so callers always read a renderable frame from ``cells``.

    With ``collision_detection=False`` the snake passes through itself and the
    food starts at ``(0, 0)`` instead of being drawn from the provider.
    """

    def __init__(
        self,
        size: int,
        provider: SnakeProvider,
        collision_detection: bool = True,
        max_food_attempts: int = DEFAULT_MAX_FOOD_ATTEMPTS,
    ) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"size must be a positive integer, got {size!r}")
        if max_food_attempts < 1:
            raise ValueError("max_food_attempts must be at least 1")

        self._size = size
        self.provider = provider
        self.collision_detection = collision_detection
        self.max_food_attempts = max_food_attempts

        self._cells: List[Pixel] = []
        self._back: List[Pixel] = []
        self.snake: List[Position] = []
        self.current_food: Position = (0, 0)
        self.current_direction = Direction.UP
        self.finished = False

        self.reset()

    @property
    def size(self) -> int:
        return self._size

    @property
    def cells(self) -> Tuple[Pixel, ...]:
        return tuple(self._cells)

    @property
    def head(self) -> Position:
        return self.snake[0]

    def cell_index(self, row: int, column: int) -> int:
        return row * self._size + column

    def pixel_buffer_index(self, row: int, column: int) -> int:
        # 3 bytes per cell
        return self.cell_index(row, column) * 3

    def set_direction(self, direction: Union[int, Direction]) -> None:
        """Change direction unless it would turn the snake back onto itself."""
        direction = Direction.from_value(direction)
        if not direction.is_opposite(self.current_direction):
            self.current_direction = direction

    def set_direction_unchecked(self, direction: Union[int, Direction]) -> None:
        self.current_direction = Direction.from_value(direction)

    def reset(self) -> None:
        center = self._size // 2
        self.current_direction = Direction.UP
        self.snake = [(center, center)]
        self._cells = [BLACK] * (self._size * self._size)
        self._back = list(self._cells)
        self.finished = False
        # no retry against the snake here, it is a single cell
        if self.collision_detection:
            self.current_food = self._random_position()
        else:
            self.current_food = (0, 0)

    def tick(self) -> None:
        next_cells = self._back
        next_cells[:] = self._cells
        next_cells[self.cell_index(*self.current_food)] = FOOD_COLOR
        next_cells[self.cell_index(*self.snake[-1])] = BLACK

        old_head = self.snake[0]
        new_head = self._advance(old_head)
        new_snake = [new_head]

        if self.collision_detection and new_head in self.snake:
            self.finished = True
        elif old_head == self.current_food or new_head == self.current_food:
            # the tail stays, so the snake grows by one
            new_snake.extend(self.snake)
            self._debug(f"Ate some food! new length {len(new_snake)}")
            self.current_food = self._respawn_food(new_snake)
        else:
            new_snake.extend(self.snake[:-1])

        if self.finished:
            self._debug("Game over! restarting...")
            self.reset()
            return

        for row, column in new_snake:
            next_cells[self.cell_index(row, column)] = SNAKE_COLOR

        self._cells, self._back = next_cells, self._cells
        self.snake = new_snake

    def _advance(self, position: Position) -> Position:
        row_offset, column_offset = self.current_direction.offset
        return self._wrap(position[0] + row_offset), self._wrap(position[1] + column_offset)

    def _wrap(self, value: int) -> int:
        if value == self._size:
            return 0
        if value == -1:
            return self._size - 1
        return value

    def _random_position(self) -> Position:
        row = self._random_coordinate()
        column = self._random_coordinate()
        return row, column

    def _random_coordinate(self) -> int:
        value = self.provider.random_in_range(self._size)
        if not 0 <= value < self._size:
            raise ValueError(f"random_in_range({self._size}) returned {value!r}")
        return value

    def _respawn_food(self, body: Iterable[Position]) -> Position:
        occupied = set(body)
        for _ in range(self.max_food_attempts):
            food = self._random_position()
            if food not in occupied:
                return food

        # sampling kept hitting the snake, take the first free cell instead
        for row in range(self._size):
            for column in range(self._size):
                if (row, column) not in occupied:
                    return row, column

        self._debug("No free cell left for food")
        return self.current_food

    def _debug(self, message: str) -> None:
        try:
            self.provider.debug_log(message)
        except Exception:
            logger.warning("debug_log failed for message %r", message, exc_info=True)
