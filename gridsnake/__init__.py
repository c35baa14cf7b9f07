from gridsnake.game import (
    BLACK,
    FOOD_COLOR,
    SNAKE_COLOR,
    Direction,
    Pixel,
    Position,
    SnakeGame,
)
from gridsnake.provider import RandomProvider, SnakeProvider

__all__ = [
    "BLACK",
    "FOOD_COLOR",
    "SNAKE_COLOR",
    "Direction",
    "Pixel",
    "Position",
    "RandomProvider",
    "SnakeGame",
    "SnakeProvider",
]
