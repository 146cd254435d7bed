from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
import numpy as np

Coordinate = Tuple[int, int]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Grid:
    # All four layers are indexed [y, x]
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.mine = np.zeros((height, width), dtype=bool)
        self.neighbor_count = np.zeros((height, width), dtype=np.int8)
        self.flag = np.zeros((height, width), dtype=bool)
        self.revealed = np.zeros((height, width), dtype=bool)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f'cell ({x}, {y}) outside {self.width}x{self.height} grid')

    def neighbors(self, x: int, y: int) -> List[Coordinate]:
        coords = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    coords.append((nx, ny))
        return coords

    def is_mine(self, x: int, y: int) -> bool:
        self._check(x, y)
        return bool(self.mine[y, x])

    def is_flagged(self, x: int, y: int) -> bool:
        self._check(x, y)
        return bool(self.flag[y, x])

    def is_revealed(self, x: int, y: int) -> bool:
        self._check(x, y)
        return bool(self.revealed[y, x])

    def count_at(self, x: int, y: int) -> int:
        self._check(x, y)
        return int(self.neighbor_count[y, x])

    def set_mine(self, x: int, y: int, value: bool = True) -> None:
        self._check(x, y)
        self.mine[y, x] = value

    def set_flag(self, x: int, y: int, value: bool) -> None:
        self._check(x, y)
        self.flag[y, x] = value

    def set_revealed(self, x: int, y: int) -> None:
        self._check(x, y)
        self.revealed[y, x] = True

    def mine_total(self) -> int:
        return int(self.mine.sum())

    def covered_safe_cells(self) -> int:
        return int(np.count_nonzero(~self.mine & ~self.revealed))


@dataclass
class Cursor:
    x: int = 0
    y: int = 0

    def move(self, direction: Direction, width: int, height: int) -> bool:
        dx, dy = direction.value
        nx, ny = self.x + dx, self.y + dy
        if not (0 <= nx < width and 0 <= ny < height):
            return False
        self.x, self.y = nx, ny
        return True

    @property
    def position(self) -> Coordinate:
        return (self.x, self.y)
