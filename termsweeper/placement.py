from __future__ import annotations
import random
from typing import Iterable

from termsweeper.grid import Coordinate, Grid


def populate(grid: Grid, mine_count: int, safe_cell: Coordinate, rng: random.Random) -> None:
    # Rejection sampling; terminates because callers keep mine_count < area - 1
    placed = 0
    while placed < mine_count:
        rx = rng.randrange(grid.width)
        ry = rng.randrange(grid.height)
        if (rx, ry) == safe_cell or grid.mine[ry, rx]:
            continue
        grid.mine[ry, rx] = True
        placed += 1


def place(grid: Grid, cells: Iterable[Coordinate]) -> None:
    for (x, y) in cells:
        grid.set_mine(x, y)
