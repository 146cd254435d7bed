from __future__ import annotations
import logging
import random
import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional

from termsweeper.config import GameConfig, InvalidConfiguration
from termsweeper.counts import derive_counts
from termsweeper.grid import Coordinate, Cursor, Direction, Grid
from termsweeper.placement import place, populate

logger = logging.getLogger(__name__)


class GameState(Enum):
    STARTING = 'starting'
    RUNNING = 'running'
    WON = 'won'
    LOST = 'lost'
    DONE = 'done'

    @property
    def terminal(self) -> bool:
        return self in (GameState.WON, GameState.LOST, GameState.DONE)


class CellKind(Enum):
    COVERED = 'covered'
    FLAGGED = 'flagged'
    REVEALED = 'revealed'
    MINE = 'mine'


@dataclass(frozen=True)
class CellView:
    kind: CellKind
    count: int = 0


class Board:
    """One game of Minesweeper.

    Mines are not placed at construction: the first reveal picks the safe
    cell, populates the mines around it and derives the neighbor counts.
    Actions that make no sense for the current state (flagging a revealed
    cell, revealing a flagged one, anything after the game ended) are ignored.
    """

    def __init__(self, config: GameConfig, seed: Optional[int] = None,
                 mines: Optional[Iterable[Coordinate]] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.config = config.validate()
        self.width = config.width
        self.height = config.height
        self.mine_count = config.mines
        self.rng = random.Random(int(seed)) if seed is not None else random.Random()
        self.grid = Grid(self.width, self.height)
        self.cursor = Cursor(self.width // 2, self.height // 2)
        self.state = GameState.STARTING
        self.flags_placed = 0
        self._layout: Optional[List[Coordinate]] = self._check_layout(mines) if mines is not None else None
        self._clock = clock
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

    @classmethod
    def start(cls, width: int, height: int, mine_count: int, **kwargs) -> 'Board':
        return cls(GameConfig(width, height, mine_count), **kwargs)

    # Read model

    @property
    def flags_remaining(self) -> int:
        return self.mine_count - self.flags_placed

    @property
    def elapsed_seconds(self) -> float:
        if self._started_at is None:
            return 0.0
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return end - self._started_at

    @property
    def started(self) -> bool:
        return self._started_at is not None

    @property
    def won(self) -> bool:
        return self.state is GameState.WON

    def cell_view(self, x: int, y: int) -> CellView:
        g = self.grid
        if g.is_flagged(x, y):
            return CellView(CellKind.FLAGGED)
        if not g.is_revealed(x, y):
            return CellView(CellKind.COVERED)
        if g.is_mine(x, y):
            return CellView(CellKind.MINE)
        return CellView(CellKind.REVEALED, g.count_at(x, y))

    def render_ascii(self, show_cursor: bool = False) -> str:
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                view = self.cell_view(x, y)
                if view.kind is CellKind.FLAGGED:
                    ch = 'F'
                elif view.kind is CellKind.COVERED:
                    ch = '#'
                elif view.kind is CellKind.MINE:
                    ch = '*'
                elif view.count == 0:
                    ch = '.'
                else:
                    ch = str(view.count)
                if show_cursor and (x, y) == self.cursor.position:
                    ch = f'[{ch}]'
                else:
                    ch = f' {ch} '
                row.append(ch)
            rows.append(''.join(row))
        return '\n'.join(rows)

    # Cursor actions

    def move_cursor(self, direction: Direction) -> None:
        if self.state.terminal:
            return
        self.cursor.move(direction, self.width, self.height)

    def reveal(self) -> None:
        self.reveal_at(*self.cursor.position)

    def toggle_flag(self) -> None:
        self.flag_at(*self.cursor.position)

    def chord(self) -> None:
        self.chord_at(*self.cursor.position)

    def quit(self) -> None:
        if self.state.terminal:
            return
        self._finish(GameState.DONE)

    # Coordinate actions

    def reveal_at(self, x: int, y: int) -> None:
        if self.state.terminal or not self.grid.in_bounds(x, y):
            return
        if self.grid.flag[y, x] or self.grid.revealed[y, x]:
            logger.debug('ignoring reveal of (%d, %d)', x, y)
            return
        if self.state is GameState.STARTING:
            self._generate((x, y))
        self._reveal_cell(x, y)
        if self.state is GameState.RUNNING:
            self._check_win()

    def flag_at(self, x: int, y: int) -> None:
        if self.state.terminal or not self.grid.in_bounds(x, y):
            return
        g = self.grid
        if g.revealed[y, x]:
            return
        if g.flag[y, x]:
            g.set_flag(x, y, False)
            self.flags_placed -= 1
        elif self.flags_placed < self.mine_count:
            g.set_flag(x, y, True)
            self.flags_placed += 1
        else:
            logger.debug('flag budget exhausted (%d)', self.mine_count)

    def chord_at(self, x: int, y: int) -> None:
        if self.state.terminal or not self.grid.in_bounds(x, y):
            return
        g = self.grid
        if not g.revealed[y, x]:
            self.reveal_at(x, y)
            return
        nbrs = g.neighbors(x, y)
        flagged = sum(1 for (nx, ny) in nbrs if g.flag[ny, nx])
        if flagged != g.neighbor_count[y, x]:
            logger.debug('chord at (%d, %d) ignored: %d flags for %d', x, y, flagged, g.neighbor_count[y, x])
            return
        for (nx, ny) in nbrs:
            if self.state is not GameState.RUNNING:
                break
            if g.flag[ny, nx] or g.revealed[ny, nx]:
                continue
            self._reveal_cell(nx, ny)
        if self.state is GameState.RUNNING:
            self._check_win()

    # Internals

    def _check_layout(self, mines: Iterable[Coordinate]) -> List[Coordinate]:
        layout = list(dict.fromkeys((int(x), int(y)) for (x, y) in mines))
        outside = [c for c in layout if not self.grid.in_bounds(*c)]
        if outside:
            raise InvalidConfiguration(f'Mine layout has cells outside the board: {outside}')
        if len(layout) != self.mine_count:
            raise InvalidConfiguration(
                f'Mine layout has {len(layout)} distinct cells, expected {self.mine_count}')
        return layout

    def _generate(self, safe_cell: Coordinate) -> None:
        if self._layout is not None:
            place(self.grid, self._layout)
            if safe_cell in self._layout:
                # Move the mine under the first reveal somewhere else
                self.grid.set_mine(*safe_cell, False)
                populate(self.grid, 1, safe_cell, self.rng)
        else:
            populate(self.grid, self.mine_count, safe_cell, self.rng)
        derive_counts(self.grid)
        self._started_at = self._clock()
        self.state = GameState.RUNNING
        logger.info('board %dx%d generated with %d mines, safe cell %s',
                    self.width, self.height, self.grid.mine_total(), safe_cell)

    def _reveal_cell(self, x: int, y: int) -> None:
        g = self.grid
        if g.mine[y, x]:
            g.set_revealed(x, y)
            self._lose()
            return
        g.set_revealed(x, y)
        if g.neighbor_count[y, x] > 0:
            return
        # Flood fill over zero-count cells
        work = deque([(x, y)])
        while work:
            cx, cy = work.popleft()
            for (nx, ny) in g.neighbors(cx, cy):
                if g.revealed[ny, nx] or g.flag[ny, nx]:
                    continue
                g.set_revealed(nx, ny)
                if g.neighbor_count[ny, nx] == 0:
                    work.append((nx, ny))

    def _lose(self) -> None:
        g = self.grid
        g.revealed |= g.mine & ~g.flag
        self._finish(GameState.LOST)

    def _check_win(self) -> None:
        if self.grid.covered_safe_cells() > 0:
            return
        g = self.grid
        g.flag |= g.mine
        self.flags_placed = int(g.flag.sum())
        self._finish(GameState.WON)

    def _finish(self, state: GameState) -> None:
        if self._started_at is not None:
            self._stopped_at = self._clock()
        self.state = state
        logger.info('game %s after %.1fs', state.value, self.elapsed_seconds)
