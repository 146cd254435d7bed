from __future__ import annotations
from typing import Iterable, Optional, Tuple

from termsweeper.engine import Board, GameState
from termsweeper.grid import Coordinate


def revealed_number_cells(board: Board) -> Iterable[Coordinate]:
    g = board.grid
    for y in range(board.height):
        for x in range(board.width):
            if g.revealed[y, x] and not g.mine[y, x] and g.neighbor_count[y, x] > 0:
                yield (x, y)


def pick_move(board: Board) -> Optional[Tuple[str, Coordinate]]:
    if board.state is not GameState.RUNNING:
        return None
    g = board.grid
    for x, y in revealed_number_cells(board):
        nbrs = g.neighbors(x, y)
        hidden = [(nx, ny) for nx, ny in nbrs if not g.revealed[ny, nx] and not g.flag[ny, nx]]
        flagged = [(nx, ny) for nx, ny in nbrs if g.flag[ny, nx]]
        if not hidden:
            continue
        number = int(g.neighbor_count[y, x])
        if number - len(flagged) == len(hidden) and board.flags_remaining > 0:
            return ('flag', hidden[0])
        if len(flagged) == number:
            return ('reveal', hidden[0])
    return None
