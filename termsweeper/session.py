from __future__ import annotations
import logging
import time
from enum import Enum
from typing import Callable, Optional

from termsweeper.config import GameConfig
from termsweeper.engine import Board, GameState
from termsweeper.grid import Direction
from termsweeper.stats import Save

logger = logging.getLogger(__name__)


class Command(Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    REVEAL = 'reveal'
    FLAG = 'flag'
    CHORD = 'chord'
    RESET = 'reset'
    QUIT = 'quit'


_MOVES = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}


class Session:
    """Drives consecutive boards of one configuration.

    Counts reveal/chord clicks per game and records every game that got past
    its first reveal into the statistics store once it ends.
    """

    def __init__(self, config: GameConfig, seed: Optional[int] = None, save: Optional[Save] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.config = config.validate()
        self.seed = seed
        self.save = save
        self.clock = clock
        self.games = 0
        self.finished = False
        self.board = self._new_board()

    def _new_board(self) -> Board:
        # Vary the seed per game so a seeded session does not repeat its layout
        seed = None if self.seed is None else self.seed + self.games
        self.clicks = 0
        self._recorded = False
        return Board(self.config, seed=seed, clock=self.clock)

    def apply(self, command: Command) -> GameState:
        if command in _MOVES:
            self.board.move_cursor(_MOVES[command])
        elif command is Command.REVEAL:
            self.clicks += 1
            self.board.reveal()
        elif command is Command.CHORD:
            self.clicks += 1
            self.board.chord()
        elif command is Command.FLAG:
            self.board.toggle_flag()
        elif command is Command.RESET:
            self.board.quit()
            self._record()
            self.games += 1
            self.board = self._new_board()
            return self.board.state
        elif command is Command.QUIT:
            self.board.quit()
            self.finished = True
        self._record()
        return self.board.state

    def _record(self) -> None:
        board = self.board
        if self._recorded or not board.state.terminal or not board.started:
            return
        self._recorded = True
        logger.info('recording game: %s, %.0fs, %d clicks', board.state.value, board.elapsed_seconds, self.clicks)
        if self.save is not None:
            self.save.update(board.won, board.elapsed_seconds, self.clicks)
