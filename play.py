from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

from termsweeper.config import PRESETS, GameConfig, InvalidConfiguration
from termsweeper.engine import GameState
from termsweeper.hints import pick_move
from termsweeper.session import Command, Session
from termsweeper.stats import DEFAULT_SAVE, Save, SaveError

KEYS = {
    'w': Command.UP,
    's': Command.DOWN,
    'a': Command.LEFT,
    'd': Command.RIGHT,
    'r': Command.REVEAL,
    'f': Command.FLAG,
    'c': Command.CHORD,
    'n': Command.RESET,
    'q': Command.QUIT,
}

HELP = 'keys: w/a/s/d move, r reveal, f flag, c chord, h hint, n new game, q quit'


def build_config(args) -> GameConfig:
    if args.width is not None or args.height is not None or args.mines is not None:
        base = PRESETS[args.preset]
        return GameConfig.custom(
            str(args.width if args.width is not None else base.width),
            str(args.height if args.height is not None else base.height),
            str(args.mines if args.mines is not None else base.mines),
        )
    return PRESETS[args.preset]


def status_line(session: Session) -> str:
    board = session.board
    return (f"state: {board.state.value} | flags left: {board.flags_remaining} | "
            f"time: {int(board.elapsed_seconds)}s | clicks: {session.clicks}")


def show(session: Session) -> None:
    print(session.board.render_ascii(show_cursor=True))
    print(status_line(session))
    if session.board.state is GameState.WON:
        print('WIN  (n for a new game, q to quit)')
    elif session.board.state is GameState.LOST:
        print('LOSE (n for a new game, q to quit)')
    print()


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--preset', type=str, default='beginner', choices=sorted(PRESETS))
    parser.add_argument('--width', type=int, default=None)
    parser.add_argument('--height', type=int, default=None)
    parser.add_argument('--mines', type=int, default=None)
    parser.add_argument('--seed', type=int, default=-1, help='Base RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--save', type=str, default=str(DEFAULT_SAVE))
    parser.add_argument('--no_save', action='store_true', help='Do not read or update the statistics file')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    try:
        config = build_config(args)
    except InvalidConfiguration as e:
        print(f"[play] X {e}")
        return 2

    save = None
    if not args.no_save:
        try:
            save = Save.read(Path(args.save))
        except SaveError as e:
            print(f"[play] {e}")
            return 1

    session = Session(config, seed=(None if args.seed < 0 else args.seed), save=save)
    print(f"[play] {config.width}x{config.height}, {config.mines} mines")
    print(HELP)
    show(session)
    try:
        while not session.finished:
            line = input('> ').strip().lower()
            if not line:
                continue
            for key in line:
                if key == 'h':
                    hint = pick_move(session.board)
                    print(f"[play] hint: {hint[0]} {hint[1]}" if hint else "[play] no sure move")
                    continue
                command = KEYS.get(key)
                if command is None:
                    print(HELP)
                    break
                session.apply(command)
                if session.finished:
                    break
            show(session)
    except (EOFError, KeyboardInterrupt):
        session.apply(Command.QUIT)
        print()
    finally:
        if save is not None:
            save.write(Path(args.save))

    if save is not None:
        print(f"[play] Games played: {save.g_played} | won: {save.g_won} | win%: {save.win_rate * 100:.1f}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
