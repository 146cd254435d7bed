from __future__ import annotations
import argparse
import sys
from pathlib import Path

from termsweeper.stats import DEFAULT_SAVE, Save, SaveError


def summarize(save: Save) -> str:
    out = []
    out.append(f"Games played: {save.g_played}")
    out.append(f"Games won: {save.g_won}")
    out.append(f"Win %: {save.win_rate * 100:.1f}")
    out.append(f"Minutes played: {save.total_playtime // 60}")
    out.append(f"Clicks: {save.total_clicks}")
    if save.g_played:
        out.append(f"Avg seconds per game: {save.total_playtime / save.g_played:.1f}")
        out.append(f"Avg clicks per game: {save.total_clicks / save.g_played:.1f}")
    return "\n".join(out)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--save', type=str, default=str(DEFAULT_SAVE))
    parser.add_argument('--out', type=str, default='', help='Also write a Markdown report here')
    args = parser.parse_args()

    path = Path(args.save)
    if not path.exists():
        print(f"[report] No save file at {path}")
        return 1
    try:
        save = Save.read(path)
    except SaveError as e:
        print(f"[report] {e}")
        return 1
    text = summarize(save)
    if args.out:
        Path(args.out).write_text('# Statistics\n\n' + text + '\n')
    print(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
