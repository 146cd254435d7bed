from __future__ import annotations
import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

DEFAULT_SAVE = Path('save.json')


class SaveError(Exception):
    pass


def _default_count_colors() -> List[str]:
    return ['34', '32', '31', '35', '33', '36', '37', '30']


@dataclass
class Save:
    # Statistics
    g_played: int = 0
    g_won: int = 0
    total_playtime: int = 0  # seconds
    total_clicks: int = 0    # reveal and chord actions
    # ANSI color codes
    border_fg: str = '37'
    border_bg: str = '40'
    inner_fg: str = '37'
    inner_highlight: str = '97'
    inner_bg: str = '100'
    m_count_fg: List[str] = field(default_factory=_default_count_colors)
    # Glyphs
    mine_char: str = '*'
    flag_char: str = 'F'
    tile_char: str = '#'
    # 0 vanilla, 1 quality-of-life, 2 no guessing
    gamemode: int = 0

    @property
    def win_rate(self) -> float:
        return (self.g_won / self.g_played) if self.g_played > 0 else 0.0

    def update(self, won: bool, playtime: float, clicks: int) -> None:
        self.g_played += 1
        if won:
            self.g_won += 1
        self.total_playtime += int(playtime)
        self.total_clicks += clicks

    @classmethod
    def read(cls, path: Union[str, Path] = DEFAULT_SAVE) -> 'Save':
        path = Path(path)
        if not path.exists():
            save = cls()
            save.write(path)
            logger.info('created save file %s', path)
            return save
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except (OSError, json.JSONDecodeError) as e:
            raise SaveError(f'Error while opening save file: {e}') from e
        if not isinstance(data, dict):
            raise SaveError(f'Error while opening save file: expected an object in {path}')
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def write(self, path: Union[str, Path] = DEFAULT_SAVE) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(asdict(self)), encoding='utf-8')
