from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

# Signed 16-bit bound of the original board dimensions
MAX_DIMENSION = 32767


class InvalidConfiguration(ValueError):
    pass


@dataclass(frozen=True)
class GameConfig:
    width: int
    height: int
    mines: int

    @property
    def area(self) -> int:
        return self.width * self.height

    def validate(self) -> 'GameConfig':
        if self.width <= 0 or self.height <= 0:
            raise InvalidConfiguration('Please enter valid positive numbers')
        if self.width > MAX_DIMENSION or self.height > MAX_DIMENSION:
            raise InvalidConfiguration(f'Board dimensions must not exceed {MAX_DIMENSION}')
        if self.mines < 0:
            raise InvalidConfiguration('Please enter valid positive numbers')
        if self.mines >= self.area - 1:
            raise InvalidConfiguration(
                f'Too many mines for the given space count ({self.mines} mines in {self.area} spaces)')
        return self

    @classmethod
    def custom(cls, width: str, height: str, mines: str) -> 'GameConfig':
        try:
            w, h, m = int(width.strip()), int(height.strip()), int(mines.strip())
        except ValueError as e:
            raise InvalidConfiguration(f'Error while reading input: {e}') from e
        return cls(w, h, m).validate()


PRESETS: Dict[str, GameConfig] = {
    'beginner': GameConfig(9, 9, 10),
    'intermediate': GameConfig(16, 16, 40),
    'expert': GameConfig(30, 16, 99),
}
