from __future__ import annotations
import numpy as np

from termsweeper.grid import Grid


def derive_counts(grid: Grid) -> np.ndarray:
    # Sum the eight shifted views of a zero-padded mine layer
    padded = np.pad(grid.mine.astype(np.int8), 1)
    h, w = grid.height, grid.width
    counts = np.zeros((h, w), dtype=np.int8)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            counts += padded[1 + dy:1 + dy + h, 1 + dx:1 + dx + w]
    grid.neighbor_count = counts
    return counts
