"""
Exhaustive enumeration of root-row assignments for one derived cell.

A cell at (row, col) depends on the root-row window [col - row, col + row].
Assignments over a window of width w are visited in the order of their integer
code 0 .. 2**w - 1, with the most significant bit mapped to the leftmost window
index, so assignment k is the binary spelling of k read left to right.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, List, Tuple

import numpy as np

from simulate import simulate_batch

Assignment = Tuple[bool, ...]


@dataclass(frozen=True)
class Window:
    """Inclusive span [lo, hi] of root-row indices."""
    lo: int
    hi: int

    @property
    def width(self) -> int:
        return self.hi - self.lo + 1

    def indices(self) -> range:
        return range(self.lo, self.hi + 1)


@dataclass(frozen=True)
class CellEnumeration:
    window: Window
    alive: Tuple[Assignment, ...]
    dead_count: int

    @property
    def total(self) -> int:
        return len(self.alive) + self.dead_count


def window_for(row: int, col: int) -> Window:
    if row < 1:
        raise ValueError(f"derived rows start at 1, got {row}")
    return Window(col - row, col + row)


def iter_assignments(width: int) -> Iterator[Assignment]:
    for code in range(1 << width):
        yield tuple(bool((code >> (width - 1 - bit)) & 1) for bit in range(width))


def assignment_matrix(width: int) -> np.ndarray:
    """All 2**width assignments as rows of a boolean matrix, same order as iter_assignments."""
    codes = np.arange(1 << width, dtype=np.uint32)
    matrix = np.empty((codes.size, width), dtype=bool)
    for bit in range(width):
        matrix[:, bit] = (codes >> (width - 1 - bit)) & 1
    return matrix


@lru_cache(maxsize=None)
def alive_mask(row: int) -> np.ndarray:
    """
    Outcome of every assignment of a row's window. The outcome depends only on the
    assignment and the depth, so one mask serves every column of the row.
    """
    mask = simulate_batch(assignment_matrix(2 * row + 1), row)
    mask.setflags(write=False)
    return mask


@lru_cache(maxsize=None)
def alive_assignments(row: int) -> Tuple[Assignment, ...]:
    matrix = assignment_matrix(2 * row + 1)
    alive: List[Assignment] = [tuple(bool(b) for b in matrix[k]) for k in np.flatnonzero(alive_mask(row))]
    return tuple(alive)


def enumerate_cell(row: int, col: int) -> CellEnumeration:
    window = window_for(row, col)
    alive = alive_assignments(row)
    return CellEnumeration(window=window, alive=alive, dead_count=(1 << window.width) - len(alive))
