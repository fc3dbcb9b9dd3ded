from rules import ElementaryRule, RULE_110
from errors import InvariantViolation
from typing import List, Sequence
import numpy as np


def _check_window(length: int, depth: int) -> None:
    if depth < 0 or length != 2 * depth + 1:
        raise InvariantViolation(
            f"window of length {length} cannot be reduced to one cell in {depth} steps "
            f"(expected length {2 * depth + 1})"
        )


def reduce_step(window: Sequence[bool], rule: ElementaryRule = RULE_110) -> List[bool]:
    '''
    One reduction: apply the rule to every consecutive triple, so the result is two cells shorter.
    '''
    return [rule(window[i - 1], window[i], window[i + 1]) for i in range(1, len(window) - 1)]


def simulate(window: Sequence[bool], depth: int, rule: ElementaryRule = RULE_110) -> bool:
    """
    Value of the cell `depth` rows below the center of `window`.
    `window` must hold exactly 2*depth + 1 root-row cells.
    """
    _check_window(len(window), depth)
    curr = [bool(x) for x in window]
    for _ in range(depth):
        curr = reduce_step(curr, rule)
    return curr[0]


def expand(window: Sequence[bool], depth: int, rule: ElementaryRule = RULE_110) -> bool:
    """
    Single-shot recursive expansion of the same cell:
    State(r, c) = rule(State(r-1, c-1), State(r-1, c), State(r-1, c+1)),
    State(0, c) = window[c].
    Exponential in depth; only meant to cross-check `simulate` on small windows.
    """
    _check_window(len(window), depth)

    def state(r: int, c: int) -> bool:
        if r == 0:
            return bool(window[c])
        return rule(state(r - 1, c - 1), state(r - 1, c), state(r - 1, c + 1))

    return state(depth, depth)


def simulate_batch(matrix: np.ndarray, depth: int, rule: ElementaryRule = RULE_110) -> np.ndarray:
    """
    Staged reduction applied to every row of a (n, 2*depth + 1) boolean matrix.
    Returns a length-n boolean vector of outcomes.
    """
    matrix = np.asarray(matrix, dtype=bool)
    if matrix.ndim != 2:
        raise InvariantViolation(f"expected a 2-D assignment matrix, got {matrix.ndim} dimensions")
    _check_window(matrix.shape[1], depth)

    table = np.array(rule.table, dtype=bool)
    curr = matrix.astype(np.uint8)
    for _ in range(depth):
        idx = (curr[:, :-2] << 2) | (curr[:, 1:-1] << 1) | curr[:, 2:]
        curr = table[idx].astype(np.uint8)
    return curr[:, 0].astype(bool)
