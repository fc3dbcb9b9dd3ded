from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

from errors import InvariantViolation


@dataclass(frozen=True)
class ElementaryRule:
    """
    Elementary (3-cell neighborhood) binary rule encoded as a Wolfram bit-string:
    bits[0] is the outcome for neighborhood 111, bits[7] for neighborhood 000.
    The lookup table is indexed by the neighborhood code (L << 2) | (C << 1) | R.
    """
    rule: str

    def __post_init__(self):
        if len(self.rule) != 8:
            raise ValueError(f"rule string must be 8 bits long, got {len(self.rule)}")
        if not all(ch in "01" for ch in self.rule):
            raise ValueError(f"rule string must contain only 0/1, got {self.rule!r}")

    @property
    def table(self) -> Tuple[bool, ...]:
        """Outcomes indexed by neighborhood code 0..7."""
        return tuple(self.rule[7 - code] == "1" for code in range(8))

    @property
    def code(self) -> int:
        return int(self.rule, 2)

    def __call__(self, left: bool, center: bool, right: bool) -> bool:
        return self.table[(bool(left) << 2) | (bool(center) << 1) | bool(right)]

    @classmethod
    def from_int(cls, code: int) -> ElementaryRule:
        """Construct from a Wolfram code, 0..255."""
        if not 0 <= code <= 255:
            raise ValueError(f"rule code must be in 0..255, got {code}")
        return cls(f"{code:08b}")


RULE_110 = ElementaryRule.from_int(110)

# neighborhood (L, C, R) -> next state
RULE_110_TABLE = {
    (False, False, False): False,
    (False, False, True): True,
    (False, True, False): True,
    (False, True, True): True,
    (True, False, False): False,
    (True, False, True): True,
    (True, True, False): True,
    (True, True, True): False,
}


def check_table(rule: ElementaryRule, expected: Dict[Tuple[bool, bool, bool], bool]) -> None:
    """Raise InvariantViolation unless `rule` reproduces `expected` on all 8 neighborhoods."""
    if len(rule.table) != 8 or len(expected) != 8:
        raise InvariantViolation(f"lookup table must cover 8 neighborhoods, got {len(expected)}")
    for hood, alive in expected.items():
        if rule(*hood) != alive:
            raise InvariantViolation(f"rule {rule.code} gives {not alive} for neighborhood {hood}")


check_table(RULE_110, RULE_110_TABLE)


def apply(left: bool, center: bool, right: bool) -> bool:
    """Next state of the center cell under Rule 110."""
    return RULE_110(left, center, right)
