"""
Named starting tapes for the Rule 110 grid.

Generated presets are built for the requested tape length. Fixed patterns are
placed near the right edge (Rule 110 structures drift left, so this leaves
the most room to watch them) and cut off at the tape end.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class Preset:
    name: str
    description: str
    data: Optional[Sequence[int]] = None
    generate: Optional[Callable[[int, np.random.Generator], List[int]]] = None


def _random(cols: int, rng: np.random.Generator) -> List[int]:
    return [int(rng.random() > 0.5) for _ in range(cols)]


def _single(cols: int, rng: np.random.Generator) -> List[int]:
    state = [0] * cols
    state[cols - 1] = 1
    return state


def _alternating(cols: int, rng: np.random.Generator) -> List[int]:
    return [1 if i % 2 == 0 else 0 for i in range(cols)]


def _dense(cols: int, rng: np.random.Generator) -> List[int]:
    state = [0] * cols
    center = cols // 2
    for i in range(max(0, center - 5), min(cols, center + 6)):
        state[i] = 1
    return state


PRESETS: Dict[str, Preset] = {
    "random": Preset(
        "Random Noise",
        "A random distribution of bits. Often settles into stable periodic structures.",
        generate=_random,
    ),
    "single": Preset(
        "Single Cell",
        "A single active cell at the right edge. Generates the classic Rule 110 triangle.",
        generate=_single,
    ),
    "alternating": Preset(
        "Alternating",
        "1-0-1-0 pattern. Creates a chaotic interaction zone.",
        generate=_alternating,
    ),
    "spaceship_A": Preset(
        "Standard Glider",
        "One of the most common background structures in Rule 110.",
        data=(0, 0, 0, 1, 1, 0, 1, 1, 1, 0, 0, 0),
    ),
    "repeater": Preset(
        "Simple Repeater",
        "A small periodic structure.",
        data=(1, 1, 1, 0, 1, 0, 0, 1, 1, 0),
    ),
    "ether": Preset(
        "Ether Pattern",
        "The background texture of Rule 110.",
        data=(0, 0, 1, 1, 1, 0, 1, 1, 0, 1, 1, 1, 1, 1, 0, 0, 0, 1),
    ),
    "gun_variant": Preset(
        "Glider Gun Variant",
        "Produces multiple gliders over time.",
        data=(1, 1, 1, 0, 1, 1, 0, 1, 0, 0, 0, 1, 1, 1, 0, 0, 1),
    ),
    "chaos_A": Preset(
        "Chaos Seed A",
        "A small seed that grows chaotically.",
        data=(0, 0, 0, 1, 1, 1, 0, 1, 1, 1, 0, 0, 0),
    ),
    "chaos_B": Preset(
        "Chaos Seed B",
        "Another chaotic seed.",
        data=(1, 0, 1, 0, 0, 1, 0, 0, 0, 1, 1),
    ),
    "oscillator_long": Preset(
        "Long Oscillator",
        "Repeats after many generations.",
        data=(1, 1, 1, 1, 1, 0, 0, 0, 1, 0, 0, 1, 1, 0, 1),
    ),
    "dense": Preset(
        "Dense Block",
        "A solid block of 1s.",
        generate=_dense,
    ),
}


def load_preset(key: str, cols: int, *, seed: int = 42) -> List[bool]:
    """
    Tape of length `cols` for preset `key`. `seed` only affects "random".
    """
    if key not in PRESETS:
        raise ValueError(f"unknown preset {key!r}; choose from {sorted(PRESETS)}")
    if cols <= 0:
        raise ValueError(f"cols must be positive, got {cols}")

    preset = PRESETS[key]
    tape = [False] * cols
    if preset.generate is not None:
        pattern = preset.generate(cols, np.random.default_rng(seed))
        offset = 0
    else:
        pattern = list(preset.data)
        offset = max(0, cols - len(pattern) - 2)

    for i, val in enumerate(pattern):
        if offset + i < cols:
            tape[offset + i] = bool(val)
    return tape


def preset_list() -> List[Dict[str, str]]:
    return [
        {"key": key, "name": p.name, "description": p.description}
        for key, p in PRESETS.items()
    ]
