from __future__ import annotations

from collections import Counter

from yaku_engine.tiles import TERMINAL_HONOR_KINDS, Tile


def is_thirteen_orphans(counts: Counter[Tile]) -> bool:
    if sum(counts.values()) != 14:
        return False
    if set(counts) != TERMINAL_HONOR_KINDS:
        return False
    return sorted(counts.values()) == [1] * 12 + [2]


def is_seven_pairs(counts: Counter[Tile]) -> bool:
    return len(counts) == 7 and all(c == 2 for c in counts.values())
