from __future__ import annotations

import itertools
import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from yaku_engine.errors import InvalidTileError


class Suit(str, Enum):
    m = "m"
    p = "p"
    s = "s"
    z = "z"


NUMBERED_SUITS = (Suit.m, Suit.p, Suit.s)
MAX_RANK = {Suit.m: 9, Suit.p: 9, Suit.s: 9, Suit.z: 7}

HONOR_CODES = ("E", "S", "W", "N", "P", "F", "C")
DRAGON_RANKS = (5, 6, 7)

_GLYPHS = {
    Suit.m: "🀇🀈🀉🀊🀋🀌🀍🀎🀏",
    Suit.p: "🀙🀚🀛🀜🀝🀞🀟🀠🀡",
    Suit.s: "🀐🀑🀒🀓🀔🀕🀖🀗🀘",
    Suit.z: "🀀🀁🀂🀃🀆🀅🀄",
}
_SUIT_NAMES = {Suit.m: "萬", Suit.p: "筒", Suit.s: "索"}
_HONOR_NAMES = ("東", "南", "西", "北", "白", "發", "中")

CODE_RE = re.compile(r"^(?:[1-9][mps]|5[mps]r|[ESWNPFC])$")
COMPACT_RE = re.compile(r"^(?:[0-9]+[mpsz])+$")
_COMPACT_GROUP_RE = re.compile(r"([0-9]+)([mpsz])")


@dataclass(frozen=True, order=True)
class Tile:
    suit: Suit
    rank: int
    tag: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        try:
            suit = Suit(self.suit)
        except ValueError as exc:
            raise InvalidTileError(f"Invalid suit: {self.suit!r}") from exc
        object.__setattr__(self, "suit", suit)
        rank_ok = isinstance(self.rank, int) and not isinstance(self.rank, bool)
        if not rank_ok or not 1 <= self.rank <= MAX_RANK[suit]:
            raise InvalidTileError(f"Invalid rank for suit {suit.value}: {self.rank!r}")

    @classmethod
    def from_code(cls, code: str) -> Tile:
        if not CODE_RE.fullmatch(code):
            raise InvalidTileError(f"Invalid tile code: {code}")
        if code in HONOR_CODES:
            return cls(Suit.z, HONOR_CODES.index(code) + 1)
        return cls(Suit(code[1]), int(code[0]))

    @property
    def kind(self) -> Tile:
        """The tile stripped of its tag, usable as a counting key."""
        if self.tag is None:
            return self
        return Tile(self.suit, self.rank)

    @property
    def code(self) -> str:
        if self.suit is Suit.z:
            return HONOR_CODES[self.rank - 1]
        return f"{self.rank}{self.suit.value}"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self.suit][self.rank - 1]

    @property
    def name(self) -> str:
        if self.suit is Suit.z:
            return _HONOR_NAMES[self.rank - 1]
        return f"{self.rank}{_SUIT_NAMES[self.suit]}"

    @property
    def is_honor(self) -> bool:
        return self.suit is Suit.z

    @property
    def is_terminal(self) -> bool:
        return not self.is_honor and self.rank in (1, 9)

    @property
    def is_terminal_or_honor(self) -> bool:
        return self.is_honor or self.is_terminal

    @property
    def is_simple(self) -> bool:
        return not self.is_honor and 2 <= self.rank <= 8

    @property
    def is_dragon(self) -> bool:
        return self.is_honor and self.rank in DRAGON_RANKS

    def __str__(self) -> str:
        return self.code


ALL_KINDS: tuple[Tile, ...] = tuple(
    Tile(suit, rank) for suit in (*NUMBERED_SUITS, Suit.z) for rank in range(1, MAX_RANK[suit] + 1)
)
TERMINAL_HONOR_KINDS: frozenset[Tile] = frozenset(t for t in ALL_KINDS if t.is_terminal_or_honor)


def tiles_from_codes(codes: Iterable[str]) -> list[Tile]:
    tiles = []
    for code in codes:
        if code in {"5mr", "5pr", "5sr"}:
            code = code[:2]
        tiles.append(Tile.from_code(code))
    return tiles


def parse_tiles(text: str) -> list[Tile]:
    """Parse compact notation such as ``"123m456p789s11z"``."""
    compact = text.replace(" ", "")
    if not COMPACT_RE.fullmatch(compact):
        raise InvalidTileError(f"Invalid tile notation: {text!r}")
    tiles = []
    for digits, suit in _COMPACT_GROUP_RE.findall(compact):
        for digit in digits:
            tiles.append(Tile(Suit(suit), int(digit)))
    return tiles


def format_tiles(tiles: Iterable[Tile]) -> str:
    parts = []
    for suit, group in itertools.groupby(sort_tiles(tiles), key=lambda t: t.suit):
        parts.append("".join(str(t.rank) for t in group) + suit.value)
    return "".join(parts)


def sort_tiles(tiles: Iterable[Tile]) -> list[Tile]:
    return sorted(tiles)


def count_kinds(tiles: Iterable[Tile]) -> Counter[Tile]:
    return Counter(t.kind for t in tiles)


def sort_with_drawn_last(hand: list[Tile]) -> list[Tile]:
    """Sort the concealed part of a 14-tile hand, leaving the drawn tile at the end."""
    if len(hand) <= 13:
        return hand
    return sort_tiles(hand[:13]) + [hand[-1]]


class TileFactory:
    """Creates tiles stamped with a sequence number local to this factory."""

    def __init__(self, start: int = 0) -> None:
        self._seq = itertools.count(start)

    def create(self, suit: Suit | str, rank: int) -> Tile:
        return Tile(suit, rank, tag=next(self._seq))

    def full_set(self, copies: int = 4) -> list[Tile]:
        return [self.create(kind.suit, kind.rank) for kind in ALL_KINDS for _ in range(copies)]
