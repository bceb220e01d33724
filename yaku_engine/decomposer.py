from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from yaku_engine.tiles import ALL_KINDS, Tile

logger = logging.getLogger(__name__)

KIND_INDEX = {kind: i for i, kind in enumerate(ALL_KINDS)}
NUMBERED_KIND_COUNT = 27

Counts = tuple[int, ...]


class GroupKind(str, Enum):
    pair = "pair"
    run = "run"
    triplet = "triplet"


@dataclass(frozen=True)
class Group:
    kind: GroupKind
    tile: Tile

    @property
    def tiles(self) -> tuple[Tile, ...]:
        if self.kind == GroupKind.run:
            return tuple(Tile(self.tile.suit, self.tile.rank + i) for i in range(3))
        if self.kind == GroupKind.triplet:
            return (self.tile,) * 3
        return (self.tile,) * 2


@dataclass(frozen=True)
class Decomposition:
    pair: Group
    groups: tuple[Group, ...]

    @property
    def runs(self) -> list[Group]:
        return [g for g in self.groups if g.kind == GroupKind.run]

    @property
    def triplets(self) -> list[Group]:
        return [g for g in self.groups if g.kind == GroupKind.triplet]

    @property
    def tiles(self) -> list[Tile]:
        tiles = list(self.pair.tiles)
        for group in self.groups:
            tiles.extend(group.tiles)
        return sorted(tiles)


def to_counts(tiles: Iterable[Tile]) -> Counts:
    counts = [0] * len(ALL_KINDS)
    for tile in tiles:
        counts[KIND_INDEX[tile.kind]] += 1
    return tuple(counts)


def _take(counts: Counts, index: int, n: int) -> Counts:
    work = list(counts)
    work[index] -= n
    return tuple(work)


def _take_run(counts: Counts, index: int) -> Counts:
    work = list(counts)
    for i in range(index, index + 3):
        work[i] -= 1
    return tuple(work)


def _can_start_run(counts: Counts, index: int) -> bool:
    return index < NUMBERED_KIND_COUNT and index % 9 <= 6 and counts[index + 1] > 0 and counts[index + 2] > 0


def _first_present(counts: Counts) -> int:
    return next((i for i, c in enumerate(counts) if c > 0), -1)


def _pair_candidates(counts: Counts) -> Iterator[tuple[Group, Counts]]:
    for i, c in enumerate(counts):
        if c >= 2:
            yield Group(GroupKind.pair, ALL_KINDS[i]), _take(counts, i, 2)


class Decomposer(Protocol):
    def decompose(self, tiles: Iterable[Tile]) -> Decomposition | None: ...

    def candidates(self, tiles: Iterable[Tile]) -> list[Decomposition]: ...


class FirstFoundDecomposer:
    """Greedy pair-first search; returns the first decomposition it reaches.

    Once a pair is fixed the lowest remaining kind is consumed as a triplet
    when three or more are left, otherwise as the start of a run. No alternate
    resolution is tried, so some hands with several readings report only one.
    """

    def _groups_for(self, counts: Counts) -> tuple[Group, ...] | None:
        groups: list[Group] = []
        while True:
            first = _first_present(counts)
            if first == -1:
                break
            if counts[first] >= 3:
                counts = _take(counts, first, 3)
                groups.append(Group(GroupKind.triplet, ALL_KINDS[first]))
            elif _can_start_run(counts, first):
                counts = _take_run(counts, first)
                groups.append(Group(GroupKind.run, ALL_KINDS[first]))
            else:
                return None
        if len(groups) != 4:
            return None
        return tuple(groups)

    def decompose(self, tiles: Iterable[Tile]) -> Decomposition | None:
        counts = to_counts(tiles)
        for pair, rest in _pair_candidates(counts):
            groups = self._groups_for(rest)
            if groups is not None:
                logger.debug("decomposed with pair %s: %s", pair.tile, [(g.kind.value, g.tile.code) for g in groups])
                return Decomposition(pair=pair, groups=groups)
            logger.debug("pair candidate %s failed", pair.tile)
        return None

    def candidates(self, tiles: Iterable[Tile]) -> list[Decomposition]:
        found = self.decompose(tiles)
        return [found] if found is not None else []


class ExhaustiveDecomposer:
    """Enumerates every pair + four group reading of the hand."""

    def _collect(self, counts: Counts, remain: int, current: tuple[Group, ...]) -> Iterator[tuple[Group, ...]]:
        if remain == 0:
            if not any(counts):
                yield current
            return

        first = _first_present(counts)
        if first == -1:
            return

        if counts[first] >= 3:
            yield from self._collect(
                _take(counts, first, 3), remain - 1, current + (Group(GroupKind.triplet, ALL_KINDS[first]),)
            )
        if _can_start_run(counts, first):
            yield from self._collect(
                _take_run(counts, first), remain - 1, current + (Group(GroupKind.run, ALL_KINDS[first]),)
            )

    def candidates(self, tiles: Iterable[Tile]) -> list[Decomposition]:
        counts = to_counts(tiles)
        found = []
        for pair, rest in _pair_candidates(counts):
            for groups in self._collect(rest, 4, ()):
                found.append(Decomposition(pair=pair, groups=groups))
        logger.debug("found %d decompositions", len(found))
        return found

    def decompose(self, tiles: Iterable[Tile]) -> Decomposition | None:
        found = self.candidates(tiles)
        return found[0] if found else None


DECOMPOSERS: dict[str, type[FirstFoundDecomposer] | type[ExhaustiveDecomposer]] = {
    "first_found": FirstFoundDecomposer,
    "exhaustive": ExhaustiveDecomposer,
}


def get_decomposer(strategy: str) -> Decomposer:
    try:
        return DECOMPOSERS[strategy]()
    except KeyError as exc:
        raise ValueError(f"Unknown decomposition strategy: {strategy}") from exc
