from __future__ import annotations

from collections.abc import Iterable, Sequence

from yaku_engine.errors import InvalidHandError, InvalidTileError
from yaku_engine.tiles import CODE_RE, Tile, count_kinds, tiles_from_codes

WIN_HAND_SIZE = 14
TENPAI_HAND_SIZE = 13


def validate_tile(code: str) -> None:
    if not CODE_RE.fullmatch(code):
        raise InvalidTileError(f"Invalid tile code: {code}")


def validate_hand_size(tiles: Sequence[Tile], expected: int) -> None:
    if len(tiles) != expected:
        raise InvalidHandError(f"Hand must contain exactly {expected} tiles, got {len(tiles)}")


def validate_tile_counts(tiles: Iterable[Tile]) -> None:
    for kind, count in count_kinds(tiles).items():
        if count >= 5:
            raise InvalidHandError(f"Tile appears 5+ times in hand: {kind.code}")


def validate_hand(tiles: Sequence[Tile], expected: int) -> None:
    validate_hand_size(tiles, expected)
    for tile in tiles:
        if not isinstance(tile, Tile):
            raise InvalidTileError(f"Not a tile: {tile!r}")
    validate_tile_counts(tiles)


def hand_from_codes(codes: Sequence[str], expected: int) -> list[Tile]:
    for code in codes:
        validate_tile(code)
    tiles = tiles_from_codes(codes)
    validate_hand(tiles, expected)
    return tiles
