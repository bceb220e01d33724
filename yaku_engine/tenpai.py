from __future__ import annotations

import logging
from collections.abc import Sequence

from yaku_engine.config import settings
from yaku_engine.decomposer import Decomposer, get_decomposer
from yaku_engine.schemas import TenpaiResult
from yaku_engine.tiles import ALL_KINDS, Tile
from yaku_engine.validators import TENPAI_HAND_SIZE, validate_hand
from yaku_engine.yaku import analyze_tiles, is_winning

logger = logging.getLogger(__name__)


def completes_hand(tiles: Sequence[Tile], candidate: Tile, decomposer: Decomposer | None = None) -> bool:
    return is_winning(analyze_tiles([*tiles, candidate], decomposer).result)


def find_waits(tiles: Sequence[Tile], decomposer: Decomposer | None = None) -> list[Tile]:
    validate_hand(tiles, TENPAI_HAND_SIZE)
    if decomposer is None:
        decomposer = get_decomposer(settings.decomposition_strategy)
    return [kind for kind in ALL_KINDS if completes_hand(tiles, kind, decomposer)]


def check_tenpai(tiles: Sequence[Tile], decomposer: Decomposer | None = None) -> TenpaiResult:
    waits = find_waits(tiles, decomposer)
    logger.debug("tenpai check: waits=%s", [w.code for w in waits])
    return TenpaiResult(is_tenpai=bool(waits), waits=[w.code for w in waits])
