from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from yaku_engine.config import settings
from yaku_engine.decomposer import Decomposer, Decomposition, GroupKind, get_decomposer
from yaku_engine.schemas import YakuItem, YakuResult
from yaku_engine.special_hands import is_seven_pairs, is_thirteen_orphans
from yaku_engine.tiles import NUMBERED_SUITS, Suit, Tile, count_kinds
from yaku_engine.validators import WIN_HAND_SIZE, validate_hand

logger = logging.getLogger(__name__)

KOKUSHI = "国士無双"
CHIITOITSU = "七対子"
PINFU = "平和"
TANYAO = "断么九"
IIPEIKOU = "一盃口"
ITTSUU = "一気通貫"
TOITOI = "対々和"
SANANKOU = "三暗刻"
SANSHOKU = "三色同順"
HONITSU = "混一色"
CHINITSU = "清一色"
YAKUHAI = "役牌"


@dataclass(frozen=True)
class YakuSpec:
    han: int
    yakuman: bool = False


YAKU_TABLE: dict[str, YakuSpec] = {
    KOKUSHI: YakuSpec(han=13, yakuman=True),
    CHIITOITSU: YakuSpec(han=2),
    PINFU: YakuSpec(han=1),
    TANYAO: YakuSpec(han=1),
    IIPEIKOU: YakuSpec(han=1),
    ITTSUU: YakuSpec(han=2),
    TOITOI: YakuSpec(han=2),
    SANANKOU: YakuSpec(han=2),
    SANSHOKU: YakuSpec(han=2),
    HONITSU: YakuSpec(han=3),
    CHINITSU: YakuSpec(han=6),
    YAKUHAI: YakuSpec(han=1),
}


@dataclass(frozen=True)
class HandAnalysis:
    result: YakuResult
    special_shape: str | None = None
    decomposition: Decomposition | None = None


def _ranks_in_suit(tiles: Sequence[Tile], suit: Suit) -> set[int]:
    return {t.rank for t in tiles if t.suit == suit}


def _has_tanyao(tiles: Sequence[Tile]) -> bool:
    return all(t.is_simple for t in tiles)


def _has_pinfu(decomposition: Decomposition) -> bool:
    if any(g.kind != GroupKind.run for g in decomposition.groups):
        return False
    return decomposition.pair.tile.is_simple


def _has_iipeikou(decomposition: Decomposition) -> bool:
    starts = Counter(g.tile for g in decomposition.runs)
    return any(v >= 2 for v in starts.values())


def _has_ittsuu(tiles: Sequence[Tile]) -> bool:
    for suit in NUMBERED_SUITS:
        if _ranks_in_suit(tiles, suit) >= set(range(1, 10)):
            return True
    return False


def _has_toitoi(decomposition: Decomposition) -> bool:
    return len(decomposition.triplets) == 4


def _has_sanankou(decomposition: Decomposition) -> bool:
    return len(decomposition.triplets) >= 3


def _has_sanshoku_doujun(tiles: Sequence[Tile]) -> bool:
    ranks_by_suit = [_ranks_in_suit(tiles, suit) for suit in NUMBERED_SUITS]
    for start in range(1, 8):
        run = {start, start + 1, start + 2}
        if all(run <= ranks for ranks in ranks_by_suit):
            return True
    return False


def _numbered_suits(tiles: Sequence[Tile]) -> set[Suit]:
    return {t.suit for t in tiles if not t.is_honor}


def _has_honitsu(tiles: Sequence[Tile]) -> bool:
    return len(_numbered_suits(tiles)) == 1 and any(t.is_honor for t in tiles)


def _has_chinitsu(tiles: Sequence[Tile]) -> bool:
    return len(_numbered_suits(tiles)) == 1 and not any(t.is_honor for t in tiles)


def _has_yakuhai(decomposition: Decomposition) -> bool:
    return any(g.tile.is_dragon for g in decomposition.triplets)


def _append_flush_yaku(names: list[str], tiles: Sequence[Tile]) -> None:
    if _has_chinitsu(tiles):
        names.append(CHINITSU)
    elif _has_honitsu(tiles):
        names.append(HONITSU)


def build_result(names: Sequence[str]) -> YakuResult:
    items = [YakuItem(name=name, han=YAKU_TABLE[name].han) for name in names]
    return YakuResult(
        yaku=items,
        han=sum(item.han for item in items),
        yakuman=any(YAKU_TABLE[name].yakuman for name in names),
    )


def classify_decomposition(decomposition: Decomposition, tiles: Sequence[Tile]) -> YakuResult:
    names: list[str] = []
    if _has_pinfu(decomposition):
        names.append(PINFU)
    if _has_tanyao(tiles):
        names.append(TANYAO)
    if _has_iipeikou(decomposition):
        names.append(IIPEIKOU)
    if _has_ittsuu(tiles):
        names.append(ITTSUU)
    if _has_toitoi(decomposition):
        names.append(TOITOI)
    if _has_sanankou(decomposition):
        names.append(SANANKOU)
    if _has_sanshoku_doujun(tiles):
        names.append(SANSHOKU)
    _append_flush_yaku(names, tiles)
    if _has_yakuhai(decomposition):
        names.append(YAKUHAI)
    return build_result(names)


def classify_seven_pairs(tiles: Sequence[Tile]) -> YakuResult:
    names = [CHIITOITSU]
    if _has_tanyao(tiles):
        names.append(TANYAO)
    _append_flush_yaku(names, tiles)
    return build_result(names)


def reading_rank(result: YakuResult) -> tuple[bool, int, bool]:
    """Order readings of one hand by payout: yakuman, then han, then fu.

    Decomposed readings score 20 fu with 平和 and 30 fu without it, so on a han
    tie the reading without 平和 pays more.
    """
    return result.yakuman, result.han, PINFU not in result.names


def analyze_tiles(tiles: Sequence[Tile], decomposer: Decomposer | None = None) -> HandAnalysis:
    """Classify 14 tiles without validating them.

    Special shapes are checked first. Otherwise every decomposition the
    decomposer offers is classified and the best-paying reading is kept; the
    first-found decomposer only ever offers one.
    """
    tiles = sorted(t.kind for t in tiles)
    counts = count_kinds(tiles)

    if is_thirteen_orphans(counts):
        return HandAnalysis(result=build_result([KOKUSHI]), special_shape=KOKUSHI)
    if is_seven_pairs(counts):
        return HandAnalysis(result=classify_seven_pairs(tiles), special_shape=CHIITOITSU)

    if decomposer is None:
        decomposer = get_decomposer(settings.decomposition_strategy)

    best: HandAnalysis | None = None
    for decomposition in decomposer.candidates(tiles):
        result = classify_decomposition(decomposition, tiles)
        if best is None or reading_rank(result) > reading_rank(best.result):
            best = HandAnalysis(result=result, decomposition=decomposition)

    if best is None:
        return HandAnalysis(result=YakuResult())
    return best


def analyze_hand(tiles: Sequence[Tile], decomposer: Decomposer | None = None) -> HandAnalysis:
    validate_hand(tiles, WIN_HAND_SIZE)
    analysis = analyze_tiles(tiles, decomposer)
    logger.debug("classified hand: yaku=%s han=%d", analysis.result.names, analysis.result.han)
    return analysis


def classify_hand(tiles: Sequence[Tile], decomposer: Decomposer | None = None) -> YakuResult:
    return analyze_hand(tiles, decomposer).result


def is_winning(result: YakuResult) -> bool:
    return result.yakuman or result.han > 0
