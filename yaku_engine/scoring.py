from __future__ import annotations

import math

from yaku_engine.schemas import LimitTier, Points, ScoreBreakdown, WinType, YakuResult
from yaku_engine.yaku import CHIITOITSU, PINFU

SEVEN_PAIRS_FU = 25
PINFU_FU = 20
DEFAULT_FU = 30

LIMIT_CAPS: dict[LimitTier, float] = {
    LimitTier.yakuman: 8000,
    LimitTier.sanbaiman: 6000,
    LimitTier.baiman: 4000,
    LimitTier.haneman: 3000,
    LimitTier.mangan: 2000,
    LimitTier.none: math.inf,
}

POINT_LABELS: dict[LimitTier, str] = {
    LimitTier.yakuman: "役満",
    LimitTier.sanbaiman: "三倍満",
    LimitTier.baiman: "倍満",
    LimitTier.haneman: "跳満",
    LimitTier.mangan: "満貫",
    LimitTier.none: "通常",
}


def round_up_100(value: int) -> int:
    return ((value + 99) // 100) * 100


def derive_fu(result: YakuResult) -> int:
    names = result.names
    if CHIITOITSU in names:
        return SEVEN_PAIRS_FU
    fu = PINFU_FU if PINFU in names else DEFAULT_FU
    return max(20, ((fu + 9) // 10) * 10)


def limit_tier(han: int, yakuman: bool = False) -> LimitTier:
    if yakuman or han >= 13:
        return LimitTier.yakuman
    if han >= 11:
        return LimitTier.sanbaiman
    if han >= 8:
        return LimitTier.baiman
    if han >= 6:
        return LimitTier.haneman
    if han == 5:
        return LimitTier.mangan
    return LimitTier.none


def base_points(fu: int, han: int, yakuman: bool = False) -> int:
    # The yakuman flag picks the cap only; a low-han yakuman stays below it.
    cap = LIMIT_CAPS[limit_tier(han, yakuman)]
    return int(min(fu * 2 ** (2 + han), cap))


def calc_points(base: int, is_dealer: bool, win_type: WinType) -> tuple[Points, int]:
    if win_type == WinType.ron:
        ron = round_up_100(base * (6 if is_dealer else 4))
        return Points(ron=ron), ron

    if is_dealer:
        each = round_up_100(base * 2)
        return Points(tsumo_dealer_pay=0, tsumo_non_dealer_pay=each), each * 3

    pay_dealer = round_up_100(base * 2)
    pay_non_dealer = round_up_100(base)
    return (
        Points(tsumo_dealer_pay=pay_dealer, tsumo_non_dealer_pay=pay_non_dealer),
        pay_dealer + pay_non_dealer * 2,
    )


def score_fu_han(fu: int, han: int, yakuman: bool, is_dealer: bool, win_type: WinType) -> ScoreBreakdown:
    tier = limit_tier(han, yakuman)
    base = base_points(fu, han, yakuman)
    points, total = calc_points(base, is_dealer, WinType(win_type))
    return ScoreBreakdown(
        fu=fu,
        han=han,
        limit=tier,
        point_label=POINT_LABELS[tier],
        base_points=base,
        total=total,
        points=points,
    )


def calculate_score(result: YakuResult, is_dealer: bool, win_type: WinType) -> ScoreBreakdown:
    return score_fu_han(derive_fu(result), result.han, result.yakuman, is_dealer, win_type)
