import pytest

from yaku_engine.schemas import LimitTier, WinType, YakuItem, YakuResult
from yaku_engine.scoring import (
    base_points,
    calculate_score,
    derive_fu,
    limit_tier,
    round_up_100,
    score_fu_han,
)
from yaku_engine.yaku import CHIITOITSU, KOKUSHI, PINFU, build_result


def yaku_result(han: int, names: list[str] | None = None, yakuman: bool = False) -> YakuResult:
    items = [YakuItem(name=name, han=0) for name in names or []]
    return YakuResult(yaku=items, han=han, yakuman=yakuman)


@pytest.mark.parametrize(
    "value,expected",
    [(0, 0), (1, 100), (99, 100), (100, 100), (101, 200), (199, 200), (200, 200), (2880, 2900)],
)
def test_round_up_100(value, expected):
    assert round_up_100(value) == expected
    assert round_up_100(round_up_100(value)) == round_up_100(value)


def test_fu_buckets():
    assert derive_fu(yaku_result(2, [CHIITOITSU])) == 25
    assert derive_fu(yaku_result(1, [PINFU])) == 20
    assert derive_fu(yaku_result(2, ["断么九"])) == 30
    assert derive_fu(yaku_result(3, [CHIITOITSU, PINFU])) == 25


def test_non_dealer_ron_30_fu_2_han():
    score = calculate_score(yaku_result(2), is_dealer=False, win_type=WinType.ron)
    assert score.fu == 30
    assert score.han == 2
    assert score.base_points == 480
    assert score.limit == LimitTier.none
    assert score.point_label == "通常"
    assert score.total == 2000
    assert score.points.ron == 2000


def test_dealer_ron_rounds_each_payment_not_the_base():
    score = calculate_score(yaku_result(2), is_dealer=True, win_type=WinType.ron)
    assert score.base_points == 480
    assert score.total == 2900
    assert score.points.ron == 2900


def test_pinfu_non_dealer_tsumo():
    score = calculate_score(build_result([PINFU]), is_dealer=False, win_type=WinType.tsumo)
    assert score.fu == 20
    assert score.base_points == 160
    assert score.points.tsumo_dealer_pay == 400
    assert score.points.tsumo_non_dealer_pay == 200
    assert score.points.ron == 0
    assert score.total == 800


def test_dealer_tsumo_each_seat_pays_double_base():
    score = calculate_score(yaku_result(1), is_dealer=True, win_type=WinType.tsumo)
    assert score.base_points == 240
    assert score.points.tsumo_non_dealer_pay == 500
    assert score.points.tsumo_dealer_pay == 0
    assert score.total == 1500


def test_seven_pairs_non_dealer_ron():
    score = calculate_score(yaku_result(3, [CHIITOITSU]), is_dealer=False, win_type=WinType.ron)
    assert score.fu == 25
    assert score.base_points == 800
    assert score.total == 3200


def test_five_han_is_capped():
    score = calculate_score(yaku_result(5), is_dealer=False, win_type=WinType.ron)
    assert score.limit == LimitTier.mangan
    assert score.point_label == "満貫"
    assert score.base_points == 2000
    assert score.total == 8000


@pytest.mark.parametrize(
    "han,tier,base",
    [
        (1, LimitTier.none, 240),
        (4, LimitTier.none, 1920),
        (5, LimitTier.mangan, 2000),
        (6, LimitTier.haneman, 3000),
        (7, LimitTier.haneman, 3000),
        (8, LimitTier.baiman, 4000),
        (10, LimitTier.baiman, 4000),
        (11, LimitTier.sanbaiman, 6000),
        (12, LimitTier.sanbaiman, 6000),
        (13, LimitTier.yakuman, 8000),
        (26, LimitTier.yakuman, 8000),
    ],
)
def test_limit_tiers_at_30_fu(han, tier, base):
    assert limit_tier(han) == tier
    assert base_points(30, han) == base


def test_yakuman_flag_selects_cap_but_not_base():
    result = YakuResult(yaku=[YakuItem(name=KOKUSHI, han=1)], han=1, yakuman=True)
    score = calculate_score(result, is_dealer=False, win_type=WinType.ron)
    assert score.limit == LimitTier.yakuman
    assert score.point_label == "役満"
    assert score.base_points == 30 * 2**3
    assert score.total == 1000


def test_thirteen_orphans_dealer_tsumo():
    score = calculate_score(build_result([KOKUSHI]), is_dealer=True, win_type=WinType.tsumo)
    assert score.base_points == 8000
    assert score.points.tsumo_non_dealer_pay == 16000
    assert score.total == 48000


def test_score_fu_han_accepts_plain_values():
    score = score_fu_han(fu=40, han=3, yakuman=False, is_dealer=False, win_type="ron")
    assert score.base_points == 1280
    assert score.total == 5200


def test_scoring_a_non_winning_result_is_not_rejected():
    score = calculate_score(YakuResult(), is_dealer=False, win_type=WinType.ron)
    assert score.han == 0
    assert score.base_points == 120
    assert score.total == 500


@pytest.mark.parametrize("is_dealer", [True, False])
@pytest.mark.parametrize("win_type", [WinType.ron, WinType.tsumo])
@pytest.mark.parametrize("han", range(0, 14))
def test_totals_are_multiples_of_100(is_dealer, win_type, han):
    for fu in (20, 25, 30):
        score = score_fu_han(fu, han, False, is_dealer, win_type)
        assert score.total % 100 == 0
        assert score.total >= 0
