import pytest

from yaku_engine.decomposer import ExhaustiveDecomposer
from yaku_engine.errors import InvalidHandError
from yaku_engine.hand_scoring import score_hand
from yaku_engine.schemas import LimitTier, WinType
from yaku_engine.tiles import TileFactory, parse_tiles


def base_hand():
    return parse_tiles("234m567m345p456s88p")


def test_score_hand_ron_non_dealer():
    result = score_hand(base_hand(), is_dealer=False, win_type=WinType.ron)
    assert result.result.names == ["平和", "断么九"]
    assert result.score.fu == 20
    assert result.score.han == 2
    assert result.score.base_points == 320
    assert result.score.points.ron == 1300
    assert result.score.total == 1300
    assert result.explanation[-1] == "fu=20, han=2, limit=none."


def test_score_hand_tsumo_dealer():
    result = score_hand(base_hand(), is_dealer=True, win_type=WinType.tsumo)
    assert result.score.points.tsumo_non_dealer_pay == 700
    assert result.score.total == 2100


def test_score_hand_seven_pairs_dealer_ron():
    result = score_hand(parse_tiles("1122m3344p5566s77z"), is_dealer=True, win_type=WinType.ron)
    assert result.score.fu == 25
    assert result.score.base_points == 400
    assert result.score.total == 2400
    assert "Special shape: 七対子." in result.explanation


def test_score_hand_full_flush_hits_baiman():
    result = score_hand(parse_tiles("123m234m456m678m99m"), is_dealer=False, win_type=WinType.ron)
    assert result.score.han == 8
    assert result.score.limit == LimitTier.baiman
    assert result.score.total == 16000


def test_score_hand_thirteen_orphans():
    result = score_hand(parse_tiles("119m19p19s1234567z"), is_dealer=False, win_type=WinType.tsumo)
    assert result.result.yakuman is True
    assert result.score.limit == LimitTier.yakuman
    assert result.score.points.tsumo_dealer_pay == 16000
    assert result.score.points.tsumo_non_dealer_pay == 8000
    assert result.score.total == 32000


def test_score_hand_non_winning_has_no_score():
    result = score_hand(parse_tiles("234m456p789s111z55m"), is_dealer=False, win_type=WinType.ron)
    assert result.result.han == 0
    assert result.score is None
    assert result.explanation[-1] == "Not a winning hand."


def test_score_hand_accepts_tagged_tiles():
    factory = TileFactory()
    tiles = [factory.create(t.suit, t.rank) for t in base_hand()]
    assert score_hand(tiles, False, WinType.ron) == score_hand(base_hand(), False, WinType.ron)


def test_score_hand_with_exhaustive_decomposer():
    tiles = parse_tiles("11223344m567p678s")
    first = score_hand(tiles, is_dealer=False, win_type=WinType.ron)
    best = score_hand(tiles, is_dealer=False, win_type=WinType.ron, decomposer=ExhaustiveDecomposer())
    assert first.score.fu == 30
    assert first.score.total == 1000
    assert best.score.fu == 20
    assert best.score.total == 1300


def test_score_hand_rejects_thirteen_tiles():
    with pytest.raises(InvalidHandError):
        score_hand(parse_tiles("234m567m345p456s8p"), is_dealer=False, win_type=WinType.ron)


def test_exhaustive_prefers_higher_fu_on_han_tie():
    # 66s pair reads as 平和 + 一盃口; 99s pair reads as 三暗刻. Both are 2 han.
    tiles = parse_tiles("567m66677788899s")
    result = score_hand(tiles, is_dealer=False, win_type=WinType.ron, decomposer=ExhaustiveDecomposer())
    assert result.result.names == ["三暗刻"]
    assert result.score.fu == 30
    assert result.score.total == 2000
