from __future__ import annotations

from collections.abc import Sequence

from yaku_engine.decomposer import Decomposer
from yaku_engine.schemas import HandScoreResult, WinType
from yaku_engine.scoring import calculate_score
from yaku_engine.tiles import Tile, format_tiles
from yaku_engine.yaku import analyze_hand, is_winning


def score_hand(
    tiles: Sequence[Tile],
    is_dealer: bool,
    win_type: WinType,
    decomposer: Decomposer | None = None,
) -> HandScoreResult:
    """Hand shape -> yaku and score. Non-winning hands come back with score=None."""
    analysis = analyze_hand(tiles, decomposer)
    result = analysis.result
    explanation = [f"Hand: {format_tiles(tiles)}."]
    if analysis.special_shape:
        explanation.append(f"Special shape: {analysis.special_shape}.")
    elif analysis.decomposition is not None:
        groups = [f"{g.kind.value}:{g.tile.code}" for g in analysis.decomposition.groups]
        explanation.append(f"Pair {analysis.decomposition.pair.tile.code}, groups {', '.join(groups)}.")

    if not is_winning(result):
        explanation.append("Not a winning hand.")
        return HandScoreResult(result=result, score=None, explanation=explanation)

    score = calculate_score(result, is_dealer, win_type)
    explanation.append(f"fu={score.fu}, han={score.han}, limit={score.limit.value}.")
    return HandScoreResult(result=result, score=score, explanation=explanation)
