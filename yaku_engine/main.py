from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from yaku_engine.config import settings
from yaku_engine.decomposer import get_decomposer
from yaku_engine.errors import InvalidHandError
from yaku_engine.hand_scoring import score_hand
from yaku_engine.logging import setup_logging
from yaku_engine.schemas import (
    EvaluateRequest,
    EvaluateResponse,
    GroupOut,
    ScoreRequest,
    ScoreResponse,
    TenpaiRequest,
    TenpaiResponse,
)
from yaku_engine.tenpai import check_tenpai
from yaku_engine.validators import TENPAI_HAND_SIZE, WIN_HAND_SIZE, hand_from_codes
from yaku_engine.yaku import analyze_hand

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Mahjong Hand Evaluation Engine", version="0.1.0")
decomposer = get_decomposer(settings.decomposition_strategy)


@app.get("/")
def root() -> dict[str, str]:
    return {
        "message": "Mahjong Hand Evaluation Engine API",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/v1/evaluate", response_model=EvaluateResponse)
def evaluate(req: EvaluateRequest) -> EvaluateResponse:
    try:
        tiles = hand_from_codes(req.tiles, WIN_HAND_SIZE)
        analysis = analyze_hand(tiles, decomposer)
    except InvalidHandError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    groups: list[GroupOut] = []
    if analysis.decomposition is not None:
        for group in (analysis.decomposition.pair, *analysis.decomposition.groups):
            groups.append(GroupOut(kind=group.kind.value, tiles=[t.code for t in group.tiles]))
    return EvaluateResponse(result=analysis.result, special_shape=analysis.special_shape, decomposition=groups)


@app.post("/api/v1/tenpai", response_model=TenpaiResponse)
def tenpai(req: TenpaiRequest) -> TenpaiResponse:
    try:
        tiles = hand_from_codes(req.tiles, TENPAI_HAND_SIZE)
        result = check_tenpai(tiles, decomposer)
    except InvalidHandError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return TenpaiResponse(result=result)


@app.post("/api/v1/score", response_model=ScoreResponse)
def score(req: ScoreRequest) -> ScoreResponse:
    try:
        tiles = hand_from_codes(req.tiles, WIN_HAND_SIZE)
        result = score_hand(tiles, req.is_dealer, req.win_type, decomposer)
    except InvalidHandError as exc:
        logger.info("rejected score request: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ScoreResponse(result=result)
