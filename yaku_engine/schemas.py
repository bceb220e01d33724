from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, conint


class WinType(str, Enum):
    ron = "ron"
    tsumo = "tsumo"


class LimitTier(str, Enum):
    none = "none"
    mangan = "mangan"
    haneman = "haneman"
    baiman = "baiman"
    sanbaiman = "sanbaiman"
    yakuman = "yakuman"


TileCode = str


class YakuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    han: int


class YakuResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    yaku: list[YakuItem] = Field(default_factory=list)
    han: conint(ge=0) = 0
    yakuman: bool = False

    @property
    def names(self) -> list[str]:
        return [item.name for item in self.yaku]


class Points(BaseModel):
    ron: int = 0
    tsumo_dealer_pay: int = 0
    tsumo_non_dealer_pay: int = 0


class ScoreBreakdown(BaseModel):
    fu: int
    han: int
    limit: LimitTier
    point_label: str
    base_points: int
    total: int
    points: Points


class GroupOut(BaseModel):
    kind: str
    tiles: list[TileCode]


class TenpaiResult(BaseModel):
    is_tenpai: bool
    waits: list[TileCode] = Field(default_factory=list)


class HandScoreResult(BaseModel):
    result: YakuResult
    score: ScoreBreakdown | None = None
    explanation: list[str] = Field(default_factory=list)


class EvaluateRequest(BaseModel):
    tiles: list[TileCode]

    model_config = ConfigDict(extra="forbid")


class EvaluateResponse(BaseModel):
    status: str = "ok"
    result: YakuResult
    special_shape: str | None = None
    decomposition: list[GroupOut] = Field(default_factory=list)


class TenpaiRequest(BaseModel):
    tiles: list[TileCode]

    model_config = ConfigDict(extra="forbid")


class TenpaiResponse(BaseModel):
    status: str = "ok"
    result: TenpaiResult


class ScoreRequest(BaseModel):
    tiles: list[TileCode]
    is_dealer: bool = False
    win_type: WinType = WinType.ron

    model_config = ConfigDict(extra="forbid")


class ScoreResponse(BaseModel):
    status: str = "ok"
    result: HandScoreResult
