from pydantic import BaseModel, Field
from typing import Annotated, List, Optional

from slalom.domain.models import Direction, OrderType, PositionConfig, StrategyEvaluation


class PositionSchema(BaseModel):
    ticker: str = Field(..., min_length=1, max_length=20)
    direction: Direction = Direction.LONG
    leverage: float = Field(5.0, ge=1, le=50)
    allocation: float = Field(..., ge=0, le=100)
    order_type: OrderType = OrderType.MARKET
    limit_price: Optional[float] = Field(None, gt=0)

    def to_domain(self) -> PositionConfig:
        return PositionConfig(
            ticker=self.ticker.strip().upper(),
            direction=self.direction,
            leverage=self.leverage,
            allocation_percent=self.allocation,
            order_type=self.order_type,
            limit_price=self.limit_price,
        )

    @classmethod
    def from_domain(cls, position: PositionConfig) -> "PositionSchema":
        return cls(
            ticker=position.ticker,
            direction=position.direction,
            leverage=position.leverage,
            allocation=position.allocation_percent,
            order_type=position.order_type,
            limit_price=position.limit_price,
        )


class StrategyRequest(BaseModel):
    positions: List[PositionSchema]

    def to_domain(self) -> List[PositionConfig]:
        return [p.to_domain() for p in self.positions]


class RebalanceRequest(StrategyRequest):
    index: int = Field(..., ge=0)
    allocation: float = Field(..., ge=0, le=100)


class RebalanceResponse(BaseModel):
    positions: List[PositionSchema]
    total_allocation: float


class StrategyEvaluationSchema(BaseModel):
    score: int
    grade: str
    commentary: str
    strengths: List[str]
    risks: List[str]
    approved: bool
    allocation_variance: float
    average_leverage: float

    @classmethod
    def from_domain(cls, evaluation: StrategyEvaluation) -> "StrategyEvaluationSchema":
        return cls(
            score=evaluation.score,
            grade=evaluation.grade.value,
            commentary=evaluation.commentary,
            strengths=list(evaluation.strengths),
            risks=list(evaluation.risks),
            approved=evaluation.approved,
            allocation_variance=round(evaluation.allocation_variance, 4),
            average_leverage=round(evaluation.average_leverage, 4),
        )


class SplitRequest(BaseModel):
    tickers: List[Annotated[str, Field(min_length=1, max_length=20)]] = Field(..., min_length=1, max_length=50)
    leverage: float = Field(5.0, ge=1, le=50)
