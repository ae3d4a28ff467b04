from pydantic import BaseModel, Field
from typing import List

from slalom.domain.models import BondingProgress, ExecutedPosition, VaultDeployment
from slalom.domain.schemas.strategy import PositionSchema, StrategyRequest


class ExecuteOrderRequest(StrategyRequest):
    total_capital: float | None = Field(None, gt=0)


class ExecutedPositionSchema(BaseModel):
    ticker: str
    order_id: str
    status: str
    execution_price: float
    quantity: float

    @classmethod
    def from_domain(cls, executed: ExecutedPosition) -> "ExecutedPositionSchema":
        return cls(
            ticker=executed.ticker,
            order_id=executed.order_id,
            status=executed.status,
            execution_price=executed.execution_price,
            quantity=executed.quantity,
        )


class ExecuteOrderResponse(BaseModel):
    success: bool = True
    message: str
    order_ids: List[str]
    executed_positions: List[ExecutedPositionSchema]


class OpenSessionRequest(BaseModel):
    address: str | None = Field(None, min_length=3, max_length=128)


class SessionSchema(BaseModel):
    session_id: str
    address: str | None
    balance: float
    connected: bool
    vault_count: int


class DeployVaultRequest(StrategyRequest):
    name: str = Field(..., min_length=1, max_length=64)
    description: str = Field("", max_length=500)


class BondRequest(BaseModel):
    usdc_amount: float = Field(..., gt=0)


class BondingProgressSchema(BaseModel):
    current: float
    target: float
    percentage: float
    next_price: float

    @classmethod
    def from_domain(cls, bonding: BondingProgress) -> "BondingProgressSchema":
        return cls(
            current=bonding.current,
            target=bonding.target,
            percentage=round(bonding.percentage, 4),
            next_price=round(bonding.next_price, 6),
        )


class VaultSchema(BaseModel):
    vault_address: str
    transaction_hash: str
    bridge_transaction_hash: str
    name: str
    description: str
    owner: str
    deployed_at: float
    grade: str
    score: int
    status: str
    positions: List[PositionSchema]
    bonding_progress: BondingProgressSchema

    @classmethod
    def from_domain(cls, vault: VaultDeployment) -> "VaultSchema":
        return cls(
            vault_address=vault.vault_address,
            transaction_hash=vault.transaction_hash,
            bridge_transaction_hash=vault.bridge_transaction_hash,
            name=vault.name,
            description=vault.description,
            owner=vault.owner,
            deployed_at=vault.deployed_at,
            grade=vault.grade.value,
            score=vault.score,
            status=vault.status,
            positions=[PositionSchema.from_domain(p) for p in vault.positions],
            bonding_progress=BondingProgressSchema.from_domain(vault.bonding),
        )


class BondResponse(BaseModel):
    success: bool = True
    tokens_minted: float
    bonding_progress: BondingProgressSchema


class BalanceResponse(BaseModel):
    session_id: str
    address: str | None
    balance: float
