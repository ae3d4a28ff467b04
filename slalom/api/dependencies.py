"""
Service wiring for the API.
Services live on app.state; routes receive them through Depends().
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import FastAPI, Request

from slalom.config import Settings
from slalom.domain.services.config_engine import ConfigEngine
from slalom.infrastructure.chain.transaction_submitter import FakeTransactionSubmitter, TransactionSubmitter
from slalom.infrastructure.market_data.provider_factory import get_market_data_provider
from slalom.infrastructure.market_data.types import MarketDataProvider
from slalom.services.execution_service import OrderExecutor
from slalom.services.ingredient_service import IngredientService
from slalom.services.session_service import SessionStore
from slalom.services.strategy_service import StrategyService
from slalom.services.vault_service import VaultDeployer


@dataclass
class KitchenServices:
    settings: Settings
    config_engine: ConfigEngine
    market_data: MarketDataProvider
    ingredients: IngredientService
    strategy: StrategyService
    orders: OrderExecutor
    sessions: SessionStore
    vaults: VaultDeployer


def build_services(
    config_engine: ConfigEngine,
    app_settings: Settings,
    market_data: Optional[MarketDataProvider] = None,
    submitter: Optional[TransactionSubmitter] = None,
) -> KitchenServices:
    market_data = market_data or get_market_data_provider(config_engine, app_settings)
    submitter = submitter or FakeTransactionSubmitter(history_size=app_settings.TX_HISTORY_SIZE)

    return KitchenServices(
        settings=app_settings,
        config_engine=config_engine,
        market_data=market_data,
        ingredients=IngredientService(market_data),
        strategy=StrategyService(),
        orders=OrderExecutor(config_engine.mock_prices),
        sessions=SessionStore(
            starting_balance=app_settings.WALLET_STARTING_BALANCE,
            max_sessions=app_settings.MAX_SESSIONS,
            idle_ttl_seconds=app_settings.SESSION_IDLE_TTL,
        ),
        vaults=VaultDeployer(
            submitter,
            creation_fee=app_settings.VAULT_CREATION_FEE,
            bonding_target=app_settings.VAULT_BONDING_TARGET,
        ),
    )


def attach_services(app: FastAPI, services: KitchenServices) -> None:
    app.state.services = services


def get_services(request: Request) -> KitchenServices:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise RuntimeError("Kitchen services not initialized")
    return services
