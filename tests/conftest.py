from pathlib import Path
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from slalom.api.dependencies import attach_services, build_services
from slalom.config import Settings
from slalom.domain.models import Direction, PositionConfig
from slalom.domain.services.config_engine import ConfigEngine
from slalom.infrastructure.chain.transaction_submitter import FakeTransactionSubmitter
from slalom.main import include_routers

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


@pytest.fixture(scope="session")
def config_engine() -> ConfigEngine:
    engine = ConfigEngine(CONFIG_DIR)
    engine.load_all()
    return engine


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        MARKET_DATA_PROVIDER="static",
        REDIS_ENABLED=False,
        WALLET_STARTING_BALANCE=100.0,
        VAULT_CREATION_FEE=1.0,
    )


@pytest.fixture()
def submitter() -> FakeTransactionSubmitter:
    return FakeTransactionSubmitter()


@pytest.fixture()
def app(config_engine, test_settings, submitter) -> FastAPI:
    app = FastAPI()
    include_routers(app)
    attach_services(app, build_services(config_engine, test_settings, submitter=submitter))
    return app


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_position(ticker="BTC", allocation=100.0, leverage=5.0, direction=Direction.LONG) -> PositionConfig:
    return PositionConfig(
        ticker=ticker,
        direction=direction,
        leverage=leverage,
        allocation_percent=allocation,
    )


@pytest.fixture()
def position_factory():
    return make_position
