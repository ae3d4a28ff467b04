"""
FastAPI Main Application
SLALOM kitchen: ingredient ratings, strategy evaluation, simulated vaults
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from slalom.config import settings
from slalom.core.logging import get_logger, setup_logging
from slalom.api.dependencies import attach_services, build_services
from slalom.api.routes import ingredients, orders, sessions, strategy
from slalom.domain.services.config_engine import ConfigEngine
from slalom.infrastructure.market_data.cached_provider import CachedMarketDataProvider

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"
VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Loads configuration and wires services onto app.state
    """
    logger.info("=" * 60)
    logger.info("🚀 Starting SLALOM Kitchen")
    logger.info("=" * 60)

    logger.info("⚙️  Loading configuration from %s", CONFIG_DIR)
    config_engine = ConfigEngine(CONFIG_DIR)
    config_engine.load_all()
    logger.info("   🍱 Ingredient universe: %d coins", len(config_engine.market_universe.tickers))

    services = build_services(config_engine, settings)
    attach_services(app, services)
    logger.info("✅ Services initialized (market data: %s)", settings.MARKET_DATA_PROVIDER)
    logger.info("   ✅ API Docs: http://%s:%s/docs", settings.API_HOST, settings.API_PORT)

    yield

    logger.info("🛑 Shutting down SLALOM Kitchen...")
    market_data = services.market_data
    if isinstance(market_data, CachedMarketDataProvider) and market_data.redis_cache is not None:
        await market_data.redis_cache.close()
    logger.info("👋 Shutdown complete")


def include_routers(app: FastAPI) -> None:
    app.include_router(ingredients.router, prefix="/api/v1/ingredients", tags=["Ingredients"])
    app.include_router(strategy.router, prefix="/api/v1/strategy", tags=["Strategy"])
    app.include_router(orders.router, prefix="/api/v1/orders", tags=["Orders"])
    app.include_router(sessions.router, prefix="/api/v1/sessions", tags=["Sessions & Vaults"])


# Create FastAPI app
app = FastAPI(
    title="SLALOM Kitchen",
    description="Ingredient ratings and strategy evaluation for the SLALOM protocol",
    version=VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Service health"""
    services = getattr(app.state, "services", None)
    return {
        "status": "healthy" if services else "starting",
        "service": "SLALOM Kitchen",
        "version": VERSION,
        "market_data": settings.MARKET_DATA_PROVIDER,
        "sessions": len(services.sessions) if services else 0,
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "🐼 Welcome to the SLALOM kitchen",
        "version": VERSION,
        "docs": "/docs",
    }


include_routers(app)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("slalom.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
