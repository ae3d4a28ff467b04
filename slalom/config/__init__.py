"""
Application Settings
Load from environment variables
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # ======================
    # Market Data
    # ======================
    MARKET_DATA_PROVIDER: str = "static"
    MARKET_DATA_URL: str = "https://hyperdash.info/api/analytics/coins"
    MARKET_DATA_TIMEOUT: float = 10.0
    MARKET_DATA_CACHE_TTL: int = 300
    TOP_INGREDIENTS_LIMIT: int = 50

    # ======================
    # Redis
    # ======================
    REDIS_ENABLED: bool = False
    REDIS_URL: str = "redis://localhost:6379/0"

    # ======================
    # Simulated chain / wallet
    # ======================
    WALLET_STARTING_BALANCE: float = 100.0
    MAX_SESSIONS: int = 1000
    SESSION_IDLE_TTL: int = 3600
    TX_HISTORY_SIZE: int = 500
    VAULT_CREATION_FEE: float = 1.0
    VAULT_BONDING_TARGET: float = 100.0
    DEFAULT_ORDER_CAPITAL: float = 10000.0

    # ======================
    # Pydantic v2 config
    # ======================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="forbid",
    )


settings = Settings()
