from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from pydantic import field_validator
import logging

# Configurer un logger pour le module
logger = logging.getLogger(__name__)

SUPPORTED_STORE_BACKENDS = ("memory", "sql")


class GlobalSettings(BaseSettings):
    """
    Configuration for the todo service.
    Every value can be overridden through an environment variable of the same name
    or through a ``.env`` file in the working directory.
    """
    # ==========================================
    # GENERAL APPLICATION SETTINGS
    # ==========================================
    PROJECT_NAME: str = "Todo Service"
    ENVIRONMENT: str = "dev"
    CORS_ORIGINS: str = "*"
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # ==========================================
    # STORAGE
    # ==========================================
    TODO_STORE_BACKEND: str = "memory"
    DATABASE_URL: Optional[str] = "sqlite://"
    SEED_DATA: bool = True

    # ==========================================
    # LOGGING
    # ==========================================
    LOG_LEVEL: str = "INFO"
    SLOW_REQUEST_THRESHOLD_SECONDS: float = 2.0

    @field_validator("TODO_STORE_BACKEND", mode="before")
    @classmethod
    def check_store_backend(cls, v: str) -> str:
        backend = (v or "memory").strip().lower()
        if backend not in SUPPORTED_STORE_BACKENDS:
            raise ValueError(
                f"TODO_STORE_BACKEND must be one of {', '.join(SUPPORTED_STORE_BACKENDS)}, got {v!r}"
            )
        return backend

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def normalize_database_url(cls, v: Optional[str]) -> str:
        if not v:
            return "sqlite://"
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    @field_validator("SLOW_REQUEST_THRESHOLD_SECONDS")
    @classmethod
    def check_threshold(cls, v: float) -> float:
        if v < 0:
            raise ValueError("SLOW_REQUEST_THRESHOLD_SECONDS must be >= 0")
        return v

    def get_cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        extra="ignore",
    )


# Initialisation du singleton de configuration globale
settings = GlobalSettings()

logger.debug(f"Configuration loaded for environment: {settings.ENVIRONMENT}")
logger.debug(f"Todo store backend: {settings.TODO_STORE_BACKEND}")
