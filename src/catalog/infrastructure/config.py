"""Runtime configuration.

All settings can be overridden via environment variables. A ``.env`` file
is read once at process start by :func:`load_environment`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_ENV: str = Field(default="dev")

    # MongoDB
    MONGODB_URI: str = Field(default="mongodb://localhost:27017")
    MONGODB_DATABASE: str = Field(default="catalog")
    MONGODB_TIMEOUT_MS: int = Field(default=5000, ge=1)
    PRODUCT_COLLECTION: str = Field(default="product")
    COUNTER_COLLECTION: str = Field(default="counters")

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    LOG_FORMAT: Literal["json", "console"] = Field(default="json")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.lower() in ("dev", "development")


def load_environment(path: str | Path = ".env") -> bool:
    """Load key/value pairs from *path* into ``os.environ``.

    Variables that are already set win over the file, so calling this
    more than once is harmless. A missing file is not an error.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return False
    return load_dotenv(dotenv_path=env_path, override=False)
