"""
Sanctum Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    ENGINE_VERSION: str = "1.0.0"
    API_VERSION: str = "1"

    # --- Cultural adaptation ---
    DEFAULT_TRADITION: str = os.getenv("SANCTUM_DEFAULT_TRADITION", "secular")
    # Seeds the shared adapter's random source; unset = nondeterministic
    RANDOM_SEED: Optional[int] = _optional_int("SANCTUM_RANDOM_SEED")

    # --- Input limits ---
    MAX_TEXT_LENGTH: int = int(os.getenv("SANCTUM_MAX_TEXT_LENGTH", "10000"))

    # --- Server ---
    HOST: str = os.getenv("SANCTUM_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("SANCTUM_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("SANCTUM_CORS_ORIGINS", "*")


settings = Settings()
