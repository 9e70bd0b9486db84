from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_PACKAGE_DIR = Path(__file__).resolve().parent

# Load .env from project root
load_dotenv(_PACKAGE_DIR.parent / ".env")


def _split_origins(raw: str) -> tuple[str, ...]:
    return tuple(o.strip() for o in raw.split(",") if o.strip())


@dataclass(frozen=True)
class AppConfig:
    data_path: Path = Path(
        os.getenv("RESTAURANT_DATA_PATH", str(_PACKAGE_DIR / "data" / "restaurants.json"))
    )
    static_dir: Path = Path(os.getenv("RESTAURANT_STATIC_DIR", str(_PACKAGE_DIR / "static")))
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    cors_origins: tuple[str, ...] = _split_origins(os.getenv("CORS_ORIGINS", "*"))
    default_per_page: int = 5
    default_max_distance_km: float = 10.0


DEFAULT_APP_CONFIG = AppConfig()


def setup_logging(config: AppConfig = DEFAULT_APP_CONFIG) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
