import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = ("*",)
    max_text_length: int = 10000
    api_prefix: str = "/api/v1"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.getenv("BRAILLE_CORS_ORIGINS", "*")
    max_text_length = _int_from_env("BRAILLE_MAX_TEXT_LENGTH", 10000)
    if max_text_length <= 0:
        raise ValueError("BRAILLE_MAX_TEXT_LENGTH must be positive")

    return Settings(
        log_level=os.getenv("BRAILLE_LOG_LEVEL", "INFO").upper(),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        max_text_length=max_text_length,
        api_prefix=os.getenv("BRAILLE_API_PREFIX", "/api/v1").rstrip("/"),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
