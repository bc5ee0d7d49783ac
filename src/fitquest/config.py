import logging
import os
from dataclasses import dataclass

LOG_FORMATS = ("text", "json")


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Config:
    log_format: str = "text"
    log_level: str = "INFO"
    seed: int | None = None
    mission_target: int = 3
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls) -> "Config":
        log_format = os.environ.get("FITQUEST_LOG_FORMAT", "text").lower()
        if log_format not in LOG_FORMATS:
            raise RuntimeError(f"FITQUEST_LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}")

        log_level = os.environ.get("FITQUEST_LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise RuntimeError(f"Unknown FITQUEST_LOG_LEVEL {log_level!r}")

        return cls(
            log_format=log_format,
            log_level=log_level,
            seed=_int_env("FITQUEST_SEED", None),
            mission_target=_int_env("FITQUEST_MISSION_TARGET", 3),
            host=os.environ.get("FITQUEST_HOST", "127.0.0.1"),
            port=_int_env("FITQUEST_PORT", 8000),
        )
