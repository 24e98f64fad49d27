import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field

_DEFAULT_CPU_INTERVAL = 0.1
_DEFAULT_LOG_LEVEL = "WARNING"


class Settings(BaseModel):
    cpu_sample_interval: float = Field(
        default=_DEFAULT_CPU_INTERVAL,
        ge=0,
        description="Sampling window in seconds for the global CPU usage reading",
    )
    log_level: str = Field(
        default=_DEFAULT_LOG_LEVEL,
        description="Logging level name for diagnostics written to stderr",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        raw_interval = os.getenv("SYSMON_CPU_INTERVAL", "").strip()
        try:
            cpu_sample_interval = float(raw_interval) if raw_interval else _DEFAULT_CPU_INTERVAL
        except ValueError:
            cpu_sample_interval = _DEFAULT_CPU_INTERVAL
        if cpu_sample_interval < 0:
            cpu_sample_interval = _DEFAULT_CPU_INTERVAL

        # Unknown level names fall back instead of breaking the report
        log_level = os.getenv("SYSMON_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = _DEFAULT_LOG_LEVEL

        return cls(
            cpu_sample_interval=cpu_sample_interval,
            log_level=log_level,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
