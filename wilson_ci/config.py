"""Application configuration loaded from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_PATH = PROJECT_ROOT / ".env"
load_dotenv(ENV_PATH)

DEFAULT_CONFIDENCE_LEVEL = 0.95
DEFAULT_REPORT_PRECISION = 6
DEFAULT_SCALE_FACTORS = (1, 2, 4, 8, 16, 32, 48)


def _parse_csv_env(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


def _parse_factors(value: str) -> tuple[int, ...]:
    try:
        factors = tuple(int(part) for part in _parse_csv_env(value))
    except ValueError:
        return ()
    return factors


def _default_cors_origins() -> tuple[str, ...]:
    return ("http://localhost:8000", "http://127.0.0.1:8000")


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Typed runtime settings.

    Args:
        confidence_level: Default two-sided confidence level.
        report_precision: Decimal places used in text reports.
        scale_factors: Trial-count multipliers used by sweeps.
        cors_origins: Allowed cross-origin origins.
        log_level: Root logging level name.
    """

    confidence_level: float = _float_env("WILSON_CONFIDENCE_LEVEL", DEFAULT_CONFIDENCE_LEVEL)
    report_precision: int = _int_env("WILSON_REPORT_PRECISION", DEFAULT_REPORT_PRECISION)
    scale_factors: tuple[int, ...] = _parse_factors(os.getenv("WILSON_SCALE_FACTORS", "")) or DEFAULT_SCALE_FACTORS
    cors_origins: tuple[str, ...] = _parse_csv_env(os.getenv("CORS_ORIGINS", "")) or _default_cors_origins()
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __post_init__(self) -> None:
        """Replace out-of-range values with defaults."""

        if not 0.0 < self.confidence_level < 1.0:
            object.__setattr__(self, "confidence_level", DEFAULT_CONFIDENCE_LEVEL)
        if self.report_precision < 0:
            object.__setattr__(self, "report_precision", DEFAULT_REPORT_PRECISION)
        if any(factor <= 0 for factor in self.scale_factors):
            object.__setattr__(self, "scale_factors", DEFAULT_SCALE_FACTORS)
        if not isinstance(logging.getLevelName(self.log_level), int):
            object.__setattr__(self, "log_level", "INFO")


settings = Settings()
