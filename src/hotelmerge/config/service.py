"""Query service configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from .env import env_float, optional_env_var
from .suppliers import SupplierConfig, get_supplier_configs

CACHE_TTL_ENV = "HOTELMERGE_CACHE_TTL_SECONDS"
LOG_LEVEL_ENV = "HOTELMERGE_LOG_LEVEL"
DEFAULT_CACHE_TTL_SECONDS = 60.0


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    suppliers: tuple[SupplierConfig, ...]
    cache_ttl: timedelta = field(default_factory=lambda: timedelta(seconds=DEFAULT_CACHE_TTL_SECONDS))
    log_level: str = "INFO"


def get_service_config() -> ServiceConfig:
    return ServiceConfig(
        suppliers=get_supplier_configs(),
        cache_ttl=timedelta(seconds=env_float(CACHE_TTL_ENV, DEFAULT_CACHE_TTL_SECONDS)),
        log_level=optional_env_var(LOG_LEVEL_ENV) or "INFO",
    )
