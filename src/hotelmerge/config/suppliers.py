"""Supplier endpoint configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger

from .env import env_float, optional_env_var
from .errors import MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig

log = getLogger(__name__)

SUPPLIER_TIMEOUT_ENV = "HOTELMERGE_SUPPLIER_TIMEOUT_SECONDS"
SUPPLIER_HTTP_CACHE_ENV = "HOTELMERGE_SUPPLIER_HTTP_CACHE_SECONDS"
SUPPLIER_RATE_LIMIT_ENV = "HOTELMERGE_SUPPLIER_MAX_CALLS_PER_SECOND"
DEFAULT_SUPPLIER_TIMEOUT_SECONDS = 2.0
DEFAULT_SUPPLIER_MAX_CALLS_PER_SECOND = 5.0


class SupplierName(StrEnum):
    ACME = "Acme"
    PATAGONIA = "Patagonia"
    PAPERFLIES = "Paperflies"

    @property
    def url_env_var(self) -> str:
        return f"HOTELMERGE_{self.name}_URL"


@dataclass(frozen=True, slots=True)
class SupplierConfig:
    name: SupplierName
    resilience: ResilienceConfig

    @property
    def url(self) -> str:
        if self.resilience.base_url is None:
            raise MissingConfigurationError(f"Missing URL for supplier {self.name}")
        return self.resilience.base_url


def supplier_resilience(name: SupplierName, url: str) -> ResilienceConfig:
    timeout = env_float(SUPPLIER_TIMEOUT_ENV, DEFAULT_SUPPLIER_TIMEOUT_SECONDS)
    cache: CacheConfig | None = None
    if optional_env_var(SUPPLIER_HTTP_CACHE_ENV) is not None:
        # response caching is opt-in
        cache = CacheConfig(default_ttl_seconds=env_float(SUPPLIER_HTTP_CACHE_ENV, timeout))
    return ResilienceConfig(
        name=name.value.lower(),
        base_url=url,
        timeout_seconds=timeout,
        ratelimit=RateLimit(
            max_calls=env_float(SUPPLIER_RATE_LIMIT_ENV, DEFAULT_SUPPLIER_MAX_CALLS_PER_SECOND),
            per_seconds=1.0,
        ),
        cache=cache,
        default_headers={"Accept": "application/json"},
    )


def get_supplier_configs() -> tuple[SupplierConfig, ...]:
    """Build configs for every supplier that has an endpoint configured.

    Suppliers without a URL are skipped; at least one must be configured.
    """

    configs: list[SupplierConfig] = []
    for name in SupplierName:
        url = optional_env_var(name.url_env_var)
        if url is None:
            log.warning("No URL configured for supplier %s (%s), skipping", name, name.url_env_var)
            continue
        configs.append(SupplierConfig(name=name, resilience=supplier_resilience(name, url)))

    if not configs:
        expected = [name.url_env_var for name in SupplierName]
        raise MissingConfigurationError(
            f"No supplier configured; set one of: {', '.join(expected)}", variables=expected
        )
    return tuple(configs)
