"""Application configuration helpers."""

from __future__ import annotations

from .env import env_float, optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .service import ServiceConfig, get_service_config
from .suppliers import SupplierConfig, SupplierName, get_supplier_configs, supplier_resilience

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "ServiceConfig",
    "SupplierConfig",
    "SupplierName",
    "configure_logging",
    "env_float",
    "get_service_config",
    "get_supplier_configs",
    "optional_env_var",
    "require_env_vars",
    "supplier_resilience",
]
