"""Application configuration helpers."""

from __future__ import annotations

from .env import int_env_var, optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingCollaboratorError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .reconcile import DEFAULT_MAX_WORKERS, ReconcileConfig, get_reconcile_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config
from .webhook import WebhookConfig, get_webhook_config

__all__ = [
    "DEFAULT_MAX_WORKERS",
    "ConfigurationError",
    "DatabaseConfig",
    "MissingCollaboratorError",
    "MissingConfigurationError",
    "RateLimit",
    "ReconcileConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "WebhookConfig",
    "configure_logging",
    "get_database_config",
    "get_reconcile_config",
    "get_storage_config",
    "get_webhook_config",
    "int_env_var",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
