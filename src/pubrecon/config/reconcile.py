"""Reconciliation defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .env import int_env_var, optional_env_var
from .errors import ConfigurationError

DEFAULT_MAX_WORKERS = 4
DEFAULT_STORE_NAMES: tuple[str, ...] = ("master", "web")


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    max_workers: int = DEFAULT_MAX_WORKERS
    store_names: tuple[str, ...] = DEFAULT_STORE_NAMES

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {self.max_workers}")
        if not self.store_names:
            raise ConfigurationError("At least one store name must be configured")


def _parse_store_names(raw: str | None) -> tuple[str, ...]:
    if raw is None:
        return DEFAULT_STORE_NAMES
    return tuple(name.strip() for name in raw.split(",") if name.strip())


def get_reconcile_config() -> ReconcileConfig:
    return ReconcileConfig(
        max_workers=int_env_var("PUBRECON_MAX_WORKERS", default=DEFAULT_MAX_WORKERS),
        store_names=_parse_store_names(optional_env_var("PUBRECON_STORES")),
    )
