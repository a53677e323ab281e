"""Strategy catalog: an immutable, order-stable registry loaded from YAML."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from strategy_engine.models.strategy import StrategyDefinition

logger = logging.getLogger(__name__)

CATALOG_PATH = Path(__file__).parent / "strategies.yaml"


class CatalogError(ValueError):
    """Raised for malformed catalog data or duplicate strategy names."""


class StrategyCatalog:
    """Read-only sequence of strategies.

    Iteration order is the order the strategies were declared in, which the
    ranker relies on to break score ties.
    """

    __slots__ = ("_strategies", "_by_name", "_by_key")

    def __init__(self, strategies: Iterable[StrategyDefinition] = ()):
        items = tuple(strategies)
        by_name: dict[str, StrategyDefinition] = {}
        by_key: dict[str, StrategyDefinition] = {}
        for strategy in items:
            if strategy.name in by_name:
                raise CatalogError(f"Duplicate strategy name: {strategy.name}")
            if strategy.key in by_key:
                raise CatalogError(f"Duplicate strategy key: {strategy.key}")
            by_name[strategy.name] = strategy
            by_key[strategy.key] = strategy
        self._strategies = items
        self._by_name = by_name
        self._by_key = by_key

    def __iter__(self) -> Iterator[StrategyDefinition]:
        return iter(self._strategies)

    def __len__(self) -> int:
        return len(self._strategies)

    def __getitem__(self, index: int) -> StrategyDefinition:
        return self._strategies[index]

    def __repr__(self) -> str:
        return f"StrategyCatalog({len(self)} strategies)"

    def names(self) -> list[str]:
        return [s.name for s in self._strategies]

    def get(self, name: str) -> StrategyDefinition | None:
        return self._by_name.get(name)

    def by_key(self, key: str) -> StrategyDefinition | None:
        return self._by_key.get(key.upper())


def load_catalog(path: str | Path | None = None) -> StrategyCatalog:
    """Load a strategy catalog from YAML (the packaged catalog by default)."""
    path = Path(path) if path is not None else CATALOG_PATH
    if not path.exists():
        raise FileNotFoundError(f"Catalog not found: {path}")
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid catalog YAML in {path}: {e}") from e

    entries = data.get("strategies") if isinstance(data, dict) else None
    if entries is None:
        raise CatalogError(f"Catalog {path} has no 'strategies' list")
    if not isinstance(entries, list):
        raise CatalogError(f"'strategies' in {path} must be a list")

    try:
        strategies = [StrategyDefinition(**entry) for entry in entries]
    except (TypeError, ValidationError) as e:
        raise CatalogError(f"Invalid strategy entry in {path}: {e}") from e

    catalog = StrategyCatalog(strategies)
    logger.debug("Loaded %d strategies from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> StrategyCatalog:
    """The packaged catalog, loaded once per process."""
    return load_catalog()
