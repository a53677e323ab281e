"""Engine configuration loaded from config.yaml."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "STRATEGY_ENGINE_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RankingConfig:
    max_recommendations: int = 5

    def __post_init__(self) -> None:
        if not 1 <= self.max_recommendations <= 50:
            raise ValueError(
                f"max_recommendations must be between 1 and 50, got {self.max_recommendations}"
            )


@dataclass(frozen=True)
class CatalogConfig:
    path: str | None = None  # None -> packaged strategies.yaml

    @property
    def resolved_path(self) -> Path | None:
        if self.path is None:
            return None
        return Path(self.path).expanduser()


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.level.upper() not in _LOG_LEVELS:
            raise ValueError(f"logging level must be one of {_LOG_LEVELS}, got {self.level!r}")

    @property
    def numeric_level(self) -> int:
        return logging.getLevelName(self.level.upper())


@dataclass(frozen=True)
class AppConfig:
    ranking: RankingConfig = field(default_factory=RankingConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = []
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            candidates.append(Path(env_path).expanduser())
        candidates += [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    return AppConfig(
        ranking=RankingConfig(**raw.get("ranking", {})),
        catalog=CatalogConfig(**raw.get("catalog", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
    )
