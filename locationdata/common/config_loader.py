"""Scoring override loading and validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from locationdata.common.errors import ConfigError
from locationdata.common.fs import read_yaml
from locationdata.common.logging import default_logger, log_warning
from locationdata.common.schema import validate_scoring_overrides

DEFAULT_SCORING_CONFIG_PATH = Path("config") / "scoring_rules.yml"


@dataclass(frozen=True)
class ScoringOverrides:
    """Per-indicator scoring overrides, keyed by source then raw indicator key.

    Load once at startup and pass the instance to the scoring calls.
    """

    sources: dict[str, dict[str, dict]] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "ScoringOverrides":
        return cls()

    def for_source(self, source: str) -> dict[str, dict]:
        return self.sources.get(source) or {}

    def for_indicator(self, source: str, key: str) -> dict | None:
        return self.for_source(source).get(key)

    def __len__(self) -> int:
        return sum(len(indicators) for indicators in self.sources.values())


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    if overlay is None:
        return base
    return _deep_merge(base, overlay)


def read_scoring_overrides(path: Path, *, overlay_path: Path | None = None) -> ScoringOverrides:
    """Strict variant: raises ``ConfigError`` for a missing or invalid file."""
    if not path.exists():
        raise ConfigError(f"Scoring config not found: {path}")
    try:
        cfg = _load_yaml_with_overlay(path, overlay_path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Scoring config is not valid YAML: {path}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Scoring config is not valid UTF-8: {path}") from exc
    validated = validate_scoring_overrides(cfg)
    sources = {source: dict(indicators or {}) for source, indicators in (validated["sources"] or {}).items()}
    return ScoringOverrides(sources=sources)


def load_scoring_overrides(
    path: Path = DEFAULT_SCORING_CONFIG_PATH,
    *,
    overlay_path: Path | None = None,
    logger: logging.Logger | None = None,
) -> ScoringOverrides:
    """Load overrides, degrading to an empty set when the asset is absent or corrupt."""
    logger = logger or default_logger()
    try:
        return read_scoring_overrides(path, overlay_path=overlay_path)
    except (ConfigError, OSError) as exc:
        log_warning(
            logger,
            f"scoring config unavailable, using defaults: {exc}",
            stage="config",
            event="SCORING_CONFIG_FALLBACK",
            status="warning",
            error_code=getattr(exc, "error_code", "IO_ERROR"),
        )
        return ScoringOverrides.empty()
