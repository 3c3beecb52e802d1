"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from locationdata.common.constants import SOURCES
from locationdata.common.errors import ConfigError

OVERRIDE_KEYS = {"comparison_type", "margin", "base_value", "direction"}
COMPARISON_TYPES = {"relatief", "absoluut"}
DIRECTIONS = {"positive", "negative"}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_indicator_override(override: dict, ctx: str) -> dict:
    if not isinstance(override, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    _assert_no_unknown_keys(override, OVERRIDE_KEYS, ctx, allow_unknown=False)

    if "comparison_type" in override and override["comparison_type"] not in COMPARISON_TYPES:
        raise ConfigError(f"{ctx}.comparison_type must be one of: {', '.join(sorted(COMPARISON_TYPES))}")
    if "direction" in override and override["direction"] not in DIRECTIONS:
        raise ConfigError(f"{ctx}.direction must be one of: {', '.join(sorted(DIRECTIONS))}")
    if "margin" in override:
        if not _is_number(override["margin"]) or override["margin"] < 0:
            raise ConfigError(f"{ctx}.margin must be a non-negative number")
    if "base_value" in override:
        if override["base_value"] is not None and not _is_number(override["base_value"]):
            raise ConfigError(f"{ctx}.base_value must be a number or null")
    return override


def validate_scoring_overrides(cfg: dict, *, allow_unknown: bool = False) -> dict:
    if not isinstance(cfg, dict):
        raise ConfigError("scoring_rules must be a mapping")
    _assert_required_keys(cfg, {"sources"}, "scoring_rules")
    _assert_no_unknown_keys(cfg, {"version", "sources"}, "scoring_rules", allow_unknown)

    sources = cfg["sources"] or {}
    if not isinstance(sources, dict):
        raise ConfigError("scoring_rules.sources must be a mapping")
    _assert_no_unknown_keys(sources, set(SOURCES), "scoring_rules.sources", allow_unknown=False)

    for source, indicators in sources.items():
        if indicators is None:
            continue
        if not isinstance(indicators, dict):
            raise ConfigError(f"scoring_rules.sources.{source} must be a mapping")
        for key, override in indicators.items():
            validate_indicator_override(override, f"scoring_rules.sources.{source}.{key}")
    return cfg
