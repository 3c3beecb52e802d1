import json
import logging
from pathlib import Path

import pytest

from locationdata.common.config_loader import ScoringOverrides, load_scoring_overrides, read_scoring_overrides
from locationdata.common.errors import ConfigError


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_scoring_overrides_from_repo_config():
    overrides = load_scoring_overrides(Path("config") / "scoring_rules.yml")
    assert len(overrides) > 0
    assert overrides.for_indicator("health", "Roker_11") == {"direction": "negative"}
    assert overrides.for_indicator("health", "Unknown_0") is None
    assert overrides.for_source("weather") == {}


def test_overlay_values_are_deep_merged(tmp_path: Path):
    base = _write(
        tmp_path / "base.yml",
        """sources:
  health:
    Roker_11:
      direction: negative
      margin: 20
""",
    )
    overlay = _write(
        tmp_path / "overlay.yml",
        """sources:
  health:
    Roker_11:
      margin: 5
  safety:
    Crime_1.1.1:
      direction: negative
""",
    )

    overrides = read_scoring_overrides(base, overlay_path=overlay)

    assert overrides.for_indicator("health", "Roker_11") == {"direction": "negative", "margin": 5}
    assert overrides.for_indicator("safety", "Crime_1.1.1") == {"direction": "negative"}


def test_empty_overlay_is_ignored(tmp_path: Path):
    base = _write(tmp_path / "base.yml", "sources:\n  health:\n    Roker_11:\n      margin: 10\n")
    overlay = _write(tmp_path / "overlay.yml", "")
    overrides = read_scoring_overrides(base, overlay_path=overlay)
    assert overrides.for_indicator("health", "Roker_11") == {"margin": 10}


def test_strict_reader_rejects_missing_file(tmp_path: Path):
    with pytest.raises(ConfigError):
        read_scoring_overrides(tmp_path / "missing.yml")


def test_strict_reader_rejects_non_mapping_overlay(tmp_path: Path):
    base = _write(tmp_path / "base.yml", "sources: {}\n")
    overlay = _write(tmp_path / "overlay.yml", "- not\n- a\n- mapping\n")
    with pytest.raises(ConfigError):
        read_scoring_overrides(base, overlay_path=overlay)


def test_strict_reader_rejects_invalid_yaml(tmp_path: Path):
    base = _write(tmp_path / "base.yml", "sources: [unclosed\n")
    with pytest.raises(ConfigError):
        read_scoring_overrides(base)


def test_fallback_for_empty_file(tmp_path: Path):
    overrides = load_scoring_overrides(_write(tmp_path / "scoring_rules.yml", ""))
    assert len(overrides) == 0


def test_fallback_logs_warning_and_returns_empty(tmp_path: Path, caplog):
    path = _write(tmp_path / "scoring_rules.yml", "sources:\n  health:\n    Roker_11:\n      direction: sideways\n")
    logger = logging.getLogger("locationdata.test-fallback")

    with caplog.at_level(logging.WARNING, logger="locationdata.test-fallback"):
        overrides = load_scoring_overrides(path, logger=logger)

    assert len(overrides) == 0
    events = [getattr(record, "event", None) for record in caplog.records]
    assert "SCORING_CONFIG_FALLBACK" in events
    fallback = next(record for record in caplog.records if getattr(record, "event", None) == "SCORING_CONFIG_FALLBACK")
    assert fallback.error_code == "CONFIG_ERROR"


def test_fallback_for_missing_file(tmp_path: Path):
    overrides = load_scoring_overrides(tmp_path / "nope.yml")
    assert overrides == ScoringOverrides.empty()
    assert json.dumps(overrides.sources) == "{}"


def test_strict_reader_rejects_undecodable_bytes(tmp_path: Path):
    path = tmp_path / "scoring_rules.yml"
    path.write_bytes(b"version: 1\nsources:\n  health:\n    Roker_11: \xff\xfe\n")
    with pytest.raises(ConfigError, match="UTF-8"):
        read_scoring_overrides(path)


def test_fallback_for_undecodable_bytes(tmp_path: Path, caplog):
    path = tmp_path / "scoring_rules.yml"
    path.write_bytes(b"version: 1\nsources:\n  health:\n    Roker_11: \xff\xfe\n")
    logger = logging.getLogger("locationdata.test-undecodable")

    with caplog.at_level(logging.WARNING, logger="locationdata.test-undecodable"):
        overrides = load_scoring_overrides(path, logger=logger)

    assert overrides == ScoringOverrides.empty()
    fallback = next(record for record in caplog.records if getattr(record, "event", None) == "SCORING_CONFIG_FALLBACK")
    assert fallback.error_code == "CONFIG_ERROR"
