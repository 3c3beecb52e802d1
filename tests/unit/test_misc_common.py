import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest

from locationdata.common.constants import JSON_LOG_FIELDS
from locationdata.common.errors import ContractError
from locationdata.common.fs import read_json, read_json_object, write_csv, write_json
from locationdata.common.logging import JsonLineFormatter, build_logger, log_event
from locationdata.common.time_utils import generate_run_id, period_code, utc_timestamp_iso


def test_generate_run_id_prefix():
    assert generate_run_id().startswith("run-")
    fixed = datetime(2026, 2, 17, 8, 30, tzinfo=timezone.utc)
    assert generate_run_id(fixed) == "run-20260217T083000000000Z"


def test_period_code():
    assert period_code(2023) == "2023JJ00"


def test_utc_timestamp_is_utc():
    assert utc_timestamp_iso().endswith("+00:00")


def test_write_json_is_sorted_and_utf8(tmp_path: Path):
    path = tmp_path / "nested" / "out.json"
    write_json(path, {"b": "m³", "a": 1})
    text = path.read_text(encoding="utf-8")
    assert text.index('"a"') < text.index('"b"')
    assert "m³" in text
    assert read_json(path) == {"a": 1, "b": "m³"}


def test_write_csv_ignores_extra_columns(tmp_path: Path):
    path = tmp_path / "rows.csv"
    assert write_csv(path, ["a", "c"], [{"a": 1, "b": 2}]) == 1
    assert path.read_text(encoding="utf-8").splitlines() == ["a,c", "1,"]


def test_read_json_object_rejects_non_objects(tmp_path: Path):
    path = tmp_path / "list.json"
    write_json(path, [1, 2])
    with pytest.raises(ContractError):
        read_json_object(path)
    with pytest.raises(ContractError):
        read_json_object(tmp_path / "missing.json")


def test_json_formatter_emits_fixed_fields():
    record = logging.LogRecord("locationdata", logging.INFO, __file__, 1, "hello", None, None)
    record.stage = "parse"
    payload = json.loads(JsonLineFormatter().format(record))
    assert tuple(payload) == JSON_LOG_FIELDS
    assert payload["stage"] == "parse"
    assert payload["message"] == "hello"


def test_build_logger_writes_run_log_with_run_id(tmp_path: Path):
    logger = build_logger("run-test", data_dir=tmp_path)
    log_event(logger, "hello", stage="parse", source="health", level="district", status="ok")
    for handler in logger.handlers:
        handler.flush()

    lines = (tmp_path / "run_meta" / "run-test.log.jsonl").read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])
    assert payload["run_id"] == "run-test"
    assert payload["level"] == "district"
    assert payload["source"] == "health"
