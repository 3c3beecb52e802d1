"""Filesystem helpers for config, JSON and CSV artifacts."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from locationdata.common.errors import ContractError


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_yaml(path: Path):
    import yaml

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def read_json(path: Path):
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def read_json_object(path: Path) -> dict[str, Any]:
    """Read a JSON file that must hold an object; anything else is a ``ContractError``."""
    if not path.exists():
        raise ContractError(f"Input file not found: {path}")
    try:
        payload = read_json(path)
    except ValueError as exc:
        raise ContractError(f"Input file is not valid JSON: {path}") from exc
    if not isinstance(payload, dict):
        raise ContractError(f"Input file must hold a JSON object: {path}")
    return payload


def write_json(path: Path, payload) -> None:
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2, sort_keys=True)
        f.write("\n")


def write_csv(path: Path, headers: list[str], rows: Iterable[Mapping[str, object]]) -> int:
    ensure_dir(path.parent)
    count = 0
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=headers, restval="", extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
            count += 1
    return count
