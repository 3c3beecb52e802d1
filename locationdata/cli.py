"""CLI entrypoint for the location statistics pipeline."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from locationdata.common.config_loader import DEFAULT_SCORING_CONFIG_PATH, ScoringOverrides, load_scoring_overrides
from locationdata.common.constants import (
    COMMANDS,
    EXIT_HARD_FAIL,
    EXIT_PARTIAL,
    EXIT_SUCCESS,
    SOURCES,
)
from locationdata.common.errors import ContractError, PipelineError
from locationdata.common.fs import read_json_object, write_json
from locationdata.common.http import HttpClient
from locationdata.common.logging import build_logger, log_error, log_event
from locationdata.common.models import ParsedDataset
from locationdata.common.scoring import apply_scoring_to_dataset, summarize_scores
from locationdata.common.time_utils import generate_run_id, period_code
from locationdata.parsers.registry import parse_source
from locationdata.pipeline.export import write_report_json, write_rows_csv
from locationdata.pipeline.multi_level import build_location_report
from locationdata.sources.cbs_odata import fetch_location


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument("--source", default=None, choices=SOURCES)
    parser.add_argument("--input", default=None)
    parser.add_argument("--output", default=None)
    parser.add_argument("--output-dir", default=None)
    parser.add_argument("--population", type=float, default=None)
    parser.add_argument("--location", default=None)
    parser.add_argument("--national", default=None)
    parser.add_argument("--municipality", default=None)
    parser.add_argument("--district", default=None)
    parser.add_argument("--neighborhood", default=None)
    parser.add_argument("--year", type=int, default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--config", default=str(DEFAULT_SCORING_CONFIG_PATH))
    parser.add_argument("--overlay-config", default=None)
    parser.add_argument("--data-dir", default="./data")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def _require(args: argparse.Namespace, *names: str) -> None:
    missing = [f"--{name.replace('_', '-')}" for name in names if getattr(args, name) in (None, "")]
    if missing:
        raise ContractError(f"{args.command} requires {', '.join(missing)}")


def _read_dataset(path: Path) -> ParsedDataset:
    payload = read_json_object(path)
    try:
        return ParsedDataset.from_dict(payload)
    except (KeyError, TypeError, AttributeError) as exc:
        raise ContractError(f"Input file is not a parsed dataset: {path}") from exc


def run_parse(args: argparse.Namespace, logger: logging.Logger) -> int:
    _require(args, "source", "input", "output")
    record = read_json_object(Path(args.input))
    dataset = parse_source(args.source, record, args.population)
    write_json(Path(args.output), dataset.to_dict())
    log_event(
        logger,
        "parsed record",
        stage="parse",
        source=args.source,
        status="ok",
        indicators_in=len(record),
        indicators_out=len(dataset),
    )
    return EXIT_SUCCESS


def run_score(args: argparse.Namespace, logger: logging.Logger, overrides: ScoringOverrides) -> int:
    _require(args, "source", "location", "national", "output")
    location = _read_dataset(Path(args.location))
    national = _read_dataset(Path(args.national))
    scored = apply_scoring_to_dataset(location, national, args.source, overrides)
    write_json(Path(args.output), scored.to_dict())
    log_event(
        logger,
        f"scored dataset {summarize_scores(scored)}",
        stage="score",
        source=args.source,
        status="ok",
        indicators_in=len(location),
        indicators_out=len(scored),
    )
    return EXIT_SUCCESS


def run_report(args: argparse.Namespace, logger: logging.Logger, overrides: ScoringOverrides) -> int:
    _require(args, "input", "output_dir")
    raw = read_json_object(Path(args.input))
    unknown = sorted(set(raw) - set(SOURCES))
    if unknown:
        raise ContractError(f"Unknown sources in input: {unknown}")

    report = build_location_report(raw, overrides, logger=logger)
    output_dir = Path(args.output_dir)
    rows = report.rows()
    write_rows_csv(output_dir / "rows.csv", rows)
    write_report_json(output_dir / "report.json", report)
    log_event(logger, "report written", stage="report", status="ok", indicators_out=len(rows))
    return EXIT_SUCCESS


def run_fetch(args: argparse.Namespace, logger: logging.Logger) -> int:
    _require(args, "municipality", "output")
    codes = {
        "municipality": args.municipality,
        "district": args.district,
        "neighborhood": args.neighborhood,
    }
    periods = {source: period_code(args.year) for source in SOURCES} if args.year else None
    with HttpClient() as client:
        raw, failures = fetch_location(client, codes, periods=periods, logger=logger)
    write_json(Path(args.output), raw)
    if failures:
        log_event(logger, f"partial fetch: {failures}", stage="fetch", event="FETCH_PARTIAL", status="partial")
        return EXIT_PARTIAL
    return EXIT_SUCCESS


def execute_command(args: argparse.Namespace, logger: logging.Logger) -> int:
    if args.command == "parse":
        return run_parse(args, logger)
    if args.command == "fetch":
        return run_fetch(args, logger)

    overrides = load_scoring_overrides(
        Path(args.config),
        overlay_path=Path(args.overlay_config) if args.overlay_config else None,
        logger=logger,
    )
    if args.command == "score":
        return run_score(args, logger, overrides)
    return run_report(args, logger, overrides)


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    logger = build_logger(run_id, data_dir=Path(args.data_dir), level=args.log_level)
    log_event(logger, "command start", stage=args.command, event="COMMAND_START", status="ok")

    try:
        code = execute_command(args, logger)
    except PipelineError as exc:
        log_error(
            logger,
            f"command failed: {exc}",
            stage=args.command,
            event="COMMAND_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        return EXIT_HARD_FAIL
    except Exception as exc:
        log_error(
            logger,
            f"unexpected failure: {exc!r}",
            stage=args.command,
            event="COMMAND_FAIL",
            status="error",
            error_code="UNEXPECTED_ERROR",
        )
        return EXIT_HARD_FAIL

    log_event(logger, "command end", stage=args.command, event="COMMAND_END", status="ok")
    return code


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        return run_command(args)
    except Exception:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
