"""Command line entry point for batch lookups against the YTJ registry."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from . import table_io
from .config import load_settings
from .errors import InputError
from .pipeline import run_batch
from .providers import YtjClient
from .records import OutputRecord
from .utils.logging_setup import setup_logger

logger = setup_logger().getChild("cli")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ytj-fetch", description="Unternehmensdaten aus dem YTJ-Register abrufen"
    )
    parser.add_argument("input", help="Textdatei (ein Y-Tunnus pro Zeile) oder Excel-Datei")
    parser.add_argument(
        "--output", "-o", help="Ergebnisdatei (.csv mit ';' oder .xlsx)"
    )
    parser.add_argument("--sheet", help="Tabellenblatt bei Excel-Eingabe (Standard: erstes)")
    parser.add_argument(
        "--column", default="A", help="Spalte mit Y-Tunnus bei Excel-Eingabe (Standard: A)"
    )
    parser.add_argument("--config", help="YAML mit API-Einstellungen")
    parser.add_argument(
        "--quiet", action="store_true", help="Keine Datensätze auf der Konsole ausgeben"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Ausführliche Log-Ausgabe aktivieren"
    )
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    setup_logger(logging.DEBUG if verbose else logging.INFO)


def _validate_column(column: str) -> str:
    column = column.strip().upper()
    if not column or not column.isalpha():
        raise ValueError(f"Ungültiger Spaltenwert: {column}")
    return column


def _print_record(record: OutputRecord) -> None:
    print(json.dumps(record.as_row(), indent=2, ensure_ascii=False))
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.verbose)

    dotenv_path = Path(".env")
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path)

    try:
        settings = load_settings(args.config)
        column = _validate_column(args.column)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    try:
        identifiers = table_io.load_identifiers(args.input, sheet=args.sheet, column=column)
    except InputError as exc:
        logger.error("Abbruch: %s", exc)
        return 2

    client = YtjClient.from_settings(settings)
    start_time = time.perf_counter()

    result = run_batch(
        identifiers,
        client,
        on_record=None if args.quiet else _print_record,
    )

    export_failed = False
    if args.output:
        try:
            table_io.write_records(result.records, args.output)
        except OSError as exc:
            logger.error("Ergebnisdatei %s nicht schreibbar: %s", args.output, exc)
            export_failed = True

    duration = time.perf_counter() - start_time
    logger.info(
        "Verarbeitung abgeschlossen: processed=%s hits=%s errors=%s duration=%.2fs",
        result.processed,
        len(result.records),
        len(result.failures),
        duration,
    )

    if export_failed:
        return 2
    if result.failures:
        return 4
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
