"""Hilfsfunktionen für das Lesen der Y-Tunnus-Liste und den Export der Ergebnisse."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

import pandas as pd

from .errors import InputError
from .records import FIELD_NAMES, OutputRecord
from .utils.logging_setup import setup_logger

_BASE_LOGGER = setup_logger()
LOGGER = _BASE_LOGGER.getChild("table_io")

_EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
CSV_DELIMITER = ";"


def _is_excel(path: Path) -> bool:
    return path.suffix.lower() in _EXCEL_SUFFIXES


def _normalise_column(column: str | None) -> str | None:
    if column is None:
        return None
    column = column.strip().upper()
    return column or None


def _column_letter_to_index(letter: str) -> int:
    normalised = _normalise_column(letter)
    if not normalised or not normalised.isalpha():
        raise ValueError(f"Ungültiger Spaltenbuchstabe: {letter!r}")

    idx = 0
    for ch in normalised:
        idx = idx * 26 + (ord(ch) - ord("A") + 1)
    return idx - 1


def _cell_to_string(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    value_str = value.strip() if isinstance(value, str) else str(value).strip()
    return value_str or None


def unique_identifiers(values: Iterable[object]) -> list[str]:
    """Trim, drop empty values and deduplicate while keeping first occurrences."""

    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        text = _cell_to_string(value)
        if text is None or text in seen:
            continue
        seen.add(text)
        result.append(text)
    return result


def _read_text_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8-sig").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Eingabedatei nicht lesbar: {path} ({exc})") from exc


def _read_excel_column(path: Path, sheet: str | None, column: str) -> list[object]:
    idx = _column_letter_to_index(column)
    try:
        df = pd.read_excel(path, sheet_name=sheet or 0, header=None, dtype=str)
    except ValueError as exc:
        raise InputError(f"Arbeitsblatt '{sheet}' in {path} nicht lesbar: {exc}") from exc
    except OSError as exc:
        raise InputError(f"Eingabedatei nicht lesbar: {path} ({exc})") from exc

    if idx >= df.shape[1]:
        LOGGER.debug("Spalte %s existiert nicht in %s", column, path)
        return []
    return df.iloc[:, idx].tolist()


def load_identifiers(
    path: str | Path,
    *,
    sheet: str | None = None,
    column: str = "A",
) -> list[str]:
    """Liest Y-Tunnus-Werte aus einer Text- oder Excel-Datei.

    Textdateien enthalten einen Wert pro Zeile; bei Excel-Dateien wird
    *column* im Blatt *sheet* (Standard: erstes Blatt) gelesen.
    """

    input_path = Path(path)
    if not input_path.is_file():
        raise InputError(f"Eingabedatei nicht gefunden: {input_path}")

    if _is_excel(input_path):
        raw_values: Sequence[object] = _read_excel_column(input_path, sheet, column)
    else:
        raw_values = _read_text_lines(input_path)

    identifiers = unique_identifiers(raw_values)
    if not identifiers:
        raise InputError(f"Keine verwertbaren Y-Tunnus-Werte in {input_path}")

    LOGGER.info(
        "Aus %s geladen: %s Y-Tunnus-Werte (%s Einträge gelesen)",
        input_path,
        len(identifiers),
        len(raw_values),
    )
    return identifiers


def records_to_frame(records: Iterable[OutputRecord]) -> pd.DataFrame:
    return pd.DataFrame([record.as_row() for record in records], columns=list(FIELD_NAMES))


def write_records(records: Sequence[OutputRecord], path: str | Path) -> Path:
    """Schreibt *records* als CSV (``;``, UTF-8) oder, bei ``.xlsx``, als Excel-Blatt."""

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = records_to_frame(records)

    if _is_excel(output_path):
        LOGGER.info("Speichere %s Datensätze als Excel: %s", len(df), output_path)
        df.to_excel(output_path, index=False, sheet_name="YTJ", engine="openpyxl")
    else:
        LOGGER.info("Speichere %s Datensätze als CSV: %s", len(df), output_path)
        df.to_csv(output_path, sep=CSV_DELIMITER, index=False, encoding="utf-8")
    return output_path


__all__ = [
    "CSV_DELIMITER",
    "load_identifiers",
    "records_to_frame",
    "unique_identifiers",
    "write_records",
]
