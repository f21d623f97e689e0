"""Input/output helpers for the globmatch CLI."""
import csv
import json
import os
import sys
from collections.abc import Iterable
from typing import TextIO


def _read_text_lines(handle: TextIO) -> list[str]:
    return [line.rstrip("\n\r") for line in handle if line.strip()]


def _read_jsonl(handle: TextIO, key: str) -> list[str]:
    data: list[str] = []
    for raw in handle:
        raw = raw.strip()
        if not raw:
            continue
        obj = json.loads(raw)
        if isinstance(obj, dict) and key in obj:
            value = obj[key]
        else:
            value = obj
        data.append(str(value))
    return data


def _read_csv(handle: TextIO, column: str) -> list[str]:
    reader = csv.DictReader(handle)
    fieldnames = reader.fieldnames or []
    if column not in fieldnames:
        raise ValueError(f"CSV missing required column {column!r}")
    return [row[column] for row in reader if row.get(column)]


def _open_path(path: str, key: str) -> Iterable[str]:
    if path == "-":
        yield from _read_text_lines(sys.stdin)
        return
    _, ext = os.path.splitext(path)
    ext = ext.lower()
    if ext in {".json", ".jsonl"}:
        with open(path, encoding="utf-8") as handle:
            yield from _read_jsonl(handle, key)
    elif ext in {".csv"}:
        with open(path, encoding="utf-8", newline="") as handle:
            yield from _read_csv(handle, key)
    else:
        with open(path, encoding="utf-8") as handle:
            yield from _read_text_lines(handle)


def read_items(path: str) -> list[str]:
    """Read candidate texts, one per line (``item`` key/column for json/csv)."""
    return list(_open_path(path, "item"))


def read_patterns(path: str) -> list[str]:
    """Read glob patterns, one per line (``pattern`` key/column for json/csv)."""
    return list(_open_path(path, "pattern"))


def write_json(obj: object, path: str) -> None:
    if path == "-":
        json.dump(obj, sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(obj, handle, indent=2, sort_keys=True)
        handle.write("\n")


def write_text(text: str, path: str) -> None:
    if path == "-":
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
