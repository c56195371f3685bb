"""Read answer/clue pairs from a CSV or XLSX file into ClueEntry records."""

from __future__ import annotations

import sys
from pathlib import Path

import openpyxl

from models import ClueEntry, CrosswordError

HEADER_NAMES = {"answer", "word"}
MIN_ANSWER_LENGTH = 2


def read_entries(path: str | Path) -> list[ClueEntry]:
    """Open *path*, parse (answer, clue) rows, filter and index them."""
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    suffix = path.suffix.lower()
    if suffix in (".csv", ".txt"):
        pairs = _read_csv_pairs(path)
    elif suffix == ".xlsx":
        pairs = _read_xlsx_pairs(path)
    else:
        raise CrosswordError(f"Unsupported input format: {path.suffix or path.name}")

    return _validate_and_index(pairs)


def normalize_answer(raw: str) -> str:
    """Uppercase, strip everything except A-Z."""
    return "".join(c for c in raw.upper() if "A" <= c <= "Z")


def _read_csv_pairs(path: Path) -> list[tuple[str, str]]:
    """Each non-blank line is ``answer,clue``; the clue may contain commas."""
    pairs: list[tuple[str, str]] = []
    with open(path, encoding="utf-8-sig") as f:
        for line in f:
            line = line.strip()
            if not line or "," not in line:
                continue
            answer, clue = line.split(",", 1)
            pairs.append((answer.strip(), _unquote(clue.strip())))

    if pairs and pairs[0][0].lower() in HEADER_NAMES:
        pairs.pop(0)
    return pairs


def _read_xlsx_pairs(path: Path) -> list[tuple[str, str]]:
    """Column A is the answer, column B the clue; an optional header is skipped."""
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    ws = wb.active

    pairs: list[tuple[str, str]] = []
    for row in ws.iter_rows(min_col=1, max_col=2, values_only=True):
        if not row or row[0] is None:
            continue
        answer = str(row[0]).strip()
        clue = str(row[1]).strip() if len(row) > 1 and row[1] is not None else ""
        pairs.append((answer, clue))

    wb.close()

    if pairs and pairs[0][0].lower() in HEADER_NAMES:
        pairs.pop(0)
    return pairs


def _unquote(text: str) -> str:
    """Strip surrounding double quotes and collapse doubled quotes."""
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        text = text[1:-1]
    return text.replace('""', '"')


def _validate_and_filter(pairs: list[tuple[str, str]]) -> list[tuple[str, str]]:
    """Normalize answers, drop empty/too-short/duplicate ones with a warning."""
    seen_answers: set[str] = set()
    result: list[tuple[str, str]] = []

    for raw_answer, clue in pairs:
        answer = normalize_answer(raw_answer)
        if not answer:
            print(f"Warning: skipping '{raw_answer}' (no letters A-Z)", file=sys.stderr)
            continue
        if len(answer) < MIN_ANSWER_LENGTH:
            print(
                f"Warning: skipping '{answer}' (too short, <{MIN_ANSWER_LENGTH} letters)",
                file=sys.stderr,
            )
            continue
        if answer in seen_answers:
            print(f"Warning: duplicate answer '{answer}', skipping", file=sys.stderr)
            continue
        seen_answers.add(answer)
        result.append((answer, clue))

    return result


def _validate_and_index(pairs: list[tuple[str, str]]) -> list[ClueEntry]:
    kept = _validate_and_filter(pairs)
    if not kept:
        raise CrosswordError("No valid clue entries after filtering")
    return [
        ClueEntry(index=i, clue_text=clue, answer=answer)
        for i, (answer, clue) in enumerate(kept)
    ]
