"""Reading input texts from a text stream (plain or JSONL)."""

from __future__ import annotations

import json
from typing import Iterator, TextIO


def read_jsonl(stream: TextIO) -> Iterator[object]:
    """Yield parsed values from JSONL lines, skipping blank and malformed lines."""
    for line in stream:
        line = line.strip()
        if not line:
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError:
            continue


def extract_text(record: object, field: str = "text") -> str | None:
    """Text of a JSONL value: the value itself if a string, else ``record[field]``."""
    if isinstance(record, str):
        return record
    if isinstance(record, dict):
        val = record.get(field)
        if isinstance(val, str):
            return val
    return None


def read_texts(stream: TextIO, field: str = "text") -> tuple[list[str], int]:
    """Collect texts from a JSONL stream. Returns ``(texts, skipped)``."""
    texts: list[str] = []
    skipped = 0
    for record in read_jsonl(stream):
        text = extract_text(record, field=field)
        if text is None:
            skipped += 1
            continue
        texts.append(text)
    return texts, skipped
