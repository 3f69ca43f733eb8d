"""Paragraph and sentence segmentation into offset-tracked units."""

from __future__ import annotations

import re

from text_splitter.models import ChunkStrategy, Unit

PARAGRAPH_BREAK = re.compile(r"\n{2,}")
SENTENCE = re.compile(r"[^.!?]+[.!?]+(?:\s+|\Z)")


def paragraph_units(text: str) -> list[Unit]:
    """Split on blank-line runs. Offsets are raw, text is stripped."""
    units: list[Unit] = []
    last = 0
    for m in PARAGRAPH_BREAK.finditer(text):
        piece = text[last:m.start()].strip()
        if piece:
            units.append(Unit(piece, last, m.start()))
        last = m.end()
    tail = text[last:].strip()
    if tail:
        units.append(Unit(tail, last, len(text)))
    return units


def sentence_units(text: str) -> list[Unit]:
    """Terminated sentences only; a trailing fragment without ``.!?`` is not a unit."""
    units: list[Unit] = []
    for m in SENTENCE.finditer(text):
        piece = m.group().strip()
        if piece:
            units.append(Unit(piece, m.start(), m.end()))
    return units


def extract_units(text: str, strategy: ChunkStrategy | str) -> list[Unit]:
    if ChunkStrategy(strategy) is ChunkStrategy.PARAGRAPH:
        return paragraph_units(text)
    return sentence_units(text)


def atomic_units(text: str) -> list[Unit]:
    """The whole text as a single unmodified unit (list input with a strategy)."""
    return [Unit(text, 0, len(text))]
