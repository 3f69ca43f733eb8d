"""Window packing: sliding character windows and greedy unit windows."""

from __future__ import annotations

import logging
from typing import Iterator

from text_splitter.models import Chunk, SplitOptions, Unit
from text_splitter.units import atomic_units, extract_units

log = logging.getLogger(__name__)


def iter_char_chunks(text: str, options: SplitOptions) -> Iterator[Chunk]:
    """Slide a variable-width window over *text*.

    The window grows one character at a time for as long as the measured
    span stays within ``chunk_size``. A window that cannot grow at all still
    takes one character, so ``chunk_size <= 0`` yields single characters.
    """
    measure = options.length_function
    chunk_size = options.chunk_size
    length = len(text)
    start = 0

    while start < length:
        end = start
        current = 0
        while end < length and current < chunk_size:
            current = measure(text[start:end + 1])
            if current > chunk_size:
                break
            end += 1
        if end == start:
            end = min(start + 1, length)

        yield Chunk(text[start:end], start, start, end - 1, end)

        if end >= length:
            break

        # Overlap steps back, but never to or before the previous start
        if options.chunk_overlap > 0:
            start = max(end - options.chunk_overlap, start + 1)
        else:
            start = end


def _fits_whole(units: list[Unit], options: SplitOptions, joiner_len: float) -> bool:
    measure = options.length_function
    sizes = [measure(u.text) for u in units]
    if any(s > options.chunk_size for s in sizes):
        return False
    total = sum(sizes) + joiner_len * max(len(units) - 1, 0)
    return total <= options.chunk_size


def _pack_window(units: list[Unit], i: int, options: SplitOptions, joiner_len: float) -> list[Unit]:
    """Greedily take units from *i* while the joined size stays within ``chunk_size``."""
    measure = options.length_function
    window: list[Unit] = []
    current = 0
    for unit in units[i:]:
        simulated = current + (joiner_len if window else 0) + measure(unit.text)
        if simulated > options.chunk_size:
            if not window:
                window.append(unit)
            break
        window.append(unit)
        current = simulated
    return window


def iter_unit_chunks(text: str, options: SplitOptions, *, atomic: bool = False) -> Iterator[Chunk]:
    """Pack paragraph or sentence units of *text* into chunks.

    With ``atomic`` the whole text is one unit and no segmentation happens;
    this is how list input is treated when a strategy is set.

    Units that all fit together are yielded one chunk per unit. Otherwise
    windows are packed greedily; with overlap the next window starts
    ``window - chunk_overlap`` units later (at least one). A window equal to
    the previous one is skipped, and a final chunk that is a suffix of the
    one before it is dropped.
    """
    units = atomic_units(text) if atomic else extract_units(text, options.chunk_strategy)
    joiner = options.joiner
    joiner_len = options.length_function(joiner)

    if _fits_whole(units, options, joiner_len):
        for n, u in enumerate(units):
            yield Chunk(u.text, n, u.start, n, u.end)
        return

    i = 0
    last_chunk: str | None = None
    # The newest chunk is held back until we know it is not a redundant tail
    pending: Chunk | None = None
    previous: Chunk | None = None
    while i < len(units):
        window = _pack_window(units, i, options, joiner_len)
        chunk_str = joiner.join(u.text for u in window)
        if chunk_str and chunk_str != last_chunk:
            if pending is not None:
                yield pending
                previous = pending
            pending = Chunk(chunk_str, i, window[0].start, i + len(window) - 1, window[-1].end)
            last_chunk = chunk_str

        if options.chunk_overlap > 0:
            i += max(1, len(window) - options.chunk_overlap)
        else:
            i += len(window)

    if pending is None:
        return
    if previous is not None and previous.chunk.endswith(pending.chunk):
        log.debug("Dropping tail chunk %r, already covered by the previous chunk", pending.chunk)
        return
    yield pending
