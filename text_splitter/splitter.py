"""Split one text or a list of texts into chunks."""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, Iterator

from text_splitter.chunker import iter_char_chunks, iter_unit_chunks
from text_splitter.models import Chunk, SplitOptions

log = logging.getLogger(__name__)


def _resolve_options(options: SplitOptions | None, overrides: dict) -> SplitOptions:
    if options is None:
        return SplitOptions(**overrides)
    if overrides:
        return dataclasses.replace(options, **overrides)
    return options


def produce_chunks(
    text: str | Iterable[str],
    options: SplitOptions | None = None,
    **overrides,
) -> Iterator[Chunk]:
    """Yield chunks for *text* one at a time, in the same order as :func:`split`.

    A bare string is one text; any other iterable is a list of texts, each
    chunked in its own coordinate space. With a strategy, each list element
    is a single unit, so its chunks report unit index 0 rather than the
    element's position in the list. An empty text yields a single empty
    chunk. ``overrides`` are :class:`SplitOptions` fields and take precedence
    over *options*.
    """
    opts = _resolve_options(options, overrides)
    is_list = not isinstance(text, str)
    texts = list(text) if is_list else [text]

    for n, current in enumerate(texts):
        if not current:
            yield Chunk("", 0, 0, 0, 0)
            continue
        if opts.chunk_strategy is None:
            log.debug("Text %d: %d chars, character windows of %d", n, len(current), opts.chunk_size)
            yield from iter_char_chunks(current, opts)
        else:
            log.debug("Text %d: %d chars, %s units", n, len(current), opts.chunk_strategy.value)
            yield from iter_unit_chunks(current, opts, atomic=is_list)


def split(
    text: str | Iterable[str],
    options: SplitOptions | None = None,
    **overrides,
) -> list[Chunk]:
    """Split *text* into chunks. Eager form of :func:`produce_chunks`."""
    chunks = list(produce_chunks(text, options, **overrides))
    log.debug("Produced %d chunks", len(chunks))
    return chunks


def extract_substring(text: str | Iterable[str], start: int = 0, end: int | None = None) -> str:
    """Return ``[start, end)`` of *text*, with list input concatenated first.

    Bounds are clamped to the text; an empty or inverted range gives ``""``.
    """
    joined = text if isinstance(text, str) else "".join(text)
    length = len(joined)
    start = min(max(start, 0), length)
    end = length if end is None else min(max(end, 0), length)
    if start >= end:
        return ""
    return joined[start:end]
