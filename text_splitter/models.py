"""Data classes for chunks, units, and split options."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Callable

from text_splitter.length import char_length


class ChunkStrategy(str, Enum):
    PARAGRAPH = "paragraph"
    SENTENCE = "sentence"

    @property
    def joiner(self) -> str:
        """String reinserted between units merged into one chunk."""
        return "\n\n" if self is ChunkStrategy.PARAGRAPH else " "


@dataclass
class Chunk:
    chunk: str
    start_index: int  # char offset, or unit ordinal in unit mode
    start_position: int
    end_index: int  # inclusive
    end_position: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Unit:
    text: str
    start: int
    end: int


@dataclass
class SplitOptions:
    chunk_size: int = 512
    chunk_overlap: int = 0  # values <= 0 disable overlap
    length_function: Callable[[str], float] = char_length
    chunk_strategy: ChunkStrategy | None = None

    def __post_init__(self) -> None:
        if self.chunk_strategy is not None:
            self.chunk_strategy = ChunkStrategy(self.chunk_strategy)

    @property
    def joiner(self) -> str:
        return self.chunk_strategy.joiner if self.chunk_strategy else ""
