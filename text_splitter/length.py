"""Length measurers: character count (default) or tiktoken token count."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable

DEFAULT_ENCODING = "cl100k_base"
LENGTH_KINDS = ("chars", "tokens")


def char_length(text: str) -> int:
    return len(text)


@lru_cache(maxsize=None)
def _get_encoding(encoding_name: str):
    import tiktoken

    return tiktoken.get_encoding(encoding_name)


def token_length(encoding_name: str = DEFAULT_ENCODING) -> Callable[[str], int]:
    """Return a measurer counting *encoding_name* tokens.

    The encoding is loaded here, so an unknown name fails before any
    chunking starts. Loaded encodings are shared between measurers.
    """
    encoding = _get_encoding(encoding_name)

    def measure(text: str) -> int:
        return len(encoding.encode(text, disallowed_special=()))

    return measure


def build_length_function(kind: str = "chars", encoding: str | None = None) -> Callable[[str], float]:
    """Factory: return a measurer for the given kind."""
    if kind == "chars":
        return char_length
    if kind == "tokens":
        return token_length(encoding or DEFAULT_ENCODING)
    raise ValueError(f"Unknown length function: {kind!r}")
