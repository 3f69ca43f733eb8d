"""Environment-driven defaults for the CLI."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from text_splitter.length import DEFAULT_ENCODING
from text_splitter.models import SplitOptions

ENV_PREFIX = "TEXT_SPLITTER_"

_LIBRARY_DEFAULTS = SplitOptions()


@dataclass
class Settings:
    chunk_size: int = _LIBRARY_DEFAULTS.chunk_size
    chunk_overlap: int = _LIBRARY_DEFAULTS.chunk_overlap
    strategy: str | None = None
    length: str = "chars"
    encoding: str = DEFAULT_ENCODING


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"Error: {ENV_PREFIX + name} must be an integer, got {raw!r}.", file=sys.stderr)
        sys.exit(2)


def load_settings() -> Settings:
    """Read settings from the environment. Call ``load_dotenv()`` first to pick up ``.env``."""
    defaults = Settings()
    return Settings(
        chunk_size=_env_int("CHUNK_SIZE", defaults.chunk_size),
        chunk_overlap=_env_int("CHUNK_OVERLAP", defaults.chunk_overlap),
        strategy=os.environ.get(ENV_PREFIX + "STRATEGY") or defaults.strategy,
        length=os.environ.get(ENV_PREFIX + "LENGTH") or defaults.length,
        encoding=os.environ.get(ENV_PREFIX + "ENCODING") or defaults.encoding,
    )
