"""Word Sources Package"""

from silly_commit.sources.loader import (
    SourceLoadError,
    split_lines,
    load_lines,
    load_bundled,
    load_names,
    load_messages,
    NAMES_FILENAME,
    MESSAGES_FILENAME,
)

__all__ = [
    "SourceLoadError",
    "split_lines",
    "load_lines",
    "load_bundled",
    "load_names",
    "load_messages",
    "NAMES_FILENAME",
    "MESSAGES_FILENAME",
]
