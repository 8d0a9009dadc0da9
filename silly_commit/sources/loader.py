"""Word Source Loader - Read names and message templates."""

from importlib import resources
from pathlib import Path
from typing import Optional, Union

DATA_PACKAGE = 'silly_commit.data'
NAMES_FILENAME = 'names.txt'
MESSAGES_FILENAME = 'commit_messages.txt'


class SourceLoadError(Exception):
    """Raised when a word list cannot be loaded."""
    pass


def split_lines(text: str) -> list[str]:
    """Split line-delimited text, dropping blank lines.

    A trailing carriage return is stripped so CRLF files behave the same as
    LF files; any other whitespace is kept as written.
    """
    lines = []
    for line in text.split('\n'):
        if line.endswith('\r'):
            line = line[:-1]
        if line:
            lines.append(line)
    return lines


def load_lines(path: Union[str, Path]) -> list[str]:
    """Load a line-delimited word list from disk.

    Raises:
        SourceLoadError: If the file can't be read or has no non-blank lines.
    """
    path = Path(path).expanduser()
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise SourceLoadError(f"Could not read {path}: {e}")

    lines = split_lines(text)
    if not lines:
        raise SourceLoadError(f"No entries found in {path}")
    return lines


def load_bundled(filename: str) -> list[str]:
    """Load one of the word lists shipped with the package."""
    text = resources.files(DATA_PACKAGE).joinpath(filename).read_text(encoding='utf-8')
    return split_lines(text)


def load_names(path: Optional[Union[str, Path]] = None) -> list[str]:
    if path is None:
        return load_bundled(NAMES_FILENAME)
    return load_lines(path)


def load_messages(path: Optional[Union[str, Path]] = None) -> list[str]:
    if path is None:
        return load_bundled(MESSAGES_FILENAME)
    return load_lines(path)
