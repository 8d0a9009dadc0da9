"""Terminal Output Formatting Package

stdout carries only generated messages, so every diagnostic here is written
to stderr and coloured according to whether stderr is a terminal.
"""

import os
import sys

RESET = '\033[0m'
STYLES = {
    'bold': '\033[1m',
    'dim': '\033[2m',
    'red': '\033[31m',
    'green': '\033[32m',
    'yellow': '\033[33m',
    'cyan': '\033[36m',
}


def _stderr_supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    isatty = getattr(sys.stderr, 'isatty', None)
    if isatty is None or not isatty():
        return False
    # Windows 10+ terminals understand ANSI; older consoles print garbage
    return sys.platform != 'win32' or 'WT_SESSION' in os.environ or 'TERM' in os.environ


def _stderr_supports_unicode() -> bool:
    try:
        '✓✗⚠'.encode(sys.stderr.encoding or 'utf-8')
        return True
    except (UnicodeEncodeError, LookupError):
        return False


COLORS_ENABLED = _stderr_supports_color()
UNICODE_ENABLED = _stderr_supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
WARN = '⚠' if UNICODE_ENABLED else '[!]'


def _style(text: str, *names: str) -> str:
    if not COLORS_ENABLED:
        return text
    return ''.join(STYLES[n] for n in names) + text + RESET


def success(text: str) -> str:
    return _style(text, 'green')


def error(text: str) -> str:
    return _style(text, 'red')


def warning(text: str) -> str:
    return _style(text, 'yellow')


def info(text: str) -> str:
    return _style(text, 'cyan')


def dim(text: str) -> str:
    return _style(text, 'dim')


def bold(text: str) -> str:
    return _style(text, 'bold')


def _report(symbol: str, message: str) -> None:
    print(f"{symbol} {message}", file=sys.stderr)


def print_success(message: str) -> None:
    _report(success(CHECK), message)


def print_error(message: str) -> None:
    _report(error(CROSS), error(message))


def print_warning(message: str) -> None:
    _report(warning(WARN), warning(message))


__all__ = [
    "STYLES", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "WARN",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_warning",
]
