"""Placeholder Substitutor - Fill a message template."""

import random
import re

from silly_commit import NAME_TOKEN, UPPER_NAME_TOKEN, LOWER_NAME_TOKEN, NUMBER_TOKEN_PATTERN
from silly_commit.generator.numbers import parse_range, generate_number

NUMBER_TOKEN_RE = re.compile(NUMBER_TOKEN_PATTERN)

_ASCII_UPPER = str.maketrans('abcdefghijklmnopqrstuvwxyz', 'ABCDEFGHIJKLMNOPQRSTUVWXYZ')
_ASCII_LOWER = str.maketrans('ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')


def ascii_upper(text: str) -> str:
    return text.translate(_ASCII_UPPER)


def ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def substitute_numbers(template: str, rng: random.Random) -> str:
    """Replace every XNUM<spec>X with its own random number, left to right."""
    def _replace(match: re.Match) -> str:
        return str(generate_number(parse_range(match.group(1)), rng))
    return NUMBER_TOKEN_RE.sub(_replace, template)


def substitute_name(text: str, name: str) -> str:
    """Replace the name tokens.

    Case-specific tokens go first, then the plain XNAMEX.
    """
    text = text.replace(UPPER_NAME_TOKEN, ascii_upper(name))
    text = text.replace(LOWER_NAME_TOKEN, ascii_lower(name))
    return text.replace(NAME_TOKEN, name)


def substitute(template: str, name: str, rng: random.Random) -> str:
    """Fill numbers first, then names."""
    return substitute_name(substitute_numbers(template, rng), name)
