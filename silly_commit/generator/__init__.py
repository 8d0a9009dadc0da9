"""Message Generation Package"""

import random
from dataclasses import dataclass
from typing import Sequence

from silly_commit.generator.selector import choose, SelectionError
from silly_commit.generator.numbers import NumberRange, parse_range, generate_number
from silly_commit.generator.placeholders import (
    substitute, substitute_name, substitute_numbers,
)


@dataclass(frozen=True)
class GeneratedMessage:
    """One generated commit message and what it was built from."""
    name: str
    template: str
    text: str


def generate_message(names: Sequence[str], templates: Sequence[str],
                     rng: random.Random) -> GeneratedMessage:
    """Pick a name and a template, then fill in the placeholders.

    Raises:
        SelectionError: If either list is empty.
    """
    name = choose(names, rng, "names")
    template = choose(templates, rng, "commit messages")
    return GeneratedMessage(name=name, template=template, text=substitute(template, name, rng))


__all__ = [
    "GeneratedMessage",
    "generate_message",
    "choose",
    "SelectionError",
    "NumberRange",
    "parse_range",
    "generate_number",
    "substitute",
    "substitute_name",
    "substitute_numbers",
]
