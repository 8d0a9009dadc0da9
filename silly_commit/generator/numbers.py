"""Number placeholders - Range parsing and number generation.

A number placeholder looks like ``XNUM<spec>X``. The specifier is parsed
permissively: anything that is not a plain 32-bit unsigned integer falls
back to the default bound instead of raising.

    ""       -> (1, 999)
    "10"     -> (1, 10)
    "5,20"   -> (5, 20)
    ",20"    -> (1, 20)
    "5,"     -> (5, 999)
    "1,000"  -> (1, 0)     commas always separate, never group thousands
"""

import random
from dataclasses import dataclass

from silly_commit import DEFAULT_NUMBER_START, DEFAULT_NUMBER_END, MAX_NUMBER

_MAX_DIGITS = len(str(MAX_NUMBER))


@dataclass(frozen=True)
class NumberRange:
    """Bounds parsed from a number placeholder's specifier text."""
    start: int = DEFAULT_NUMBER_START
    end: int = DEFAULT_NUMBER_END

    @property
    def is_inverted(self) -> bool:
        return self.start > self.end

    @property
    def upper_bound(self) -> int:
        """Effective upper bound, after inversion correction."""
        if self.is_inverted:
            return self.start * 2
        return self.end


def _parse_unsigned(text: str, default: int) -> int:
    # str.isdigit() alone accepts non-ASCII digits too
    if not (text and text.isascii() and text.isdigit()):
        return default
    # Leading zeros don't count toward the width
    significant = text.lstrip('0')
    if len(significant) > _MAX_DIGITS:
        return default
    value = int(significant or '0')
    return value if value <= MAX_NUMBER else default


def parse_range(spec: str) -> NumberRange:
    """Parse the specifier between ``XNUM`` and ``X`` into a NumberRange."""
    if not spec:
        return NumberRange()

    before, comma, after = spec.partition(',')
    if not comma:
        return NumberRange(end=_parse_unsigned(spec, DEFAULT_NUMBER_END))

    return NumberRange(
        start=_parse_unsigned(before, DEFAULT_NUMBER_START),
        end=_parse_unsigned(after, DEFAULT_NUMBER_END),
    )


def generate_number(number_range: NumberRange, rng: random.Random) -> int:
    """Draw a number from the range, inclusive on both ends.

    Inverted ranges like ``10,5`` become ``[10, 20]``. A range whose upper
    bound does not exceed its start always yields the start.
    """
    upper = number_range.upper_bound
    if upper > number_range.start:
        return rng.randint(number_range.start, upper)
    return number_range.start
