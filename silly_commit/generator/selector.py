"""Random Selector - Pick one entry from a word list."""

import random
from typing import Sequence, TypeVar

T = TypeVar('T')


class SelectionError(Exception):
    """Raised when there is nothing to pick from."""
    pass


def choose(candidates: Sequence[T], rng: random.Random, what: str = "candidates") -> T:
    """Return one element of candidates, uniformly at random.

    The sequence is left untouched. ``what`` names the list in the error
    message, e.g. "names" gives "failed to select any names".
    """
    if not candidates:
        raise SelectionError(f"failed to select any {what}")
    return candidates[rng.randrange(len(candidates))]
