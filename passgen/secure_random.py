"""Secure random primitives used by the password builder.

Everything here goes through :mod:`secrets`, which reads from the
operating system CSPRNG. ``secrets.randbelow`` draws whole random bits and
rejects out-of-range values, so the indices it returns carry no modulo bias.
"""
import secrets
from typing import MutableSequence

from .errors import RandomSourceError


def random_index(n: int) -> int:
    """Return a uniformly distributed integer in ``[0, n)``."""
    if n < 1:
        raise ValueError(f'upper bound must be at least 1, got {n}')
    try:
        return secrets.randbelow(n)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError('secure random source failed') from exc


def random_element(alphabet: str) -> str:
    # Pick one character from the alphabet
    if not alphabet:
        raise ValueError('cannot choose from an empty alphabet')
    return alphabet[random_index(len(alphabet))]


def shuffle(items: MutableSequence) -> None:
    """Shuffle ``items`` in place (Fisher-Yates)."""
    for i in range(len(items) - 1, 0, -1):
        j = random_index(i + 1)
        items[i], items[j] = items[j], items[i]
