import logging
import operator
import threading
from typing import Optional

from . import config
from .alphabets import CharClass, FULL_ALPHABETS, NO_AMBIGUOUS_ALPHABETS
from .errors import ExceedsTotalLength, NoCharactersSpecified
from .secure_random import random_element, shuffle

logger = logging.getLogger(__name__)


def _count(n) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f'required count must not be negative, got {n}')
    return n


class PasswordBuilder:
    """Configurable password generator.

    Classes enabled with :meth:`enable` (or the ``with_*`` shortcuts) form the
    pool that free slots are filled from. ``require_*`` guarantees at least N
    characters of a class and keeps it in the pool; ``exact_*`` guarantees N
    characters and takes the class out of the pool, so exactly N appear. The
    last call for a class wins.

    Configuration methods return the builder so calls can be chained::

        PasswordBuilder().with_lower().with_upper().require_digits(2).generate(12)

    A configured builder can be reused for any number of :meth:`generate`
    calls; generating never changes the configuration.
    """

    def __init__(self):
        # Nothing enabled or required until configured
        self._alphabets = FULL_ALPHABETS
        self._include = {char_class: False for char_class in CharClass}
        self._required = {char_class: 0 for char_class in CharClass}
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        with self._lock:
            enabled = [c.value for c in CharClass if self._include[c]]
            required = {c.value: n for c, n in self._required.items() if n}
            return (
                f'PasswordBuilder(enabled={enabled}, required={required}, '
                f'no_ambiguous={self.ambiguous_excluded})'
            )

    @property
    def ambiguous_excluded(self) -> bool:
        return self._alphabets is NO_AMBIGUOUS_ALPHABETS

    @property
    def required_total(self) -> int:
        with self._lock:
            return sum(self._required.values())

    def is_enabled(self, char_class: CharClass) -> bool:
        with self._lock:
            return self._include[CharClass(char_class)]

    def required(self, char_class: CharClass) -> int:
        with self._lock:
            return self._required[CharClass(char_class)]

    def no_ambiguous_characters(self) -> 'PasswordBuilder':
        # Swap all four alphabets at once
        with self._lock:
            self._alphabets = NO_AMBIGUOUS_ALPHABETS
        return self

    def enable(self, char_class: CharClass, enable: bool = True) -> 'PasswordBuilder':
        # Add the class to the fill pool; does not guarantee it shows up
        with self._lock:
            self._include[CharClass(char_class)] = bool(enable)
        return self

    def require_at_least(self, char_class: CharClass, n: int) -> 'PasswordBuilder':
        # At least n characters, more may come from the fill pool
        n = _count(n)
        with self._lock:
            char_class = CharClass(char_class)
            self._include[char_class] = True
            self._required[char_class] = n
        return self

    def require_exactly(self, char_class: CharClass, n: int) -> 'PasswordBuilder':
        # Exactly n characters, the class is kept out of the fill pool
        n = _count(n)
        with self._lock:
            char_class = CharClass(char_class)
            self._include[char_class] = False
            self._required[char_class] = n
        return self

    def with_lower(self, enable: bool = True) -> 'PasswordBuilder':
        return self.enable(CharClass.LOWER, enable)

    def with_upper(self, enable: bool = True) -> 'PasswordBuilder':
        return self.enable(CharClass.UPPER, enable)

    def with_digits(self, enable: bool = True) -> 'PasswordBuilder':
        return self.enable(CharClass.DIGITS, enable)

    def with_symbols(self, enable: bool = True) -> 'PasswordBuilder':
        return self.enable(CharClass.SYMBOLS, enable)

    def require_lower(self, n: int) -> 'PasswordBuilder':
        return self.require_at_least(CharClass.LOWER, n)

    def require_upper(self, n: int) -> 'PasswordBuilder':
        return self.require_at_least(CharClass.UPPER, n)

    def require_digits(self, n: int) -> 'PasswordBuilder':
        return self.require_at_least(CharClass.DIGITS, n)

    def require_symbols(self, n: int) -> 'PasswordBuilder':
        return self.require_at_least(CharClass.SYMBOLS, n)

    def exact_lower(self, n: int) -> 'PasswordBuilder':
        return self.require_exactly(CharClass.LOWER, n)

    def exact_upper(self, n: int) -> 'PasswordBuilder':
        return self.require_exactly(CharClass.UPPER, n)

    def exact_digits(self, n: int) -> 'PasswordBuilder':
        return self.require_exactly(CharClass.DIGITS, n)

    def exact_symbols(self, n: int) -> 'PasswordBuilder':
        return self.require_exactly(CharClass.SYMBOLS, n)

    def generate(self, length: int) -> str:
        """Generate a password of exactly ``length`` characters.

        Raises :class:`NoCharactersSpecified` when there is nothing to draw
        from and :class:`ExceedsTotalLength` when the required characters do
        not fit. A failing entropy source surfaces as
        :class:`~passgen.errors.RandomSourceError`.
        """
        length = operator.index(length)
        if length < 0:
            raise ValueError(f'length must not be negative, got {length}')

        # Work on a snapshot so concurrent configuration can't tear a run
        with self._lock:
            alphabets = self._alphabets
            include = dict(self._include)
            required = dict(self._required)

        if not any(include.values()) and not any(required.values()):
            raise NoCharactersSpecified()

        required_total = sum(required.values())
        if required_total > length:
            raise ExceedsTotalLength(required_total, length)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                'Generating password: length=%d required=%s',
                length, {c.value: n for c, n in required.items() if n},
            )

        # Guaranteed characters first, from the active alphabet of each class
        chars = []
        for char_class in CharClass:
            alphabet = alphabets[char_class]
            for _ in range(required[char_class]):
                chars.append(random_element(alphabet))

        remaining = length - len(chars)
        if remaining > 0:
            pool = ''.join(alphabets[c] for c in CharClass if include[c])
            # Only reachable when every enabled class was switched to exact
            if not pool:
                raise NoCharactersSpecified()
            for _ in range(remaining):
                chars.append(random_element(pool))

        # Shuffle so the guaranteed chars aren't always in front
        shuffle(chars)
        return ''.join(chars)


def generate_password(
    length: Optional[int] = None,
    upper: bool = True,
    lower: bool = True,
    digits: bool = True,
    symbols: bool = False,
    no_ambiguous: bool = False,
) -> str:
    # Simple helper function to build a password with one call
    if length is None:
        length = config.default_length()

    builder = (
        PasswordBuilder()
        .with_upper(upper)
        .with_lower(lower)
        .with_digits(digits)
        .with_symbols(symbols)
    )
    if no_ambiguous:
        builder.no_ambiguous_characters()

    # One of each enabled class, as long as they all fit
    enabled = [c for c in CharClass if builder.is_enabled(c)]
    if len(enabled) <= length:
        for char_class in enabled:
            builder.require_at_least(char_class, 1)

    return builder.generate(length)
