"""Character classes and the alphabets they draw from."""
from enum import Enum
from types import MappingProxyType
from typing import Optional


class CharClass(Enum):
    LOWER = 'lower'
    UPPER = 'upper'
    DIGITS = 'digits'
    SYMBOLS = 'symbols'


LOWER_LETTERS = 'abcdefghijklmnopqrstuvwxyz'
UPPER_LETTERS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
DIGITS = '0123456789'
SYMBOLS = '~!@#$%^&*()_+-={}[]'

# Same sets without glyphs that are easy to confuse (i l o I L O 0 1)
LOWER_LETTERS_NO_AMBIGUOUS = 'abcdefghjkmnpqrstuvwxyz'
UPPER_LETTERS_NO_AMBIGUOUS = 'ABCDEFGHJKMNPQRSTUVWXYZ'
DIGITS_NO_AMBIGUOUS = '23456789'
SYMBOLS_NO_AMBIGUOUS = SYMBOLS

FULL_ALPHABETS = MappingProxyType({
    CharClass.LOWER: LOWER_LETTERS,
    CharClass.UPPER: UPPER_LETTERS,
    CharClass.DIGITS: DIGITS,
    CharClass.SYMBOLS: SYMBOLS,
})

NO_AMBIGUOUS_ALPHABETS = MappingProxyType({
    CharClass.LOWER: LOWER_LETTERS_NO_AMBIGUOUS,
    CharClass.UPPER: UPPER_LETTERS_NO_AMBIGUOUS,
    CharClass.DIGITS: DIGITS_NO_AMBIGUOUS,
    CharClass.SYMBOLS: SYMBOLS_NO_AMBIGUOUS,
})


def char_class_of(char: str) -> Optional[CharClass]:
    # Look the character up in the full tables, the no-ambiguity ones are subsets
    for char_class, alphabet in FULL_ALPHABETS.items():
        if char in alphabet:
            return char_class
    return None
