from .alphabets import (
    CharClass, LOWER_LETTERS, UPPER_LETTERS, DIGITS, SYMBOLS,
    LOWER_LETTERS_NO_AMBIGUOUS, UPPER_LETTERS_NO_AMBIGUOUS, DIGITS_NO_AMBIGUOUS, SYMBOLS_NO_AMBIGUOUS,
    FULL_ALPHABETS, NO_AMBIGUOUS_ALPHABETS, char_class_of,
)
from .errors import PasswordGeneratorError, ExceedsTotalLength, NoCharactersSpecified, RandomSourceError
from .password_builder import PasswordBuilder, generate_password
from .secure_random import random_index, random_element, shuffle
from .config import configure_logging

__all__ = [
    'CharClass', 'LOWER_LETTERS', 'UPPER_LETTERS', 'DIGITS', 'SYMBOLS',
    'LOWER_LETTERS_NO_AMBIGUOUS', 'UPPER_LETTERS_NO_AMBIGUOUS', 'DIGITS_NO_AMBIGUOUS', 'SYMBOLS_NO_AMBIGUOUS',
    'FULL_ALPHABETS', 'NO_AMBIGUOUS_ALPHABETS', 'char_class_of',
    'PasswordGeneratorError', 'ExceedsTotalLength', 'NoCharactersSpecified', 'RandomSourceError',
    'PasswordBuilder', 'generate_password',
    'random_index', 'random_element', 'shuffle',
    'configure_logging',
]
