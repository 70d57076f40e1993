import logging
import os

DEFAULT_LENGTH = 16
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def default_length() -> int:
    # Read on every call so the environment can change between calls
    raw = os.environ.get('PASSGEN_DEFAULT_LENGTH')
    if raw is None or raw.strip() == '':
        return DEFAULT_LENGTH
    try:
        length = int(raw)
    except ValueError:
        raise ValueError(f'PASSGEN_DEFAULT_LENGTH must be an integer, got {raw!r}') from None
    if length < 0:
        raise ValueError(f'PASSGEN_DEFAULT_LENGTH must not be negative, got {length}')
    return length


def log_level() -> str:
    return os.environ.get('PASSGEN_LOG_LEVEL', 'WARNING').upper()


def configure_logging() -> None:
    """Set up root logging for applications embedding the generator.

    The library itself never calls this; it only creates module loggers.
    """
    logging.basicConfig(format=LOG_FORMAT, level=log_level())
