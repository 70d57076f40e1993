import secrets

import pytest

from passgen import PasswordBuilder


@pytest.fixture
def builder():
    return PasswordBuilder()


@pytest.fixture
def broken_entropy(monkeypatch):
    # Make every draw fail as if the OS entropy source were unreadable
    def fail(_n):
        raise OSError('entropy source unavailable')

    monkeypatch.setattr(secrets, 'randbelow', fail)
