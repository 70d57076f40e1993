import logging

import pytest

from passgen import CharClass, char_class_of, config, generate_password


def test_default_length(monkeypatch):
    monkeypatch.delenv('PASSGEN_DEFAULT_LENGTH', raising=False)
    assert config.default_length() == 16
    assert len(generate_password()) == 16


def test_default_length_from_environment(monkeypatch):
    monkeypatch.setenv('PASSGEN_DEFAULT_LENGTH', '24')
    assert config.default_length() == 24
    assert len(generate_password()) == 24


@pytest.mark.parametrize('value', ['abc', '-3', '1.5'])
def test_invalid_default_length(monkeypatch, value):
    monkeypatch.setenv('PASSGEN_DEFAULT_LENGTH', value)
    with pytest.raises(ValueError, match='PASSGEN_DEFAULT_LENGTH'):
        config.default_length()


def test_log_level(monkeypatch):
    monkeypatch.delenv('PASSGEN_LOG_LEVEL', raising=False)
    assert config.log_level() == 'WARNING'
    monkeypatch.setenv('PASSGEN_LOG_LEVEL', 'debug')
    assert config.log_level() == 'DEBUG'


def test_generation_is_logged_without_password(caplog):
    caplog.set_level(logging.DEBUG, logger='passgen')
    password = generate_password(12)
    assert 'length=12' in caplog.text
    assert password not in caplog.text


def test_generate_password_defaults():
    for _ in range(20):
        counts = {char_class_of(c) for c in generate_password(12)}
        assert counts == {CharClass.LOWER, CharClass.UPPER, CharClass.DIGITS}


def test_generate_password_with_symbols_no_ambiguous():
    password = generate_password(20, symbols=True, no_ambiguous=True)
    assert len(password) == 20
    assert CharClass.SYMBOLS in {char_class_of(c) for c in password}
    assert not set(password) & set('iloILO01')


def test_generate_password_shorter_than_classes():
    assert len(generate_password(2, symbols=True)) == 2


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv('PASSGEN_LOG_LEVEL', 'info')
    config.configure_logging()
    assert calls == [{'format': config.LOG_FORMAT, 'level': 'INFO'}]
