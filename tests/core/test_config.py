import pytest
from pydantic import ValidationError

from funseq.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("FUNSEQ_ROTATION_MODULUS", raising=False)

    settings = Settings.load()
    assert settings.log_level == "INFO"
    assert settings.rotation_modulus == "interval"


def test_load_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("FUNSEQ_ROTATION_MODULUS", "TUPLE")

    settings = Settings.load()
    assert settings.log_level == "DEBUG"
    assert settings.rotation_modulus == "tuple"


def test_rejects_unknown_modulus(monkeypatch):
    monkeypatch.setenv("FUNSEQ_ROTATION_MODULUS", "range")
    with pytest.raises(ValidationError):
        Settings.load()
