from __future__ import annotations

import importlib
import sys

import pytest

MODULE = "easygestion.settings.production"


def _import_fresh(monkeypatch):
    monkeypatch.delitem(sys.modules, MODULE, raising=False)
    return importlib.import_module(MODULE)


def test_production_requires_secret_key(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(RuntimeError, match="SECRET_KEY"):
        _import_fresh(monkeypatch)


def test_production_uses_configured_secrets(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "s3cret")
    monkeypatch.delenv("ACCESS_TOKEN_SECRET", raising=False)

    settings = _import_fresh(monkeypatch)

    assert settings.SECRET_KEY == "s3cret"
    assert settings.JWT_SECRET_KEY == "s3cret"
    assert settings.DEBUG is False
    assert settings.JWT_COOKIE_SECURE is True
