import importlib

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("test", "config.testing"),
        ("testing", "config.testing"),
        ("development", "config.development"),
        ("anything-else", "config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_default_is_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"


@pytest.mark.parametrize("module", ["config.development", "config.testing", "config.production"])
def test_settings_modules_define_required_names(module):
    settings = importlib.import_module(module)
    for name in ("SECRET_KEY", "DB_CONFIG", "DEBUG", "LOG_LEVEL", "LOG_JSON"):
        assert hasattr(settings, name), name
    assert set(settings.DB_CONFIG) == {"host", "port", "user", "password", "database"}
