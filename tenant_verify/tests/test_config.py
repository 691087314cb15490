# tests/test_config.py
import pytest
from pydantic import ValidationError as SettingsParseError

from tenant_verify.config import load_settings
from tenant_verify.errors import ConfigError


def test_defaults():
    s = load_settings(_env_file=None)
    assert s.PORT == 8080
    assert s.DATABASE_URL == "postgres://localhost/tenant_verify"
    assert s.API_KEY == "development-key"
    assert s.MAX_CONNECTIONS == 25
    assert s.TIMEOUT_SECONDS == 30
    assert s.is_development and not s.is_production


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("MAX_CONNECTIONS", "3")
    s = load_settings(_env_file=None)
    assert s.PORT == 9090
    assert s.is_production
    assert s.MAX_CONNECTIONS == 3


def test_settings_are_immutable():
    s = load_settings(_env_file=None)
    with pytest.raises(SettingsParseError):
        s.PORT = 9999


@pytest.mark.parametrize("overrides", [
    {"PORT": 80},
    {"PORT": 70000},
    {"ENVIRONMENT": "production", "DATABASE_URL": ""},
    {"MAX_CONNECTIONS": 0},
    {"TIMEOUT_SECONDS": 0},
    {"LOG_LEVEL": "verbose"},
    {"ENVIRONMENT": "staging"},
])
def test_refuses_bad_config(overrides):
    with pytest.raises(ConfigError):
        load_settings(_env_file=None, **overrides)


def test_non_numeric_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(ConfigError):
        load_settings(_env_file=None)


def test_empty_database_url_allowed_in_development():
    s = load_settings(_env_file=None, DATABASE_URL="")
    assert s.DATABASE_URL == ""
