import pytest
from monday_client.config import (
    DEFAULT_HOST,
    DEFAULT_VERSION,
    Configuration,
    load_env_config,
)
from pydantic import ValidationError


def test_defaults():
    config = Configuration()
    assert config.token is None
    assert config.host == DEFAULT_HOST
    assert config.version == DEFAULT_VERSION
    assert config.open_timeout == 10
    assert config.read_timeout == 30


def test_given_values():
    config = Configuration(token="test-token", host="https://monday.com/api")
    assert config.token == "test-token"
    assert config.host == "https://monday.com/api"


def test_unknown_option_rejected():
    with pytest.raises(ValidationError):
        Configuration(args="unknown")


def test_override_returns_new_instance():
    base = Configuration(token="global")
    local = base.override(token="local", read_timeout=5)
    assert base.token == "global"
    assert local.token == "local"
    assert local.read_timeout == 5
    assert base.override() is base


def test_override_validates():
    with pytest.raises(ValidationError):
        Configuration().override(open_timeout=0)
    with pytest.raises(ValidationError):
        Configuration().override(unknown=True)


def test_configuration_is_frozen():
    config = Configuration()
    with pytest.raises(ValidationError):
        config.token = "changed"


def test_load_env_config(monkeypatch):
    monkeypatch.setenv("MONDAY_TOKEN", " env-token ")
    monkeypatch.setenv("MONDAY_API_VERSION", "2024-01")
    monkeypatch.delenv("MONDAY_HOST", raising=False)

    assert load_env_config(use_dotenv=False) == {
        "token": "env-token",
        "version": "2024-01",
    }

    config = Configuration.from_env(use_dotenv=False, read_timeout=3)
    assert config.token == "env-token"
    assert config.version == "2024-01"
    assert config.host == DEFAULT_HOST
    assert config.read_timeout == 3
