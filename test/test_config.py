#!/usr/bin/env python3
"""Tests for ApiConfig loading from arguments, environment and YAML."""

import dataclasses
from unittest.mock import patch

import pytest

from freshdesk_sdk import Api, ApiConfig, InvalidConfigurationError

ENV_VARS = ["FRESHDESK_API_KEY", "FRESHDESK_DOMAIN", "FRESHDESK_BASE_URL", "FRESHDESK_TIMEOUT"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    # keep a developer's .env out of the tests
    with patch("freshdesk_sdk.models.load_dotenv"):
        yield monkeypatch


def test_config_is_immutable():
    config = ApiConfig("key", "acme")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.domain = "other"


def test_from_env_subdomain(clean_env):
    clean_env.setenv("FRESHDESK_API_KEY", "env-key")
    clean_env.setenv("FRESHDESK_DOMAIN", "acme")
    clean_env.setenv("FRESHDESK_TIMEOUT", "5")

    config = ApiConfig.from_env()

    assert config.api_key == "env-key"
    assert config.base_url == "https://acme.freshdesk.com/api/v2"
    assert config.timeout == 5.0


def test_from_env_base_url_wins(clean_env):
    clean_env.setenv("FRESHDESK_API_KEY", "env-key")
    clean_env.setenv("FRESHDESK_DOMAIN", "acme")
    clean_env.setenv("FRESHDESK_BASE_URL", "http://localhost:8080/api/v2")

    config = ApiConfig.from_env()

    assert config.is_subdomain is False
    assert config.base_url == "http://localhost:8080/api/v2"


def test_from_env_overrides(clean_env):
    clean_env.setenv("FRESHDESK_API_KEY", "env-key")
    clean_env.setenv("FRESHDESK_BASE_URL", "http://localhost:8080/api/v2")

    config = ApiConfig.from_env(api_key="cli-key", domain="other")

    assert config.api_key == "cli-key"
    assert config.base_url == "https://other.freshdesk.com/api/v2"


def test_from_env_missing_key():
    with pytest.raises(InvalidConfigurationError, match="API key"):
        ApiConfig.from_env(domain="acme")


def test_from_env_bad_timeout(clean_env):
    clean_env.setenv("FRESHDESK_TIMEOUT", "soon")
    with pytest.raises(InvalidConfigurationError, match="timeout"):
        ApiConfig.from_env(api_key="k", domain="acme")


def test_api_from_env(clean_env):
    clean_env.setenv("FRESHDESK_API_KEY", "env-key")
    clean_env.setenv("FRESHDESK_DOMAIN", "acme")

    api = Api.from_env()

    assert api.base_url == "https://acme.freshdesk.com/api/v2"
    assert api.session.auth == ("env-key", "X")


def test_from_yaml(tmp_path):
    path = tmp_path / "freshdesk.yaml"
    path.write_text("api_key: yaml-key\ndomain: acme\ntimeout: 30\n", encoding="utf-8")

    config = ApiConfig.from_yaml(path)

    assert config == ApiConfig("yaml-key", "acme", is_subdomain=True, timeout=30.0)


def test_from_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "freshdesk.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(InvalidConfigurationError):
        ApiConfig.from_yaml(path)
