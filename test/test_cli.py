#!/usr/bin/env python3
"""Tests for the freshdesk-sdk command line."""

import json
from unittest.mock import patch

import pytest

from freshdesk_sdk import cli

from helpers import make_api, make_response, sent


@pytest.fixture
def fake_api(monkeypatch):
    """Route Api.from_config to a client backed by a mock session."""
    for var in ["FRESHDESK_API_KEY", "FRESHDESK_DOMAIN", "FRESHDESK_BASE_URL", "FRESHDESK_TIMEOUT"]:
        monkeypatch.delenv(var, raising=False)
    api, session = make_api(make_response(body={"id": 42, "subject": "Printer"}))
    with patch("freshdesk_sdk.models.load_dotenv"), \
            patch.object(cli.Api, "from_config", return_value=api) as from_config:
        yield api, session, from_config


def test_view_ticket_prints_json(fake_api, capsys):
    _, session, from_config = fake_api

    code = cli.main(["--api-key", "k", "--domain", "acme", "tickets", "view", "42"])

    assert code == 0
    method, url, _ = sent(session)
    assert (method, url) == ("GET", "https://acme.freshdesk.com/api/v2/tickets/42")
    config = from_config.call_args[0][0]
    assert config.base_url == "https://acme.freshdesk.com/api/v2"
    assert json.loads(capsys.readouterr().out) == {"id": 42, "subject": "Printer"}


def test_data_and_query_are_passed(fake_api):
    _, session, _ = fake_api

    cli.main(["--api-key", "k", "--domain", "acme", "--data", '{"status": 4}', "tickets", "update", "42"])
    _, _, kwargs = sent(session)
    assert kwargs["json"] == {"status": 4}

    cli.main(["--api-key", "k", "--domain", "acme", "--query", "page=2", "contacts", "all"])
    _, _, kwargs = sent(session)
    assert kwargs["params"] == {"page": "2"}


def test_data_from_file(fake_api, tmp_path):
    _, session, _ = fake_api
    payload = tmp_path / "ticket.json"
    payload.write_text('{"subject": "From file"}', encoding="utf-8")

    cli.main(["--api-key", "k", "--domain", "acme", "--data", f"@{payload}", "tickets", "create"])

    _, _, kwargs = sent(session)
    assert kwargs["json"] == {"subject": "From file"}


def test_config_file(fake_api, tmp_path):
    _, _, from_config = fake_api
    path = tmp_path / "freshdesk.yaml"
    path.write_text("api_key: k\nbase_url: http://localhost:9000/api/v2\n", encoding="utf-8")

    assert cli.main(["--config", str(path), "agents", "current"]) == 0

    assert from_config.call_args[0][0].base_url == "http://localhost:9000/api/v2"


def test_unknown_resource_is_usage_error(fake_api, capsys):
    assert cli.main(["--api-key", "k", "--domain", "acme", "session", "close"]) == 2
    assert cli.main(["--api-key", "k", "--domain", "acme", "tickets", "_path"]) == 2


def test_missing_config_is_error(capsys):
    with patch("freshdesk_sdk.models.load_dotenv"), \
            patch.dict("os.environ", {}, clear=True):
        assert cli.main(["tickets", "all"]) == 1
    assert "API key is empty" in capsys.readouterr().out


def test_api_error_returns_1(capsys):
    api, _ = make_api(make_response(status=404, body={"code": "not_found"}, reason="Not Found"))
    with patch("freshdesk_sdk.models.load_dotenv"), \
            patch.object(cli.Api, "from_config", return_value=api):
        code = cli.main(["--api-key", "k", "--domain", "acme", "tickets", "view", "1"])

    assert code == 1
    out = capsys.readouterr().out
    assert "404" in out
    assert "not_found" in out
