"""CLI `doctor` con un cliente sobre transporte simulado."""

from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

from atlassian_rest import AuthenticationService, JiraClient
from atlassian_rest.cli import doctor
from atlassian_rest.cli.main import app
from conftest import SITE

runner = CliRunner()


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for var in ("SITE", "EMAIL", "API_TOKEN", "USER_AGENT", "EXPERIMENTAL_API"):
        monkeypatch.delenv(f"ATLASSIAN_REST_{var}", raising=False)
    return tmp_path


def _fake_client(make_http, handler):
    def factory(settings):
        return JiraClient(SITE, http=make_http(handler), auth=AuthenticationService())

    return factory


def test_doctor_without_site_fails(isolated_env):
    result = runner.invoke(app, ["--no-banner", "doctor", "run"])

    assert result.exit_code == 1
    assert "MISSING" in result.output


def test_doctor_reports_success(isolated_env, monkeypatch, make_http):
    monkeypatch.setenv("ATLASSIAN_REST_SITE", SITE)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"accountId": "abc", "baseUrl": SITE})

    monkeypatch.setattr(doctor, "_make_client", _fake_client(make_http, handler))

    result = runner.invoke(app, ["--no-banner", "doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "Server info" in result.output
    assert "FAIL" not in result.output


def test_doctor_shows_failed_response_body(isolated_env, monkeypatch, make_http):
    monkeypatch.setenv("ATLASSIAN_REST_SITE", SITE)

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/myself"):
            return httpx.Response(401, json={"message": "Client must be authenticated"})
        return httpx.Response(200, json={"baseUrl": SITE})

    monkeypatch.setattr(doctor, "_make_client", _fake_client(make_http, handler))

    result = runner.invoke(app, ["--no-banner", "doctor", "run"])

    assert result.exit_code == 1
    assert "FAIL" in result.output
    assert "HTTP 401" in result.output
    assert "Client must be authenticated" in result.output


def test_doctor_setup_writes_user_env(isolated_env):
    result = runner.invoke(
        app,
        ["--no-banner", "doctor", "setup"],
        input="https://x.atlassian.net\nme@example.com\ntkn\n",
    )

    assert result.exit_code == 0, result.output
    env = isolated_env / "config" / "atlassian-rest" / ".env"
    content = env.read_text(encoding="utf-8")
    assert "ATLASSIAN_REST_SITE=https://x.atlassian.net" in content
    assert "ATLASSIAN_REST_API_TOKEN=tkn" in content
