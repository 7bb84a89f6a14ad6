"""Estrategia de autenticación: setters, consultas y snapshots."""

from __future__ import annotations

from atlassian_rest import AppSettings, AuthenticationService, Credentials


def test_fresh_service_reports_nothing_configured():
    auth = AuthenticationService()

    assert not auth.has_basic_auth()
    assert not auth.has_user_agent()
    assert not auth.has_experimental_flag()
    assert auth.get_basic_auth() == ("", "")
    assert auth.get_user_agent() == ""


def test_setters_are_reflected_by_queries():
    auth = AuthenticationService()
    auth.set_basic_auth("me@example.com", "secret")
    auth.set_user_agent("agent/1.0")
    auth.set_experimental_flag()

    assert auth.has_basic_auth()
    assert auth.get_basic_auth() == ("me@example.com", "secret")
    assert auth.has_user_agent()
    assert auth.get_user_agent() == "agent/1.0"
    assert auth.has_experimental_flag()


def test_empty_strings_are_accepted_without_validation():
    auth = AuthenticationService()
    auth.set_basic_auth("", "")
    auth.set_user_agent("")

    assert auth.has_basic_auth()
    assert auth.has_user_agent()
    # base64(":")
    assert auth.snapshot().basic_auth_header() == "Basic Og=="


def test_basic_auth_header_encodes_identity_and_secret():
    creds = Credentials(identity="Aladdin", secret="open sesame")

    assert creds.basic_auth_header() == "Basic QWxhZGRpbjpvcGVuIHNlc2FtZQ=="


def test_snapshot_is_not_affected_by_later_rotation():
    auth = AuthenticationService()
    auth.set_basic_auth("old@example.com", "old")
    before = auth.snapshot()

    auth.set_basic_auth("new@example.com", "new")

    assert before.identity == "old@example.com"
    assert auth.snapshot().identity == "new@example.com"


def test_from_settings_maps_configuration():
    settings = AppSettings(
        _env_file=None,
        site="https://x.atlassian.net",
        email="me@example.com",
        api_token="tkn",
        user_agent="cfg-agent",
        experimental_api=True,
    )

    auth = AuthenticationService.from_settings(settings)

    assert auth.get_basic_auth() == ("me@example.com", "tkn")
    assert auth.get_user_agent() == "cfg-agent"
    assert auth.has_experimental_flag()


def test_from_settings_without_credentials_leaves_basic_auth_unset():
    settings = AppSettings(_env_file=None, user_agent=None)

    auth = AuthenticationService.from_settings(settings)

    assert not auth.has_basic_auth()
    assert not auth.has_user_agent()
