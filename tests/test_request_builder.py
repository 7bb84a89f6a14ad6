"""Constructor de peticiones: resolución de paths y headers."""

from __future__ import annotations

import pytest

from atlassian_rest import AuthenticationService, Client, Context
from atlassian_rest.core.errors import (
    ConfigurationError,
    InvalidPathError,
    MissingContextError,
    RequestConstructionError,
)
from conftest import SITE


@pytest.fixture
def client(http, auth) -> Client:
    return Client(SITE, http=http, auth=auth)


def test_relative_path_resolves_against_site(client):
    prepared = client.new_request(Context.background(), "GET", "rest/api/3/myself")

    assert prepared.url == "https://x.atlassian.net/rest/api/3/myself"
    assert prepared.method == "GET"


def test_leading_slash_is_equivalent_on_root_site(client):
    ctx = Context.background()

    with_slash = client.new_request(ctx, "GET", "/rest/api/3/serverInfo")
    without_slash = client.new_request(ctx, "GET", "rest/api/3/serverInfo")

    assert with_slash.url == without_slash.url


def test_site_without_trailing_slash_is_normalized(http, auth):
    client = Client("https://x.atlassian.net", http=http, auth=auth)

    assert client.site == SITE
    assert client.resolve("rest/api/3/label") == "https://x.atlassian.net/rest/api/3/label"


def test_relative_path_keeps_site_prefix(http, auth):
    client = Client("https://x.atlassian.net/wiki", http=http, auth=auth)

    prepared = client.new_request(Context.background(), "GET", "rest/api/content/1/child/attachment")

    assert prepared.url == "https://x.atlassian.net/wiki/rest/api/content/1/child/attachment"


def test_query_escapes_are_preserved(client):
    prepared = client.new_request(Context.background(), "GET", "rest/api/3/myself?expand=groups%2CapplicationRoles")

    assert prepared.url == "https://x.atlassian.net/rest/api/3/myself?expand=groups%2CapplicationRoles"


def test_request_without_body_has_accept_but_no_content_type(client):
    prepared = client.new_request(Context.background(), "GET", "rest/api/3/myself")

    assert prepared.headers["Accept"] == "application/json"
    assert "Content-Type" not in prepared.headers
    assert prepared.content == b""


def test_request_with_body_is_json(client):
    prepared = client.new_request(Context.background(), "POST", "rest/api/3/issue", b'{"a":1}')

    assert prepared.headers["Content-Type"] == "application/json"
    assert prepared.headers["Accept"] == "application/json"
    assert prepared.content == b'{"a":1}'


def test_request_accepts_a_reader(client):
    prepared = client.new_request(
        Context.background(),
        "PUT",
        "rest/api/3/issue/1",
        client.encode_payload({"fields": {"summary": "x"}}),
    )

    assert prepared.content == b'{"fields":{"summary":"x"}}'


def test_auth_headers_are_applied(client):
    prepared = client.new_request(Context.background(), "GET", "rest/api/3/myself")

    assert prepared.headers["Authorization"] == client.auth.snapshot().basic_auth_header()
    assert prepared.headers["Authorization"].startswith("Basic ")
    assert prepared.headers["User-Agent"] == "atlassian-rest-tests/1.0"
    assert "X-ExperimentalApi" not in prepared.headers


def test_no_authorization_without_basic_auth(http):
    client = Client(SITE, http=http, auth=AuthenticationService())

    prepared = client.new_request(Context.background(), "GET", "rest/api/3/myself")

    assert "Authorization" not in prepared.headers


def test_experimental_flag_adds_opt_in_header(client):
    client.auth.set_experimental_flag()

    prepared = client.new_request(Context.background(), "GET", "rest/servicedeskapi/organization")

    assert prepared.headers["X-ExperimentalApi"] == "opt-in"


def test_built_request_keeps_credentials_of_its_time(client):
    prepared = client.new_request(Context.background(), "GET", "rest/api/3/myself")
    header = prepared.headers["Authorization"]

    client.auth.set_basic_auth("other@example.com", "rotated")

    assert prepared.headers["Authorization"] == header
    rebuilt = client.new_request(Context.background(), "GET", "rest/api/3/myself")
    assert rebuilt.headers["Authorization"] != header


def test_form_request_headers(client):
    prepared = client.new_form_request(
        Context.background(),
        "POST",
        "rest/api/3/issue/KEY-1/attachments",
        "multipart/form-data; boundary=abc",
        b"--abc--\r\n",
    )

    assert prepared.headers["Content-Type"] == "multipart/form-data; boundary=abc"
    assert prepared.headers["Accept"] == "application/json"
    assert prepared.headers["X-Atlassian-Token"] == "no-check"
    assert prepared.headers["Authorization"].startswith("Basic ")


def test_missing_context_is_rejected(client, recorder):
    with pytest.raises(MissingContextError):
        client.new_request(None, "GET", "rest/api/3/myself")

    assert recorder.requests == []


@pytest.mark.parametrize("path", ["rest/api/3/my\nself", "rest/api/3/search?jql=%zz", "rest/\x7fapi"])
def test_invalid_paths_are_rejected(client, recorder, path):
    with pytest.raises(InvalidPathError) as exc:
        client.new_request(Context.background(), "GET", path)

    assert isinstance(exc.value, RequestConstructionError)
    assert exc.value.path == path
    assert recorder.requests == []


@pytest.mark.parametrize("site", ["x.atlassian.net", "", "https://"])
def test_invalid_site_is_rejected(http, site):
    with pytest.raises(ConfigurationError):
        Client(site, http=http)


def test_deadline_becomes_request_timeout(client):
    prepared = client.new_request(Context.with_timeout(5), "GET", "rest/api/3/myself")

    timeout = prepared.request.extensions["timeout"]
    assert 0 < timeout["read"] <= 5
