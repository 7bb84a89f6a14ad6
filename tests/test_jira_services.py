"""Servicios de Jira Platform sobre un transporte simulado."""

from __future__ import annotations

import pytest

from atlassian_rest import Context, JiraClient
from atlassian_rest.core.domain.jira import CommentPayloadScheme, CommentVisibilityScheme
from atlassian_rest.core.errors import PreconditionError, UnexpectedStatusError
from conftest import SITE


@pytest.fixture
def jira(http, auth) -> JiraClient:
    return JiraClient(SITE, http=http, auth=auth)


def test_services_share_the_client_version(jira):
    assert jira.api_version == "3"
    assert jira.myself.version == "3"
    assert jira.issue.comment.version == "3"


def test_myself_without_expand(jira, recorder):
    recorder.reply(200, json_body={"accountId": "abc", "self": "https://x/rest/api/3/user?accountId=abc"})

    user, _ = jira.myself.details(Context.background())

    assert str(recorder.last.url) == "https://x.atlassian.net/rest/api/3/myself"
    assert user.self_url.endswith("accountId=abc")


def test_server_info(jira, recorder):
    recorder.reply(200, json_body={"baseUrl": SITE, "versionNumbers": [1001, 0, 0], "deploymentType": "Cloud"})

    info, response = jira.server.info(Context.background())

    assert response.endpoint == "https://x.atlassian.net/rest/api/3/serverInfo"
    assert info.deployment_type == "Cloud"
    assert info.version_numbers == [1001, 0, 0]


def test_labels_query_is_sorted(jira, recorder):
    recorder.reply(200, json_body={"maxResults": 10, "startAt": 20, "total": 2, "isLast": True, "values": ["a", "b"]})

    labels, _ = jira.label.gets(Context.background(), start_at=20, max_results=10)

    assert str(recorder.last.url) == "https://x.atlassian.net/rest/api/3/label?maxResults=10&startAt=20"
    assert labels.values == ["a", "b"]
    assert labels.is_last


def test_resolutions_decode_as_list(jira, recorder):
    recorder.reply(200, json_body=[{"id": "1", "name": "Done"}, {"id": "2", "name": "Won't Do"}])

    resolutions, _ = jira.resolution.gets(Context.background())

    assert [r.name for r in resolutions] == ["Done", "Won't Do"]


def test_resolution_requires_id(jira, recorder):
    with pytest.raises(PreconditionError):
        jira.resolution.get(Context.background(), "")

    assert recorder.requests == []


def test_comments_page(jira, recorder):
    recorder.reply(
        200,
        json_body={
            "startAt": 0,
            "maxResults": 50,
            "total": 1,
            "comments": [{"id": "10", "author": {"accountId": "abc"}, "body": {"type": "doc", "version": 1}}],
        },
    )

    page, _ = jira.issue.comment.gets(Context.background(), "KEY-1", order_by="created", expand=["renderedBody"])

    assert str(recorder.last.url) == (
        "https://x.atlassian.net/rest/api/3/issue/KEY-1/comment"
        "?expand=renderedBody&maxResults=50&orderBy=created&startAt=0"
    )
    assert page.comments[0].author.account_id == "abc"
    assert page.comments[0].body == {"type": "doc", "version": 1}


def test_add_comment_sends_json_payload(jira, recorder):
    recorder.reply(201, json_body={"id": "11"})
    payload = CommentPayloadScheme(
        body={"type": "doc", "version": 1, "content": []},
        visibility=CommentVisibilityScheme(type="role", value="Administrators"),
    )

    comment, response = jira.issue.comment.add(Context.background(), "KEY-1", payload)

    sent = recorder.last
    assert sent.method == "POST"
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.content == (
        b'{"body":{"type":"doc","version":1,"content":[]},'
        b'"visibility":{"type":"role","value":"Administrators"}}'
    )
    assert comment.id == "11"
    assert response.code == 201


def test_delete_comment_returns_envelope(jira, recorder):
    recorder.reply(204)

    response = jira.issue.comment.delete(Context.background(), "KEY-1", "10")

    assert response.code == 204
    assert response.method == "DELETE"
    assert str(recorder.last.url).endswith("/rest/api/3/issue/KEY-1/comment/10")


@pytest.mark.parametrize(("key", "comment_id"), [("", "10"), ("KEY-1", "")])
def test_comment_preconditions(jira, recorder, key, comment_id):
    with pytest.raises(PreconditionError):
        jira.issue.comment.get(Context.background(), key, comment_id)

    assert recorder.requests == []


def test_attachment_upload_is_multipart(jira, recorder):
    recorder.reply(200, json_body=[{"id": "100", "filename": "log.txt", "size": 5}])

    attachments, _ = jira.issue.attachment.add(Context.background(), "KEY-1", "log.txt", b"hello")

    sent = recorder.last
    assert str(sent.url) == "https://x.atlassian.net/rest/api/3/issue/KEY-1/attachments"
    assert sent.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    assert sent.headers["X-Atlassian-Token"] == "no-check"
    assert b'filename="log.txt"' in sent.content
    assert attachments[0].filename == "log.txt"


@pytest.mark.parametrize(("key", "name", "file"), [("", "a", b"x"), ("K-1", "", b"x"), ("K-1", "a", None)])
def test_attachment_preconditions(jira, recorder, key, name, file):
    with pytest.raises(PreconditionError):
        jira.issue.attachment.add(Context.background(), key, name, file)

    assert recorder.requests == []


def test_service_surfaces_error_envelope(jira, recorder):
    recorder.reply(404, json_body={"errorMessages": ["Issue does not exist"]})

    with pytest.raises(UnexpectedStatusError) as exc:
        jira.issue.comment.get(Context.background(), "KEY-404", "1")

    assert exc.value.response.json()["errorMessages"] == ["Issue does not exist"]
