# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from tivesender.config import SenderSettings
from tivesender.http import (
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    reachability_request,
    submission_request,
)


def _client(handler, **settings) -> HttpxClient:
    return HttpxClient(
        SenderSettings(**settings),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_httpx_client_returns_status_reason_and_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["user_agent"] = request.headers.get("user-agent")
        seen["auth"] = request.headers.get("authorization")
        seen["body"] = request.content
        return httpx.Response(201, json={"id": "r1"})

    client = _client(handler, user_agent="TestAgent/1.0")
    response = await client.request(submission_request("https://x/y", "abc", {"a": 1}))
    await client.aclose()

    assert response.ok is True
    assert response.is_success is True
    assert response.status_code == 201
    assert response.reason_phrase == "Created"
    assert response.json_body() == {"id": "r1"}
    assert response.meta["body_truncated"] is False
    assert seen == {"method": "POST", "user_agent": "TestAgent/1.0", "auth": "Bearer abc", "body": b'{"a": 1}'}


@pytest.mark.asyncio
async def test_httpx_client_error_status_is_still_a_response():
    client = _client(lambda request: httpx.Response(503, text="down"))
    response = await client.request(reachability_request("https://x/y"))

    assert response.ok is True
    assert response.is_success is False
    assert response.status_code == 503
    assert response.reason_phrase == "Service Unavailable"
    assert response.json_body() == {}


@pytest.mark.asyncio
async def test_httpx_client_converts_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("All connection attempts failed", request=request)

    client = _client(handler)
    response = await client.request(HttpRequest(url="https://x/y"))

    assert response.ok is False
    assert response.status_code is None
    assert response.error_message == "All connection attempts failed"
    assert response.error_type == "ConnectError"
    assert response.meta["error_category"] == "CONNECTION_ERROR"


@pytest.mark.asyncio
async def test_httpx_client_caps_body_size():
    client = _client(lambda request: httpx.Response(200, content=b"x" * 100), max_body_bytes=10)
    response = await client.request(HttpRequest(url="https://x/y"))

    assert response.content == b"x" * 10
    assert response.meta["body_truncated"] is True


def test_json_body_only_accepts_objects():
    assert HttpResponse(ok=True, status_code=200, text='{"service": "ingest"}').json_body() == {"service": "ingest"}
    assert HttpResponse(ok=True, status_code=200, text="[1, 2]").json_body() == {}
    assert HttpResponse(ok=True, status_code=200, text="<html>").json_body() == {}
    assert HttpResponse(ok=False).json_body() == {}


def test_request_builders_shape():
    post = submission_request("https://x/y", "key", {"DeviceId": "1"})
    assert post.method == "POST"
    assert post.headers == {"Content-Type": "application/json", "Authorization": "Bearer key"}
    assert post.body == '{"DeviceId": "1"}'

    get = reachability_request("https://x/y")
    assert get.method == "GET"
    assert get.headers == {"Content-Type": "application/json"}
    assert get.body is None


@pytest.mark.asyncio
async def test_stub_client_prefers_method_specific_responses():
    client = StubHttpClient()
    client.add("https://x/y", HttpResponse(ok=True, status_code=200))
    client.add("https://x/y", HttpResponse(ok=True, status_code=401), method="post")

    get = await client.request(HttpRequest(url="https://x/y"))
    post = await client.request(HttpRequest(url="https://x/y", method="POST"))
    missing = await client.request(HttpRequest(url="https://other"))

    assert get.status_code == 200
    assert post.status_code == 401
    assert missing.ok is False
    assert len(client.requests) == 3


def test_json_value_keeps_any_parsed_value():
    assert HttpResponse(ok=True, status_code=200, text='[{"id": "r1"}]').json_value() == [{"id": "r1"}]
    assert HttpResponse(ok=True, status_code=200, text="42").json_value() == 42
    assert HttpResponse(ok=True, status_code=200, text="<html>").json_value() == {}
    assert HttpResponse(ok=True, status_code=200, text="").json_value() == {}
