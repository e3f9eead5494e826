# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from tivesender.dispatch import Dispatcher, History
from tivesender.errors import ConfigurationError, ErrorCategory, PayloadParseError, RemoteRejection, TransportError
from tivesender.http import HttpRequest, HttpResponse, StubHttpClient
from tivesender.models import DispatchResult

ENDPOINT = "https://x/y"


def _dispatcher(response: HttpResponse, history: History | None = None) -> tuple[Dispatcher, StubHttpClient]:
    client = StubHttpClient()
    client.add(ENDPOINT, response, method="POST")
    return Dispatcher(client, history), client


@pytest.mark.asyncio
async def test_successful_dispatch_appends_one_history_entry():
    dispatcher, client = _dispatcher(HttpResponse(ok=True, status_code=201, reason_phrase="Created", text='{"id":"r1"}'))

    result = await dispatcher.dispatch(ENDPOINT, "abc", '{"a":1}')

    assert result.succeeded is True
    assert result.response_body == {"id": "r1"}
    assert result.request_body == {"a": 1}
    assert result.error_message is None
    assert result.error is None
    assert result.status_code == 201
    assert len(dispatcher.history) == 1
    assert dispatcher.history.latest is result

    (request,) = client.requests
    assert request.method == "POST"
    assert request.headers == {"Content-Type": "application/json", "Authorization": "Bearer abc"}
    assert json.loads(request.body) == {"a": 1}


@pytest.mark.asyncio
async def test_malformed_json_fails_before_any_request():
    dispatcher, client = _dispatcher(HttpResponse(ok=True, status_code=201))

    with pytest.raises(PayloadParseError, match="Invalid JSON payload"):
        await dispatcher.dispatch(ENDPOINT, "abc", "{'a': 1")

    assert client.requests == []
    assert len(dispatcher.history) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("endpoint, credential", [("", "abc"), (ENDPOINT, ""), (None, None)])
async def test_missing_configuration_fails_before_any_request(endpoint, credential):
    dispatcher, client = _dispatcher(HttpResponse(ok=True, status_code=201))

    with pytest.raises(ConfigurationError):
        await dispatcher.dispatch(endpoint, credential, '{"a":1}')
    with pytest.raises(ConfigurationError):
        await dispatcher.dispatch_record(endpoint, credential, {"a": 1})

    assert client.requests == []
    assert len(dispatcher.history) == 0


@pytest.mark.asyncio
async def test_rejection_uses_body_message():
    dispatcher, _ = _dispatcher(
        HttpResponse(ok=True, status_code=422, reason_phrase="Unprocessable Entity", text='{"message":"Invalid payload"}')
    )

    result = await dispatcher.dispatch(ENDPOINT, "abc", '{"a":1}')

    assert result.succeeded is False
    assert result.status_code == 422
    assert result.response_body == {"message": "Invalid payload"}
    assert result.error_message == "Invalid payload"
    assert isinstance(result.error, RemoteRejection)
    assert result.error.status_code == 422


@pytest.mark.asyncio
async def test_rejection_without_message_falls_back_to_status_line():
    dispatcher, _ = _dispatcher(
        HttpResponse(ok=True, status_code=500, reason_phrase="Internal Server Error", text="oops")
    )

    result = await dispatcher.dispatch(ENDPOINT, "abc", "[1, 2]")

    assert result.succeeded is False
    assert result.response_body == {}
    assert result.request_body == [1, 2]
    assert result.error_message == "Error: 500 Internal Server Error"


@pytest.mark.asyncio
async def test_transport_failure_has_no_response_body():
    dispatcher, _ = _dispatcher(
        HttpResponse(
            ok=False,
            error_message="All connection attempts failed",
            error_type="ConnectError",
            meta={"error_category": "CONNECTION_ERROR"},
        )
    )

    result = await dispatcher.dispatch(ENDPOINT, "abc", '{"a":1}')

    assert result.succeeded is False
    assert result.response_body is None
    assert result.status_code is None
    assert result.error_message == "All connection attempts failed"
    assert isinstance(result.error, TransportError)
    assert result.error.category == ErrorCategory.CONNECTION_ERROR
    assert len(dispatcher.history) == 1


@pytest.mark.asyncio
async def test_client_exceptions_are_captured():
    class ExplodingClient:
        async def request(self, request: HttpRequest) -> HttpResponse:  # noqa: ARG002
            raise ConnectionRefusedError("refused")

    dispatcher = Dispatcher(ExplodingClient())
    result = await dispatcher.dispatch(ENDPOINT, "abc", '{"a":1}')

    assert result.succeeded is False
    assert result.error_message == "refused"
    assert result.error.category == ErrorCategory.CONNECTION_ERROR
    assert len(dispatcher.history) == 1


@pytest.mark.asyncio
async def test_history_is_most_recent_first_and_bounded():
    history = History(limit=2)
    dispatcher, _ = _dispatcher(HttpResponse(ok=True, status_code=200, text="{}"), history)

    first = await dispatcher.dispatch(ENDPOINT, "abc", '{"n":1}')
    second = await dispatcher.dispatch(ENDPOINT, "abc", '{"n":2}')
    third = await dispatcher.dispatch(ENDPOINT, "abc", '{"n":3}')

    assert list(history) == [third, second]
    assert history[0] is third
    assert first not in list(history)
    assert first.request_body == {"n": 1}


def test_history_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        History(limit=0)


def test_dispatch_result_to_dict_omits_absent_fields():
    result = DispatchResult(succeeded=False, request_body={"a": 1}, error_message="boom")
    data = result.to_dict()
    assert data["succeeded"] is False
    assert data["error_message"] == "boom"
    assert "response_body" not in data
    assert data["issued_at"].endswith("+00:00")


@pytest.mark.asyncio
async def test_non_object_json_body_is_kept_verbatim():
    dispatcher, _ = _dispatcher(HttpResponse(ok=True, status_code=200, text='[{"id":"r1"}]'))

    result = await dispatcher.dispatch(ENDPOINT, "abc", '{"a":1}')

    assert result.succeeded is True
    assert result.response_body == [{"id": "r1"}]


@pytest.mark.asyncio
async def test_rejection_with_non_object_body_uses_status_line():
    dispatcher, _ = _dispatcher(HttpResponse(ok=True, status_code=400, reason_phrase="Bad Request", text='"nope"'))

    result = await dispatcher.dispatch(ENDPOINT, "abc", '{"a":1}')

    assert result.succeeded is False
    assert result.response_body == "nope"
    assert result.error_message == "Error: 400 Bad Request"
    assert result.error.body == {}
