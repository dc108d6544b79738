import httpx
import pytest

from chat_gateway.domain.exceptions import BackendError, MissingCredentialError, TransportError
from chat_gateway.domain.models import ChatMessage, ContextCounts
from chat_gateway.providers.openai_client import OpenAIClient, OpenAICompatibleClient


class SettingsStub:
    http_timeout = 1.0
    openai_base_url = "https://api.openai.com/v1"


CONVERSATION = [
    ChatMessage(role="system", content="sys"),
    ChatMessage(role="user", content="hi"),
]


def _fake_client(resp, captured=None):
    class Client:
        def __init__(self, *a, **kw):
            if captured is not None:
                captured["client_kwargs"] = kw

        def __enter__(self):
            return self

        def __exit__(self, *a):
            return False

        def post(self, url, json=None, headers=None):
            if captured is not None:
                captured["url"] = url
                captured["json"] = json
                captured["headers"] = headers
            return resp

    return Client


class Resp:
    def __init__(self, status_code=200, data=None, text=""):
        self.status_code = status_code
        self._data = data
        self.text = text

    def json(self):
        if self._data is None:
            raise ValueError("not json")
        return self._data


def test_openai_client_request_shape(monkeypatch):
    captured = {}
    resp = Resp(data={"choices": [{"message": {"role": "assistant", "content": "ok"}}]})
    monkeypatch.setattr("httpx.Client", _fake_client(resp, captured))

    text = OpenAIClient(SettingsStub()).complete(CONVERSATION, "sk-test", ContextCounts())

    assert text == "ok"
    assert captured["url"] == "https://api.openai.com/v1/chat/completions"
    assert captured["headers"]["Authorization"] == "Bearer sk-test"
    assert captured["json"] == {
        "model": "gpt-3.5-turbo",
        "messages": [{"role": "system", "content": "sys"}, {"role": "user", "content": "hi"}],
        "max_tokens": 1000,
        "temperature": 0.7,
    }
    assert captured["client_kwargs"]["timeout"] == 1.0


def test_openai_client_missing_credential_makes_no_call(monkeypatch):
    class Client:
        def __init__(self, *a, **kw):
            raise AssertionError("no outbound call expected")

    monkeypatch.setattr("httpx.Client", Client)
    with pytest.raises(MissingCredentialError) as exc:
        OpenAIClient(SettingsStub()).complete(CONVERSATION, None, ContextCounts())
    assert exc.value.code == "MISSING_CREDENTIAL"

    with pytest.raises(MissingCredentialError):
        OpenAIClient(SettingsStub()).complete(CONVERSATION, "", ContextCounts())


def test_openai_client_error_carries_json_payload(monkeypatch):
    error_body = {"error": {"message": "Incorrect API key", "type": "invalid_request_error"}}
    monkeypatch.setattr("httpx.Client", _fake_client(Resp(status_code=401, data=error_body)))

    with pytest.raises(BackendError) as exc:
        OpenAIClient(SettingsStub()).complete(CONVERSATION, "sk-bad", ContextCounts())
    assert exc.value.code == "BACKEND_ERROR"
    assert exc.value.extra["payload"] == error_body
    assert exc.value.extra["status_code"] == 401
    assert "Incorrect API key" in exc.value.message


@pytest.mark.parametrize(
    "data",
    [
        {"choices": []},
        {"choices": [{"message": {}}]},
        {"choices": [{"message": {"content": None}}]},
        {},
    ],
)
def test_openai_client_missing_content_yields_empty(monkeypatch, data):
    monkeypatch.setattr("httpx.Client", _fake_client(Resp(data=data)))
    assert OpenAIClient(SettingsStub()).complete(CONVERSATION, "sk", ContextCounts()) == ""


def test_openai_client_non_json_success_body(monkeypatch):
    monkeypatch.setattr("httpx.Client", _fake_client(Resp(status_code=200, data=None, text="<html>")))
    with pytest.raises(BackendError) as exc:
        OpenAIClient(SettingsStub()).complete(CONVERSATION, "sk", ContextCounts())
    assert exc.value.code == "INVALID_RESPONSE"


def test_openai_client_transport_failure(monkeypatch):
    class Client:
        def __init__(self, *a, **kw):
            pass

        def __enter__(self):
            return self

        def __exit__(self, *a):
            return False

        def post(self, *a, **kw):
            raise httpx.ConnectError("connection refused")

    monkeypatch.setattr("httpx.Client", Client)
    with pytest.raises(TransportError) as exc:
        OpenAIClient(SettingsStub()).complete(CONVERSATION, "sk", ContextCounts())
    assert exc.value.code == "TRANSPORT_FAILURE"
    assert "connection refused" in exc.value.message


@pytest.mark.parametrize("status", [101, 302, 304])
def test_openai_client_non_2xx_status_is_backend_error(monkeypatch, status):
    monkeypatch.setattr("httpx.Client", _fake_client(Resp(status_code=status, data={"error": "moved"})))
    with pytest.raises(BackendError) as exc:
        OpenAIClient(SettingsStub()).complete(CONVERSATION, "sk", ContextCounts())
    assert exc.value.code == "BACKEND_ERROR"
    assert exc.value.extra["status_code"] == status


def test_compatible_client_without_credential_requirement(monkeypatch):
    class SelfHostedClient(OpenAICompatibleClient):
        name = "self-hosted"
        requires_credential = False

    captured = {}
    resp = Resp(data={"choices": [{"message": {"content": "hello"}}]})
    monkeypatch.setattr("httpx.Client", _fake_client(resp, captured))

    assert SelfHostedClient(SettingsStub()).complete(CONVERSATION, None, ContextCounts()) == "hello"
    assert "Authorization" not in captured["headers"]
    assert OpenAIClient.requires_credential is True
