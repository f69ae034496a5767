import asyncio
import json

import httpx
import pytest
from tenacity import wait_none

from bigo.prompts import SYSTEM_PROMPT
from providers.groq_provider import (
    GroqAPIError,
    GroqProvider,
    MalformedResponseError,
    ProviderUnavailableError,
)


CODE = "for i in range(n):\n    print(i)"


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class Recorder:
    """Mock transport handler replaying canned responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        return self.responses.pop(0)


def run(handler, code=CODE):
    provider = GroqProvider(api_key="gsk-test", model="test-model", transport=httpx.MockTransport(handler))

    async def go():
        async with provider:
            return await provider.analyze(code)

    return asyncio.run(go())


@pytest.fixture(autouse=True)
def no_backoff(monkeypatch):
    monkeypatch.setattr(GroqProvider, "RATE_LIMIT_BACKOFF_SECONDS", 0)
    monkeypatch.setattr(GroqProvider._make_request.retry, "wait", wait_none())


def test_successful_analysis_and_request_shape():
    answer = {"notation": "O(n)", "explanation": "One loop", "steps": ["Loop runs n times"]}
    handler = Recorder(httpx.Response(200, json=completion(json.dumps(answer))))

    verdict = run(handler)

    assert verdict.notation == "O(n)"
    assert verdict.steps == ["Loop runs n times"]
    request = handler.requests[0]
    assert request.headers["Authorization"] == "Bearer gsk-test"
    payload = json.loads(request.content)
    assert payload["model"] == "test-model"
    assert payload["response_format"] == {"type": "json_object"}
    assert payload["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert CODE in payload["messages"][1]["content"]


def test_json_embedded_in_text():
    content = 'Sure: {"notation": "O(log n)", "explanation": "halving", "steps": []} done'
    verdict = run(Recorder(httpx.Response(200, json=completion(content))))
    assert verdict.notation == "O(log n)"


def test_malformed_reply_falls_back_to_notation():
    verdict = run(Recorder(httpx.Response(200, json=completion("It is O(n²) because of nesting"))))
    assert verdict.notation == "O(n²)"
    assert verdict.explanation == "Parsed from malformed response"
    assert verdict.steps == ["Could not parse full response"]


def test_malformed_reply_without_notation():
    with pytest.raises(MalformedResponseError):
        run(Recorder(httpx.Response(200, json=completion("no idea"))))


def test_missing_notation():
    with pytest.raises(GroqAPIError, match="Missing 'notation'"):
        run(Recorder(httpx.Response(200, json=completion('{"explanation": "x"}'))))


def test_empty_reply():
    with pytest.raises(GroqAPIError, match="No response"):
        run(Recorder(httpx.Response(200, json=completion(""))))


def test_invalid_api_key():
    with pytest.raises(GroqAPIError) as excinfo:
        run(Recorder(httpx.Response(401, json={"error": {"message": "bad key"}})))
    assert excinfo.value.status_code == 401
    assert "Invalid API key" in excinfo.value.message


def test_rate_limit_is_retried_once():
    answer = json.dumps({"notation": "O(1)", "explanation": "constant", "steps": []})
    handler = Recorder(httpx.Response(429), httpx.Response(200, json=completion(answer)))
    assert run(handler).notation == "O(1)"
    assert len(handler.requests) == 2


def test_rate_limit_exceeded():
    handler = Recorder(httpx.Response(429), httpx.Response(429))
    with pytest.raises(GroqAPIError) as excinfo:
        run(handler)
    assert excinfo.value.status_code == 429
    assert len(handler.requests) == 2


def test_other_api_error_uses_detail():
    with pytest.raises(GroqAPIError, match=r"API error \(500\): boom"):
        run(Recorder(httpx.Response(500, json={"error": {"message": "boom"}})))


@pytest.mark.parametrize("key", ["", "   "])
def test_missing_key_is_unavailable(key):
    with pytest.raises(ProviderUnavailableError):
        GroqProvider(api_key=key)


def test_empty_code_is_rejected():
    with pytest.raises(ValueError):
        run(Recorder(), code="  ")


def test_unreachable_service_after_retries():
    attempts = []

    def refuse(request):
        attempts.append(request)
        raise httpx.ConnectError("Connection refused", request=request)

    with pytest.raises(GroqAPIError) as excinfo:
        run(refuse)
    assert excinfo.value.status_code == 502
    assert excinfo.value.message.startswith("Network error: could not connect to the AI service")
    assert len(attempts) == 3
