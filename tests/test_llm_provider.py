"""Tests for the OpenAI compatible rewrite provider."""

import json

import httpx
import pytest

from blogsmith.errors import (
    EmptyResultError,
    PaymentRequiredError,
    ProviderFailure,
    RateLimitedError,
    TransportError,
)
from blogsmith.generation import MockLLMProvider, OpenAIProvider

BASE_URL = "https://llm.test/v1"


def completion(content):
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 0,
        "model": "test-model",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


def make_provider(handler):
    return OpenAIProvider(
        api_key="test-key",
        model="test-model",
        base_url=BASE_URL,
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def test_rewrite_sends_system_and_user_messages():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=completion("  Rewritten article  "))

    provider = make_provider(handler)
    text = provider.rewrite("be an editor", "the article")

    assert text == "Rewritten article"
    assert str(requests[0].url) == f"{BASE_URL}/chat/completions"
    body = json.loads(requests[0].content)
    assert body["model"] == "test-model"
    assert body["messages"] == [
        {"role": "system", "content": "be an editor"},
        {"role": "user", "content": "the article"},
    ]
    assert provider.get_usage_stats()["total_tokens"] == 15


@pytest.mark.parametrize(
    "status, error_type",
    [(429, RateLimitedError), (402, PaymentRequiredError), (503, ProviderFailure)],
)
def test_status_errors_are_typed_and_not_retried(status, error_type):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(status, json={"error": {"message": "nope"}})

    with pytest.raises(error_type):
        make_provider(handler).rewrite("s", "u")
    assert len(calls) == 1


def test_gateway_error_message_names_status():
    def handler(request):
        return httpx.Response(500, json={"error": {"message": "boom"}})

    with pytest.raises(ProviderFailure, match="AI gateway error: 500"):
        make_provider(handler).rewrite("s", "u")


def test_user_facing_quota_messages():
    assert str(RateLimitedError()) == "Rate limit exceeded. Please try again later."
    assert str(PaymentRequiredError()) == "Payment required. Please add credits to your workspace."


def test_empty_content_is_an_empty_result():
    def handler(request):
        return httpx.Response(200, json=completion(""))

    with pytest.raises(EmptyResultError, match="No enhanced content generated"):
        make_provider(handler).rewrite("s", "u")


def test_connection_failure_is_a_transport_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(TransportError):
        make_provider(handler).rewrite("s", "u")


def test_mock_provider_records_calls():
    provider = MockLLMProvider()

    text = provider.rewrite("system", "Title: Hello\nbody")

    assert "Title: Hello" in text
    assert provider.calls == [("system", "Title: Hello\nbody")]
    assert provider.get_usage_stats()["api_calls"] == 1


def test_close_releases_http_client():
    http_client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=completion("x"))))
    provider = OpenAIProvider(api_key="test-key", model="test-model", base_url=BASE_URL, http_client=http_client)

    provider.close()

    assert http_client.is_closed
