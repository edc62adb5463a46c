from __future__ import annotations

import pytest

from provider_gateway.base.errors import (
    InvalidCustomUrlError,
    InvalidMessageError,
    InvalidProviderError,
    MissingCredentialError,
    MissingMessagesError,
    MissingModelError,
    SchemaRequiredError,
)
from provider_gateway.base.models import ChatRequest, Message, Provider
from provider_gateway.base.validation import is_absolute_url, validate_request


def test_valid_request_passes(request_factory):
    validate_request(request_factory())


@pytest.mark.parametrize("provider", [None, "", "anthropic", "ollamaX"])
def test_unknown_provider_rejected(request_factory, provider):
    with pytest.raises(InvalidProviderError) as ei:
        validate_request(request_factory(provider=provider))
    assert str(ei.value) == "Invalid or unsupported provider"  # nosec B101


def test_provider_match_is_case_insensitive(request_factory):
    validate_request(request_factory(provider="GeMiNi"))


def test_missing_key_reported_before_missing_model(request_factory):
    with pytest.raises(MissingCredentialError):
        validate_request(request_factory(api_key=None, model_id=None))


def test_missing_model(request_factory):
    with pytest.raises(MissingModelError) as ei:
        validate_request(request_factory(model_id=""))
    assert ei.value.message == "Model ID is required"  # nosec B101


def test_missing_messages(request_factory):
    with pytest.raises(MissingMessagesError):
        validate_request(request_factory(messages=[]))


def test_first_invalid_message_wins(request_factory):
    msgs = [
        Message(role="user", content="ok"),
        Message(role="tool", content="x"),  # type: ignore[arg-type]
        Message(role="user", content=""),
    ]
    with pytest.raises(InvalidMessageError) as ei:
        validate_request(request_factory(messages=msgs))
    assert ei.value.index == 1  # nosec B101
    assert ei.value.message == "Invalid message role"  # nosec B101


def test_empty_content_rejected(request_factory):
    with pytest.raises(InvalidMessageError) as ei:
        validate_request(request_factory(messages=[Message(role="system", content="")]))
    assert ei.value.message == "Message content is required"  # nosec B101
    assert ei.value.index == 0  # nosec B101


@pytest.mark.parametrize("content", [123, ["Hello"], {"text": "Hello"}])
def test_non_text_content_rejected(content):
    request = ChatRequest.from_dict(
        {
            "provider": "openai",
            "apiKey": "k-123",
            "modelId": "m-1",
            "messages": [{"role": "user", "content": "ok"}, {"role": "user", "content": content}],
        }
    )
    with pytest.raises(InvalidMessageError) as ei:
        validate_request(request)
    assert ei.value.index == 1  # nosec B101
    assert ei.value.message == "Message content is required"  # nosec B101


@pytest.mark.parametrize("provider", Provider.names())
def test_json_without_schema_fails_for_every_provider(request_factory, provider):
    with pytest.raises(SchemaRequiredError) as ei:
        validate_request(request_factory(provider=provider, response_type="json"))
    assert ei.value.message == "Response schema required for JSON response type"  # nosec B101


def test_schema_checked_before_custom_url(request_factory):
    with pytest.raises(SchemaRequiredError):
        validate_request(request_factory(response_type="json", custom_url="not a url"))


@pytest.mark.parametrize("url", ["not a url", "/v1/chat", "localhost:11434"])
def test_relative_custom_url_rejected(request_factory, url):
    with pytest.raises(InvalidCustomUrlError) as ei:
        validate_request(request_factory(custom_url=url))
    assert ei.value.url == url  # nosec B101


def test_empty_custom_url_counts_as_absent(request_factory):
    validate_request(request_factory(custom_url=""))


def test_is_absolute_url():
    assert is_absolute_url("https://proxy.internal/v1/chat")  # nosec B101
    assert is_absolute_url("http://127.0.0.1:11434/api/chat")  # nosec B101
    assert not is_absolute_url("proxy.internal/v1")  # nosec B101
