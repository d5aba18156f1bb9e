"""Tests for AnthropicSearchProvider."""

from types import SimpleNamespace

import pytest
from anthropic import AsyncAnthropic

from claude_search_mcp.core.llm_provider import AnthropicSearchProvider


class FakeMessages:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def fake_client(**kwargs):
    return SimpleNamespace(messages=FakeMessages(**kwargs))


SEARCH_TOOL = {"type": "web_search_20250305", "name": "web_search", "max_uses": 5}


@pytest.mark.asyncio
async def test_search_request_shape():
    """Test the Messages API call carries the query and the search tool."""
    client = fake_client(response=SimpleNamespace(content=[{"type": "text", "text": "Hi"}]))
    provider = AnthropicSearchProvider(client=client)

    content = await provider.search("latest python release", SEARCH_TOOL)

    assert content == [{"type": "text", "text": "Hi"}]
    assert client.messages.calls == [
        {
            "model": "claude-3-7-sonnet-latest",
            "max_tokens": 1024,
            "messages": [{"role": "user", "content": "latest python release"}],
            "tools": [SEARCH_TOOL],
        }
    ]


@pytest.mark.asyncio
async def test_search_custom_model():
    """Test model and token budget come from the constructor."""
    client = fake_client(response=SimpleNamespace(content=[]))
    provider = AnthropicSearchProvider(model="claude-sonnet-4-0", max_tokens=2048, client=client)

    await provider.search("q", SEARCH_TOOL)

    call = client.messages.calls[0]
    assert call["model"] == "claude-sonnet-4-0"
    assert call["max_tokens"] == 2048


@pytest.mark.asyncio
async def test_search_propagates_errors():
    """Test client failures reach the caller unchanged."""
    provider = AnthropicSearchProvider(client=fake_client(error=ConnectionError("boom")))

    with pytest.raises(ConnectionError, match="boom"):
        await provider.search("q", SEARCH_TOOL)


def test_default_client_without_retries():
    """Test the default client is built from the API key with retries disabled."""
    provider = AnthropicSearchProvider(api_key="sk-test")

    assert isinstance(provider.client, AsyncAnthropic)
    assert provider.client.api_key == "sk-test"
    assert provider.client.max_retries == 0


def test_default_client_without_key():
    """Test a missing key still builds a client."""
    provider = AnthropicSearchProvider(api_key=None)
    assert provider.client.api_key == ""
