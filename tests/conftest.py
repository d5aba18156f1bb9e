"""Shared fixtures."""

from typing import Any, Dict, List, Optional

import pytest


class FakeSearchProvider:
    """Stands in for AnthropicSearchProvider and records each call."""

    def __init__(self, content: Optional[List[Any]] = None, error: Optional[Exception] = None):
        self.content = content if content is not None else [{"type": "text", "text": "Hello"}]
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def search(self, query: str, search_tool: Dict[str, Any]) -> List[Any]:
        self.calls.append({"query": query, "search_tool": search_tool})
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def fake_provider():
    """Provider returning a single text block."""
    return FakeSearchProvider()


@pytest.fixture
def search_reply():
    """A reply with narrative text followed by one search result block."""
    return [
        {"type": "text", "text": "Hello"},
        {
            "type": "web_search_tool_result",
            "tool_use_id": "srvtoolu_01",
            "content": [
                {
                    "type": "web_search_result",
                    "title": "Example",
                    "url": "http://e.com",
                    "page_age": "2024-01-01",
                    "encrypted_content": "abc",
                }
            ],
        },
    ]


@pytest.fixture
def make_provider():
    """Factory for providers with a custom reply or failure."""
    return FakeSearchProvider
