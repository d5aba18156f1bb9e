"""Render Claude's web search reply as Markdown text."""

from typing import Any, Iterable

from claude_search_mcp.utils.logger import logger

SEARCH_RESULTS_HEADER = "### Search Results\n\n"


def _field(block: Any, name: str, default: Any = None) -> Any:
    """Read a field from an SDK content block or a plain dict."""
    if isinstance(block, dict):
        return block.get(name, default)
    return getattr(block, name, default)


def format_search_response(content: Iterable[Any]) -> str:
    """
    Render the reply's content blocks into one string.

    Text blocks are kept in order, each followed by a blank line. Each web
    search tool result becomes a "### Search Results" section with one
    Markdown link per hit and its last-updated date. Other block types are
    skipped.
    """
    results = ""

    for item in content:
        block_type = _field(item, "type")

        if block_type == "text":
            results += f"{_field(item, 'text', '')}\n\n"
        elif block_type == "web_search_tool_result":
            hits = _field(item, "content")
            if not isinstance(hits, list):
                # Error payloads (e.g. max_uses_exceeded) carry an object here
                logger.debug(f"Skipping web search tool result without hits: {hits!r}")
                continue

            results += SEARCH_RESULTS_HEADER
            for hit in hits:
                if _field(hit, "type") != "web_search_result":
                    continue
                results += f"- [{_field(hit, 'title')}]({_field(hit, 'url')})\n"
                results += f"  Last updated: {_field(hit, 'page_age') or 'Unknown'}\n\n"
        else:
            logger.debug(f"Skipping unrecognized content block type: {block_type}")

    return results.strip()
