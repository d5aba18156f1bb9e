"""MCP server for the Claude web search tool."""

import asyncio
import os
import sys

from dotenv import load_dotenv

from claude_search_mcp.core.llm_provider import AnthropicSearchProvider
from claude_search_mcp.mcp.server.adapter import ToolAdapter
from claude_search_mcp.mcp.server.stdio_server import StdioMCPServer
from claude_search_mcp.tools.web_search import WebSearchTool
from claude_search_mcp.utils.config import Settings, load_claude_config, resolve_credential
from claude_search_mcp.utils.logger import logger

SERVER_NAME = "Claude Web Search"
SERVER_VERSION = "1.0.0"


def create_server(settings: Settings) -> ToolAdapter:
    """Wire the provider, tool and MCP adapter from settings."""
    api_key = resolve_credential(
        lambda: load_claude_config(settings.claude_config_path),
        # Settings already merges os.environ and .env for ANTHROPIC_API_KEY
        lambda name: os.environ.get(name) or settings.anthropic_api_key,
    )
    provider = AnthropicSearchProvider(
        api_key=api_key,
        model=settings.anthropic_model,
        max_tokens=settings.anthropic_max_tokens,
    )
    tool = WebSearchTool(
        provider,
        tool_type=settings.web_search_tool_type,
        default_max_results=settings.default_max_results,
    )
    return ToolAdapter(tool, name=SERVER_NAME, version=SERVER_VERSION)


async def main():
    """Run web search MCP server."""
    # Load .env file for environment variables (ANTHROPIC_API_KEY)
    load_dotenv()

    server = StdioMCPServer(create_server(Settings()))
    server.bind()
    logger.info("Claude Web Search MCP Server running on stdio")
    await server.start()


def run():
    """Console entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception(f"Fatal error running server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
