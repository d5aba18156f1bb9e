"""Web search tool backed by Claude's built-in web search."""

from typing import Any, Dict, Optional

from claude_search_mcp.tools.base import BaseTool, ToolResult, ToolValidationError
from claude_search_mcp.tools.formatting import format_search_response
from claude_search_mcp.utils.config import settings
from claude_search_mcp.utils.logger import logger


class WebSearchTool(BaseTool):
    """Tool that forwards queries to Claude with the web search tool enabled."""

    def __init__(
        self,
        provider: Any,
        tool_type: Optional[str] = None,
        default_max_results: Optional[int] = None,
    ):
        super().__init__(
            name="web_search",
            description="Search the web for real-time information about any topic. Use this tool when you need up-to-date information that might not be available in your training data, or when you need to verify current facts.",
        )
        self.provider = provider
        self.tool_type = tool_type or settings.web_search_tool_type
        self.default_max_results = default_max_results or settings.default_max_results

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "The search query to look up on the web",
                },
                "maxResults": {
                    "type": "number",
                    "description": "Maximum number of search results to return (default: 5)",
                },
                "allowedDomains": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Only include results from these domains",
                },
                "blockedDomains": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Never include results from these domains",
                },
            },
            "required": ["query"],
        }

    def validate_input(self, arguments: Dict[str, Any]) -> None:
        query = arguments.get("query")
        if not query or not isinstance(query, str):
            raise ToolValidationError("Invalid query parameter")

    def build_search_tool(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Build the web search server tool definition sent to Claude."""
        max_results = arguments.get("maxResults")
        if max_results is None:
            max_results = self.default_max_results

        search_tool: Dict[str, Any] = {
            "type": self.tool_type,
            "name": "web_search",
            "max_uses": max_results,
        }

        # Empty lists mean "no filter" and are not forwarded
        allowed_domains = arguments.get("allowedDomains")
        if isinstance(allowed_domains, list) and allowed_domains:
            search_tool["allowed_domains"] = allowed_domains
            logger.info(f"Allowing domains: {allowed_domains}")

        blocked_domains = arguments.get("blockedDomains")
        if isinstance(blocked_domains, list) and blocked_domains:
            search_tool["blocked_domains"] = blocked_domains
            logger.info(f"Blocking domains: {blocked_domains}")

        return search_tool

    async def execute(self, arguments: Dict[str, Any]) -> ToolResult:
        """Execute web search through the provider."""
        query = arguments["query"]
        search_tool = self.build_search_tool(arguments)

        try:
            logger.info(f"Searching the web: '{query}'")
            content = await self.provider.search(query, search_tool)
            results = format_search_response(content)
        except Exception as e:
            logger.error(f"Error performing web search: {e}", exc_info=True)
            return ToolResult.error(f"Error performing web search: {e}")

        return ToolResult.success(results)
