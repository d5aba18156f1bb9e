"""Adapter that exposes a BaseTool implementation as an MCP server."""

from typing import Any, Optional

from claude_search_mcp.mcp.server.base import MCPServerBase, MCPTool
from claude_search_mcp.tools.base import BaseTool, ToolResult
from claude_search_mcp.utils.logger import logger


class ToolAdapter(MCPServerBase):
    """Adapter that wraps a BaseTool as an MCP server."""

    def __init__(self, tool: BaseTool, name: Optional[str] = None, version: str = "1.0.0"):
        super().__init__(name=name or f"{tool.name}_server", version=version)
        self.tool = tool

        descriptor = tool.describe()
        self.register_tool(
            MCPTool(
                name=descriptor["name"],
                description=descriptor["description"],
                input_schema=descriptor["inputSchema"],
            )
        )

    async def execute_tool(self, tool_name: str, arguments: Any) -> ToolResult:
        """Execute the wrapped tool."""
        if tool_name != self.tool.name:
            logger.error(f"Unknown tool requested: {tool_name}")
            return ToolResult.error(f"Unknown tool: {tool_name}")

        logger.info(f"Executing tool {tool_name} with arguments: {arguments}")
        return await self.tool.run(arguments)
