"""Base MCP server class following Model Context Protocol specification."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from claude_search_mcp.tools.base import ToolResult
from claude_search_mcp.utils.logger import logger

PROTOCOL_VERSION = "2024-11-05"


class MCPTool:
    """Represents an MCP tool definition."""

    def __init__(
        self,
        name: str,
        description: str,
        input_schema: Dict[str, Any],
    ):
        self.name = name
        self.description = description
        self.input_schema = input_schema

    def to_dict(self) -> Dict[str, Any]:
        """Convert to MCP tool format."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


class MCPServerBase(ABC):
    """Base class for MCP servers."""

    def __init__(self, name: str, version: str = "1.0.0"):
        self.name = name
        self.version = version
        self.tools: Dict[str, MCPTool] = {}

    def register_tool(self, tool: MCPTool):
        """Register a tool with this server."""
        self.tools[tool.name] = tool
        logger.info(f"MCP Server '{self.name}' registered tool: {tool.name}")

    @abstractmethod
    async def execute_tool(self, tool_name: str, arguments: Any) -> ToolResult:
        """
        Execute a tool with given arguments.

        Returns:
            ToolResult; request-level failures are error results, not exceptions
        """
        pass

    async def handle_request(self, request: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Handle an MCP protocol request.

        Returns None for notifications, which get no response.
        """
        method = request.get("method")
        params = request.get("params") or {}
        request_id = request.get("id")

        if "id" not in request:
            logger.debug(f"Received notification: {method}")
            return None

        try:
            if method == "initialize":
                return await self._handle_initialize(request_id, params)
            elif method == "ping":
                return self._result_response(request_id, {})
            elif method == "tools/list":
                return await self._handle_list_tools(request_id)
            elif method == "tools/call":
                return await self._handle_call_tool(request_id, params)
            else:
                return self._error_response(
                    request_id, -32601, f"Method not found: {method}"
                )
        except Exception as e:
            logger.error(f"Error handling request: {e}")
            return self._error_response(request_id, -32603, str(e))

    async def _handle_initialize(self, request_id: Any, params: Dict[str, Any]) -> Dict[str, Any]:
        """Handle initialize request."""
        client_info = params.get("clientInfo") or {}
        logger.info(f"Initializing session for client: {client_info.get('name', 'unknown')}")
        return self._result_response(
            request_id,
            {
                "protocolVersion": PROTOCOL_VERSION,
                "serverInfo": {
                    "name": self.name,
                    "version": self.version,
                },
                "capabilities": {
                    "tools": {},
                },
            },
        )

    async def _handle_list_tools(self, request_id: Any) -> Dict[str, Any]:
        """Handle tools/list request."""
        tools_list = [tool.to_dict() for tool in self.tools.values()]
        return self._result_response(request_id, {"tools": tools_list})

    async def _handle_call_tool(self, request_id: Any, params: Dict[str, Any]) -> Dict[str, Any]:
        """Handle tools/call request.

        Unknown tools and bad arguments are reported inside the result with
        ``isError`` set, not as JSON-RPC errors.
        """
        tool_name = params.get("name")
        arguments = params.get("arguments")

        result = await self.execute_tool(tool_name, arguments)
        return self._result_response(request_id, result.to_dict())

    def _result_response(self, request_id: Any, result: Dict[str, Any]) -> Dict[str, Any]:
        """Create a success response."""
        return {
            "jsonrpc": "2.0",
            "id": request_id,
            "result": result,
        }

    def _error_response(self, request_id: Any, code: int, message: str) -> Dict[str, Any]:
        """Create an error response."""
        return {
            "jsonrpc": "2.0",
            "id": request_id,
            "error": {
                "code": code,
                "message": message,
            },
        }
