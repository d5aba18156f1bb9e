"""STDIO transport for MCP servers."""

import asyncio
import json
import sys
from typing import Optional, TextIO

from claude_search_mcp.mcp.server.base import MCPServerBase
from claude_search_mcp.utils.logger import logger


class TransportError(RuntimeError):
    """Raised when the STDIO transport cannot be established."""


class StdioMCPServer:
    """MCP server using STDIO transport."""

    def __init__(
        self,
        server: MCPServerBase,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.server = server
        self.stdin = stdin
        self.stdout = stdout

    def bind(self):
        """Attach to stdin/stdout, failing fast if either is unusable."""
        stdin = self.stdin if self.stdin is not None else sys.stdin
        stdout = self.stdout if self.stdout is not None else sys.stdout

        if stdin is None or getattr(stdin, "closed", False):
            raise TransportError("stdin is not available")
        if stdout is None or getattr(stdout, "closed", False):
            raise TransportError("stdout is not available")

        self.stdin = stdin
        self.stdout = stdout

    async def start(self):
        """Start the STDIO server and serve until stdin reaches EOF.

        Raises:
            TransportError: if the transport cannot be bound
        """
        self.bind()
        logger.info(f"Starting MCP STDIO server: {self.server.name}")

        try:
            # Read from stdin, write to stdout
            while True:
                line = await self._read_line()
                if line is None:
                    break
                if not line:
                    continue

                try:
                    request = json.loads(line)
                except json.JSONDecodeError as e:
                    logger.error(f"Invalid JSON received: {e}")
                    await self._write_response(
                        {
                            "jsonrpc": "2.0",
                            "id": None,
                            "error": {
                                "code": -32700,
                                "message": "Parse error",
                            },
                        }
                    )
                    continue

                if not isinstance(request, dict):
                    logger.error(f"Invalid request received: {request!r}")
                    await self._write_response(
                        {
                            "jsonrpc": "2.0",
                            "id": None,
                            "error": {
                                "code": -32600,
                                "message": "Invalid Request",
                            },
                        }
                    )
                    continue

                response = await self.server.handle_request(request)
                if response is not None:
                    await self._write_response(response)
        finally:
            logger.info(f"MCP STDIO server stopped: {self.server.name}")

    async def _read_line(self) -> Optional[str]:
        """Read a line from stdin asynchronously.

        Returns None at EOF and an empty string for blank lines.
        """
        loop = asyncio.get_running_loop()
        line = await loop.run_in_executor(None, self.stdin.readline)
        return line.strip() if line else None

    async def _write_response(self, response: dict):
        """Write a response to stdout."""
        try:
            json_str = json.dumps(response)
            self.stdout.write(json_str + "\n")
            self.stdout.flush()
        except (TypeError, ValueError) as e:
            logger.error(f"Error writing to stdout: {e}")
