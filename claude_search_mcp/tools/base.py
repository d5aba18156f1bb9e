"""Base tool interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field

from claude_search_mcp.utils.logger import logger


class ToolValidationError(ValueError):
    """Raised when tool arguments are rejected before execution."""


class TextContent(BaseModel):
    """MCP text content item."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Outcome of one tool invocation: success content or error content."""

    content: List[TextContent] = Field(..., description="Content items returned to the client")
    is_error: bool = Field(False, description="Whether the content describes a failure")

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(content=[TextContent(text=message)], is_error=True)

    @property
    def text(self) -> str:
        return "".join(item.text for item in self.content)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to MCP ``tools/call`` result format."""
        result: Dict[str, Any] = {"content": [item.model_dump() for item in self.content]}
        if self.is_error:
            result["isError"] = True
        return result


class BaseTool(ABC):
    """Abstract base class for all tools."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description

    @property
    @abstractmethod
    def input_schema(self) -> Dict[str, Any]:
        """Return JSON schema for tool inputs."""
        pass

    @abstractmethod
    def validate_input(self, arguments: Dict[str, Any]) -> None:
        """
        Check arguments before execution.

        Raises:
            ToolValidationError: with the message to return to the client
        """
        pass

    @abstractmethod
    async def execute(self, arguments: Dict[str, Any]) -> ToolResult:
        """Execute the tool with validated arguments."""
        pass

    def describe(self) -> Dict[str, Any]:
        """Tool descriptor as advertised by ``tools/list``."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }

    async def run(self, arguments: Any) -> ToolResult:
        """Run tool with validation and error handling.

        Never raises: every failure comes back as an error result.
        """
        if arguments is None or not isinstance(arguments, dict):
            logger.error(f"Tool {self.name} called without arguments")
            return ToolResult.error("No arguments provided")

        try:
            self.validate_input(arguments)
        except ToolValidationError as e:
            logger.error(f"Invalid input for tool {self.name}: {e}")
            return ToolResult.error(str(e))

        try:
            result = await self.execute(arguments)
        except Exception as e:
            logger.exception(f"Tool {self.name} raised exception: {e}")
            return ToolResult.error(f"Tool {self.name} failed: {e}")

        if result.is_error:
            logger.error(f"Tool {self.name} failed: {result.text}")
        else:
            logger.info(f"Tool {self.name} executed successfully")
        return result

