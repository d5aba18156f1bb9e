"""Anthropic provider that runs Claude's built-in web search tool."""

from typing import Any, Dict, List, Optional

from anthropic import AsyncAnthropic

from claude_search_mcp.utils.config import settings
from claude_search_mcp.utils.logger import logger


class AnthropicSearchProvider:
    """Sends a query to the Messages API with the web search tool attached."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        client: Optional[Any] = None,
    ):
        self.model_name = model or settings.anthropic_model
        self.max_tokens = max_tokens or settings.anthropic_max_tokens

        if client is not None:
            self.client = client
        else:
            if not api_key:
                logger.warning(
                    "ANTHROPIC_API_KEY not set! Every web search will fail to authenticate."
                )
            # One attempt per invocation; failures surface to the caller as-is.
            self.client = AsyncAnthropic(api_key=api_key or "", max_retries=0)

    async def search(self, query: str, search_tool: Dict[str, Any]) -> List[Any]:
        """
        Ask the model to answer ``query`` using the web search tool.

        Args:
            query: Sent as the only user message
            search_tool: Web search server tool definition

        Returns:
            The response's content blocks, in order
        """
        logger.info(f"Calling {self.model_name} with web search (max_uses: {search_tool.get('max_uses')})")

        response = await self.client.messages.create(
            model=self.model_name,
            max_tokens=self.max_tokens,
            messages=[
                {
                    "role": "user",
                    "content": query,
                }
            ],
            tools=[search_tool],
        )

        content = list(response.content)
        logger.debug(f"Received {len(content)} content blocks from {self.model_name}")
        return content
