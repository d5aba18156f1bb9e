"""Configuration management using Pydantic Settings."""

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_KEY_ENV_VAR = "ANTHROPIC_API_KEY"

DEFAULT_CLAUDE_CONFIG_PATH = (
    Path(os.environ.get("HOME", "")) / "code" / "claude-search-mcp" / "claude_desktop_config.json"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Anthropic - loaded from .env via os.environ
    anthropic_api_key: Optional[str] = Field(
        default_factory=lambda: os.environ.get(API_KEY_ENV_VAR),
        description="Anthropic API key from ANTHROPIC_API_KEY env var",
    )
    anthropic_model: str = Field(
        default_factory=lambda: os.environ.get("ANTHROPIC_MODEL", "claude-3-7-sonnet-latest"),
        description="Model that runs the web search from ANTHROPIC_MODEL env var",
    )
    anthropic_max_tokens: int = Field(
        default_factory=lambda: int(os.environ.get("ANTHROPIC_MAX_TOKENS", "1024")),
        description="Output token budget per search from ANTHROPIC_MAX_TOKENS env var (default: 1024)",
    )

    # Web search tool
    web_search_tool_type: str = "web_search_20250305"
    default_max_results: int = 5

    # Claude Desktop config file, checked before the environment for the API key
    claude_config_path: Path = Field(
        default_factory=lambda: Path(
            os.environ.get("CLAUDE_CONFIG_PATH", str(DEFAULT_CLAUDE_CONFIG_PATH))
        ),
        description="Path of the Claude Desktop config from CLAUDE_CONFIG_PATH env var",
    )

    # Application Settings - loaded from .env via os.environ
    debug: bool = Field(
        default_factory=lambda: os.environ.get("DEBUG", "False").lower() == "true",
        description="Debug mode from DEBUG env var (default: False)",
    )
    log_level: str = Field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"),
        description="Logging level from LOG_LEVEL env var (default: INFO)",
    )
    log_file: Optional[str] = Field(
        default_factory=lambda: os.environ.get("LOG_FILE"),
        description="Optional log file path from LOG_FILE env var",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def load_claude_config(
    config_path: Optional[Path] = None,
    warn: Optional[Callable[[str], None]] = None,
) -> Optional[Dict[str, Any]]:
    """
    Load the Claude Desktop config file.

    Any failure is downgraded to a warning and ``None`` so callers fall back
    to environment variables.
    """
    path = Path(config_path) if config_path is not None else DEFAULT_CLAUDE_CONFIG_PATH
    if warn is None:
        from claude_search_mcp.utils.logger import logger

        warn = logger.warning

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        warn(f"Could not load Claude Desktop config: {e}")
        warn("Falling back to environment variables")
        return None

    if not isinstance(data, dict):
        warn(f"Could not load Claude Desktop config: expected a JSON object in {path}")
        warn("Falling back to environment variables")
        return None

    return data


def _api_key_from_config(config: Dict[str, Any]) -> Optional[str]:
    """Find the API key at the top level or in any server's env block."""
    value = config.get(API_KEY_ENV_VAR)
    if isinstance(value, str) and value:
        return value

    servers = config.get("mcpServers")
    if not isinstance(servers, dict):
        return None
    for server in servers.values():
        env = server.get("env") if isinstance(server, dict) else None
        if isinstance(env, dict):
            value = env.get(API_KEY_ENV_VAR)
            if isinstance(value, str) and value:
                return value
    return None


def resolve_credential(
    read_config: Callable[[], Optional[Dict[str, Any]]],
    read_env: Callable[[str], Optional[str]],
) -> Optional[str]:
    """
    Resolve the Anthropic API key, first match wins.

    Args:
        read_config: Returns the parsed Claude Desktop config, or None
        read_env: Looks up an environment variable by name

    Returns:
        The API key, or None when neither source has one
    """
    config = read_config()
    if config:
        api_key = _api_key_from_config(config)
        if api_key:
            return api_key

    return read_env(API_KEY_ENV_VAR) or None


# Global settings instance
settings = Settings()
