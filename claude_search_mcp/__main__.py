"""Allow ``python -m claude_search_mcp``."""

from claude_search_mcp.mcp.servers.web_search_server import run

if __name__ == "__main__":
    run()
