import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import dotenv_values, load_dotenv
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from ._version import __version__
from .configuration import TOKEN_ENV_VARS, GitHubConfig, is_placeholder_token
from .core.handlers import CallToolHandler
from .github.client import open_github_client

logger = logging.getLogger(__name__)


def should_override_token(token: str | None) -> bool:
    """Check if a token in the environment should be replaced from a .env file."""
    return is_placeholder_token(token)


def _load_env_file(env_file: Path) -> None:
    tokens_before = {name: os.getenv(name) for name in TOKEN_ENV_VARS}
    load_dotenv(env_file, override=False)  # Don't override existing env vars

    # Empty and placeholder tokens are replaced by a real value from the file
    env_values = dotenv_values(env_file)
    for name, before in tokens_before.items():
        value = env_values.get(name)
        if should_override_token(before) and value and not should_override_token(value):
            os.environ[name] = value


def load_environment_variables(env_dir: Path | None = None) -> List[str]:
    """Load environment variables from .env files with proper precedence.

    Order of precedence:
    1. System environment variables with a real value
    2. Project-specific .env file (current working directory)
    3. .env file in ``env_dir`` (if provided)

    Access tokens that are empty, whitespace-only or a placeholder
    (YOUR_TOKEN_HERE, REPLACE_ME, TODO, CHANGEME) are overridden.

    Returns:
        The .env files that were loaded
    """
    loaded_files: List[str] = []
    candidates = [Path.cwd() / ".env"]
    if env_dir:
        candidates.append(env_dir / ".env")

    for env_file in candidates:
        if not env_file.exists() or str(env_file) in loaded_files:
            continue
        try:
            _load_env_file(env_file)
        except OSError as e:
            logger.warning(f"Failed to load .env file {env_file}: {e}")
            continue
        loaded_files.append(str(env_file))
        logger.info(f"Loaded environment variables from {env_file}")

    if not loaded_files:
        logger.info("No .env files found, using system environment variables only")
    return loaded_files


def create_server(handler: CallToolHandler) -> Server:
    """Create the MCP server exposing every GitHub tool through ``handler``."""
    server = Server("github-mcp-server", version=__version__)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return handler.list_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        return await handler.call_tool(name, arguments)

    return server


async def serve(config: GitHubConfig, test_mode: bool = False) -> None:
    """Run the MCP GitHub Server on stdio until the client disconnects."""
    logger.info(f"🚀 Starting MCP GitHub Server {__version__} against {config.api_url}")

    async with open_github_client(config) as client:
        handler = CallToolHandler(client)
        server = create_server(handler)

        # Test mode for CI
        if test_mode:
            logger.info("🧪 Running in test mode - staying alive for CI testing")
            await asyncio.sleep(1)
            logger.info("🧪 Test mode completed successfully")
            return

        options = server.create_initialization_options()
        async with stdio_server() as (read_stream, write_stream):
            logger.info("GitHub MCP Server running on stdio")
            await server.run(read_stream, write_stream, options)

    logger.info("MCP GitHub Server shutting down.")
