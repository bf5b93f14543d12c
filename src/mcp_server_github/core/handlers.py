"""Tool call handlers for MCP GitHub Server"""

import logging
import os
import time
from typing import Any, Dict, List, Optional

from mcp.types import TextContent, Tool

from ..error_handling import GitHubError
from ..github.client import GitHubClient
from .tools import GitHubToolRouter, ToolRegistry

logger = logging.getLogger(__name__)


class CallToolHandler:
    """Centralized tool call handler using the router system"""

    def __init__(self, client: GitHubClient, registry: Optional[ToolRegistry] = None):
        self.registry = registry or ToolRegistry()
        self.registry.initialize_default_tools()
        self.router = GitHubToolRouter(self.registry, client)

    def list_tools(self) -> List[Tool]:
        return self.registry.list_tools()

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """Main tool call entry point with logging and timing.

        Failures are logged and re-raised so the protocol layer reports them as
        the call's error result.
        """
        request_id = os.urandom(4).hex()
        log_context = {"request_id": request_id, "tool": name}
        logger.info(f"🔧 [{request_id}] Tool call: {name}", extra=log_context)
        logger.debug(f"🔧 [{request_id}] Arguments: {arguments}", extra=log_context)

        start_time = time.time()

        try:
            result = await self.router.route_tool_call(name, arguments)
        except GitHubError as e:
            duration_ms = round((time.time() - start_time) * 1000, 1)
            logger.warning(
                f"❌ [{request_id}] Tool '{name}' failed after {duration_ms}ms: {e}",
                extra={**log_context, "duration_ms": duration_ms},
            )
            raise
        except Exception as e:
            duration_ms = round((time.time() - start_time) * 1000, 1)
            logger.error(
                f"❌ [{request_id}] Tool '{name}' crashed after {duration_ms}ms: {e}",
                exc_info=True,
                extra={**log_context, "duration_ms": duration_ms},
            )
            raise

        duration_ms = round((time.time() - start_time) * 1000, 1)
        logger.info(
            f"✅ [{request_id}] Tool '{name}' completed in {duration_ms}ms",
            extra={**log_context, "duration_ms": duration_ms},
        )
        return result
