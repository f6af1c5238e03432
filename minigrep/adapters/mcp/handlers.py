"""
MCP Tool Handlers

Handlers for MCP tools that use the hexagonal core.
"""
import asyncio
import logging
from typing import Any, Optional

from ...container import Container
from ...core.domain import Config, ignore_case_from_env

logger = logging.getLogger(__name__)


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    async def search_file(
        self,
        query: str,
        file_path: str,
        ignore_case: Optional[bool] = None
    ) -> dict[str, Any]:
        """Search a file, return matching lines + metadata"""
        try:
            if ignore_case is None:
                ignore_case = ignore_case_from_env()

            config = Config(query=query, file_path=file_path, ignore_case=ignore_case)

            # File read blocks; keep it off the event loop
            result = await asyncio.to_thread(
                self.container.search_file.execute,
                config
            )

            return {
                "success": True,
                "query": result.query,
                "path": result.file_path,
                "ignore_case": result.ignore_case,
                "lines": result.lines,
                "count": result.count,
            }

        except Exception as e:
            logger.error(f"search_file: {file_path} FAILED: {e}")
            return {
                "success": False,
                "error": f"Search failed: {str(e)}"
            }
