"""Wrap executor outcomes into MCP tool envelopes."""

import logging
from typing import Any, Dict, List, Optional

from mcp.types import CallToolResult, TextContent, Tool

from tools import OperationExecutor, list_operations

logger = logging.getLogger(__name__)


class RequestDispatcher:
    """Answers tools/list and tools/call.

    Stateless: no mutable data on the dispatcher or its executor, so sharing
    one instance between sessions is equivalent to one per session.
    """

    def __init__(self, executor: OperationExecutor):
        self.executor = executor

    def handle_list_tools(self) -> List[Tool]:
        return [
            Tool(name=op.name, description=op.description, inputSchema=op.input_schema())
            for op in list_operations()
        ]

    def handle_call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        logger.debug(f"Tool call: {name}({arguments})")
        result = self.executor.execute(name, arguments)
        return CallToolResult(
            content=[TextContent(type="text", text=result.text)],
            isError=result.is_error,
        )
