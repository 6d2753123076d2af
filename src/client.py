import asyncio
import os
import sys
from typing import Any, Dict, List, Optional, Tuple
from contextlib import AsyncExitStack
import json

import aiohttp
from mcp import ClientSession, StdioServerParameters
from mcp.client.streamable_http import streamablehttp_client
from mcp.client.stdio import stdio_client
from mcp.client.sse import sse_client

from dotenv import load_dotenv

load_dotenv()


class MCPClient:
    def __init__(self):
        # Initialize session and client objects
        self.session: Optional[ClientSession] = None
        self.exit_stack = AsyncExitStack()

    async def connect_to_server(self, server_path_or_url: str, transport: Optional[str] = None):
        """Connect to an MCP server via STDIO, SSE or streamable HTTP.

        Args:
            server_path_or_url: Path to server script for STDIO or URL otherwise
            transport: "stdio", "sse" or "streamable-http"; defaults to the TRANSPORT env variable
        """
        transport = (transport or os.getenv("TRANSPORT", "sse")).lower()

        if transport == "sse":
            sse_transport = await self.exit_stack.enter_async_context(
                sse_client(server_path_or_url)
            )
            self.session = await self.exit_stack.enter_async_context(
                ClientSession(sse_transport[0], sse_transport[1])
            )

        elif transport == "streamable-http":
            http_transport = await self.exit_stack.enter_async_context(
                streamablehttp_client(server_path_or_url)
            )
            self.session = await self.exit_stack.enter_async_context(
                ClientSession(http_transport[0], http_transport[1])
            )

        elif transport == "stdio":
            if not server_path_or_url.endswith(".py"):
                raise ValueError("For STDIO transport, server must be a .py file")

            # The spawned server needs to see stdio as its transport too
            env = dict(os.environ, TRANSPORT="stdio")
            server_params = StdioServerParameters(
                command=sys.executable,
                args=[server_path_or_url],
                env=env,
            )
            read, write = await self.exit_stack.enter_async_context(stdio_client(server_params))
            self.session = await self.exit_stack.enter_async_context(ClientSession(read, write))

        else:
            raise ValueError(f"Unsupported transport: {transport}. Use 'stdio', 'sse' or 'streamable-http'")

        await self.session.initialize()

    async def list_tools(self) -> List[Dict[str, Any]]:
        """Return name, description and input schema of every tool on the server."""
        response = await self.session.list_tools()
        return [
            {"name": tool.name, "description": tool.description, "inputSchema": tool.inputSchema}
            for tool in response.tools
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Tuple[str, bool]:
        """Invoke a tool and return its text content and error flag."""
        result = await self.session.call_tool(name, arguments or {})
        text = "\n".join(block.text for block in result.content if getattr(block, "type", None) == "text")
        return text, bool(result.isError)

    async def cleanup(self):
        """Clean up resources"""
        await self.exit_stack.aclose()


async def fetch_health(base_url: str, timeout: int = 10) -> Dict[str, Any]:
    """Query the server's /health endpoint."""
    url = base_url.rstrip("/") + "/health"
    async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout)) as session:
        async with session.get(url) as response:
            response.raise_for_status()
            return await response.json()


USAGE = """Usage:
  mcp-calculator-client <server_url_or_script> [tool [json_arguments]]
  mcp-calculator-client --health <base_url>

Examples:
  mcp-calculator-client http://localhost:8000/sse
  mcp-calculator-client http://localhost:8000/sse add '{"a": 2, "b": 3}'
  TRANSPORT=stdio mcp-calculator-client src/server.py factorial '{"n": 5}'
  mcp-calculator-client --health http://localhost:8000"""


async def main(argv: List[str]) -> int:
    if not argv:
        print(USAGE)
        return 1

    if argv[0] == "--health":
        if len(argv) < 2:
            print(USAGE)
            return 1
        print(json.dumps(await fetch_health(argv[1]), indent=2, ensure_ascii=False))
        return 0

    server_path_or_url = argv[0]
    client = MCPClient()
    try:
        await client.connect_to_server(server_path_or_url)

        if len(argv) == 1:
            for tool in await client.list_tools():
                print(f"{tool['name']}: {tool['description']}")
            return 0

        tool_name = argv[1]
        try:
            arguments = json.loads(argv[2]) if len(argv) > 2 else {}
        except json.JSONDecodeError as e:
            print(f"Invalid JSON arguments: {e}")
            return 1

        text, is_error = await client.call_tool(tool_name, arguments)
        print(text)
        return 1 if is_error else 0
    finally:
        await client.cleanup()


def run():
    sys.exit(asyncio.run(main(sys.argv[1:])))


if __name__ == "__main__":
    run()
