from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import ContentBlock, Tool
from starlette.requests import Request
from starlette.responses import JSONResponse
import logging
import sys
from config import Config, config
from dispatcher import RequestDispatcher
from tools import OperationExecutor, TimeTools
from typing import Any, Dict, List, Sequence

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class CalculatorServer(FastMCP):
    """FastMCP server whose tools/list and tools/call go through a RequestDispatcher."""

    def __init__(self, dispatcher: RequestDispatcher, **settings: Any):
        self.dispatcher = dispatcher
        super().__init__(**settings)

    async def list_tools(self) -> List[Tool]:
        """List every calculator operation as an MCP tool."""
        return self.dispatcher.handle_list_tools()

    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> Sequence[ContentBlock]:
        """Run one calculator operation and return its text content."""
        result = self.dispatcher.handle_call_tool(name, arguments)
        if result.isError:
            # The SDK turns a raised error into an isError result carrying str(e)
            raise ToolError(result.content[0].text)
        return result.content


def create_server(cfg: Config = config) -> CalculatorServer:
    """Create and configure the MCP server."""
    time_tools = TimeTools()
    dispatcher = RequestDispatcher(OperationExecutor(cfg, time_tools=time_tools))
    server = CalculatorServer(
        dispatcher,
        name=cfg.SERVER_NAME,
        instructions="Calculator server: add, subtract, multiply, divide, power, sqrt, factorial and operator info",
        host=cfg.HOST,
        port=cfg.PORT,
        debug=cfg.DEBUG,
        log_level=cfg.LOG_LEVEL,
        stateless_http=True,
    )

    @server.custom_route("/health", methods=["GET"])
    async def health(request: Request) -> JSONResponse:
        return JSONResponse({
            "status": "ok",
            "service": cfg.SERVER_NAME,
            "version": cfg.VERSION,
            "operator": cfg.OPERATOR_NAME,
            "port": cfg.PORT,
            "timestamp": time_tools.get_current_time(),
        })

    return server


def main():
    """Main server entry point."""
    try:
        config.validate()
    except ValueError as e:
        logger.error(f"Server startup failed: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.LOG_LEVEL)
    logger.info(config.display_config())
    server = create_server(config)

    logger.info(f"Starting MCP calculator server on {config.HOST}:{config.PORT}")
    logger.info(f"Transport mode: {config.TRANSPORT}")
    if config.TRANSPORT == "sse":
        logger.info(f"SSE endpoint: http://{config.HOST}:{config.PORT}/sse")
    elif config.TRANSPORT == "streamable-http":
        logger.info(f"Streamable HTTP endpoint: http://{config.HOST}:{config.PORT}/mcp")
    if config.TRANSPORT != "stdio":
        logger.info(f"Health check: http://{config.HOST}:{config.PORT}/health")

    server.run(transport=config.TRANSPORT)


if __name__ == "__main__":
    main()
