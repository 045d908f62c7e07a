"""MCP server wiring for github-rest-mcp.

Exposes the tool catalog to MCP hosts and routes tool calls through the dispatch
layer. Results are serialized as JSON envelopes.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

try:
    from mcp.server import Server
    from mcp.types import Resource, TextContent, Tool
except ImportError as exc:  # pragma: no cover
    raise ImportError("MCP library not installed. Install with: pip install mcp") from exc

from . import __version__
from .catalog import TOOL_METADATA, get_all
from .config import load_config_from_env
from .dispatch import DispatchServer
from .errors import GitHubAPIError, to_error_result

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)

server = Server("github-rest-mcp")

_RUNTIME: DispatchServer | None = None

_RESOURCES = (
    ("github-rest-mcp://server-status", "Server Status", "Non-secret server configuration"),
    ("github-rest-mcp://capabilities", "Capabilities", "Available GitHub operations"),
)


def initialize_runtime_from_env() -> DispatchServer:
    """Build and cache the dispatch server from environment configuration."""
    global _RUNTIME  # pylint: disable=global-statement
    if _RUNTIME is not None:
        return _RUNTIME

    _RUNTIME = DispatchServer(config=load_config_from_env())
    return _RUNTIME


def _tools() -> list[Tool]:
    return [Tool(name=t["name"], description=t["description"], inputSchema=t["parameters"]) for t in get_all()]


def _resources() -> list[Resource]:
    return [Resource(uri=uri, name=name, description=description) for uri, name, description in _RESOURCES]


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    tools = _tools()
    logger.info("Listed %s tools", len(tools))
    return tools


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Execute a tool and return its envelope as MCP TextContent."""
    if not isinstance(arguments, dict):
        arguments = {}

    logger.info("Tool called: %s", name)

    try:
        runtime = initialize_runtime_from_env()
        result = await runtime.handle_request({"method": name, "params": arguments})
    except GitHubAPIError as err:
        logger.error("Tool %s could not run: %s", name, err.message)
        result = to_error_result(code=err.code, message=err.message, details=err.details)

    return [TextContent(type="text", text=json.dumps(result, indent=2, default=str))]


@server.list_resources()
async def list_resources() -> list[Resource]:
    """List available resources."""
    return _resources()


@server.read_resource()
async def read_resource(uri: Any) -> str:
    """Read resource content."""
    uri_s = uri if isinstance(uri, str) else str(uri)

    if uri_s == "github-rest-mcp://capabilities":
        caps = {
            "server": "github-rest-mcp",
            "version": __version__,
            "operations": list(TOOL_METADATA.keys()),
        }
        return json.dumps(caps, indent=2)

    if uri_s == "github-rest-mcp://server-status":
        status: dict[str, Any] = {
            "server": "github-rest-mcp",
            "version": __version__,
            "tools_available": len(TOOL_METADATA),
            "configured": False,
        }
        try:
            runtime = initialize_runtime_from_env()
        except GitHubAPIError:
            return json.dumps(status, indent=2)

        config = runtime.client.config
        status["configured"] = True
        status["auth_mode"] = "token" if config.token else "github_app"
        status["api_base_url"] = config.api_base_url
        status["limits"] = {
            "total_timeout_s": config.limits.total_timeout_s,
            "connect_timeout_s": config.limits.connect_timeout_s,
            "read_timeout_s": config.limits.read_timeout_s,
        }
        return json.dumps(status, indent=2)

    return json.dumps(to_error_result(code="NOT_FOUND", message="Unknown resource"), indent=2)


async def run_server() -> None:
    """Run the server over stdio."""
    # Fail fast on invalid/missing host configuration.
    try:
        _ = initialize_runtime_from_env()
    except GitHubAPIError as exc:
        logger.error("Startup configuration error: %s", exc.message)
        raise

    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


async def test_server() -> None:
    """Lightweight self-test: tool/resource construction and catalog/handler parity."""
    tools = _tools()
    _ = _resources()

    mismatched = DispatchServer(token="self-test").check_catalog_parity()
    if mismatched:
        raise RuntimeError(f"Catalog and handler table disagree: {', '.join(mismatched)}")

    logger.info("Self-test passed: %s tools", len(tools))
