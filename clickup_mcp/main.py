"""clickup-mcp CLI: run the MCP server and inspect what it exposes."""

import asyncio
import logging
from typing import Annotated

import typer
from mcp.server.fastmcp import FastMCP
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from clickup_mcp.gateway import ClickUpGateway
from clickup_mcp.server import build_server
from clickup_mcp.settings import ClickUpSettings, get_settings

app = typer.Typer(help="clickup-mcp: ClickUp tools and resources over the Model Context Protocol", no_args_is_help=True)

TRANSPORTS = ("stdio", "sse", "streamable-http")

ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Profile name from ~/.config/clickup-mcp/config.toml"),
]


def configure_logging(level: str) -> None:
    # stdout belongs to the stdio transport, so logs go to stderr.
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def create_server(settings: ClickUpSettings) -> FastMCP:
    return build_server(ClickUpGateway(settings))


@app.command("serve")
def serve(
    profile: ProfileOpt = None,
    transport: Annotated[
        str,
        typer.Option("--transport", "-t", help="stdio, sse or streamable-http"),
    ] = "stdio",
    log_level: Annotated[str | None, typer.Option("--log-level", help="Override the configured log level")] = None,
) -> None:
    """Start the ClickUp MCP server."""
    if transport not in TRANSPORTS:
        rprint(f"[red]Unknown transport '{transport}'. Valid: {', '.join(TRANSPORTS)}[/red]")
        raise typer.Exit(1)

    settings = get_settings(profile=profile)
    configure_logging(log_level or settings.log_level)

    mcp = create_server(settings)
    logging.getLogger(__name__).info("ClickUp MCP Server started (%s)", transport)
    mcp.run(transport=transport)  # type: ignore[arg-type]


async def _inventory(settings: ClickUpSettings) -> tuple[list, list, list]:
    async with ClickUpGateway(settings) as gateway:
        mcp = build_server(gateway)
        tools = await mcp.list_tools()
        resources = [(str(r.uri), r.name) for r in await mcp.list_resources()]
        resources += [(t.uriTemplate, t.name) for t in await mcp.list_resource_templates()]
        prompts = await mcp.list_prompts()
        return tools, resources, prompts


@app.command("tools")
def list_tools() -> None:
    """List the tools, resources and prompts the server registers."""
    # Nothing is sent, so a placeholder key is enough to build the server.
    settings = ClickUpSettings(api_key="unused")  # type: ignore[arg-type]
    tools, resources, prompts = asyncio.run(_inventory(settings))

    table = Table(title="Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    for tool in tools:
        table.add_row(tool.name, (tool.description or "").split("\n", 1)[0])
    rprint(table)

    table = Table(title="Resources")
    table.add_column("URI", style="cyan", no_wrap=True)
    table.add_column("Name")
    for uri, name in resources:
        table.add_row(uri, name)
    rprint(table)

    table = Table(title="Prompts")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    for prompt in prompts:
        table.add_row(prompt.name, prompt.description or "")
    rprint(table)
