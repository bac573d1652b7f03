from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import typer

from catalogs import SERVERS, build_registry
from config import Settings
from dispatcher import Dispatcher, ReadResource, is_error
from errors import ContentServerError
from fastmcp_app import create_mcp

logger = logging.getLogger(__name__)

cli = typer.Typer(add_completion=False, help="Static documentation MCP servers.")


def configure_logging(level: str = "INFO") -> None:
    # stdout carries the stdio transport; every log record goes to stderr.
    # fastmcp installs its own Rich handler at import time, which also writes
    # to stderr; raising its level keeps routine records off the terminal.
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("mcp").setLevel(logging.WARNING)
    logging.getLogger("fastmcp").setLevel(logging.WARNING)


def serve(server: str, transport: str = "stdio", host: Optional[str] = None, port: Optional[int] = None) -> None:
    settings = Settings.from_env()
    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port
    configure_logging(settings.log_level)

    try:
        registry = build_registry(server)
        mcp = create_mcp(registry)
    except (KeyError, ContentServerError) as exc:
        logger.error("Failed to start %s: %s", server, exc)
        raise typer.Exit(code=1)

    title = registry.config.title
    try:
        if transport == "stdio":
            logger.info("%s MCP server running on stdio", title)
            mcp.run(transport="stdio", show_banner=False)
        else:
            # Force JSON-style HTTP on /mcp (non-streaming)
            app = mcp.http_app(path="/mcp", transport="http", json_response=True, stateless_http=True)
            import uvicorn

            logger.info("%s MCP server running on http://%s:%s/mcp", title, settings.host, settings.port)
            uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    except KeyboardInterrupt:
        pass
    except Exception as exc:
        logger.error("%s server error: %s", title, exc)
        raise typer.Exit(code=1)


@cli.command()
def run(
    server: str = typer.Argument(..., help="Server to run (see `list`)."),
    transport: str = typer.Option("stdio", help="Transport: 'stdio' or 'http'."),
    host: str = typer.Option(None, help="Host interface to bind (HTTP transport)."),
    port: int = typer.Option(None, help="Port to bind (HTTP transport)."),
) -> None:
    """Start one content server (defaults to stdio transport)."""

    serve(server, transport=transport, host=host, port=port)


@cli.command(name="list")
def list_servers() -> None:
    """Show every server with its resource and prompt counts."""

    for name in SERVERS:
        registry = build_registry(name)
        typer.echo(
            f"{name}\t{registry.config.scheme}://\t"
            f"{len(registry.manifest)} resources\t{len(registry.prompts)} prompts"
        )


async def _check_registry(name: str) -> int:
    registry = build_registry(name).validate()
    dispatcher = Dispatcher(registry)
    failures = 0
    for definition in registry.manifest:
        response = await dispatcher.dispatch(ReadResource(definition.uri))
        if is_error(response):
            failures += 1
            typer.echo(f"{name}: {response['error']['message']}", err=True)
    return failures


@cli.command()
def check() -> None:
    """Build every server and read every resource once."""

    configure_logging("WARNING")
    failures = 0
    for name in SERVERS:
        try:
            failures += asyncio.run(_check_registry(name))
        except ContentServerError as exc:
            failures += 1
            typer.echo(f"{name}: {exc}", err=True)
    if failures:
        raise typer.Exit(code=1)
    typer.echo(f"{len(SERVERS)} servers OK")


def _standalone(name: str) -> typer.Typer:
    app = typer.Typer(add_completion=False, help=f"Run the {name} MCP server on stdio.")

    @app.command()
    def _run() -> None:
        serve(name)

    return app


crm_template_base = _standalone("crm-template-base")
mcp_documentation = _standalone("mcp-documentation")
agency_client_template = _standalone("agency-client-template")
ibso_patterns = _standalone("ibso-patterns")
ibso_business_units = _standalone("ibso-business-units")
erp_business_patterns = _standalone("erp-business-patterns")


if __name__ == "__main__":
    cli()
