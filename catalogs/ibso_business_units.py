"""IBSO business units: client-specific project documentation.

Besides the declared resources, every ``README-<name>.md`` file in the server's
``readme`` directory is published as ``ibso-business://readme/<name>``.
"""

from __future__ import annotations

from config import ServerConfig
from registry import ServerRegistry
from resource_docs import server_docs
from resources import ResourceDefinition, discover_markdown, humanize_path

SERVER_CONFIG = ServerConfig(
    name="ibso-business-units",
    title="IBSO Business Units",
    scheme="ibso-business",
    description="IBSO Business Units MCP Server - Client-specific project patterns and configurations",
)


def _unit_resource(path: str, description: str) -> ResourceDefinition:
    return ResourceDefinition(
        uri=f"ibso-business://{path}",
        name=humanize_path(path),
        description=description,
    )


RESOURCES = (
    _unit_resource("vitracoat/overview", "Overview of the Vitracoat powder-coating project"),
    _unit_resource("vitracoat/request-forms", "Laboratory request form structure and field rules"),
    _unit_resource("vitracoat/business-workflows", "Request lifecycle from submission to delivery"),
    _unit_resource("patterns/client-project-structure", "Folder and module layout for client projects"),
    _unit_resource("docs/project-setup-guide", "Local setup steps for a new business unit project"),
)


def build_registry() -> ServerRegistry:
    docs = server_docs(SERVER_CONFIG.name)
    readmes = discover_markdown(docs / "readme", SERVER_CONFIG.scheme)
    return ServerRegistry.from_directory(SERVER_CONFIG, docs, RESOURCES, extra=readmes)
