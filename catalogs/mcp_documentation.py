"""Meta-documentation for the server ecosystem itself."""

from __future__ import annotations

from config import ServerConfig
from registry import ServerRegistry
from resource_docs import server_docs
from resources import ResourceDefinition

SERVER_CONFIG = ServerConfig(
    name="mcp-documentation",
    title="MCP Documentation",
    scheme="mcp-meta",
    description="Meta-documentation and patterns for the MCP ecosystem",
)

RESOURCES = (
    ResourceDefinition(
        uri="mcp-meta://architecture/ecosystem-overview",
        name="MCP Ecosystem Overview",
        description="Complete overview of the MCP server architecture and ecosystem",
    ),
    ResourceDefinition(
        uri="mcp-meta://servers/crm-template-base",
        name="CRM Template Base Server Documentation",
        description="Documentation for the CRM template patterns server",
    ),
    ResourceDefinition(
        uri="mcp-meta://servers/ibso-patterns",
        name="IBSO Patterns Server Documentation",
        description="Documentation for the IBSO infrastructure patterns server",
    ),
    ResourceDefinition(
        uri="mcp-meta://servers/agency-clients",
        name="Agency Client Template Server Documentation",
        description="Documentation for the agency client management patterns server",
    ),
    ResourceDefinition(
        uri="mcp-meta://patterns/server-refactoring-guide",
        name="MCP Server Refactoring Guide",
        description="Guide for splitting a monolithic server into manifest, loader and dispatcher",
    ),
    ResourceDefinition(
        uri="mcp-meta://development/mcp-best-practices",
        name="MCP Development Best Practices",
        description="Best practices for developing MCP servers and resources",
    ),
)


def build_registry() -> ServerRegistry:
    return ServerRegistry.from_directory(SERVER_CONFIG, server_docs(SERVER_CONFIG.name), RESOURCES)
