"""Agency client template: onboarding, delivery and contract material."""

from __future__ import annotations

from config import ServerConfig
from prompts import PromptArgument, PromptDefinition
from registry import ServerRegistry
from resource_docs import server_docs
from resources import ResourceDefinition

SERVER_CONFIG = ServerConfig(
    name="agency-client-template",
    title="Agency Client Template",
    scheme="agency",
    description="Client management patterns for an AI development agency",
)

PLAIN = "text/plain"

RESOURCES = (
    ResourceDefinition(
        uri="agency://clients/onboarding-checklist",
        name="Client Onboarding Checklist",
        description="Complete checklist for onboarding new AI agency clients",
        mime_type=PLAIN,
    ),
    ResourceDefinition(
        uri="agency://templates/project-structure",
        name="Standard Project Structure",
        description="Standardized folder structure and configuration for client projects",
        mime_type=PLAIN,
    ),
    ResourceDefinition(
        uri="agency://workflows/client-delivery",
        name="Client Delivery Workflow",
        description="Step-by-step process for delivering projects to clients",
        mime_type=PLAIN,
    ),
    ResourceDefinition(
        uri="agency://contracts/sow-template",
        name="Statement of Work Template",
        description="Professional SOW template with scope, timeline, and deliverables",
        mime_type=PLAIN,
    ),
    ResourceDefinition(
        uri="agency://automation/mcp-generator",
        name="Client MCP Generator",
        description="Script to generate custom MCP servers for individual clients",
        mime_type=PLAIN,
    ),
)

PROMPTS = (
    PromptDefinition(
        name="onboard_client",
        description="Complete client onboarding process",
        summary="Onboarding {client_name} for {project_type}",
        text=(
            "Complete the client onboarding process for {client_name} building a {project_type}. "
            "Use the agency://clients/onboarding-checklist and set up project structure using "
            "agency://templates/project-structure. Include AWS infrastructure setup and CI/CD "
            "pipeline configuration."
        ),
        arguments=(
            PromptArgument(name="client_name", description="Name of the client company", required=True),
            PromptArgument(
                name="project_type",
                description="Type of project (web-app, api, dashboard, etc.)",
                default="web application",
            ),
        ),
    ),
    PromptDefinition(
        name="generate_sow",
        description="Generate Statement of Work for client",
        summary="Generating SOW for {client_name}",
        text=(
            "Create a comprehensive Statement of Work for {client_name} using the "
            "agency://contracts/sow-template. Project scope: {project_scope}. Include detailed "
            "phases, deliverables, timeline, and terms."
        ),
        arguments=(
            PromptArgument(name="client_name", description="Name of the client", required=True),
            PromptArgument(
                name="project_scope",
                description="Brief description of project scope",
                default="custom web application",
            ),
        ),
    ),
    PromptDefinition(
        name="create_client_mcp",
        description="Generate custom MCP server for client",
        summary="Creating custom MCP server for {client_name}",
        text=(
            "Generate a custom MCP server for {client_name} with domain {domain} using the "
            "agency://automation/mcp-generator. Include client-specific resources for project specs, "
            "branding guidelines, environment configs, and contacts."
        ),
        arguments=(
            PromptArgument(name="client_name", description="Name of the client", required=True),
            PromptArgument(name="domain", description="Client domain name", default="client.com"),
        ),
    ),
)


def build_registry() -> ServerRegistry:
    return ServerRegistry.from_directory(SERVER_CONFIG, server_docs(SERVER_CONFIG.name), RESOURCES, PROMPTS)
