"""CRM template base: UI, architecture and routing patterns for the CRM template."""

from __future__ import annotations

from config import ServerConfig
from prompts import PromptArgument, PromptDefinition
from registry import ServerRegistry
from resource_docs import server_docs
from resources import ResourceDefinition

SERVER_CONFIG = ServerConfig(
    name="crm-template-base",
    title="CRM Template Base",
    scheme="crm-base",
    description="Code patterns and templates for the CRM template base.",
)

RESOURCES = (
    ResourceDefinition(
        uri="crm-base://ui-system/dialog-patterns",
        name="Dialog Patterns",
        description="Mandatory unified dialog patterns for consistency",
    ),
    ResourceDefinition(
        uri="crm-base://ui-system/configuration-tabs-pattern",
        name="Configuration Tabs Pattern",
        description="Enterprise configuration management with tabs",
    ),
    ResourceDefinition(
        uri="crm-base://architecture/modular-forms-system",
        name="Modular Forms System",
        description="Form architecture built from small composable sections",
    ),
    ResourceDefinition(
        uri="crm-base://architecture/feature-based-organization",
        name="Feature-Based Organization",
        description="Scalable code organization patterns",
    ),
    ResourceDefinition(
        uri="crm-base://routing/nextjs-advanced-patterns",
        name="Next.js Advanced Patterns",
        description="Advanced routing and navigation patterns",
    ),
    ResourceDefinition(
        uri="crm-base://development/typescript-excellence",
        name="TypeScript Excellence",
        description="Strict typing conventions for CRM features",
    ),
)

PROMPTS = (
    PromptDefinition(
        name="add_component",
        description="Add a new UI component to the template",
        summary="Adding {component_type} to CRM template",
        text=(
            "Create a new {component_type} following the shadcn/ui patterns used in the CRM template. "
            "Include TypeScript types, proper styling, and role-based access if needed."
        ),
        arguments=(
            PromptArgument(
                name="component_type",
                description="Type of component to add",
                default="component",
            ),
        ),
    ),
)


def build_registry() -> ServerRegistry:
    return ServerRegistry.from_directory(SERVER_CONFIG, server_docs(SERVER_CONFIG.name), RESOURCES, PROMPTS)
