"""ERP business patterns, served as JSON documents built from in-memory data."""

from __future__ import annotations

from config import ServerConfig
from loader import ContentLoader, json_entry
from prompts import PromptRegistry
from registry import ServerRegistry
from resources import ResourceDefinition, ResourceManifest

SERVER_CONFIG = ServerConfig(
    name="erp-business-patterns",
    title="ERP Business Patterns",
    scheme="erp-business-patterns",
    description=(
        "ERP Business Patterns - Vitracoat Configuration System, Chemical Request Workflows, "
        "and Role-Based Access Patterns"
    ),
)

JSON = "application/json"

PATTERNS = {
    "vitracoat-business-model": {
        "name": "Vitracoat Business Model",
        "description": "Business model with configuration pages, modules, and operational workflows",
        "category": "Business Architecture",
        "tags": ["business-model", "configuration", "modules", "workflows"],
        "dependencies": ["erp-configuration-system"],
        "configurationPages": ["clients", "products", "laboratories", "users", "request-types"],
        "modules": ["dashboard", "requests", "formulations", "testing", "production", "reports"],
    },
    "erp-configuration-system": {
        "name": "ERP Configuration System",
        "description": "Tab patterns, CRUD operations, and configuration management system",
        "category": "System Architecture",
        "tags": ["configuration", "tabs", "crud", "data-management"],
        "dependencies": [],
        "tabPattern": {
            "layout": "one tab per configuration entity",
            "operations": ["list", "create", "edit", "archive"],
            "persistence": "server actions with optimistic updates",
        },
    },
    "chemical-request-workflows": {
        "name": "Chemical Request Workflows",
        "description": "LWR/TLWR/VLWR request types with multi-step forms and validation",
        "category": "Workflow Management",
        "tags": ["workflows", "forms", "validation", "chemical-industry"],
        "dependencies": ["multi-step-forms", "role-based-access-patterns"],
        "requestTypes": {
            "lwr": "Laboratory work request",
            "tlwr": "Testing laboratory work request",
            "vlwr": "Internal validation work request",
            "micro-production": "Small batch production run",
        },
    },
    "role-based-access-patterns": {
        "name": "Role-Based Access Control",
        "description": "Permission matrix, security patterns, and user role management",
        "category": "Security Architecture",
        "tags": ["rbac", "permissions", "security"],
        "dependencies": [],
        "roles": ["admin", "lab-manager", "technician", "sales", "viewer"],
    },
}


def build_registry() -> ServerRegistry:
    definitions = [
        ResourceDefinition(
            uri=f"erp-business-patterns://resource/{key}",
            name=pattern["name"],
            description=pattern["description"],
            mime_type=JSON,
            content_key=key,
        )
        for key, pattern in PATTERNS.items()
    ]
    loader = ContentLoader({key: json_entry(pattern) for key, pattern in PATTERNS.items()})
    return ServerRegistry(
        config=SERVER_CONFIG,
        manifest=ResourceManifest(SERVER_CONFIG.scheme, definitions),
        loader=loader,
        prompts=PromptRegistry(),
    )
