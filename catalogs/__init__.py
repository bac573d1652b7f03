"""Registry builders for every shipped server, keyed by server name."""

from __future__ import annotations

from typing import Callable, Dict

from registry import ServerRegistry

from . import (
    agency_client_template,
    crm_template_base,
    erp_business_patterns,
    ibso_business_units,
    ibso_patterns,
    mcp_documentation,
)

SERVERS: Dict[str, Callable[[], ServerRegistry]] = {
    "crm-template-base": crm_template_base.build_registry,
    "mcp-documentation": mcp_documentation.build_registry,
    "agency-client-template": agency_client_template.build_registry,
    "ibso-patterns": ibso_patterns.build_registry,
    "ibso-business-units": ibso_business_units.build_registry,
    "erp-business-patterns": erp_business_patterns.build_registry,
}


def build_registry(name: str) -> ServerRegistry:
    try:
        builder = SERVERS[name]
    except KeyError:
        raise KeyError(f"unknown server {name!r}; choose from {', '.join(SERVERS)}") from None
    return builder()


__all__ = ["SERVERS", "build_registry"]
