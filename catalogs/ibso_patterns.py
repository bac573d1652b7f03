"""IBSO infrastructure, deployment and security patterns."""

from __future__ import annotations

from config import ServerConfig
from registry import ServerRegistry
from resource_docs import server_docs
from resources import ResourceDefinition

SERVER_CONFIG = ServerConfig(
    name="ibso-patterns",
    title="IBSO Patterns",
    scheme="ibso",
    description="Infrastructure and deployment patterns for IBSO client projects",
)

PLAIN = "text/plain"

RESOURCES = (
    ResourceDefinition(
        uri="ibso://infrastructure/terraform-deploy",
        name="Terraform Deployment Pipeline",
        description="Complete terraform setup for AWS infrastructure with CI/CD integration",
        mime_type=PLAIN,
    ),
    ResourceDefinition(
        uri="ibso://infrastructure/cost-optimization",
        name="AWS Cost Optimization",
        description="Proven strategies for reducing AWS costs while maintaining performance",
        mime_type=PLAIN,
    ),
    ResourceDefinition(
        uri="ibso://clients/cdicash-config",
        name="CDI Cash Configuration",
        description="Client-specific infrastructure and deployment configuration patterns",
        mime_type=PLAIN,
    ),
    ResourceDefinition(
        uri="ibso://deployment/3-minute-process",
        name="3-Minute Deployment Process",
        description="Streamlined deployment workflow from code to production in 3 minutes",
        mime_type=PLAIN,
    ),
    ResourceDefinition(
        uri="ibso://monitoring/observability-stack",
        name="Observability Stack",
        description="Complete monitoring setup with Grafana, Prometheus, and alerting",
        mime_type=PLAIN,
    ),
    ResourceDefinition(
        uri="ibso://security/compliance-framework",
        name="Security Compliance Framework",
        description="Security policies and compliance patterns for enterprise clients",
        mime_type=PLAIN,
    ),
)


def build_registry() -> ServerRegistry:
    return ServerRegistry.from_directory(SERVER_CONFIG, server_docs(SERVER_CONFIG.name), RESOURCES)
