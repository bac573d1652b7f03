from __future__ import annotations

import pytest

from config import ServerConfig
from dispatcher import Dispatcher
from loader import ContentLoader, text_entry
from prompts import PromptArgument, PromptDefinition, PromptRegistry
from registry import ServerRegistry
from resources import ResourceDefinition, ResourceManifest

DEMO_CONFIG = ServerConfig(name="demo", title="Demo", scheme="demo")

MARKDOWN_PAYLOAD = (
    "# Title\n"
    "Body with `code`, **bold** and a fence:\n"
    "```tsx\n"
    "const x = { a: 1 };\n"
    "```\n"
    "Trailing spaces  \n"
)


def _boom() -> str:
    raise OSError("disk unavailable")


@pytest.fixture
def demo_registry() -> ServerRegistry:
    manifest = ResourceManifest(
        "demo",
        [
            ResourceDefinition(
                uri="demo://a/one",
                name="One",
                description="First",
                mime_type="text/markdown",
                content_key="a/one",
            ),
            ResourceDefinition(uri="demo://a/two", name="Two", description="Second"),
            ResourceDefinition(uri="demo://b/poison", name="Poison", description="Always fails"),
        ],
    )
    loader = ContentLoader(
        {
            "a/one": text_entry("# Title\nBody text"),
            "a/two": text_entry(MARKDOWN_PAYLOAD),
            "b/poison": _boom,
        }
    )
    prompts = PromptRegistry(
        [
            PromptDefinition(
                name="greet",
                description="Greet and build",
                summary="Building {component_type} for {name}",
                text="Hello {name}, create a {component_type}",
                arguments=(
                    PromptArgument(name="name", description="Who to greet", required=True),
                    PromptArgument(name="component_type", description="What to build", default="component"),
                ),
            ),
        ]
    )
    return ServerRegistry(config=DEMO_CONFIG, manifest=manifest, loader=loader, prompts=prompts)


@pytest.fixture
def dispatcher(demo_registry: ServerRegistry) -> Dispatcher:
    return Dispatcher(demo_registry)


@pytest.fixture
def markdown_payload() -> str:
    return MARKDOWN_PAYLOAD
