from __future__ import annotations

import pytest
from fastmcp import Client
from mcp.shared.exceptions import McpError

from errors import ConfigurationError
from fastmcp_app import create_mcp
from loader import ContentLoader, text_entry
from registry import ServerRegistry


async def test_resources_over_protocol(demo_registry):
    async with Client(create_mcp(demo_registry)) as client:
        resources = await client.list_resources()
        assert sorted(str(resource.uri) for resource in resources) == ["demo://a/one", "demo://a/two", "demo://b/poison"]
        by_uri = {str(resource.uri): resource for resource in resources}
        assert by_uri["demo://a/one"].name == "One"
        assert by_uri["demo://a/one"].mimeType == "text/markdown"

        contents = await client.read_resource("demo://a/one")
        assert contents[0].text == "# Title\nBody text"


async def test_load_failure_over_protocol(demo_registry):
    async with Client(create_mcp(demo_registry)) as client:
        with pytest.raises(McpError, match="disk unavailable"):
            await client.read_resource("demo://b/poison")
        contents = await client.read_resource("demo://a/two")
        assert contents[0].text.startswith("# Title")


async def test_prompts_over_protocol(demo_registry):
    async with Client(create_mcp(demo_registry)) as client:
        prompts = await client.list_prompts()
        assert [prompt.name for prompt in prompts] == ["greet"]
        assert [(argument.name, argument.required) for argument in prompts[0].arguments] == [
            ("name", True),
            ("component_type", False),
        ]

        result = await client.get_prompt("greet", {"name": "X"})
        assert result.messages[0].role == "user"
        assert result.messages[0].content.text == "Hello X, create a component"

        with pytest.raises(McpError, match="Missing required argument"):
            await client.get_prompt("greet", {})


def test_unvalidated_registry_refused(demo_registry):
    broken = ServerRegistry(
        config=demo_registry.config,
        manifest=demo_registry.manifest,
        loader=ContentLoader({"a/one": text_entry("x")}),
    )
    with pytest.raises(ConfigurationError):
        create_mcp(broken)


async def test_listing_follows_declaration_order(demo_registry):
    async with Client(create_mcp(demo_registry)) as client:
        resources = await client.list_resources()
        assert [str(resource.uri) for resource in resources] == [
            definition.uri for definition in demo_registry.manifest
        ]


async def test_unknown_uri_reports_dispatcher_message(demo_registry):
    async with Client(create_mcp(demo_registry)) as client:
        with pytest.raises(McpError) as excinfo:
            await client.read_resource("demo://missing")
    assert excinfo.value.error.message == "Resource not found: demo://missing"


async def test_unknown_prompt_reports_dispatcher_message(demo_registry):
    async with Client(create_mcp(demo_registry)) as client:
        with pytest.raises(McpError) as excinfo:
            await client.get_prompt("nope", {})
    assert excinfo.value.error.message == "Prompt not found: nope"


async def test_prompt_description_is_substituted_summary(demo_registry):
    async with Client(create_mcp(demo_registry)) as client:
        result = await client.get_prompt("greet", {"name": "X", "component_type": "w"})
    assert result.description == "Building w for X"
    assert result.messages[0].content.text == "Hello X, create a w"
