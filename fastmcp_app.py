from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import PromptError, ResourceError
from fastmcp.prompts.prompt import Prompt, PromptArgument
from fastmcp.server.middleware import Middleware, MiddlewareContext
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, ErrorData, GetPromptResult, PromptMessage, TextContent
from pydantic import Field

from dispatcher import Dispatcher, GetPrompt, ListPrompts, ListResources, ReadResource, is_error
from prompts import PromptDefinition
from registry import ServerRegistry
from resources import ResourceDefinition

# Caller mistakes; anything else in an envelope is a server-side fault.
CLIENT_ERROR_CODES = frozenset({"RESOURCE_NOT_FOUND", "PROMPT_NOT_FOUND", "PROMPT_ARGUMENT_MISSING"})


def _raise_envelope(response: Dict[str, Any]) -> None:
    error = response["error"]
    code = INVALID_PARAMS if error.get("code") in CLIENT_ERROR_CODES else INTERNAL_ERROR
    raise McpError(ErrorData(code=code, message=error["message"]))


def _as_messages(response: Dict[str, Any]) -> List[PromptMessage]:
    return [
        PromptMessage(role=message["role"], content=TextContent(type="text", text=message["content"]["text"]))
        for message in response["messages"]
    ]


class DispatcherMiddleware(Middleware):
    """Answers list/read/get requests from the dispatcher.

    FastMCP's own managers would otherwise answer unknown URIs and prompt names
    with their own messages and report a prompt's static description.
    """

    def __init__(self, dispatcher: Dispatcher) -> None:
        self.dispatcher = dispatcher

    async def on_list_resources(self, context: MiddlewareContext, call_next):
        response = await self.dispatcher.dispatch(ListResources())
        components = {str(component.uri): component for component in await call_next(context)}
        return [components[item["uri"]] for item in response["resources"] if item["uri"] in components]

    async def on_read_resource(self, context: MiddlewareContext, call_next):
        response = await self.dispatcher.dispatch(ReadResource(str(context.message.uri)))
        if is_error(response):
            _raise_envelope(response)
        return [ReadResourceContents(content=item["text"], mime_type=item["mimeType"]) for item in response["contents"]]

    async def on_list_prompts(self, context: MiddlewareContext, call_next):
        response = await self.dispatcher.dispatch(ListPrompts())
        components = {component.name: component for component in await call_next(context)}
        return [components[item["name"]] for item in response["prompts"] if item["name"] in components]

    async def on_get_prompt(self, context: MiddlewareContext, call_next):
        message = context.message
        response = await self.dispatcher.dispatch(GetPrompt(message.name, message.arguments or {}))
        if is_error(response):
            _raise_envelope(response)
        return GetPromptResult(description=response["description"], messages=_as_messages(response))


class DispatchedPrompt(Prompt):
    """FastMCP prompt whose rendering goes through the dispatcher."""

    dispatcher: Any = Field(default=None, exclude=True)

    async def render(self, arguments: Optional[Dict[str, Any]] = None) -> List[PromptMessage]:
        response = await self.dispatcher.dispatch(GetPrompt(self.name, arguments or {}))
        if is_error(response):
            raise PromptError(response["error"]["message"])
        return _as_messages(response)


def create_mcp(registry: ServerRegistry, dispatcher: Optional[Dispatcher] = None) -> FastMCP:
    """Create a FastMCP server exposing one registry's resources and prompts.

    The registry is cross-validated first, so a manifest entry without a content
    loader stops startup instead of failing on the first read. Protocol requests
    are answered by the dispatcher; the bound components supply listing metadata.
    """

    registry.validate()
    handler = dispatcher or Dispatcher(registry)
    cfg = registry.config

    mcp = FastMCP(name=cfg.name, instructions=cfg.description or None)
    mcp.add_middleware(DispatcherMiddleware(handler))

    # ---------------------------- Resources ------------------------------
    for definition in registry.manifest:
        _bind_resource(mcp, handler, definition)

    # ----------------------------- Prompts -------------------------------
    for prompt in registry.prompts:
        mcp.add_prompt(_as_fastmcp_prompt(prompt, handler))

    return mcp


def _bind_resource(mcp: FastMCP, handler: Dispatcher, definition: ResourceDefinition) -> None:
    uri = definition.uri

    async def read() -> str:
        response = await handler.dispatch(ReadResource(uri))
        if is_error(response):
            raise ResourceError(response["error"]["message"])
        return response["contents"][0]["text"]

    mcp.resource(
        uri,
        name=definition.name,
        description=definition.description,
        mime_type=definition.mime_type,
    )(read)


def _as_fastmcp_prompt(prompt: PromptDefinition, handler: Dispatcher) -> DispatchedPrompt:
    return DispatchedPrompt(
        name=prompt.name,
        description=prompt.description,
        arguments=[
            PromptArgument(name=argument.name, description=argument.description, required=argument.required)
            for argument in prompt.arguments
        ],
        dispatcher=handler,
    )
