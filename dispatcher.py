"""Protocol-facing request handling for a content server.

Four request kinds exist. Each ``handle_*`` coroutine returns the success
payload or raises a :class:`errors.ContentServerError`; :meth:`Dispatcher.dispatch`
wraps them so that every request yields either a success payload or an
``{"error": {...}}`` envelope and never an unhandled exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from errors import (
    ConfigurationDefect,
    ContentServerError,
    LoaderMissing,
    LoadFailure,
    ResourceLoadError,
    ResourceNotFound,
)
from registry import ServerRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListResources:
    pass


@dataclass(frozen=True)
class ReadResource:
    uri: str


@dataclass(frozen=True)
class ListPrompts:
    pass


@dataclass(frozen=True)
class GetPrompt:
    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


Request = Union[ListResources, ReadResource, ListPrompts, GetPrompt]


def is_error(response: Mapping[str, Any]) -> bool:
    return "error" in response


class Dispatcher:
    def __init__(self, registry: ServerRegistry) -> None:
        self.registry = registry

    async def handle_list_resources(self) -> Dict[str, Any]:
        return {"resources": [definition.as_metadata() for definition in self.registry.manifest.list_all()]}

    async def handle_read_resource(self, uri: str) -> Dict[str, Any]:
        definition = self.registry.manifest.find_by_uri(uri)
        if definition is None:
            raise ResourceNotFound(uri)
        try:
            text = await self.registry.loader.load(definition.content_key)
        except LoaderMissing as exc:
            raise ConfigurationDefect(uri, exc.key) from exc
        except LoadFailure as exc:
            raise ResourceLoadError(uri, exc) from exc
        return {"contents": [{"uri": uri, "mimeType": definition.mime_type, "text": text}]}

    async def handle_list_prompts(self) -> Dict[str, Any]:
        return {"prompts": self.registry.prompts.list_prompts()}

    async def handle_get_prompt(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return self.registry.prompts.get_prompt(name).render(arguments)

    async def dispatch(self, request: Request) -> Dict[str, Any]:
        try:
            if isinstance(request, ListResources):
                return await self.handle_list_resources()
            if isinstance(request, ReadResource):
                return await self.handle_read_resource(request.uri)
            if isinstance(request, ListPrompts):
                return await self.handle_list_prompts()
            if isinstance(request, GetPrompt):
                return await self.handle_get_prompt(request.name, request.arguments)
        except (ConfigurationDefect, ResourceLoadError) as exc:
            logger.error("%s: %s", self.registry.config.name, exc)
            return exc.as_envelope()
        except ContentServerError as exc:
            logger.warning("%s: %s", self.registry.config.name, exc.message)
            return exc.as_envelope()
        raise TypeError(f"Unsupported request: {request!r}")
