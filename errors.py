"""Error taxonomy shared by the manifest, the loader and the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ContentServerError(Exception):
    message: str
    code: Optional[str] = None
    details: Optional[Any] = None

    def __str__(self) -> str:  # pragma: no cover - logging helper
        base = self.message
        if self.code:
            base = f"[{self.code}] " + base
        if self.details is not None:
            base += f": {self.details}"
        return base

    def as_envelope(self) -> Dict[str, Dict[str, str]]:
        return {"error": {"code": self.code or "INTERNAL_ERROR", "message": self.message}}


class ConfigurationError(ContentServerError):
    """A manifest, loader or prompt table that cannot be served as declared."""

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class LoaderMissing(ContentServerError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Resource loader not found for: {key}", code="LOADER_MISSING")
        self.key = key


class LoadFailure(ContentServerError):
    def __init__(self, key: str, cause: BaseException) -> None:
        super().__init__(f"Failed to load content {key}: {cause}", code="LOAD_FAILURE")
        self.key = key
        self.cause = cause


class ResourceNotFound(ContentServerError):
    def __init__(self, uri: str) -> None:
        super().__init__(f"Resource not found: {uri}", code="RESOURCE_NOT_FOUND")
        self.uri = uri


class ResourceLoadError(ContentServerError):
    def __init__(self, uri: str, cause: BaseException) -> None:
        reason = cause.cause if isinstance(cause, LoadFailure) else cause
        super().__init__(f"Failed to load resource {uri}: {reason}", code="RESOURCE_LOAD_ERROR")
        self.uri = uri
        self.cause = cause


class ConfigurationDefect(ContentServerError):
    """The manifest lists a resource whose content key has no loader entry."""

    def __init__(self, uri: str, key: str) -> None:
        super().__init__(f"Resource loader not found for: {uri}", code="CONFIGURATION_DEFECT", details=key)
        self.uri = uri
        self.key = key


class PromptNotFound(ContentServerError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Prompt not found: {name}", code="PROMPT_NOT_FOUND")
        self.name = name


class PromptArgumentMissing(ContentServerError):
    def __init__(self, prompt: str, argument: str) -> None:
        super().__init__(
            f"Missing required argument '{argument}' for prompt {prompt}",
            code="PROMPT_ARGUMENT_MISSING",
        )
        self.prompt = prompt
        self.argument = argument


__all__ = [
    "ConfigurationDefect",
    "ConfigurationError",
    "ContentServerError",
    "LoadFailure",
    "LoaderMissing",
    "PromptArgumentMissing",
    "PromptNotFound",
    "ResourceLoadError",
    "ResourceNotFound",
]
