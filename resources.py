from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from errors import ConfigurationError

MARKDOWN = "text/markdown"


def key_from_uri(uri: str) -> str:
    """Strip the ``<scheme>://`` prefix, leaving ``<category>/<name>``."""

    _, sep, rest = uri.partition("://")
    return rest if sep else uri


def humanize_path(resource_path: str) -> str:
    """Turn ``vitracoat/business-workflows`` into ``Vitracoat - Business Workflows``."""

    parts = resource_path.split("/")
    return " - ".join(" ".join(word.capitalize() for word in part.split("-")) for part in parts)


@dataclass(frozen=True)
class ResourceDefinition:
    uri: str
    name: str
    description: str
    mime_type: str = MARKDOWN
    content_key: Optional[str] = field(default=None)

    def __post_init__(self) -> None:
        if self.content_key is None:
            object.__setattr__(self, "content_key", key_from_uri(self.uri))

    def as_metadata(self) -> Dict[str, str]:
        return {
            "uri": self.uri,
            "mimeType": self.mime_type,
            "name": self.name,
            "description": self.description,
        }


class ResourceManifest:
    """Ordered, read-only table of the resources one server exposes."""

    def __init__(self, scheme: str, definitions: Iterable[ResourceDefinition] = ()) -> None:
        self.scheme = scheme
        self._prefix = f"{scheme}://"
        self._resources: Dict[str, ResourceDefinition] = {}
        for definition in definitions:
            self._register(definition)

    def _register(self, definition: ResourceDefinition) -> None:
        if not definition.uri.startswith(self._prefix):
            raise ConfigurationError(
                f"Resource {definition.uri} does not use the {self._prefix} scheme",
            )
        if definition.uri in self._resources:
            raise ConfigurationError(f"Duplicate resource URI: {definition.uri}")
        self._resources[definition.uri] = definition

    def __iter__(self) -> Iterator[ResourceDefinition]:
        return iter(self._resources.values())

    def __len__(self) -> int:
        return len(self._resources)

    def list_all(self) -> List[ResourceDefinition]:
        return list(self._resources.values())

    def find_by_uri(self, uri: str) -> Optional[ResourceDefinition]:
        return self._resources.get(uri)


def discover_markdown(
    directory: Path,
    scheme: str,
    *,
    prefix: str = "README-",
    category: str = "readme",
) -> List[Tuple[ResourceDefinition, Path]]:
    """Find ``README-<name>.md`` files and describe each as a resource.

    Returns ``(definition, path)`` pairs sorted by file name so listing order is
    stable between runs. A missing directory yields nothing.
    """

    if not directory.is_dir():
        return []

    found: List[Tuple[ResourceDefinition, Path]] = []
    for path in sorted(directory.glob(f"{prefix}*.md")):
        name = path.stem[len(prefix):]
        if not name:
            continue
        definition = ResourceDefinition(
            uri=f"{scheme}://{category}/{name}",
            name=f"{humanize_path(name)} Management README",
            description=f"README documentation for {name} management system",
        )
        found.append((definition, path))
    return found
