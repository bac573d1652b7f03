from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

from config import ServerConfig
from errors import ConfigurationError
from loader import ContentLoader, file_entry
from prompts import PromptDefinition, PromptRegistry
from resources import ResourceDefinition, ResourceManifest

logger = logging.getLogger(__name__)


@dataclass
class ServerRegistry:
    """Everything one server serves, built once at startup and read-only afterwards."""

    config: ServerConfig
    manifest: ResourceManifest
    loader: ContentLoader
    prompts: PromptRegistry = field(default_factory=PromptRegistry)

    @classmethod
    def from_directory(
        cls,
        config: ServerConfig,
        docs_dir: Path,
        definitions: Iterable[ResourceDefinition],
        prompts: Iterable[PromptDefinition] = (),
        extra: Iterable[Tuple[ResourceDefinition, Path]] = (),
    ) -> "ServerRegistry":
        """Build a registry whose payloads are ``<docs_dir>/<content_key>.md`` files.

        ``extra`` pairs (e.g. from :func:`resources.discover_markdown`) are appended
        to the manifest with their own file paths.
        """

        definitions = list(definitions)
        extra = list(extra)
        manifest = ResourceManifest(config.scheme, definitions + [definition for definition, _ in extra])
        loader = ContentLoader.from_directory(docs_dir, [definition.content_key for definition in definitions])
        for definition, path in extra:
            loader.register(definition.content_key, file_entry(path))
        return cls(config=config, manifest=manifest, loader=loader, prompts=PromptRegistry(prompts))

    def missing_keys(self) -> List[str]:
        return [definition.content_key for definition in self.manifest if definition.content_key not in self.loader]

    def validate(self) -> "ServerRegistry":
        """Fail fast when a manifest entry has no loader entry."""

        missing = self.missing_keys()
        if missing:
            raise ConfigurationError(
                f"{self.config.name}: manifest entries without content loaders",
                details=missing,
            )
        used = {definition.content_key for definition in self.manifest}
        unused = [key for key in self.loader if key not in used]
        if unused:
            logger.warning("%s: content keys not referenced by the manifest: %s", self.config.name, unused)
        return self
