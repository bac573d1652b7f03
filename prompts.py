from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from errors import ConfigurationError, PromptArgumentMissing, PromptNotFound

PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def placeholders(template: str) -> Set[str]:
    return set(PLACEHOLDER.findall(template))


def substitute(template: str, values: Mapping[str, str]) -> str:
    """Replace each ``{name}`` token in a single pass.

    Tokens without a value are left verbatim, as is any brace text that is not
    an identifier. Substituted values are never expanded again.
    """

    def _replace(match: "re.Match[str]") -> str:
        return values.get(match.group(1), match.group(0))

    return PLACEHOLDER.sub(_replace, template)


@dataclass(frozen=True)
class PromptArgument:
    name: str
    description: str
    required: bool = False
    default: str = ""

    def as_metadata(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description, "required": self.required}


@dataclass(frozen=True)
class PromptDefinition:
    """A named message template.

    ``description`` is what listings show. ``summary`` is the per-request
    description returned with the rendered message and may use the same
    placeholders as ``text``; it falls back to ``description``.
    """

    name: str
    description: str
    text: str
    arguments: Tuple[PromptArgument, ...] = ()
    summary: Optional[str] = field(default=None)

    def __post_init__(self) -> None:
        declared = [argument.name for argument in self.arguments]
        if len(set(declared)) != len(declared):
            raise ConfigurationError(f"Prompt {self.name} declares an argument twice", details=declared)
        for argument in self.arguments:
            if argument.required and argument.default:
                raise ConfigurationError(
                    f"Prompt {self.name}: required argument '{argument.name}' cannot have a default",
                )
        unknown = (placeholders(self.text) | placeholders(self.summary or "")) - set(declared)
        if unknown:
            raise ConfigurationError(
                f"Prompt {self.name} uses undeclared placeholders",
                details=sorted(unknown),
            )

    def as_metadata(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "arguments": [argument.as_metadata() for argument in self.arguments],
        }

    def resolve_arguments(self, supplied: Optional[Mapping[str, Any]]) -> Dict[str, str]:
        """Apply the argument policy: required must be present, optional fall back to defaults.

        ``None`` and the empty string count as absent. Undeclared arguments are ignored.
        """

        supplied = supplied or {}
        values: Dict[str, str] = {}
        for argument in self.arguments:
            raw = supplied.get(argument.name)
            value = "" if raw is None else str(raw)
            if not value:
                if argument.required:
                    raise PromptArgumentMissing(self.name, argument.name)
                value = argument.default
            values[argument.name] = value
        return values

    def render(self, supplied: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        values = self.resolve_arguments(supplied)
        return {
            "description": substitute(self.summary or self.description, values),
            "messages": [
                {
                    "role": "user",
                    "content": {"type": "text", "text": substitute(self.text, values)},
                }
            ],
        }


class PromptRegistry:
    def __init__(self, definitions: Iterable[PromptDefinition] = ()) -> None:
        self._prompts: Dict[str, PromptDefinition] = {}
        for definition in definitions:
            self._register(definition)

    def _register(self, definition: PromptDefinition) -> None:
        if definition.name in self._prompts:
            raise ConfigurationError(f"Duplicate prompt name: {definition.name}")
        self._prompts[definition.name] = definition

    def __iter__(self):
        return iter(self._prompts.values())

    def __len__(self) -> int:
        return len(self._prompts)

    def list_prompts(self) -> List[Dict[str, Any]]:
        return [definition.as_metadata() for definition in self._prompts.values()]

    def get_prompt(self, name: str) -> PromptDefinition:
        if name not in self._prompts:
            raise PromptNotFound(name)
        return self._prompts[name]
