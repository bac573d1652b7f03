"""Markdown payloads, one directory per server laid out as ``<category>/<name>.md``."""

from __future__ import annotations

from pathlib import Path

DOCS_ROOT = Path(__file__).parent.absolute()


def server_docs(server_name: str) -> Path:
    return DOCS_ROOT / server_name


__all__ = ["DOCS_ROOT", "server_docs"]
