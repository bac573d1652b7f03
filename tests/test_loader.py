from __future__ import annotations

import json

import pytest

from errors import ConfigurationError, LoaderMissing, LoadFailure
from loader import ContentLoader, file_entry, json_entry, text_entry


async def test_load_sync_thunk():
    loader = ContentLoader({"a/one": text_entry("# Title\nBody text")})
    assert await loader.load("a/one") == "# Title\nBody text"


async def test_load_async_thunk():
    async def fetch() -> str:
        return "from a coroutine"

    loader = ContentLoader({"a/one": fetch})
    assert await loader.load("a/one") == "from a coroutine"


async def test_missing_key_is_loader_missing():
    loader = ContentLoader()
    with pytest.raises(LoaderMissing) as info:
        await loader.load("a/one")
    assert info.value.code == "LOADER_MISSING"
    assert info.value.key == "a/one"


async def test_raising_thunk_is_load_failure():
    def broken() -> str:
        raise RuntimeError("boom")

    loader = ContentLoader({"a/one": broken})
    with pytest.raises(LoadFailure) as info:
        await loader.load("a/one")
    assert isinstance(info.value.cause, RuntimeError)
    assert "boom" in info.value.message


async def test_non_string_payload_is_load_failure():
    loader = ContentLoader({"a/one": lambda: 42})
    with pytest.raises(LoadFailure, match="expected str payload"):
        await loader.load("a/one")


def test_duplicate_key_rejected():
    loader = ContentLoader({"a/one": text_entry("x")})
    with pytest.raises(ConfigurationError):
        loader.register("a/one", text_entry("y"))


async def test_file_entry_reads_on_each_load(tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("first", encoding="utf-8")
    loader = ContentLoader({"doc": file_entry(path)})
    assert await loader.load("doc") == "first"
    path.write_text("second", encoding="utf-8")
    assert await loader.load("doc") == "second"


async def test_from_directory_missing_file_fails_on_load(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "one.md").write_text("# One", encoding="utf-8")
    loader = ContentLoader.from_directory(tmp_path, ["a/one", "a/two"])

    assert "a/two" in loader
    assert await loader.load("a/one") == "# One"
    with pytest.raises(LoadFailure):
        await loader.load("a/two")


async def test_json_entry_uses_two_space_indent():
    data = {"name": "Model", "tags": ["x"]}
    text = await ContentLoader({"m": json_entry(data)}).load("m")
    assert text == json.dumps(data, indent=2)
    assert json.loads(text) == data
