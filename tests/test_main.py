from __future__ import annotations

import logging

from typer.testing import CliRunner

import main
from catalogs import SERVERS

runner = CliRunner()


class FakeMCP:
    def __init__(self):
        self.calls = []

    def run(self, **kwargs):
        self.calls.append(kwargs)


def _main_messages(caplog):
    return [record.getMessage() for record in caplog.records if record.name == "main"]


def test_list_shows_every_server():
    result = runner.invoke(main.cli, ["list"])
    assert result.exit_code == 0
    for name in SERVERS:
        assert name in result.output
    assert "crm-base://" in result.output


def test_check_reads_every_resource():
    result = runner.invoke(main.cli, ["check"])
    assert result.exit_code == 0, result.output
    assert f"{len(SERVERS)} servers OK" in result.output


def test_run_unknown_server_exits_non_zero(caplog):
    caplog.set_level(logging.INFO, logger="main")
    result = runner.invoke(main.cli, ["run", "nope"])
    assert result.exit_code == 1
    messages = _main_messages(caplog)
    assert len(messages) == 1
    assert messages[0].startswith("Failed to start nope")


def test_run_starts_stdio_transport(monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="main")
    fake = FakeMCP()
    monkeypatch.setattr(main, "create_mcp", lambda registry: fake)
    result = runner.invoke(main.crm_template_base, [])
    assert result.exit_code == 0, result.output
    assert fake.calls == [{"transport": "stdio", "show_banner": False}]
    assert _main_messages(caplog) == ["CRM Template Base MCP server running on stdio"]


def test_stdio_mode_keeps_stdout_clean(monkeypatch, capsys):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    for name in ("mcp", "fastmcp"):
        monkeypatch.setattr(logging.getLogger(name), "level", logging.getLogger(name).level)
    fake = FakeMCP()
    monkeypatch.setattr(main, "create_mcp", lambda registry: fake)

    main.serve("crm-template-base")
    logging.getLogger("fastmcp").warning("fastmcp warning")

    captured = capsys.readouterr()
    assert fake.calls == [{"transport": "stdio", "show_banner": False}]
    assert captured.out == ""
    assert "CRM Template Base MCP server running on stdio" in captured.err
