from __future__ import annotations

import pytest
from typer.testing import CliRunner

from cli import main as cli_main
from core.errors import ClipboardError, SelectorError
from conftest import FakeClipboard, FakeSelector, FakeVault, make_detail, pick_first

runner = CliRunner()


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("PASSWORK_BASE_URL", "https://pw.example.com")
    monkeypatch.setenv("PASSWORK_API_KEY", "k3y")


@pytest.fixture
def wire(monkeypatch):
    def install(vault, selector, clipboard):
        monkeypatch.setattr(
            cli_main, "build_collaborators", lambda settings: (vault, selector, clipboard)
        )

    return install


def test_query_words_are_joined(env, wire):
    vault = FakeVault([make_detail("p1", "GitHub")])
    clipboard = FakeClipboard()
    wire(vault, FakeSelector(pick_first), clipboard)

    result = runner.invoke(cli_main.app, ["git", "hub", "work"])

    assert result.exit_code == 0, result.output
    assert ("search", "git hub work") in vault.calls
    assert clipboard.copied == ["hello"]
    assert "Copied password for 'GitHub' to clipboard." in result.output
    assert vault.closed


def test_no_arguments_searches_everything(env, wire):
    vault = FakeVault([make_detail("p1")])
    wire(vault, FakeSelector(""), FakeClipboard())

    result = runner.invoke(cli_main.app, [])

    assert result.exit_code == 0
    assert ("search", "") in vault.calls


def test_no_hits_exits_cleanly(env, wire):
    selector = FakeSelector(pick_first)
    wire(FakeVault([]), selector, FakeClipboard())

    result = runner.invoke(cli_main.app, ["github"])

    assert result.exit_code == 0
    assert "no passwords found for query 'github'" in result.output
    assert selector.received is None


def test_cancel_exits_zero_without_copying(env, wire):
    clipboard = FakeClipboard()
    wire(FakeVault([make_detail("p1")]), FakeSelector(""), clipboard)

    result = runner.invoke(cli_main.app, ["x"])

    assert result.exit_code == 0
    assert clipboard.copied == []
    assert "Copied" not in result.output


def test_skipped_fetch_warns_but_succeeds(env, wire):
    vault = FakeVault([make_detail("a", "A"), make_detail("b", "B")], failing=["b"])
    wire(vault, FakeSelector(pick_first), FakeClipboard())

    result = runner.invoke(cli_main.app, ["q"])

    assert result.exit_code == 0
    assert "warning: skip b" in result.output


def test_missing_api_key_fails_before_network(monkeypatch):
    monkeypatch.setenv("PASSWORK_BASE_URL", "https://pw.example.com")
    built: list[object] = []
    monkeypatch.setattr(cli_main, "build_collaborators", lambda settings: built.append(settings))

    result = runner.invoke(cli_main.app, ["github"])

    assert result.exit_code == 1
    assert "config error" in result.output
    assert "PASSWORK_API_KEY" in result.output
    assert built == []


def test_missing_base_url_fails(monkeypatch):
    monkeypatch.setenv("PASSWORK_API_KEY", "k3y")
    result = runner.invoke(cli_main.app, [])
    assert result.exit_code == 1
    assert "PASSWORK_BASE_URL" in result.output


def test_selector_error_exits_one(env, wire):
    class BrokenSelector(FakeSelector):
        def select(self, lines):
            raise SelectorError("fzf exited with status 2")

    wire(FakeVault([make_detail("a")]), BrokenSelector(), FakeClipboard())

    result = runner.invoke(cli_main.app, ["a"])

    assert result.exit_code == 1
    assert "fzf error" in result.output


def test_clipboard_error_exits_one(env, wire):
    class BrokenClipboard(FakeClipboard):
        def copy(self, text):
            raise ClipboardError("no clipboard command found")

    wire(FakeVault([make_detail("a")]), FakeSelector(pick_first), BrokenClipboard())

    result = runner.invoke(cli_main.app, ["a"])

    assert result.exit_code == 1
    assert "clipboard error" in result.output
