from __future__ import annotations

import subprocess

import pytest

from adapters import fzf_selector
from adapters.fzf_selector import FZF_OPTIONS, FzfSelector
from core.errors import SelectorError


class FakeRun:
    def __init__(self, returncode: int = 0, stdout: str = "", exc: Exception | None = None) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.exc = exc
        self.calls: list[tuple[list[str], dict]] = []

    def __call__(self, args, **kwargs):
        self.calls.append((list(args), kwargs))
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(args, self.returncode, stdout=self.stdout)


@pytest.fixture
def fake_run(monkeypatch):
    def install(**kwargs) -> FakeRun:
        runner = FakeRun(**kwargs)
        monkeypatch.setattr(fzf_selector.subprocess, "run", runner)
        return runner

    return install


def test_lines_are_piped_and_selection_returned(fake_run):
    runner = fake_run(stdout="id-2\tGitLab | - |  |  | \n")

    selected = FzfSelector("my-fzf").select(["id-1\tGitHub | - |  |  | ", "id-2\tGitLab | - |  |  | "])

    assert selected == "id-2\tGitLab | - |  |  |"
    args, kwargs = runner.calls[0]
    assert args == ["my-fzf", *FZF_OPTIONS]
    assert kwargs["input"] == "id-1\tGitHub | - |  |  | \nid-2\tGitLab | - |  |  | "
    assert kwargs["stdout"] is subprocess.PIPE
    assert "stderr" not in kwargs


def test_id_column_hidden_from_display():
    assert "--with-nth=2.." in FZF_OPTIONS
    assert "--delimiter=\t" in FZF_OPTIONS


@pytest.mark.parametrize("returncode", [1, 130])
def test_cancel_is_empty_selection(fake_run, returncode):
    fake_run(returncode=returncode)
    assert FzfSelector().select(["a\tb"]) == ""


def test_abnormal_exit_is_selector_error(fake_run):
    fake_run(returncode=2)
    with pytest.raises(SelectorError, match="status 2"):
        FzfSelector().select(["a\tb"])


def test_missing_binary_is_selector_error(fake_run):
    fake_run(exc=FileNotFoundError(2, "No such file or directory"))
    with pytest.raises(SelectorError, match="cannot start"):
        FzfSelector("nope").select(["a\tb"])
