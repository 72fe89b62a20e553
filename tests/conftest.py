"""Fixtures y fakes compartidos.

Los fakes implementan los Protocol de `core.interfaces.collaborators`, así el
pipeline y la CLI se prueban sin red, sin fzf y sin portapapeles reales.
"""

from __future__ import annotations

from typing import Callable, Sequence

import pytest

from core.codec import encode
from core.config import AppSettings, load_settings
from core.domain.models import PasswordDetail, SearchHit
from core.errors import FetchError

ENV_VARS = (
    "PASSWORK_BASE_URL",
    "PASSWORK_API_KEY",
    "PASSWORK_HTTP_TIMEOUT",
    "PASSWORK_USER_AGENT",
    "FZF_BIN",
    "CLIP_BIN",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    monkeypatch.setenv("PASSWORK_BASE_URL", "https://pw.example.com/api/v4/")
    monkeypatch.setenv("PASSWORK_API_KEY", "k3y")
    return load_settings()


def make_detail(
    password_id: str,
    name: str = "",
    *,
    secret: str | None = "hello",
    **extra: object,
) -> PasswordDetail:
    payload: dict[str, object] = {
        "id": password_id,
        "name": name,
        "cryptedPassword": encode(secret) if secret is not None else "",
    }
    payload.update(extra)
    return PasswordDetail.model_validate(payload)


class FakeVault:
    def __init__(
        self,
        details: Sequence[PasswordDetail] = (),
        *,
        hits: Sequence[SearchHit] | None = None,
        failing: Sequence[str] = (),
        token: str = "tok",
    ) -> None:
        self.details = {detail.id: detail for detail in details}
        self.hits = (
            list(hits)
            if hits is not None
            else [SearchHit(id=detail.id, name=detail.name) for detail in details]
        )
        self.failing = set(failing)
        self.token = token
        self.calls: list[tuple[str, ...]] = []
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def login(self) -> str:
        self.calls.append(("login",))
        return self.token

    def search(self, token: str, query: str) -> list[SearchHit]:
        assert token == self.token
        self.calls.append(("search", query))
        return list(self.hits)

    def get_password(self, token: str, password_id: str) -> PasswordDetail:
        assert token == self.token
        self.calls.append(("get", password_id))
        if password_id in self.failing or password_id not in self.details:
            raise FetchError(f"get password {password_id} failed: status=404 body=")
        return self.details[password_id]


class FakeSelector:
    def __init__(self, choose: Callable[[Sequence[str]], str] | str = "") -> None:
        self.choose = choose
        self.received: list[str] | None = None

    def select(self, lines: Sequence[str]) -> str:
        self.received = list(lines)
        if callable(self.choose):
            return self.choose(lines)
        return self.choose


class FakeClipboard:
    def __init__(self) -> None:
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        self.copied.append(text)


def pick_first(lines: Sequence[str]) -> str:
    return lines[0]
