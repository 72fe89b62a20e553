"""Orquestación del flujo buscar -> elegir -> copiar.

El flujo es estrictamente secuencial:

1. login (API key -> token)
2. búsqueda (query -> hits)
3. detalle de cada hit, en el orden devuelto; los fallos individuales se
   avisan y se omiten
4. líneas para fzf y selección
5. decode del secreto y copia al portapapeles

La CLI solo pinta: los avisos salen por `PipelineHooks`, y los colaboradores
(API, fzf, portapapeles) se reciben ya construidos para poder usar fakes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Sequence

from core.codec import decode_strict
from core.domain.models import PasswordDetail, SearchHit
from core.errors import DecodeWarning, EmptySecretError, FetchError, NotFoundError
from core.formatting import build_display_lines, parse_selected_id
from core.interfaces.collaborators import ClipboardWriter, LineSelector, VaultClient


class Outcome(str, Enum):
    """Finales no fatales del flujo; todos terminan con código 0."""

    COPIED = "copied"
    NO_HITS = "no_hits"
    NO_USABLE_ENTRIES = "no_usable_entries"
    CANCELLED = "cancelled"


@dataclass
class PipelineHooks:
    """Callbacks opcionales para la capa de UI (avisos, progreso)."""

    warning: Callable[[str], None] | None = None
    info: Callable[[str], None] | None = None

    def warn(self, message: str) -> None:
        if self.warning:
            self.warning(message)

    def note(self, message: str) -> None:
        if self.info:
            self.info(message)


@dataclass
class FetchResult:
    """Detalles obtenidos para una query."""

    query: str
    hits: list[SearchHit] = field(default_factory=list)
    details: list[PasswordDetail] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


@dataclass
class PipelineResult:
    outcome: Outcome
    fetched: FetchResult
    chosen: PasswordDetail | None = None


def fetch_details(
    client: VaultClient,
    token: str,
    hits: Sequence[SearchHit],
    hooks: PipelineHooks | None = None,
) -> tuple[list[PasswordDetail], list[str]]:
    """Pide el detalle de cada hit, uno a uno y en orden.

    Un `FetchError` no aborta: se avisa y ese id queda fuera. Los ids
    duplicados se piden (y se muestran) tantas veces como aparezcan.
    """

    hooks = hooks or PipelineHooks()
    details: list[PasswordDetail] = []
    skipped: list[str] = []
    for hit in hits:
        try:
            details.append(client.get_password(token, hit.id))
        except FetchError as exc:
            hooks.warn(f"skip {hit.id}: {exc}")
            skipped.append(hit.id)
    return details, skipped


def collect_entries(
    client: VaultClient,
    query: str,
    hooks: PipelineHooks | None = None,
) -> FetchResult:
    """Login + búsqueda + detalles. Errores de login/búsqueda se propagan."""

    hooks = hooks or PipelineHooks()
    token = client.login()
    hooks.note("authenticated")

    hits = client.search(token, query)
    result = FetchResult(query=query, hits=list(hits))
    hooks.note(f"{len(result.hits)} matches for query {query!r}")
    if not result.hits:
        return result

    result.details, result.skipped = fetch_details(client, token, result.hits, hooks)
    hooks.note(f"fetched {len(result.details)} of {len(result.hits)} entries")
    return result


def find_detail(details: Sequence[PasswordDetail], password_id: str) -> PasswordDetail:
    for detail in details:
        if detail.id == password_id:
            return detail
    raise NotFoundError(f"could not find password for selected id {password_id}")


def resolve_secret(detail: PasswordDetail, hooks: PipelineHooks | None = None) -> str:
    """Secreto listo para copiar.

    Si el decode falla se copia el valor crudo (con aviso). Un secreto vacío
    es fatal: no hay nada útil que copiar.
    """

    hooks = hooks or PipelineHooks()
    raw = detail.crypted_password
    if not raw:
        raise EmptySecretError("selected entry has empty cryptedPassword")
    try:
        return decode_strict(raw)
    except DecodeWarning as exc:
        hooks.warn(f"cannot base64-decode cryptedPassword, copying raw value: {exc}")
        return raw


def select_and_copy(
    fetched: FetchResult,
    selector: LineSelector,
    clipboard: ClipboardWriter,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    """Pasa las líneas a fzf y copia el secreto de la elegida."""

    hooks = hooks or PipelineHooks()
    if not fetched.hits:
        return PipelineResult(outcome=Outcome.NO_HITS, fetched=fetched)
    if not fetched.details:
        return PipelineResult(outcome=Outcome.NO_USABLE_ENTRIES, fetched=fetched)

    selected = selector.select(build_display_lines(fetched.details))
    if not selected:
        return PipelineResult(outcome=Outcome.CANCELLED, fetched=fetched)

    chosen = find_detail(fetched.details, parse_selected_id(selected))
    clipboard.copy(resolve_secret(chosen, hooks))
    return PipelineResult(outcome=Outcome.COPIED, fetched=fetched, chosen=chosen)


def run_pipeline(
    client: VaultClient,
    query: str,
    selector: LineSelector,
    clipboard: ClipboardWriter,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    """Flujo completo en una llamada, para uso programático y tests.

    La CLI llama a `collect_entries` y `select_and_copy` por separado para
    envolver solo la fase de red en el spinner.
    """

    fetched = collect_entries(client, query, hooks)
    return select_and_copy(fetched, selector, clipboard, hooks)
