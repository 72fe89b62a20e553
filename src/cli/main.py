"""Entry point de `pwfz`.

Uso:
    pwfz [palabras de búsqueda...]

Las palabras se unen con un espacio; sin argumentos se busca con query vacía
(el servidor decide qué significa "todo").

Códigos de salida: 0 al copiar, sin resultados o si se cancela fzf;
`PwfzError.exit_code` (1) ante cualquier error fatal.
"""

from __future__ import annotations

from contextlib import closing
from typing import List, Optional

import typer

from adapters.clipboard import SubprocessClipboard
from adapters.fzf_selector import FzfSelector
from adapters.passwork_client import PassworkClient
from cli.ui_components import build_consoles, build_hooks, print_error
from core.config import AppSettings, load_settings
from core.errors import PwfzError
from core.interfaces.collaborators import ClipboardWriter, LineSelector, VaultClient
from core.services.vault_pipeline import Outcome, collect_entries, select_and_copy

app = typer.Typer(
    add_completion=False,
    help="Search Passwork, pick an entry with fzf and copy its password to the clipboard.",
)

_out, _err = build_consoles()


def build_collaborators(
    settings: AppSettings,
) -> tuple[VaultClient, LineSelector, ClipboardWriter]:
    return (
        PassworkClient(settings),
        FzfSelector(settings.fzf_bin),
        SubprocessClipboard(settings.clip_bin),
    )


@app.command()
def search(
    query: Optional[List[str]] = typer.Argument(None, help="Search words (joined with spaces)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show progress on stderr."),
) -> None:
    """Search the vault and copy the selected password."""

    query_text = " ".join(query or [])
    hooks = build_hooks(_err, verbose=verbose)

    try:
        settings = load_settings()
        settings.require_base_url()
        settings.require_api_key()

        client, selector, clipboard = build_collaborators(settings)
        with closing(client):
            with _err.status("Searching Passwork..."):
                fetched = collect_entries(client, query_text, hooks)

        result = select_and_copy(fetched, selector, clipboard, hooks)
    except PwfzError as exc:
        print_error(_err, exc)
        raise typer.Exit(code=exc.exit_code) from exc

    if result.outcome is Outcome.NO_HITS:
        _err.print(f"no passwords found for query {query_text!r}", highlight=False, markup=False)
    elif result.outcome is Outcome.NO_USABLE_ENTRIES:
        _err.print("no usable password entries", highlight=False, markup=False)
    elif result.outcome is Outcome.COPIED and result.chosen is not None:
        _out.print(f"Copied password for {result.chosen.name!r} to clipboard.", highlight=False, markup=False)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
