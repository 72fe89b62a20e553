"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil

import typer

from adapters.clipboard import detect_clipboard_command
from adapters.passwork_client import PassworkClient
from cli.ui_components import build_checks_table, build_consoles, print_error
from core.config import AppSettings, load_settings
from core.errors import PwfzError

app = typer.Typer(add_completion=False, help="Environment diagnostics for pwfz.")

_out, _err = build_consoles()


def _check_login(settings: AppSettings) -> tuple[bool, str]:
    try:
        with PassworkClient(settings) as client:
            client.login()
        return True, "token received"
    except PwfzError as exc:
        return False, str(exc)


@app.command()
def check(
    login: bool = typer.Option(False, "--login", help="Also exchange the API key for a session token."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = load_settings()
    except PwfzError as exc:
        print_error(_err, exc)
        raise typer.Exit(code=exc.exit_code) from exc

    table = build_checks_table()
    failed = False

    # Config
    if settings.base_url:
        table.add_row("PASSWORK_BASE_URL", "OK", settings.base_url)
    else:
        failed = True
        table.add_row("PASSWORK_BASE_URL", "FAIL", "not set")
    if settings.api_key:
        table.add_row("PASSWORK_API_KEY", "OK", "set")
    else:
        failed = True
        table.add_row("PASSWORK_API_KEY", "FAIL", "not set")

    # Binaries
    fzf_path = shutil.which(settings.fzf_bin)
    if fzf_path:
        table.add_row("fzf", "OK", fzf_path)
    else:
        failed = True
        table.add_row("fzf", "FAIL", f"{settings.fzf_bin!r} not found (set FZF_BIN)")

    clip = detect_clipboard_command(settings.clip_bin)
    if clip:
        table.add_row("clipboard", "OK", " ".join(clip))
    else:
        failed = True
        table.add_row("clipboard", "FAIL", "set CLIP_BIN or install pbcopy/xclip/wl-copy")

    if login:
        if settings.base_url and settings.api_key:
            ok_login, detail_login = _check_login(settings)
        else:
            ok_login, detail_login = False, "skipped: missing configuration"
        failed = failed or not ok_login
        table.add_row("login", "OK" if ok_login else "FAIL", detail_login)

    _out.print(table)

    if failed:
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
