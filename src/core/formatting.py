"""Formato de líneas para fzf.

Cada `PasswordDetail` se convierte en una línea:

    <id><TAB><name> | <path> | <login> | <url> | <description>

La primera columna (id) la oculta fzf con `--with-nth=2..`, pero vuelve en la
salida y permite recuperar el registro elegido. Siempre hay exactamente cuatro
separadores ` | ` para que las columnas no se desplacen.

Funciones puras: sin I/O ni efectos laterales.
"""

from __future__ import annotations

import re
from typing import Iterable

from core.codec import decode_or_raw
from core.domain.models import CustomField, PasswordDetail, PathSegment

NO_TITLE = "(no title)"
NO_PATH = "-"
ID_DELIMITER = "\t"
COLUMN_SEPARATOR = " | "
PATH_SEPARATOR = " / "
FIELD_SEPARATOR = "; "

_LINE_BREAKING_WS = re.compile(r"[\t\r\n\v\f]+")


def one_line(value: str) -> str:
    """Tabs y saltos de línea a un espacio: fzf lee una entrada por línea."""

    return _LINE_BREAKING_WS.sub(" ", value)


def or_empty(value: str) -> str:
    return value if value.strip() else ""


def format_path(path: Iterable[PathSegment]) -> str:
    """Une los nombres de la ruta ordenados por `order`; "-" si no queda ninguno."""

    ordered = sorted(path, key=lambda s: s.order)
    names = [one_line(segment.name) for segment in ordered if segment.name]
    if not names:
        return NO_PATH
    return PATH_SEPARATOR.join(names)


def format_custom_field(field: CustomField) -> str:
    name = one_line(decode_or_raw(field.name)).strip()
    value = one_line(decode_or_raw(field.value)).strip()
    if not name:
        return value
    if not value:
        return name
    return f"{name}={value}"


def format_description(custom: Iterable[CustomField]) -> str:
    parts = [format_custom_field(field) for field in custom]
    return FIELD_SEPARATOR.join(part for part in parts if part)


def build_display_line(detail: PasswordDetail) -> str:
    display = COLUMN_SEPARATOR.join(
        (
            one_line(detail.name) or NO_TITLE,
            format_path(detail.path),
            one_line(or_empty(detail.login)),
            one_line(or_empty(detail.url)),
            format_description(detail.custom),
        )
    )
    return f"{detail.id}{ID_DELIMITER}{display}"


def build_display_lines(details: Iterable[PasswordDetail]) -> list[str]:
    return [build_display_line(detail) for detail in details]


def parse_selected_id(selected: str) -> str:
    """Recupera el id de la línea que devuelve fzf (todo hasta el primer tab)."""

    return selected.split(ID_DELIMITER, 1)[0]
