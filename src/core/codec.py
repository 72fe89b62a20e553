"""Codificación de campos de Passwork.

La API entrega `cryptedPassword` y los campos custom (nombre y valor) en
base64 estándar. Aquí vive la única implementación del decode para que el
formateador y el portapapeles se comporten igual.
"""

from __future__ import annotations

import base64
import binascii

from core.errors import DecodeWarning


def encode(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def decode_strict(value: str) -> str:
    """Decodifica base64 estándar (con padding) a texto UTF-8.

    Lanza `DecodeWarning` si el alfabeto/padding no es válido o si los bytes
    resultantes no son UTF-8.
    """

    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeWarning(f"invalid base64: {exc}") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeWarning(f"decoded bytes are not utf-8: {exc}") from exc


def decode_or_raw(value: str) -> str:
    """Como `decode_strict`, pero devuelve `value` intacto si falla."""

    try:
        return decode_strict(value)
    except DecodeWarning:
        return value
