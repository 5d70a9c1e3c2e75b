"""Helpers that turn OpenAPI names into proto identifiers."""

import re
from typing import Any

_NON_IDENT = re.compile(r"[^A-Za-z0-9]")
_PATH_SEPARATORS = re.compile(r"[{}\\/\-]")
_UNDERSCORE_RUN = re.compile(r"_+")


def capitalize(name: str) -> str:
    """Upper-case the first character only. "userId" -> "UserId"."""
    if not name:
        return name
    return name[0].upper() + name[1:]


def normalize_enum(value: Any) -> str:
    """Turn an enum literal into a constant name. "Value-1" -> "VALUE_1"."""
    return _NON_IDENT.sub("_", _literal_text(value).upper())


def format_path(path: str) -> str:
    """Flatten a path template. "/users/{id}" -> "_users_id_"."""
    return _UNDERSCORE_RUN.sub("_", _PATH_SEPARATORS.sub("_", path))


def rpc_name(method: str, path: str) -> str:
    """Synthesize an RPC name for operations without an operationId.

    "GET", "/users/{id}" -> "GetUsers_id_"
    """
    return capitalize(method.lower()) + capitalize(format_path(path).lstrip("_"))


def _literal_text(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
