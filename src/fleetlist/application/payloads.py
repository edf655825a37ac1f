"""Application – decoding of JSON-object request parameters."""
from __future__ import annotations

import json
from typing import Any, Mapping

from fleetlist.kernel.errors import ValidationError


def decode_object(raw: Any, field: str) -> dict[str, Any]:
    """Return *raw* as a dict, decoding it first when it is a JSON string.

    ``None`` and ``""`` decode to ``{}``.  Anything that is not a JSON
    object raises :class:`ValidationError` naming *field*.
    """
    if raw is None or raw == "":
        return {}
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError.for_field(
                f"{field} is not valid UTF-8",
                field,
                "invalid encoding",
                cause=exc,
            ) from exc
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValidationError.for_field(
                f"Invalid JSON in {field}: {exc.msg}",
                field,
                "invalid JSON",
                cause=exc,
            ) from exc
    if not isinstance(raw, Mapping):
        raise ValidationError.for_field(
            f"{field} must be an object",
            field,
            f"expected object, got {type(raw).__name__}",
        )
    return dict(raw)


__all__ = ["decode_object"]
