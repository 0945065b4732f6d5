"""JSON envelope helpers shared by the controllers.

Every response has the shape ``{"success": bool, "message"?: str, "data"?: ...}``.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional, Type, TypeVar

from flask import jsonify, request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from ..core.exceptions import AuthenticationError, ValidationError
from .datetime_utils import isoformat_or_none

S = TypeVar("S", bound=BaseModel)


def ok(data: Any = None, *, message: Optional[str] = None, status: int = 200, **extra: Any):
    body: dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = to_json(data)
    body.update(extra)
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def to_json(value: Any) -> Any:
    """Recursively convert dates and decimals into JSON friendly values."""
    if isinstance(value, Mapping):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    if isinstance(value, Decimal):
        return str(value)
    return isoformat_or_none(value)


def _schema_message(err: SchemaError) -> str:
    parts = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e.get("loc", ())) or "body"
        parts.append(f"{loc}: {e.get('msg')}")
    return "; ".join(parts)


def validate(schema: Type[S], payload: Any) -> S:
    """Validate a decoded body or query; anything that is not an object is rejected too."""
    try:
        return schema.model_validate(payload)
    except SchemaError as e:
        raise ValidationError(_schema_message(e))


def parse_body(schema: Type[S]) -> S:
    return validate(schema, request.get_json(silent=True) or {})


def parse_query(schema: Type[S]) -> S:
    # Empty query values behave as if the parameter was not sent.
    args = {k: v for k, v in request.args.items() if v != ""}
    return validate(schema, args)


def bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError("Access denied. No token provided.")
    return parts[1]
