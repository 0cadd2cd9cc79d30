from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from flask import jsonify, request

from ..core.constants import SUCCESS
from ..core.result import Result

# HTTP status for each DomainError.kind
STATUS_BY_KIND = {
    "validation": 400,
    "selection": 400,
    "uniqueness": 409,
    "not_found": 404,
    "authentication": 401,
    "authorization": 403,
    "store": 500,
}


# Never leaves the server.
HIDDEN_FIELDS = frozenset({"password_hash"})


def to_jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {k: to_jsonable(v) for k, v in asdict(value).items() if k not in HIDDEN_FIELDS}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def error_response(kind: str, message: str):
    body = {"status": "error", "error": kind, "message": message}
    return jsonify(body), STATUS_BY_KIND.get(kind, 400)


def respond(result: Result, *, key: str | None = None, status: int = 200):
    """Turn a core ``Result`` into a JSON response.

    ``key`` names the payload field for the success value (e.g. "transactions").
    """
    if not result.ok:
        return error_response(result.error.kind, result.message)

    body: dict[str, Any] = {"status": SUCCESS}
    if key is not None:
        body[key] = to_jsonable(result.value)
    return jsonify(body), status


def request_payload() -> dict:
    """JSON body if present, otherwise form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def optional_id(value: Any) -> Optional[int]:
    """Selected entity id, or None when nothing (or nothing usable) was selected."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None
