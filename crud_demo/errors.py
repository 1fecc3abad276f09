"""
Error normalization.

Every failure on a resource endpoint is rendered as one JSON envelope:

    {"timestamp": ..., "status": 400, "error": "Bad Request",
     "message": "...", "path": "/courses"}

Views return Failure values (from read_body or a missing record) and pass
them to error_response. Exceptions nobody handled reach the handlers
registered by register_error_handlers and go through the same function.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from flask import jsonify, request
from marshmallow import Schema, ValidationError
from werkzeug.exceptions import HTTPException
from werkzeug.http import HTTP_STATUS_CODES

logger = logging.getLogger(__name__)

MALFORMED_BODY_MESSAGE = "Request body is invalid or malformed"


class FailureKind(Enum):
    VALIDATION = "validation"
    MALFORMED_BODY = "malformed_body"
    NOT_FOUND = "not_found"
    HTTP = "http"
    INTERNAL = "internal"


STATUS_BY_KIND = {
    FailureKind.VALIDATION: 400,
    FailureKind.MALFORMED_BODY: 400,
    FailureKind.NOT_FOUND: 404,
    FailureKind.HTTP: 500,
    FailureKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: Optional[str] = None
    status: Optional[int] = None  # only set for HTTP, which carries its own code

    @classmethod
    def validation(cls, messages: List[str]) -> "Failure":
        return cls(FailureKind.VALIDATION, ", ".join(messages))

    @classmethod
    def malformed_body(cls) -> "Failure":
        return cls(FailureKind.MALFORMED_BODY, MALFORMED_BODY_MESSAGE)

    @classmethod
    def not_found(cls, message: str) -> "Failure":
        return cls(FailureKind.NOT_FOUND, message)

    @classmethod
    def internal(cls, exc: BaseException) -> "Failure":
        return cls(FailureKind.INTERNAL, str(exc))


def envelope(status: int, message: Optional[str], path: str) -> dict:
    return {
        "timestamp": datetime.now().isoformat(timespec="milliseconds"),
        "status": status,
        "error": HTTP_STATUS_CODES.get(status, "Unknown Error"),
        "message": message,
        "path": path,
    }


def error_response(failure: Failure):
    """The one place a failure becomes (json body, status)."""
    code = failure.status or STATUS_BY_KIND[failure.kind]
    return jsonify(envelope(code, failure.message, request.path)), code


def read_body(
    schema: Schema, validate: Optional[Callable[[Any], List[str]]] = None
) -> Tuple[Any, Optional[Failure]]:
    """
    Parse the JSON request body, load it through schema and run validate.

    Returns (data, None) on success or (None, failure). The body must be a
    JSON object whose fields have the declared primitive types; anything else
    is a malformed body, reported before any field constraint is looked at.
    """
    raw = request.get_json(force=True, silent=True)
    if not isinstance(raw, dict):
        return None, Failure.malformed_body()
    try:
        data = schema.load(raw)
    except ValidationError as err:
        logger.debug("Body rejected by %s: %s", type(schema).__name__, err.messages)
        return None, Failure.malformed_body()
    if validate is not None:
        violations = validate(data)
        if violations:
            return None, Failure.validation(violations)
    return data, None


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        # routing level: unknown path, wrong method
        resp, code = error_response(Failure(FailureKind.HTTP, exc.description, status=exc.code))
        # keep werkzeug's own headers, e.g. Allow on a 405
        resp.headers.extend(
            (k, v) for k, v in exc.get_headers(request.environ) if k.lower() != "content-type"
        )
        return resp, code

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response(Failure.internal(exc))
