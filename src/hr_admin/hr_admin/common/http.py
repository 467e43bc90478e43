from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def handle_domain_errors(view):
    """Map domain exceptions raised by services to JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return error_response("internal error", 500)

    return wrapper
