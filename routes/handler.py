"""
JSON handler adapter.
Turns view results into JSON responses and HandlerError into JSON error bodies.
"""

import logging
from functools import wraps

from flask import current_app, request

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = 'Internal server error. Check the logs.'
MARSHALLING_ERROR_MESSAGE = 'Error marshalling JSON'


class HandlerError(Exception):
    """Failure raised by a view: a user-facing message, a status code and an optional cause."""

    def __init__(self, message: str, code: int, cause: Exception = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.cause = cause


def _dumps(value):
    return current_app.json.dumps(value, separators=(',', ':'))


def _json_response(body: str, status: int):
    response = current_app.response_class(body, status=status, mimetype='application/json')
    _log_access(response.status_code)
    return response


def _error_response(message: str, status: int):
    return _json_response(_dumps({'error': message}), status)


def _log_access(status: int):
    path = request.full_path if request.query_string else request.path
    logger.info(f"{request.remote_addr} {request.method} {path} {status}")


def json_handler(view):
    """Wrap a view so its return value is sent as JSON and HandlerError as an error body."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            result = view(*args, **kwargs)
        except HandlerError as e:
            if e.cause is not None:
                logger.error(f"ERROR: {e.cause}")
            return _error_response(e.message, e.code)

        if result is None:
            logger.error(f"ERROR: response from {view.__name__} is None")
            return _error_response(INTERNAL_ERROR_MESSAGE, 500)

        try:
            body = _dumps(result)
        except (TypeError, ValueError) as e:
            logger.error(f"Error serialising response from {view.__name__}: {e}")
            return _error_response(MARSHALLING_ERROR_MESSAGE, 500)

        return _json_response(body, 200)

    return wrapper
