from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import current_app, g, jsonify, request, session

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    DuplicateIdentifierError,
    LastAdminViolationError,
    NotFoundError,
    ValidationError,
)
from ..core.result import OperationResult
from ..users.model import SessionUser
from ..users.session import MappingSessionStore

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (DuplicateIdentifierError, 409),
    (LastAdminViolationError, 409),
)


def session_store() -> MappingSessionStore:
    """Session of the current browser, handed explicitly to AuthService."""
    return MappingSessionStore(session)


def request_data() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def respond(result: OperationResult, status: int = 200):
    return jsonify(result.to_dict()), status


def error_status(exc: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


def api_view(view):
    """Turn domain errors into ``{"success": false}`` answers; never let a view crash."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return respond(OperationResult.fail(str(e)), error_status(e))
        except Exception as e:
            logger.exception("Unhandled error in %s", request.endpoint)
            if bool(current_app.config.get("DEBUG", False)):
                return respond(OperationResult.fail(f"Internal error: {e}"), 500)
            return respond(OperationResult.fail("Internal error"), 500)

    return wrapper


def _fresh_user() -> Optional[SessionUser]:
    """Session user re-read from the directory; stale sessions are dropped."""

    store = session_store()
    user = store.get()
    if not user:
        return None
    employee = current_app.extensions["attendease"].employee_service.get_by_id(user.employee_id)
    if not employee:
        logger.warning("Session of removed employee %s cleared", user.employee_id)
        store.clear()
        return None
    fresh = SessionUser.from_employee(employee)
    if fresh != user:
        store.set(fresh)
    return fresh


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = _fresh_user()
        if not user:
            return respond(OperationResult.fail("Please log in to continue."), 401)
        g.current_user = user
        return view(*args, **kwargs)

    return wrapper


def hr_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = _fresh_user()
        if not user:
            return respond(OperationResult.fail("Please log in to continue."), 401)
        if not user.is_hr:
            return respond(OperationResult.fail("HR access required."), 403)
        g.current_user = user
        return view(*args, **kwargs)

    return wrapper
