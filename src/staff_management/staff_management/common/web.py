from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Mapping

from flask import Flask, jsonify, redirect, render_template, request, session, url_for
from werkzeug.exceptions import HTTPException

from ..core.enums import Outcome, Role
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..core.result import Result
from .serialization import to_json

logger = logging.getLogger(__name__)

STATUS_BY_OUTCOME = {
    Outcome.OK: 200,
    Outcome.NOT_FOUND: 404,
    Outcome.INVALID_ARGUMENT: 400,
    Outcome.CONFLICT: 409,
}


def current_user() -> dict:
    return {"name": session.get("name"), "role": session.get("role")}


def admin_required(view):
    """Page guard: anonymous users go to the login page, non-admins get 403."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return redirect(url_for("login", next=request.path))

        if session.get("role") != Role.ADMIN.value:
            return render_template("403.html", current_user=current_user()), 403

        return view(*args, **kwargs)

    return wrapper


def api_admin_required(view):
    """API guard: 401 without a session, 403 without the admin role."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Authentication required"}), 401
        if session.get("role") != Role.ADMIN.value:
            return jsonify({"error": "Admin access required"}), 403
        return view(*args, **kwargs)

    return wrapper


def error_response(result: Result):
    return jsonify({"error": result.message, "outcome": result.outcome.value}), STATUS_BY_OUTCOME[result.outcome]


def result_response(result: Result, *, status: int = 200):
    if not result:
        return error_response(result)
    if result.value is None:
        return "", 204
    return jsonify(to_json(result.value)), status


def json_body() -> Mapping[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def register_crud_api(
    app: Flask,
    *,
    prefix: str,
    name: str,
    service,
    from_mapping: Callable[..., Any],
    key_field: str,
    list_view: Callable[[], Any] | None = None,
) -> None:
    """Register list/get/create/update/delete JSON endpoints for one entity service."""

    @app.get(prefix, endpoint=f"api_{name}_list")
    @api_admin_required
    def list_entities():
        items = list_view() if list_view else service.get_all()
        return jsonify(to_json(items))

    @app.get(f"{prefix}/<int:entity_id>", endpoint=f"api_{name}_get")
    @api_admin_required
    def get_entity(entity_id: int):
        return result_response(service.get_by_id(entity_id))

    @app.post(prefix, endpoint=f"api_{name}_create")
    @api_admin_required
    def create_entity():
        result = service.create(from_mapping(json_body()))
        if not result:
            return error_response(result)
        body = to_json(result.value)
        location = url_for(f"api_{name}_get", entity_id=getattr(result.value, key_field))
        return jsonify(body), 201, {"Location": location}

    @app.put(f"{prefix}/<int:entity_id>", endpoint=f"api_{name}_update")
    @api_admin_required
    def update_entity(entity_id: int):
        data = dict(json_body())
        data.setdefault(key_field, entity_id)
        result = service.update(entity_id, from_mapping(data))
        if not result:
            return error_response(result)
        return "", 204

    @app.delete(f"{prefix}/<int:entity_id>", endpoint=f"api_{name}_delete")
    @api_admin_required
    def delete_entity(entity_id: int):
        return result_response(service.delete(entity_id))


def register_error_handlers(app: Flask) -> None:
    def wants_json() -> bool:
        return request.path.startswith("/api/")

    @app.errorhandler(ValidationError)
    def on_validation_error(e: ValidationError):
        if wants_json():
            return jsonify({"error": str(e), "outcome": Outcome.INVALID_ARGUMENT.value}), 400
        return render_template("error.html", message=str(e), status=400), 400

    @app.errorhandler(NotFoundError)
    def on_not_found(e: NotFoundError):
        if wants_json():
            return jsonify({"error": str(e), "outcome": Outcome.NOT_FOUND.value}), 404
        return render_template("error.html", message=str(e), status=404), 404

    @app.errorhandler(ConflictError)
    def on_conflict(e: ConflictError):
        if wants_json():
            return jsonify({"error": str(e), "outcome": Outcome.CONFLICT.value}), 409
        return render_template("error.html", message=str(e), status=409), 409

    @app.errorhandler(HTTPException)
    def on_http_error(e: HTTPException):
        if wants_json():
            return jsonify({"error": e.description}), e.code
        return render_template("error.html", message=e.description, status=e.code), e.code

    @app.errorhandler(Exception)
    def on_unhandled(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if wants_json():
            return jsonify({"error": "Internal server error"}), 500
        return render_template("error.html", message="An unexpected error occurred.", status=500), 500


def register_template_helpers(app: Flask) -> None:
    @app.template_filter("dt_input")
    def dt_input(value) -> str:
        """Value for an ``<input type="datetime-local">``."""
        return value.strftime("%Y-%m-%dT%H:%M") if value else ""

    @app.template_filter("dt")
    def dt(value, fmt: str = "%Y-%m-%d %H:%M") -> str:
        return value.strftime(fmt) if value else "-"

    @app.context_processor
    def inject_user():
        return {"current_user": current_user()}
