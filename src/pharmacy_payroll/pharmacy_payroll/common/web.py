"""Flask helpers shared by the controllers: session identity and JSON input."""

from __future__ import annotations

from functools import wraps

from flask import g, jsonify, request, session

from ..core.exceptions import NotFoundError, ValidationError


def login_required(container):
    """Resolve the session user into ``g.actor`` or answer 401.

    The role is re-read from the profile store on every request so a role
    change or deactivation takes effect without a new login.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user_id = session.get("user_id")
            if not user_id:
                return jsonify({"error": "Please log in to continue"}), 401
            try:
                g.actor = container.profile_service.get_actor(user_id)
            except NotFoundError:
                session.clear()
                return jsonify({"error": "Please log in to continue"}), 401
            return view(*args, **kwargs)

        return wrapper

    return decorator


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return dict(request.form)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
