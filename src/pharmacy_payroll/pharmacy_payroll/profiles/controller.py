from __future__ import annotations

from datetime import timedelta

from flask import Flask, g, jsonify, session

from ..common.web import json_body, login_required
from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS


def register(app: Flask, container: Container) -> None:
    auth = login_required(container)

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.clear()
        session.permanent = bool(data.get("remember_me"))
        session_days = int(app.config.get("SESSION_DAYS", DEFAULT_SESSION_DAYS))
        app.permanent_session_lifetime = timedelta(days=session_days)
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value

        return jsonify({"user_id": s_user.user_id, "name": s_user.name, "role": s_user.role.value})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return "", 204

    @app.route("/me", methods=["GET"], endpoint="me")
    @auth
    def me():
        profile = container.profile_service.get_profile(g.actor.user_id)
        return jsonify({**profile.to_dict(), "pharmacy_name": app.config.get("PHARMACY_NAME", "")})

    @app.route("/admin/profiles", methods=["GET"], endpoint="admin_profiles")
    @auth
    def admin_profiles():
        profiles = container.profile_service.list_admin_view(g.actor)
        return jsonify({"profiles": [p.to_dict() for p in profiles]})

    @app.route("/admin/profiles", methods=["POST"], endpoint="create_profile")
    @auth
    def create_profile():
        data = json_body()
        profile = container.profile_service.create_account(
            g.actor,
            email=data.get("email", ""),
            name=data.get("name"),
            password=data.get("password", ""),
            role=data.get("role", "staff"),
        )
        return jsonify(profile.to_dict()), 201

    @app.route("/admin/profiles/<user_id>", methods=["PATCH"], endpoint="update_profile")
    @auth
    def update_profile(user_id: str):
        data = json_body()
        profile = container.profile_service.update_profile(
            g.actor,
            user_id,
            name=data.get("name"),
            hourly_rate=data.get("hourly_rate"),
            tax_rate=data.get("tax_rate"),
            role=data.get("role"),
        )
        return jsonify(profile.to_dict())

    @app.route("/admin/profiles/<user_id>/active", methods=["POST"], endpoint="set_profile_active")
    @auth
    def set_profile_active(user_id: str):
        is_active = json_body().get("is_active")
        if isinstance(is_active, str):
            is_active = is_active.strip().lower() in {"1", "true", "on", "yes"}
        profile = container.profile_service.set_active(g.actor, user_id, is_active=bool(is_active))
        return jsonify(profile.to_dict())
