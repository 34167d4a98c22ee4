from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.web import json_body, login_required
from ..container import Container
from ..core.constants import DEFAULT_BREAK_MINUTES
from .model import WorkLogEntry


def _entry_from(data: dict) -> WorkLogEntry:
    return WorkLogEntry(
        work_date=data.get("work_date"),
        start_time=data.get("start_time"),
        end_time=data.get("end_time"),
        break_minutes=data.get("break_minutes", DEFAULT_BREAK_MINUTES),
        note=data.get("note"),
    )


def register(app: Flask, container: Container) -> None:
    auth = login_required(container)
    service = container.work_log_service

    @app.route("/work-logs", methods=["GET"], endpoint="my_work_logs")
    @auth
    def my_work_logs():
        logs = service.list_mine(g.actor)
        return jsonify({"work_logs": [log.to_dict() for log in logs]})

    @app.route("/work-logs", methods=["POST"], endpoint="create_work_log")
    @auth
    def create_work_log():
        log = service.create(g.actor, _entry_from(json_body()))
        return jsonify(log.to_dict()), 201

    @app.route("/work-logs/<log_id>", methods=["GET"], endpoint="get_work_log")
    @auth
    def get_work_log(log_id: str):
        return jsonify(service.get(g.actor, log_id).to_dict())

    @app.route("/work-logs/<log_id>", methods=["PUT"], endpoint="edit_work_log")
    @auth
    def edit_work_log(log_id: str):
        log = service.edit(g.actor, log_id, _entry_from(json_body()))
        return jsonify(log.to_dict())

    @app.route("/work-logs/<log_id>", methods=["DELETE"], endpoint="delete_work_log")
    @auth
    def delete_work_log(log_id: str):
        service.delete(g.actor, log_id)
        return "", 204

    @app.route("/work-logs/<log_id>/submit", methods=["POST"], endpoint="submit_work_log")
    @auth
    def submit_work_log(log_id: str):
        return jsonify(service.submit(g.actor, log_id).to_dict())

    @app.route("/approvals", methods=["GET"], endpoint="approvals")
    @auth
    def approvals():
        return jsonify({"work_logs": service.list_pending(g.actor)})

    @app.route("/approvals/<log_id>/approve", methods=["POST"], endpoint="approve_work_log")
    @auth
    def approve_work_log(log_id: str):
        return jsonify(service.approve(g.actor, log_id).to_dict())

    @app.route("/approvals/<log_id>/reject", methods=["POST"], endpoint="reject_work_log")
    @auth
    def reject_work_log(log_id: str):
        reason = json_body().get("reason")
        return jsonify(service.reject(g.actor, log_id, reason).to_dict())
