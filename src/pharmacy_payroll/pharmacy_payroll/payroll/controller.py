from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import login_required
from ..container import Container
from ..core.constants import DEFAULT_PAYROLL_DAYS
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    auth = login_required(container)

    @app.route("/payroll", methods=["GET"], endpoint="payroll")
    @auth
    def payroll():
        try:
            days = int(request.args.get("days") or DEFAULT_PAYROLL_DAYS)
        except ValueError:
            raise ValidationError("Period must be a number of days")

        report = container.payroll_service.summary_for(
            g.actor,
            days=days,
            user_id=request.args.get("user_id") or None,
        )
        return jsonify(report.to_dict())
