from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_user_id, error_response, login_required, server_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stats", methods=["GET"], endpoint="api_stats")
    @login_required
    def api_stats():
        try:
            report = container.stats_service.monthly_report(
                user_id=current_user_id(),
                month=request.args.get("month"),
                year=request.args.get("year"),
            )
            return jsonify(report.to_dict())
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("İstatistik hesaplama hatası")
