from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_user_id, error_response, login_required, server_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/calendar", methods=["GET"], endpoint="api_calendar")
    @login_required
    def api_calendar():
        try:
            data = container.calendar_service.month_view(
                user_id=current_user_id(),
                year=request.args.get("year"),
                month=request.args.get("month"),
            )
            return jsonify(data)
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("Takvim oluşturma hatası")
