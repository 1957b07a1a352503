from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import current_user_id, error_response, json_body, login_required, server_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    svc = container.workday_service

    @app.route("/api/workdays", methods=["GET"], endpoint="api_workdays")
    @login_required
    def api_workdays():
        start_s = request.args.get("startDate")
        end_s = request.args.get("endDate")
        try:
            # The range only applies when both ends are given.
            start = parse_iso_date(start_s) if start_s and end_s else None
            end = parse_iso_date(end_s) if start_s and end_s else None
            views = svc.list_range(user_id=current_user_id(), start=start, end=end)
            return jsonify({"workdays": [v.to_dict() for v in views]})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("Çalışma günleri listeleme hatası")

    @app.route("/api/workdays/current-month", methods=["GET"], endpoint="api_workdays_current_month")
    @login_required
    def api_workdays_current_month():
        try:
            data = svc.current_month(user_id=current_user_id())
            return jsonify(
                {
                    "workdays": [v.to_dict() for v in data["workdays"]],
                    "month": data["month"],
                    "year": data["year"],
                }
            )
        except Exception:
            return server_error("Çalışma günleri getirme hatası")

    @app.route("/api/workdays", methods=["POST"], endpoint="api_workdays_create")
    @login_required
    def api_workdays_create():
        data = json_body()
        try:
            view = svc.create(
                user_id=current_user_id(),
                workplace_id=data.get("workplaceId"),
                work_date=data.get("date"),
                wage=data.get("wageOnThatDay"),
            )
            return jsonify({"message": "Çalışma günü başarıyla oluşturuldu", "workday": view.to_dict()}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("Çalışma günü oluşturma hatası")

    @app.route("/api/workdays/<int:work_day_id>", methods=["PUT"], endpoint="api_workdays_update")
    @login_required
    def api_workdays_update(work_day_id: int):
        data = json_body()
        try:
            view = svc.update(
                user_id=current_user_id(),
                work_day_id=work_day_id,
                workplace_id=data.get("workplaceId"),
                wage=data.get("wageOnThatDay"),
            )
            return jsonify({"message": "Çalışma günü başarıyla güncellendi", "workday": view.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("Çalışma günü güncelleme hatası")

    @app.route("/api/workdays/<int:work_day_id>", methods=["DELETE"], endpoint="api_workdays_delete")
    @login_required
    def api_workdays_delete(work_day_id: int):
        try:
            svc.delete(user_id=current_user_id(), work_day_id=work_day_id)
            return jsonify({"message": "Çalışma günü başarıyla silindi"})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("Çalışma günü silme hatası")
