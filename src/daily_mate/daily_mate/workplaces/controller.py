from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_user_id, error_response, json_body, login_required, server_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    svc = container.workplace_service

    @app.route("/api/workplaces", methods=["GET"], endpoint="api_workplaces")
    @login_required
    def api_workplaces():
        try:
            workplaces = svc.list_active(user_id=current_user_id())
            return jsonify({"workplaces": [w.to_dict() for w in workplaces]})
        except Exception:
            return server_error("İş yerleri listeleme hatası")

    @app.route("/api/workplaces/all", methods=["GET"], endpoint="api_workplaces_all")
    @login_required
    def api_workplaces_all():
        try:
            workplaces = svc.list_all(user_id=current_user_id())
            return jsonify({"workplaces": [w.to_dict() for w in workplaces]})
        except Exception:
            return server_error("Tüm iş yerleri listeleme hatası")

    @app.route("/api/workplaces", methods=["POST"], endpoint="api_workplaces_create")
    @login_required
    def api_workplaces_create():
        data = json_body()
        try:
            workplace = svc.create(
                user_id=current_user_id(),
                name=data.get("name"),
                daily_wage=data.get("dailyWage"),
                color=data.get("color"),
            )
            return jsonify({"message": "İş yeri başarıyla oluşturuldu", "workplace": workplace.to_dict()}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("İş yeri oluşturma hatası")

    @app.route("/api/workplaces/<int:workplace_id>", methods=["PUT"], endpoint="api_workplaces_update")
    @login_required
    def api_workplaces_update(workplace_id: int):
        data = json_body()
        try:
            workplace = svc.update(
                user_id=current_user_id(),
                workplace_id=workplace_id,
                name=data.get("name"),
                daily_wage=data.get("dailyWage"),
                color=data.get("color"),
            )
            return jsonify({"message": "İş yeri başarıyla güncellendi", "workplace": workplace.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("İş yeri güncelleme hatası")

    @app.route("/api/workplaces/<int:workplace_id>", methods=["DELETE"], endpoint="api_workplaces_delete")
    @login_required
    def api_workplaces_delete(workplace_id: int):
        try:
            removed = svc.delete(user_id=current_user_id(), workplace_id=workplace_id)
            app.logger.info("workplace %s deleted with %s work days", workplace_id, removed)
            return jsonify({"message": "İş yeri başarıyla silindi", "deletedWorkDays": removed})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("İş yeri silme hatası")

    @app.route("/api/workplaces/<int:workplace_id>/toggle", methods=["PATCH"], endpoint="api_workplaces_toggle")
    @login_required
    def api_workplaces_toggle(workplace_id: int):
        try:
            workplace = svc.toggle_active(user_id=current_user_id(), workplace_id=workplace_id)
            state = "Aktif" if workplace.is_active else "Pasif"
            return jsonify(
                {
                    "message": f"İş yeri durumu başarıyla güncellendi. Yeni durum: {state}",
                    "workplace": workplace.to_dict(),
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("İş yeri durum değiştirme hatası")

    @app.route("/api/migrate", methods=["POST"], endpoint="api_migrate")
    @login_required
    def api_migrate():
        try:
            modified = svc.backfill_active_flags(user_id=current_user_id())
            return jsonify({"message": f"{modified} iş yeri güncellendi", "modifiedCount": modified})
        except Exception:
            return server_error("Migration hatası")
