from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, session

from ..common.web import current_user_id, error_response, json_body, login_required, server_error
from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    def _start_session(s_user, *, remember: bool) -> None:
        session.clear()
        session.permanent = remember
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
        session["user_id"] = s_user.user_id
        session["email"] = s_user.email

    @app.route("/api/register", methods=["POST"], endpoint="api_register")
    def api_register():
        data = json_body()
        try:
            s_user = container.auth_service.register(
                email=data.get("email", ""),
                password=data.get("password", ""),
                name=data.get("name", ""),
                surname=data.get("surname", ""),
            )
            app.logger.info("registered user_id=%s", s_user.user_id)
            return jsonify({"message": "Kullanıcı başarıyla oluşturuldu", "user": s_user.to_dict()}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("Kayıt hatası")

    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        data = json_body()
        try:
            s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))
            _start_session(s_user, remember=bool(data.get("remember")))
            return jsonify({"message": "Giriş başarılı", "user": s_user.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return server_error("Giriş hatası")

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    def api_logout():
        session.clear()
        return jsonify({"message": "Çıkış yapıldı"})

    @app.route("/api/me", methods=["GET"], endpoint="api_me")
    @login_required
    def api_me():
        try:
            s_user = container.auth_service.get_session_user(current_user_id())
            return jsonify({"user": s_user.to_dict()})
        except DomainError as e:
            session.clear()
            return error_response(e)
        except Exception:
            return server_error("Kullanıcı bilgisi hatası")
