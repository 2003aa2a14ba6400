from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, login_required
from ..container import Container
from .model import User


def public_user(user: User) -> dict:
    return {"id": user.id, "username": user.username, "role": user.role.value}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        payload = json_body()
        user = container.auth_service.login(payload.get("username", ""), payload.get("password", ""))
        return jsonify({"success": True, "user": public_user(user)})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        return jsonify({"success": True})

    @app.route("/api/auth/register", methods=["POST"], endpoint="register")
    def register_account():
        payload = json_body()
        user = container.auth_service.register(
            payload.get("username", ""),
            payload.get("password", ""),
            payload.get("role", ""),
        )
        return jsonify({"success": True, "user": public_user(user)}), 201

    @app.route("/api/auth/me", endpoint="me")
    @login_required(container)
    def me():
        return jsonify({"success": True, "user": public_user(container.auth_service.current_user())})
