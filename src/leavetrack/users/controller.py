from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.serializers import summary_to_dict, user_to_dict
from ..common.web import admin_required, current_role, current_user_id, int_list, json_body, login_required
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..container import Container
from .service import SessionUser


def register(app: Flask, container: Container) -> None:
    def _start_session(user: SessionUser):
        session.clear()
        session["user_id"] = user.user_id
        session["name"] = user.full_name
        session["role"] = user.role.value
        return jsonify({"id": user.user_id, "full_name": user.full_name, "email": user.email, "role": user.role.value})

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))
        return _start_session(user)

    @app.route("/auth/demo-login", methods=["POST"], endpoint="demo_login")
    def demo_login():
        return _start_session(container.auth_service.demo_login())

    @app.route("/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"ok": True})

    @app.route("/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify(user_to_dict(container.user_service.get_user(current_user_id())))

    @app.route("/users", methods=["GET"], endpoint="list_users")
    @admin_required
    def list_users():
        users = container.user_service.list_users(search=request.args.get("search"))
        rows = []
        for user in users:
            row = user_to_dict(user)
            row["summary"] = summary_to_dict(container.engine.summarize(user.user_id))
            rows.append(row)
        return jsonify(rows)

    @app.route("/users", methods=["POST"], endpoint="create_user")
    @admin_required
    def create_user():
        data = json_body()
        user_id = container.user_service.create_user(
            current_role=current_role(),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            email=data.get("email", ""),
            job_description=data.get("job_description", ""),
            role=data.get("role", Role.MEMBER.value),
            annual_leave_quota=data.get("annual_leave_quota"),
            projects=int_list(data.get("projects"), "projects"),
            notes=data.get("notes"),
        )
        return jsonify(user_to_dict(container.user_service.get_user(user_id))), 201

    @app.route("/users/<int:user_id>", methods=["GET"], endpoint="get_user")
    @login_required
    def get_user(user_id: int):
        if current_role() != Role.ADMIN and user_id != current_user_id():
            raise AuthorizationError("You can only view your own profile")
        return jsonify(user_to_dict(container.user_service.get_user(user_id)))

    @app.route("/users/<int:user_id>", methods=["PUT"], endpoint="update_user")
    @admin_required
    def update_user(user_id: int):
        data = json_body()
        existing = container.user_service.get_user(user_id)
        user = container.user_service.update_user(
            current_role=current_role(),
            user_id=user_id,
            first_name=data.get("first_name", existing.first_name),
            last_name=data.get("last_name", existing.last_name),
            email=data.get("email", existing.email),
            job_description=data.get("job_description", existing.job_description),
            role=data.get("role", existing.role.value),
            annual_leave_quota=data.get("annual_leave_quota", existing.annual_leave_quota),
            projects=int_list(data.get("projects", list(existing.projects)), "projects"),
            notes=data.get("notes", existing.notes),
        )
        return jsonify(user_to_dict(user))

    @app.route("/users/invite", methods=["POST"], endpoint="invite_user")
    @admin_required
    def invite_user():
        data = json_body()
        email = container.user_service.invite(
            current_role=current_role(),
            email=data.get("email", ""),
            role=data.get("role", Role.MEMBER.value),
        )
        return jsonify({"invited": email}), 202
