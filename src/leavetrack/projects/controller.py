from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.serializers import annotations_to_dict, project_to_dict, user_to_dict
from ..common.web import admin_required, current_role, current_user_id, int_list, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/projects", methods=["GET"], endpoint="list_projects")
    @login_required
    def list_projects():
        projects = container.project_service.list_accessible(
            current_role=current_role(),
            user_id=current_user_id(),
            search=request.args.get("search"),
        )
        return jsonify([project_to_dict(p) for p in projects])

    @app.route("/projects", methods=["POST"], endpoint="create_project")
    @admin_required
    def create_project():
        data = json_body()
        project_id = container.project_service.create_project(
            current_role=current_role(),
            name=data.get("name", ""),
            members=int_list(data.get("members"), "members"),
            notes=data.get("notes"),
        )
        return jsonify(project_to_dict(container.project_service.get_project(project_id))), 201

    @app.route("/projects/<int:project_id>", methods=["GET"], endpoint="get_project")
    @login_required
    def get_project(project_id: int):
        project = container.project_service.get_accessible(
            current_role=current_role(),
            user_id=current_user_id(),
            project_id=project_id,
        )
        body = project_to_dict(project)
        body["member_details"] = [user_to_dict(u) for u in container.project_service.members_of(project_id)]
        return jsonify(body)

    @app.route("/projects/<int:project_id>", methods=["PUT"], endpoint="update_project")
    @admin_required
    def update_project(project_id: int):
        data = json_body()
        existing = container.project_service.get_project(project_id)
        project = container.project_service.update_project(
            current_role=current_role(),
            project_id=project_id,
            name=data.get("name", existing.name),
            members=int_list(data.get("members", list(existing.members)), "members"),
            notes=data.get("notes", existing.notes),
        )
        return jsonify(project_to_dict(project))

    @app.route("/projects/<int:project_id>", methods=["DELETE"], endpoint="delete_project")
    @admin_required
    def delete_project(project_id: int):
        container.project_service.delete_project(current_role=current_role(), project_id=project_id)
        return jsonify({"ok": True})

    @app.route("/projects/<int:project_id>/calendar", methods=["GET"], endpoint="project_calendar")
    @login_required
    def project_calendar(project_id: int):
        container.project_service.get_accessible(
            current_role=current_role(),
            user_id=current_user_id(),
            project_id=project_id,
        )
        day = request.args.get("date") or now_local().date().isoformat()
        ann = container.calendar_service.project_day(project_id=project_id, day=day)
        return jsonify(annotations_to_dict(ann, container.users_repo.get_by_id))
