from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import leave_to_dict, summary_to_dict
from ..common.web import admin_required, current_role, current_user_id, json_body, login_required
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        user = container.user_service.get_user(current_user_id())
        summary = container.engine.summarize(user.user_id)
        leaves = container.leave_service.list_for_user(user.user_id)
        return jsonify(
            {
                "user": {"id": user.user_id, "full_name": user.full_name, "annual_leave_quota": user.annual_leave_quota},
                "summary": summary_to_dict(summary),
                "leaves": [leave_to_dict(lv) for lv in leaves],
            }
        )

    @app.route("/leaves", methods=["GET"], endpoint="list_leaves")
    @login_required
    def list_leaves():
        if current_role() == Role.ADMIN:
            leaves = container.leave_service.list_all(current_role=current_role(), status=request.args.get("status"))
        else:
            leaves = container.leave_service.list_for_user(current_user_id())
        return jsonify([leave_to_dict(lv) for lv in leaves])

    @app.route("/leaves", methods=["POST"], endpoint="submit_leave")
    @login_required
    def submit_leave():
        data = json_body()
        request_id = container.leave_service.submit_leave(
            user_id=current_user_id(),
            leave_type=data.get("type", "annual"),
            start_date=data.get("start_date", ""),
            end_date=data.get("end_date", ""),
            half_day=data.get("half_day"),
            reason=data.get("reason", ""),
        )
        leave = container.leave_service.get_leave(
            current_role=current_role(),
            current_user_id=current_user_id(),
            request_id=request_id,
        )
        return jsonify(leave_to_dict(leave)), 201

    @app.route("/leaves/<int:request_id>", methods=["GET"], endpoint="get_leave")
    @login_required
    def get_leave(request_id: int):
        leave = container.leave_service.get_leave(
            current_role=current_role(),
            current_user_id=current_user_id(),
            request_id=request_id,
        )
        return jsonify(leave_to_dict(leave))

    @app.route("/leaves/<int:request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @admin_required
    def approve_leave(request_id: int):
        leave = container.leave_service.approve_leave(
            current_role=current_role(),
            reviewer_id=current_user_id(),
            request_id=request_id,
            note=json_body().get("note", ""),
        )
        return jsonify(leave_to_dict(leave))

    @app.route("/leaves/<int:request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @admin_required
    def reject_leave(request_id: int):
        leave = container.leave_service.reject_leave(
            current_role=current_role(),
            reviewer_id=current_user_id(),
            request_id=request_id,
            note=json_body().get("note", ""),
        )
        return jsonify(leave_to_dict(leave))

    @app.route("/leaves/summary/<int:user_id>", methods=["GET"], endpoint="leave_summary")
    @login_required
    def leave_summary(user_id: int):
        summary = container.leave_service.summary_for(
            current_role=current_role(),
            current_user_id=current_user_id(),
            user_id=user_id,
        )
        return jsonify(summary_to_dict(summary))
