from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import holiday_to_dict, settings_to_dict
from ..common.web import admin_required, current_role, json_body, login_required
from ..core.constants import COUNTRIES
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/settings", methods=["GET"], endpoint="get_settings")
    @login_required
    def get_settings():
        body = settings_to_dict(container.settings_service.get())
        body["countries"] = COUNTRIES
        return jsonify(body)

    @app.route("/settings", methods=["PUT"], endpoint="update_settings")
    @admin_required
    def update_settings():
        data = json_body()
        updated = container.settings_service.update(
            current_role=current_role(),
            country=data.get("country"),
            default_annual_leave_quota=data.get("default_annual_leave_quota"),
        )
        return jsonify(settings_to_dict(updated))

    @app.route("/settings/holidays", methods=["GET"], endpoint="list_holidays")
    @login_required
    def list_holidays():
        country = request.args.get("country") or container.settings_service.get().country
        return jsonify([holiday_to_dict(h) for h in container.holiday_service.list_for_country(country)])

    @app.route("/settings/holidays", methods=["POST"], endpoint="add_holiday")
    @admin_required
    def add_holiday():
        data = json_body()
        holiday_id = container.holiday_service.add_holiday(
            current_role=current_role(),
            name=data.get("name", ""),
            holiday_date=data.get("date", ""),
            country=data.get("country") or container.settings_service.get().country,
        )
        return jsonify({"id": holiday_id}), 201

    @app.route("/settings/holidays/<int:holiday_id>", methods=["DELETE"], endpoint="delete_holiday")
    @admin_required
    def delete_holiday(holiday_id: int):
        container.holiday_service.delete_holiday(current_role=current_role(), holiday_id=holiday_id)
        return jsonify({"ok": True})
