from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.serializers import annotations_to_dict
from ..common.web import current_user_id, login_required
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/calendar/day", methods=["GET"], endpoint="calendar_day")
    @login_required
    def calendar_day():
        day = request.args.get("date") or now_local().date().isoformat()
        ann = container.calendar_service.my_day(user_id=current_user_id(), day=day)
        return jsonify(annotations_to_dict(ann, container.users_repo.get_by_id))

    @app.route("/calendar/month", methods=["GET"], endpoint="calendar_month")
    @login_required
    def calendar_month():
        today = now_local().date()
        try:
            year = int(request.args.get("year") or today.year)
            month = int(request.args.get("month") or today.month)
        except ValueError:
            raise ValidationError("year and month must be numbers")

        markers = container.calendar_service.month_markers(user_id=current_user_id(), year=year, month=month)
        return jsonify(
            [
                {
                    "date": m.day.isoformat(),
                    "own_leave": m.own_leave,
                    "team_leave": m.team_leave,
                    "holiday": m.holiday,
                }
                for m in markers
            ]
        )
