from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import optional_int
from ..container import Container
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..roster.views import pending_response, summary_json


def _status(value) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError("Status must be Present, Absent or Unmarked")


def register(app: Flask, container: Container) -> None:
    def _class_id(data: dict):
        class_id = optional_int(data.get("class_id"), "Class id must be a number")
        if class_id is None:
            return container.session.snapshot.selected_class_id
        return class_id

    @app.route("/api/attendance/<day>", methods=["GET"], endpoint="attendance_for_day")
    def attendance_for_day(day: str):
        class_id = _class_id(request.args)
        svc = container.attendance_service
        records = svc.records_for(day, class_id)
        return jsonify(
            {
                "records": {str(sid): status.value for sid, status in records.items()},
                "summary": summary_json(svc.summary(day, class_id)),
                "is_complete": svc.is_complete(day, class_id),
            }
        )

    @app.route("/api/attendance/<day>/<int:student_id>", methods=["PUT"], endpoint="set_status")
    def set_status(day: str, student_id: int):
        data = request.get_json(silent=True) or {}
        container.attendance_service.set_status(day, student_id, _status(data.get("status")))
        return jsonify({"success": True})

    @app.route("/api/attendance/<day>/mark-all", methods=["POST"], endpoint="mark_all")
    def mark_all(day: str):
        data = request.get_json(silent=True) or {}
        action = container.attendance_service.propose_mark_all(day, _class_id(data), _status(data.get("status")))
        return pending_response(container.pending, action)

    @app.route("/api/attendance/<day>/clear", methods=["POST"], endpoint="clear_status")
    def clear_status(day: str):
        data = request.get_json(silent=True) or {}
        action = container.attendance_service.propose_clear_status(day, _class_id(data))
        return pending_response(container.pending, action)
