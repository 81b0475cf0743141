from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import date_key, today_key
from ..common.validators import require_int
from ..container import Container
from ..roster.derivations import current_records, is_attendance_complete, students_in_class, summarize
from .views import class_json, student_json, summary_json


def register(app: Flask, container: Container) -> None:
    @app.route("/api/roster", methods=["GET"], endpoint="roster")
    def roster():
        day = date_key(request.args.get("date") or today_key())
        query = request.args.get("q", "")
        snap = container.session.snapshot

        in_class = students_in_class(snap.students, snap.selected_class_id)
        records = current_records(snap.history, day, in_class)
        visible = container.student_service.list_students(snap.selected_class_id, query)

        return jsonify(
            {
                "date": day,
                "classes": [class_json(c) for c in snap.classes],
                "selected_class_id": snap.selected_class_id,
                "students": [student_json(s, records[s.id]) for s in visible],
                "summary": summary_json(summarize(records)),
                "is_complete": is_attendance_complete(records, in_class),
                "selected_student_ids": sorted(container.session.selected_ids),
            }
        )

    @app.route("/api/pending/<token>/confirm", methods=["POST"], endpoint="confirm_pending")
    def confirm_pending(token: str):
        action = container.pending.confirm(token)
        if action is None:
            return jsonify({"success": False, "message": "Nothing to confirm"}), 404
        return jsonify({"success": True, "message": f"{action.title} done"})

    @app.route("/api/pending/<token>", methods=["DELETE"], endpoint="cancel_pending")
    def cancel_pending(token: str):
        action = container.pending.cancel(token)
        if action is None:
            return jsonify({"success": False, "message": "Nothing to cancel"}), 404
        return jsonify({"success": True})

    @app.route("/api/selection", methods=["POST"], endpoint="select_student")
    def select_student():
        data = request.get_json(silent=True) or {}
        ids = container.student_service.select(require_int(data.get("student_id"), "Student id is required"), bool(data.get("checked", True)))
        return jsonify({"success": True, "selected_student_ids": sorted(ids)})

    @app.route("/api/selection/all", methods=["POST"], endpoint="select_all_students")
    def select_all_students():
        data = request.get_json(silent=True) or {}
        ids = container.student_service.select_all(
            container.session.snapshot.selected_class_id,
            str(data.get("q", "")),
            bool(data.get("checked", True)),
        )
        return jsonify({"success": True, "selected_student_ids": sorted(ids)})
