from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import optional_int, require_int
from ..container import Container
from ..roster.views import pending_response, student_json


def register(app: Flask, container: Container) -> None:
    def _class_id(data: dict):
        class_id = optional_int(data.get("class_id"), "Class id must be a number")
        if class_id is None:
            return container.session.snapshot.selected_class_id
        return class_id

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        class_id = _class_id(request.args)
        students = container.student_service.list_students(class_id, request.args.get("q", ""))
        return jsonify({"students": [student_json(s) for s in students]})

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    def add_student():
        data = request.get_json(silent=True) or {}
        student = container.student_service.add_student(
            name=str(data.get("name", "")),
            roll_number=str(data.get("roll_number", "")),
            class_id=_class_id(data),
        )
        return jsonify({"success": True, "student": student_json(student)}), 201

    @app.route("/api/students/<int:student_id>", methods=["PUT"], endpoint="edit_student")
    def edit_student(student_id: int):
        data = request.get_json(silent=True) or {}
        student = container.student_service.edit_student(
            student_id,
            name=str(data.get("name", "")),
            roll_number=str(data.get("roll_number", "")),
        )
        return jsonify({"success": True, "student": student_json(student)})

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: int):
        return pending_response(container.pending, container.student_service.propose_delete_student(student_id))

    @app.route("/api/students/bulk-delete", methods=["POST"], endpoint="bulk_delete_students")
    def bulk_delete_students():
        data = request.get_json(silent=True) or {}
        raw_ids = data.get("student_ids")
        ids = None if raw_ids is None else [require_int(i, "Student ids must be numbers") for i in raw_ids]
        return pending_response(container.pending, container.student_service.propose_bulk_delete(ids))

    @app.route("/api/students/<int:student_id>/history", methods=["GET"], endpoint="student_history")
    def student_history(student_id: int):
        student = container.student_service.get_student(student_id)
        entries = container.student_service.history(student_id)
        return jsonify(
            {
                "student": student_json(student),
                "history": [{"date": e.date, "status": e.status.value} for e in entries],
            }
        )
