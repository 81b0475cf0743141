from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import optional_int
from ..container import Container
from ..core.exceptions import ImportParseError
from ..roster.views import student_json


def _row_json(row) -> dict:
    return {"position": row.position, "roll_number": row.roll_number, "name": row.name}


def register(app: Flask, container: Container) -> None:
    def _upload() -> tuple[bytes, str]:
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            raise ImportParseError("Please choose a file to import")
        return upload.read(), upload.filename

    @app.route("/api/import/preview", methods=["POST"], endpoint="preview_import")
    def preview_import():
        preview = container.import_service.preview(container.import_service.parse_file(*_upload()))
        message = ""
        if preview.has_duplicates:
            message = (
                f"Warning: {len(preview.duplicates)} duplicate roll number(s) found. "
                "These will be skipped on import."
            )
        return jsonify(
            {
                "success": True,
                "accepted": [_row_json(r) for r in preview.accepted],
                "duplicates": [_row_json(r) for r in preview.duplicates],
                "message": message,
            }
        )

    @app.route("/api/import", methods=["POST"], endpoint="import_students")
    def import_students():
        class_id = optional_int(request.form.get("class_id"), "Class id must be a number")
        if class_id is None:
            class_id = container.session.snapshot.selected_class_id

        data, filename = _upload()
        result = container.import_service.import_file(data, filename, class_id)
        if result.imported_count == 0:
            message = "All students have duplicate roll numbers. Nothing was imported."
        elif result.skipped_count:
            message = (
                f"{result.skipped_count} student(s) with duplicate roll numbers were skipped. "
                f"Imported {result.imported_count} valid student(s)."
            )
        else:
            message = f"Imported {result.imported_count} student(s)."
        return jsonify(
            {
                "success": True,
                "imported": [student_json(s) for s in result.imported],
                "skipped": [_row_json(r) for r in result.skipped],
                "message": message,
            }
        )
