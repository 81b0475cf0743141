"""JSON shapes returned by the controllers."""

from __future__ import annotations

from typing import Optional

from flask import jsonify

from ..attendance.model import AttendanceSummary
from ..classes.model import SchoolClass
from ..core.enums import AttendanceStatus
from ..core.pending import PendingAction, PendingActionRegistry
from ..students.model import Student


def class_json(cls: SchoolClass) -> dict:
    return {"id": cls.id, "name": cls.name}


def student_json(student: Student, status: Optional[AttendanceStatus] = None) -> dict:
    out = {
        "id": student.id,
        "name": student.name,
        "roll_number": student.roll_number,
        "class_id": student.class_id,
    }
    if status is not None:
        out["status"] = status.value
    return out


def summary_json(summary: AttendanceSummary) -> dict:
    return {"present": summary.present, "absent": summary.absent, "unmarked": summary.unmarked}


def pending_response(registry: PendingActionRegistry, action: Optional[PendingAction]):
    """Stage ``action`` and answer 202, or 200 with no pending action."""
    if action is None:
        return jsonify({"success": True, "pending": None}), 200

    token = registry.stage(action)
    return jsonify(
        {
            "success": True,
            "pending": {
                "token": token,
                "title": action.title,
                "description": action.description,
                "confirm_text": action.confirm_text,
            },
        }
    ), 202
