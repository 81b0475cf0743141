from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a student enrolled in exactly one class.

    Note: roll number uniqueness is checked by the services, not here.
    """

    id: int
    name: str
    roll_number: str
    class_id: int
