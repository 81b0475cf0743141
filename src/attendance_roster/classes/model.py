from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SchoolClass:
    """Domain entity: a class (group of students) identified by ``id``."""

    id: int
    name: str
