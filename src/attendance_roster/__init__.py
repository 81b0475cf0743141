"""Attendance Roster package.

This package is organized by feature modules (classes, students, attendance,
imports, reports) around a single in-memory roster snapshot, with a thin Flask
controller layer on top and a key-value repository underneath.
"""
