"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# Keys of the persisted layout.
CLASSES_KEY = "classes"
STUDENTS_KEY = "students"
HISTORY_KEY = "attendanceHistory"
SELECTED_CLASS_KEY = "selectedClassId"

# Roster shown to first-time users or after a corrupt load.
DEFAULT_CLASS = {"id": 1, "name": "Sample Class"}
DEFAULT_STUDENTS = (
    {"id": 1, "name": "Alice Johnson", "rollNumber": "S001", "classId": 1},
    {"id": 2, "name": "Bob Williams", "rollNumber": "S002", "classId": 1},
)

IMPORT_EXTENSIONS = (".xlsx", ".xls", ".csv")
IMPORT_HEADER_KEYWORDS = ("roll", "number", "name")

REPORT_TITLE = "Attendance Report"
REPORT_COLUMNS = ("Roll Number", "Student Name", "Status")
SUMMARY_TITLE = "Daily Summary"
