"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import GradeLetter

# Durable storage keys, one per mutable collection.
USERS_KEY = "users"
STUDENTS_KEY = "students"
GRADES_KEY = "grades"
ATTENDANCE_KEY = "attendance"
SESSION_KEY = "currentUser"

DEFAULT_ADMIN_ID = "1"
DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"

DEFAULT_TOTAL_FEES = 10000
DEFAULT_FAKE_DATA_COUNT = 10
MAX_FAKE_DATA_COUNT = 1000
DEFAULT_DASHBOARD_SEED_COUNT = 20
STUDENT_CODE_PREFIX = "ST"
STUDENT_CODE_BASE = 100000

GRADE_POINTS = {
    GradeLetter.A: 4.0,
    GradeLetter.A_MINUS: 3.7,
    GradeLetter.B_PLUS: 3.3,
    GradeLetter.B: 3.0,
    GradeLetter.B_MINUS: 2.7,
    GradeLetter.C_PLUS: 2.3,
    GradeLetter.C: 2.0,
    GradeLetter.C_MINUS: 1.7,
    GradeLetter.D_PLUS: 1.3,
    GradeLetter.D: 1.0,
    GradeLetter.F: 0.0,
}
