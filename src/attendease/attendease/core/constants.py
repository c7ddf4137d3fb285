"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

# Key-value store keys
EMPLOYEES_KEY = "attendease-employees"
ATTENDANCE_KEY = "attendease-attendance"
CURRENT_USER_KEY = "attendease-currentUser"

# Bootstrap HR account, seeded only when the directory is empty
DEFAULT_ADMIN_ID = "HR001"
DEFAULT_ADMIN_NAME = "Admin HR"
DEFAULT_ADMIN_PASSWORD = "hrpassword"
DEFAULT_ADMIN_EMAIL = "hr@example.com"

# Check-in strictly after this time of day is Late
DEFAULT_LATE_CUTOFF = time(12, 0, 0)

INVALID_TIMES = "Invalid times"
MIN_PASSWORD_LENGTH = 6
DEFAULT_HISTORY_LIMIT = 30
