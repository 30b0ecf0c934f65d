import os

# Base directory
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Paths
LOG_FILE = os.path.join(BASE_DIR, "grading.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Server
DEFAULT_HOST = os.getenv("HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("PORT", "8000"))

# Sessions
SESSION_TTL = int(os.getenv("SESSION_TTL", "3600"))               # 1 hour
SESSION_CLEANUP_INTERVAL = int(os.getenv("SESSION_CLEANUP_INTERVAL", "300"))

# Grading policy (minimum percentage, letter), highest band first
GRADE_BOUNDARIES = [
    (70.0, "A"),
    (60.0, "B"),
    (50.0, "C"),
    (40.0, "D"),
    (0.0, "F"),
]
PASS_PERCENTAGE = float(os.getenv("PASS_PERCENTAGE", "40.0"))

# Grade shown on assessment records that have not been scored yet
UNSCORED_GRADE = "N/A"
