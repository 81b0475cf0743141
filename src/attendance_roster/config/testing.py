SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "memory"
STORAGE_PATH = None

MAX_UPLOAD_BYTES = 1024 * 1024
