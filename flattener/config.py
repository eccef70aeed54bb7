"""Service configuration with environment variable overrides."""
import os

LOG_LEVEL = os.environ.get("FLATTENER_LOG_LEVEL", "INFO").upper()
MAX_UPLOAD_BYTES = int(os.environ.get("FLATTENER_MAX_UPLOAD_BYTES", 5 * 1024 * 1024))
