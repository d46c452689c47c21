"""Internal constants shared across the library."""

DEFAULT_TIMEOUT_S: float = 10.0
API_KEY_HEADER = "X-API-Key"
USER_AGENT = "pymediatracker"

ENV_BASE_URL = "MEDIA_TRACKER_API_BASE_URL"
ENV_API_KEY = "MEDIA_TRACKER_API_KEY"
ENV_TIMEOUT = "MEDIA_TRACKER_TIMEOUT"
