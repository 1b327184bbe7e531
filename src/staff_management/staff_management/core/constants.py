"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_LOAN_DAYS = 14

UPLOADS_BASE_DIRECTORY = "uploads"
ALLOWED_IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")
NORMALIZED_IMAGE_EXTENSION = ".jpg"
