"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Generation backend
BACKEND_URL: str = os.getenv("BACKEND_URL", "http://localhost:8000").rstrip("/")
GENERATE_PATH: str = "/api/cv/generate"

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Fixed CV template; not user-editable
CV_TEMPLATE: str = "modern"

# Result artifacts
DEFAULT_PDF_FILENAME: str = "MakeMeHiredCV.pdf"
PDF_MIME_TYPE: str = "application/pdf"
DOWNLOAD_DIR: str = os.getenv("DOWNLOAD_DIR", "downloads")

# Shown to the user for any failed submission; details go to the log only
GENERIC_FAILURE_MESSAGE: str = "Failed to generate CV"

# Required top-level fields, in form order
REQUIRED_FIELDS: tuple = ("full_name", "job_title_target", "email", "phone")
