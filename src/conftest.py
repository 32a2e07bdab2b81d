"""Test environment defaults.

Runs before any test module is imported, so modules that read
configuration at import time (JWT settings, DATABASE_URL) see these values.
"""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")
