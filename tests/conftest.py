"""Shared test setup: a signing key long enough for the settings check."""

import os

os.environ.setdefault("JWT_SECRET", "conftest-secret-with-enough-length-for-hs256")
