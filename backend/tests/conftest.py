"""Root conftest - shared test configuration."""

import os

# Ensure tests never reach a real MongoDB or write into the working directory
os.environ.setdefault("STORAGE_BACKEND", "file")
os.environ.pop("MONGODB_URI", None)
os.environ.setdefault("LOG_FORMAT", "text")
