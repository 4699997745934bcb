"""Root conftest - shared test configuration."""

import os

# Keep test output readable; JSON logging is covered by its own tests
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
