"""Pytest configuration shared across test modules."""

import os

os.environ.setdefault("CATALOGBROWSER_LOG_LEVEL", "DEBUG")
