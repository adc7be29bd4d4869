"""Test configuration and fixtures for Fitness Tracker."""

import os

# Must run before fitness_tracker is imported: the application context loads
# its configuration at import time.
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from tests.fixtures import *  # noqa: E402,F401,F403
