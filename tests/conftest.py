"""Test configuration for stockroom."""

import os

# Must be set before stockroom.runtime.context loads the default config
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from tests.fixtures import *  # noqa: E402,F401,F403
