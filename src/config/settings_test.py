"""Settings used by the test suite.

Provides throwaway values for the variables ``config.settings`` refuses
to default, then pulls in everything else unchanged.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-only-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")

from config.settings import *  # noqa: E402,F401,F403
