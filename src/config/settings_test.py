"""Settings for the pytest run.

Supplies the secrets ``config.settings`` refuses to default, then
reuses it unchanged.  ``decouple`` reads ``os.environ`` first, so real
environment values still win.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-only-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")

from config.settings import *  # noqa: E402,F401,F403
