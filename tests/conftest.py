"""Point the app at in-memory SQLite before any app module builds its engine."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "dev")
