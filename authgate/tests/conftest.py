from __future__ import annotations

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="authgate-tests-")

# Must run before anything imports authgate: the engine is built at import.
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'authgate.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"
