# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import ENGINE, Base, SessionLocal, init_db, session_scope
from . import models  # noqa: F401,E402  (registers tables on Base.metadata)

__all__ = ["Base", "ENGINE", "SessionLocal", "init_db", "session_scope"]
