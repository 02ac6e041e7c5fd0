"""Shared test setup.

Points the app at a throwaway SQLite file and log directory before any
application module is imported, since both are read at import time.
"""

import os
import tempfile

_tmp_dir = tempfile.mkdtemp(prefix="protein-breakfast-tests-")
os.environ["WRITE_DATABASE_URL"] = "sqlite:///" + os.path.join(_tmp_dir, "test.db")
os.environ.pop("READ_DATABASE_URL", None)
os.environ.setdefault("LOG_DIR", os.path.join(_tmp_dir, "logs"))
