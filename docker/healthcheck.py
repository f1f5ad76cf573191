"""Container healthcheck script: exit 0 if the instance can take traffic."""

from __future__ import annotations

import os
import sys
import urllib.error
import urllib.request

port = os.environ.get("SERVER_PORT", "8080")

try:
    with urllib.request.urlopen(f"http://127.0.0.1:{port}/health", timeout=10) as resp:
        if resp.status == 200:
            sys.exit(0)
except (urllib.error.URLError, OSError):
    pass

sys.exit(1)
