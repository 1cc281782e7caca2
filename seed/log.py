# seed/log.py
#
# Shared seed logger with elapsed time.
#
# Design decisions:
#   - Single log() function used by every seed module.
#   - Plain stdout with flush: the seed is a short batch job, not a service.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[seed {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
