# api/infrastructure/log.py
#
# Shared service logger with elapsed time.
#
# Design decisions:
#   - Single log() function for every module (reference-table loader,
#     scenario saves, store failures).
#   - Elapsed time since process start is shown so slow reference-table
#     fetches stand out in the container output.
#   - No external dependencies: plain stdout with flush.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[simulador {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
