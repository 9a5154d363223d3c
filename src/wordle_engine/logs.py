"""Tiny logging helpers.

Components accept optional ``log`` / ``log_debug`` callables instead of
printing directly; the entry points build them with make_loggers().
"""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO, Tuple

LogFn = Callable[[str], None]


def make_loggers(
    verbose: bool = False,
    debug: bool = False,
    *,
    stream: Optional[TextIO] = None,
) -> Tuple[Optional[LogFn], Optional[LogFn]]:
    """Return (log, log_debug); either is None when that level is off."""
    verbose = bool(verbose or debug)
    start_t = time.time()
    out = stream if stream is not None else sys.stderr

    def log(msg: str) -> None:
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] {msg}", file=out)

    def log_debug(msg: str) -> None:
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] DEBUG {msg}", file=out)

    return (log if verbose else None), (log_debug if debug else None)
