"""Module s7_debug : Logs structurés des calculs."""

from .logger import DebugLogger, CodeLog, RunLog

__all__ = [
    "DebugLogger",
    "CodeLog",
    "RunLog",
]
