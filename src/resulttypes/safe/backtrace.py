"""
Captured stack traces, stored by value inside error objects.
"""

import traceback
from typing import TypeAlias

from .. import config

Backtrace: TypeAlias = traceback.StackSummary


def capture_backtrace(skip: int = 1) -> Backtrace:
    """
    Capture the current call stack.

    Args:
        skip: Number of innermost frames to drop; the default drops this call.

    Returns:
        The captured frames, outermost first.
    """
    frames = traceback.extract_stack(limit=config.BACKTRACE_LIMIT)
    return traceback.StackSummary.from_list(frames[: len(frames) - skip])


def catch_backtrace(exc: BaseException) -> Backtrace:
    """The frames an exception travelled through before it was caught."""
    return traceback.extract_tb(exc.__traceback__, limit=config.BACKTRACE_LIMIT)


def format_backtrace(bt: Backtrace) -> str:
    if not bt:
        return ""
    return "Stacktrace:\n" + "".join(bt.format()).rstrip()


__all__ = ["Backtrace", "capture_backtrace", "catch_backtrace", "format_backtrace"]
