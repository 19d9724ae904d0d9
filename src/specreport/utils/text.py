"""Text helpers shared by the built-in formatters."""

from __future__ import annotations

from typing import Sequence

from specreport.core.models import FailureDetail


def format_path(path: Sequence[str]) -> str:
    """Join a path into a single human-readable requirement."""
    return " ".join(part for part in path if part)


def format_exception(exc: BaseException) -> str:
    return f"uncaught exception: {type(exc).__name__} ({exc})"


def format_detail(detail: FailureDetail) -> str:
    """Render a failure detail for display."""
    if isinstance(detail, BaseException):
        return format_exception(detail)
    return detail


def pluralize(count: int, word: str) -> str:
    if count == 1:
        return f"{count} {word}"
    return f"{count} {word}s"


def indentation_for(nesting: Sequence[str]) -> str:
    return " " * (len(nesting) * 2)
