"""Bookkeeping a runner performs around each formatter hook."""

from __future__ import annotations

import logging
from typing import Sequence

from specreport.core.format import (
    FormatM,
    add_fail_message,
    increase_fail_count,
    increase_pending_count,
    increase_success_count,
)
from specreport.core.formatter import Formatter
from specreport.core.models import FailureDetail, Outcome, to_path

logger = logging.getLogger(__name__)

__all__ = [
    "add_fail_message",
    "increase_fail_count",
    "increase_pending_count",
    "increase_success_count",
    "report_failure",
    "report_outcome",
    "report_pending",
    "report_success",
]


def report_success(fm: FormatM, formatter: Formatter, path: Sequence[str]) -> None:
    """Count a successful example and let the formatter render it."""
    increase_success_count(fm)
    formatter.example_succeeded(fm, to_path(path))


def report_failure(
    fm: FormatM, formatter: Formatter, path: Sequence[str], detail: FailureDetail
) -> None:
    """Count and record a failed example, then let the formatter render it."""
    path = to_path(path)
    increase_fail_count(fm)
    add_fail_message(fm, path, detail)
    formatter.example_failed(fm, path, detail)


def report_pending(
    fm: FormatM, formatter: Formatter, path: Sequence[str], reason: str | None = None
) -> None:
    """Count a pending example and let the formatter render it."""
    increase_pending_count(fm)
    formatter.example_pending(fm, to_path(path), reason)


def report_outcome(
    fm: FormatM,
    formatter: Formatter,
    path: Sequence[str],
    outcome: Outcome,
    detail: FailureDetail | None = None,
) -> None:
    """Dispatch an example outcome to the matching report function.

    For failures ``detail`` is the exception or message; for pending examples
    it is the optional reason.
    """
    outcome = Outcome(outcome)
    logger.debug("Example %s: %s", outcome.value, " ".join(to_path(path)))
    if outcome == Outcome.SUCCESS:
        report_success(fm, formatter, path)
    elif outcome == Outcome.FAILURE:
        if detail is None:
            raise ValueError("A failed example needs an exception or a message")
        report_failure(fm, formatter, path, detail)
    else:
        if isinstance(detail, BaseException):
            detail = str(detail)
        report_pending(fm, formatter, path, detail)
