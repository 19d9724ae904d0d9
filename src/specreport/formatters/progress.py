"""Formatter that prints one character per example."""

from __future__ import annotations

from specreport.core.format import FormatM
from specreport.core.models import FailureDetail, Path
from specreport.formatters.defaults import default_failed_formatter, default_footer
from specreport.formatters.silent import SilentFormatter


class ProgressFormatter(SilentFormatter):
    """Prints ``.`` for passing and pending examples and ``F`` for failures."""

    @property
    def name(self) -> str:
        return "progress"

    def example_succeeded(self, fm: FormatM, path: Path) -> None:
        with fm.success_color():
            fm.write(".")

    def example_failed(self, fm: FormatM, path: Path, detail: FailureDetail) -> None:
        with fm.fail_color():
            fm.write("F")

    def example_pending(self, fm: FormatM, path: Path, reason: str | None) -> None:
        with fm.pending_color():
            fm.write(".")

    def failed_formatter(self, fm: FormatM) -> None:
        default_failed_formatter(fm)

    def footer_formatter(self, fm: FormatM) -> None:
        default_footer(fm)
