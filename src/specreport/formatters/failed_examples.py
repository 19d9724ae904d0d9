"""Formatter that only reports failures and the final summary."""

from __future__ import annotations

from specreport.core.format import FormatM
from specreport.formatters.defaults import default_failed_formatter, default_footer
from specreport.formatters.silent import SilentFormatter


class FailedExamplesFormatter(SilentFormatter):
    @property
    def name(self) -> str:
        return "failed-examples"

    def failed_formatter(self, fm: FormatM) -> None:
        default_failed_formatter(fm)

    def footer_formatter(self, fm: FormatM) -> None:
        default_footer(fm)
