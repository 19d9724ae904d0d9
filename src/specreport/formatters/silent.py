"""Formatter that produces no output at all."""

from __future__ import annotations

from specreport.core.formatter import Formatter


class SilentFormatter(Formatter):
    """Formatter whose hooks all do nothing.

    Also a convenient base for formatters that only render a few hooks.
    """

    @property
    def name(self) -> str:
        return "silent"
