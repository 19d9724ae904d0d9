"""Abstract base class for formatters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from specreport.core.format import FormatM
from specreport.core.models import FailureDetail, Path


class Formatter(ABC):
    """Hooks a test runner invokes while a run is in progress.

    The runner decides when each hook is called; a formatter only renders
    what it is told. Every hook defaults to doing nothing.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Formatter identifier."""

    def header_formatter(self, fm: FormatM) -> None:
        """Called once, before any example runs."""

    def example_group_started(
        self, fm: FormatM, index: int, ancestors: list[str], description: str
    ) -> None:
        """Called before each example group.

        ``index`` is the position of the group within its parent group.
        """

    def example_group_done(self, fm: FormatM) -> None:
        """Called after each example group."""

    def example_succeeded(self, fm: FormatM, path: Path) -> None:
        """Called after each successful example."""

    def example_failed(self, fm: FormatM, path: Path, detail: FailureDetail) -> None:
        """Called after each failed example."""

    def example_pending(self, fm: FormatM, path: Path, reason: str | None) -> None:
        """Called after each pending example."""

    def failed_formatter(self, fm: FormatM) -> None:
        """Called once after all examples have run."""

    def footer_formatter(self, fm: FormatM) -> None:
        """Called once after :meth:`failed_formatter`."""
