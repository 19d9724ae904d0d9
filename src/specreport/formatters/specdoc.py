"""Formatter that prints the run as a nested outline of requirements."""

from __future__ import annotations

from specreport.core.format import FormatM
from specreport.core.models import FailureDetail, Path
from specreport.formatters.defaults import default_failed_formatter, default_footer
from specreport.formatters.silent import SilentFormatter
from specreport.utils.text import indentation_for

NO_REASON = "No reason given"


class SpecdocFormatter(SilentFormatter):
    """Prints every group and example, indented by nesting depth.

    Example output::

        Stack
          push
             - adds an element
             - grows the stack FAILED [1]
    """

    @property
    def name(self) -> str:
        return "specdoc"

    def header_formatter(self, fm: FormatM) -> None:
        fm.new_paragraph()

    def example_group_started(
        self, fm: FormatM, index: int, ancestors: list[str], description: str
    ) -> None:
        # separate sibling groups with an empty line
        if index != 0:
            fm.new_paragraph()
        fm.write_line(indentation_for(ancestors) + description)

    def example_group_done(self, fm: FormatM) -> None:
        fm.new_paragraph()

    def example_succeeded(self, fm: FormatM, path: Path) -> None:
        nesting, requirement = _split(path)
        with fm.success_color():
            fm.write_line(f"{indentation_for(nesting)} - {requirement}")

    def example_failed(self, fm: FormatM, path: Path, detail: FailureDetail) -> None:
        nesting, requirement = _split(path)
        with fm.fail_color():
            n = fm.get_fail_count()
            fm.write_line(f"{indentation_for(nesting)} - {requirement} FAILED [{n}]")

    def example_pending(self, fm: FormatM, path: Path, reason: str | None) -> None:
        nesting, requirement = _split(path)
        indent = indentation_for(nesting)
        if reason is None:
            reason = NO_REASON
        with fm.pending_color():
            fm.write_line(f"{indent} - {requirement}")
            fm.write_line(f"{indent}     # PENDING: {reason}")

    def failed_formatter(self, fm: FormatM) -> None:
        default_failed_formatter(fm)

    def footer_formatter(self, fm: FormatM) -> None:
        default_footer(fm)


def _split(path: Path) -> tuple[Path, str]:
    """Split a path into its enclosing groups and the requirement itself."""
    if not path:
        return (), ""
    return path[:-1], path[-1]
