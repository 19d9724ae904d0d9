"""Failure list and summary shared by the built-in formatters."""

from __future__ import annotations

from specreport.core.format import FormatM
from specreport.utils.text import format_detail, format_path, pluralize


def default_failed_formatter(fm: FormatM) -> None:
    """List every recorded failure, numbered in the order it happened."""
    fm.new_paragraph()
    for i, record in enumerate(fm.get_fail_messages(), start=1):
        with fm.fail_color():
            fm.write(f"{i}) ")
            fm.write_line(format_path(record.path))
            fm.write_line(format_detail(record.message))
        fm.write_line("")


def default_footer(fm: FormatM) -> None:
    """Write the elapsed time and the example/failure/pending summary."""
    fm.write_line(
        f"Finished in {fm.get_real_time():.4f} seconds, "
        f"used {fm.get_cpu_time():.4f} seconds of CPU time"
    )

    fails = fm.get_fail_count()
    pending = fm.get_pending_count()
    total = fm.get_total_count()

    if fails:
        scope = fm.fail_color()
    elif pending:
        scope = fm.pending_color()
    else:
        scope = fm.success_color()

    with scope:
        fm.write(pluralize(total, "example"))
        fm.write(", " + pluralize(fails, "failure"))
        if pending:
            fm.write(f", {pending} pending")
    fm.write_line("")
