"""The formatting context handed to every formatter hook.

A :class:`FormatM` threads one :class:`FormatterState` through a series of
output and bookkeeping operations. Formatter authors get the read-only
counters, the output writer, the colour scopes and the timing readers. The
counter mutators below the class are for the code that drives a run and are
deliberately not methods of :class:`FormatM`.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import replace
from typing import Callable, Iterator, Sequence, TextIO, TypeVar

from rich.color import Color

from specreport.core.models import FailureDetail, FailureRecord, to_path
from specreport.core.state import FormatterState

logger = logging.getLogger(__name__)

T = TypeVar("T")

_RESET = "\x1b[0m"

FAIL_CLASS = "hspec-failure"
SUCCESS_CLASS = "hspec-success"
PENDING_CLASS = "hspec-pending"


def _sgr(color_name: str) -> str:
    """Return the escape sequence that sets a dull foreground colour."""
    codes = Color.parse(color_name).get_ansi_codes(foreground=True)
    return f"\x1b[{';'.join(codes)}m"


_FAIL_SGR = _sgr("red")
_SUCCESS_SGR = _sgr("green")
_PENDING_SGR = _sgr("yellow")


class FormatM:
    """Sequential access to the state of a single test run."""

    def __init__(self, state: FormatterState):
        self._state = state

    @classmethod
    def create(cls, use_color: bool, produce_html: bool, handle: TextIO) -> FormatM:
        """Start a new run on ``handle``, capturing the timing baseline now."""
        return cls(FormatterState.create(handle, use_color, produce_html))

    def _gets(self, f: Callable[[FormatterState], T]) -> T:
        return f(self._state)

    def _modify(self, f: Callable[[FormatterState], FormatterState]) -> None:
        self._state = f(self._state)

    def lift_io(self, action: Callable[..., T], *args, **kwargs) -> T:
        """Run an external side effect, e.g. flushing the output stream."""
        return action(*args, **kwargs)

    # Counters

    def get_success_count(self) -> int:
        """Get the number of successful examples encountered so far."""
        return self._gets(lambda s: s.success_count)

    def get_pending_count(self) -> int:
        """Get the number of pending examples encountered so far."""
        return self._gets(lambda s: s.pending_count)

    def get_fail_count(self) -> int:
        """Get the number of failed examples encountered so far."""
        return self._gets(lambda s: s.fail_count)

    def get_total_count(self) -> int:
        """Get the total number of examples encountered so far."""
        return self._gets(lambda s: s.total_count)

    def get_fail_messages(self) -> list[FailureRecord]:
        """Get the accumulated failure records, oldest first."""
        return self._gets(lambda s: list(s.fail_messages))

    # Output

    def write(self, text: str) -> None:
        """Append some output to the report."""
        handle = self._gets(lambda s: s.handle)
        self.lift_io(handle.write, text)
        self._set_last_is_empty_line(False)

    def write_line(self, text: str) -> None:
        """The same as :meth:`write`, but adds a newline character."""
        self.write(text)
        self.write("\n")

    def new_paragraph(self) -> None:
        """Append an empty line to the report.

        Calling this multiple times has the same effect as calling it once.
        """
        if not self._gets(lambda s: s.last_is_empty_line):
            self.write_line("")
            self._set_last_is_empty_line(True)

    def _set_last_is_empty_line(self, flag: bool) -> None:
        self._modify(lambda s: replace(s, last_is_empty_line=flag))

    # Colour scopes

    def fail_color(self):
        """Render the enclosed output in red."""
        return self._color_scope(_FAIL_SGR, FAIL_CLASS)

    def success_color(self):
        """Render the enclosed output in green."""
        return self._color_scope(_SUCCESS_SGR, SUCCESS_CLASS)

    def pending_color(self):
        """Render the enclosed output in yellow."""
        return self._color_scope(_PENDING_SGR, PENDING_CLASS)

    def with_fail_color(self, action: Callable[[], T]) -> T:
        with self.fail_color():
            return action()

    def with_success_color(self, action: Callable[[], T]) -> T:
        with self.success_color():
            return action()

    def with_pending_color(self, action: Callable[[], T]) -> T:
        with self.pending_color():
            return action()

    def _color_scope(self, sgr: str, css_class: str):
        if self._gets(lambda s: s.produce_html):
            return self._html_span(css_class)
        return self._ansi_color(sgr)

    @contextmanager
    def _html_span(self, css_class: str) -> Iterator[None]:
        self.write(f'<span class="{css_class}">')
        try:
            yield
        finally:
            self.write("</span>")

    @contextmanager
    def _ansi_color(self, sgr: str) -> Iterator[None]:
        use_color, handle = self._gets(lambda s: (s.use_color, s.handle))
        if use_color:
            self.lift_io(handle.write, sgr)
        try:
            yield
        finally:
            if use_color:
                self.lift_io(handle.write, _RESET)

    # Timing

    def get_cpu_time(self) -> float:
        """Get the used CPU time since the test run has been started."""
        t1 = self.lift_io(time.process_time)
        return t1 - self._gets(lambda s: s.cpu_start_time)

    def get_real_time(self) -> float:
        """Get the passed real time since the test run has been started."""
        t1 = self.lift_io(time.time)
        return t1 - self._gets(lambda s: s.start_time)


def run_format_m(
    use_color: bool,
    produce_html: bool,
    handle: TextIO,
    action: Callable[[FormatM], T],
) -> T:
    """Evaluate ``action`` against a fresh formatting context on ``handle``."""
    fm = FormatM.create(use_color, produce_html, handle)
    logger.debug("Formatting run started (color=%s, html=%s)", use_color, produce_html)
    result = action(fm)
    logger.debug(
        "Formatting run finished: %d examples, %d failures, %d pending",
        fm.get_total_count(),
        fm.get_fail_count(),
        fm.get_pending_count(),
    )
    return result


# Functions for the code driving a run, not for formatter authors.


def increase_success_count(fm: FormatM) -> None:
    """Increase the counter for successful examples."""
    fm._modify(lambda s: replace(s, success_count=s.success_count + 1))


def increase_pending_count(fm: FormatM) -> None:
    """Increase the counter for pending examples."""
    fm._modify(lambda s: replace(s, pending_count=s.pending_count + 1))


def increase_fail_count(fm: FormatM) -> None:
    """Increase the counter for failed examples."""
    fm._modify(lambda s: replace(s, fail_count=s.fail_count + 1))


def add_fail_message(fm: FormatM, path: Sequence[str], detail: FailureDetail) -> None:
    """Append to the list of accumulated failure messages."""
    record = FailureRecord(path=to_path(path), message=detail)
    fm._modify(lambda s: replace(s, fail_messages=[*s.fail_messages, record]))
