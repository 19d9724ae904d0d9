"""Mutable run state shared by every formatter hook."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TextIO

from specreport.core.models import FailureRecord


@dataclass
class FormatterState:
    """Everything a single test run accumulates while it is being reported.

    One instance is created per run and thrown away afterwards. The handle is
    borrowed from the caller and is never closed here.
    """

    handle: TextIO
    use_color: bool
    produce_html: bool
    last_is_empty_line: bool = False
    success_count: int = 0
    pending_count: int = 0
    fail_count: int = 0
    fail_messages: list[FailureRecord] = field(default_factory=list)
    cpu_start_time: float = 0.0
    start_time: float = 0.0

    @classmethod
    def create(cls, handle: TextIO, use_color: bool, produce_html: bool) -> FormatterState:
        """Create a fresh state and capture the timing baseline."""
        return cls(
            handle=handle,
            use_color=use_color,
            produce_html=produce_html,
            cpu_start_time=time.process_time(),
            start_time=time.time(),
        )

    @property
    def total_count(self) -> int:
        """The total number of examples encountered so far."""
        return self.success_count + self.pending_count + self.fail_count
