"""Run a whole report from a :class:`FormatConfig`."""

from __future__ import annotations

import logging
from typing import Callable, TextIO, TypeVar

from specreport.core.config import FormatConfig
from specreport.core.format import FormatM, run_format_m
from specreport.core.formatter import Formatter
from specreport.utils.logging import setup_logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_with_config(
    config: FormatConfig,
    handle: TextIO,
    drive: Callable[[FormatM, Formatter], T],
) -> T:
    """Report a run on ``handle`` the way ``config`` describes.

    ``drive`` is the runner: it receives the formatting context and the
    configured formatter and invokes the hooks in run order. Its return value
    is passed through.
    """
    # registers the built-in formatters
    import specreport.formatters  # noqa: F401
    from specreport.formatters.registry import get_formatter

    setup_logging(config.log_level)
    formatter = get_formatter(config.formatter)
    use_color = config.use_color_for(handle)
    logger.info(
        "Reporting with %s (color=%s, html=%s)", formatter.name, use_color, config.html
    )
    return run_format_m(use_color, config.html, handle, lambda fm: drive(fm, formatter))
