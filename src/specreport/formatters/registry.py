"""Formatter registry."""

from __future__ import annotations

import logging

from specreport.core.formatter import Formatter

logger = logging.getLogger(__name__)

_FORMATTERS: dict[str, type[Formatter]] = {}


def register_formatter(name: str, cls: type[Formatter]) -> None:
    """Register a formatter class by name, replacing any earlier one."""
    if name in _FORMATTERS and _FORMATTERS[name] is not cls:
        logger.warning("Formatter %r replaced by %s", name, cls.__name__)
    _FORMATTERS[name] = cls


def unregister_formatter(name: str) -> None:
    """Forget a formatter; unknown names are ignored."""
    _FORMATTERS.pop(name, None)


def get_formatter(name: str) -> Formatter:
    """Instantiate and return a formatter by name."""
    try:
        cls = _FORMATTERS[name]
    except KeyError:
        raise KeyError(
            f"Unknown formatter: {name!r}. Available: {sorted(_FORMATTERS)}"
        ) from None
    logger.debug("Using formatter %s", name)
    return cls()


def list_formatters() -> list[str]:
    """Return all registered formatter names."""
    return list(_FORMATTERS.keys())
