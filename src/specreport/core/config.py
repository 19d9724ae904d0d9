"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

import yaml

from specreport.core.models import ColorMode


@dataclass
class FormatConfig:
    """How a run should be reported."""

    formatter: str = "specdoc"
    color: ColorMode = ColorMode.AUTO
    html: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.color = _color_mode(self.color)

    @classmethod
    def from_yaml(cls, path: str | Path) -> FormatConfig:
        """Load configuration from a YAML file."""
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FormatConfig:
        """Create configuration from a dictionary."""
        return cls(
            formatter=data.get("formatter", "specdoc"),
            color=_color_mode(data.get("color", ColorMode.AUTO)),
            html=data.get("html", False),
            log_level=data.get("log_level", "INFO"),
        )

    def merge_overrides(
        self,
        formatter: str | None = None,
        color: ColorMode | str | bool | None = None,
        html: bool | None = None,
    ) -> None:
        """Apply caller overrides to the config."""
        if formatter:
            self.formatter = formatter
        if color is not None:
            self.color = _color_mode(color)
        if html is not None:
            self.html = html

    def use_color_for(self, handle: TextIO) -> bool:
        """Decide whether ANSI colours should be written to ``handle``."""
        if self.color == ColorMode.ALWAYS:
            return True
        if self.color == ColorMode.NEVER:
            return False
        isatty = getattr(handle, "isatty", None)
        return bool(isatty and isatty())


def _color_mode(value: ColorMode | str | bool) -> ColorMode:
    if isinstance(value, ColorMode):
        return value
    # YAML turns bare yes/no/on/off into booleans
    if isinstance(value, bool):
        return ColorMode.ALWAYS if value else ColorMode.NEVER
    try:
        return ColorMode(str(value).lower())
    except ValueError:
        raise ValueError(
            f"Unknown color mode: {value!r}. Available: {[m.value for m in ColorMode]}"
        ) from None
