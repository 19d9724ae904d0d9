"""Core data models for the reporting engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

Path = Tuple[str, ...]
"""Nested group descriptions followed by the example description."""

FailureDetail = Union[BaseException, str]
"""Either the exception an example raised or a plain failure message."""


class ColorMode(str, Enum):
    """When to emit ANSI colour sequences."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class Outcome(str, Enum):
    """Result of a single example as reported by the runner."""

    SUCCESS = "success"
    FAILURE = "failure"
    PENDING = "pending"


def to_path(path: Sequence[str]) -> Path:
    """Normalise a path given as any sequence of strings to a tuple."""
    if isinstance(path, str):
        return (path,)
    return tuple(path)


@dataclass(frozen=True)
class FailureRecord:
    """A failed example and the reason it failed."""

    path: Path
    message: FailureDetail
