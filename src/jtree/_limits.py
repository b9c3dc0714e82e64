"""
Parse limits and parser configuration.

Limits are guard-rails against hostile input: ``max_depth`` bounds recursion
and is always set, the remaining ceilings are optional and ``None`` means
unlimited.
"""

import logging
import os
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from typing import Final

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH: Final = 128
DEFAULT_MAX_STRING_LENGTH: Final = 10_000_000
DEFAULT_MAX_ARRAY_ITEMS: Final = 1_000_000
DEFAULT_MAX_OBJECT_FIELDS: Final = 100_000

# Overrides the depth ceiling used by default_limits()/default_max_depth()
MAX_DEPTH_ENV: Final = "JTREE_MAX_DEPTH"


def _check_limit(name: str, value: int | None, *, optional: bool) -> None:
    if value is None and optional:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer")


@dataclass(frozen=True)
class ParseLimits:
    """
    Ceilings applied while parsing a single document.

    Read-only during parsing; one instance may be shared by any number of
    concurrent parse calls.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    max_string_length: int | None = None
    max_array_items: int | None = None
    max_object_fields: int | None = None

    def __post_init__(self) -> None:
        _check_limit("max_depth", self.max_depth, optional=False)
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        _check_limit(
            "max_string_length", self.max_string_length, optional=True
        )
        _check_limit("max_array_items", self.max_array_items, optional=True)
        _check_limit(
            "max_object_fields", self.max_object_fields, optional=True
        )


def default_max_depth() -> int:
    """
    Returns the default nesting ceiling.

    128 unless ``JTREE_MAX_DEPTH`` holds a positive integer.
    """
    raw = os.environ.get(MAX_DEPTH_ENV)
    if raw is None:
        return DEFAULT_MAX_DEPTH
    try:
        depth = int(raw)
    except ValueError:
        depth = 0
    if depth < 1:
        logger.warning(
            "Ignoring %s=%r: expected a positive integer", MAX_DEPTH_ENV, raw
        )
        return DEFAULT_MAX_DEPTH
    return depth


def default_limits() -> ParseLimits:
    """Limits used by parse() and parse_strict()."""
    return ParseLimits(
        max_depth=default_max_depth(),
        max_string_length=DEFAULT_MAX_STRING_LENGTH,
        max_array_items=DEFAULT_MAX_ARRAY_ITEMS,
        max_object_fields=DEFAULT_MAX_OBJECT_FIELDS,
    )


def unlimited_limits() -> ParseLimits:
    """
    Limits with every optional ceiling removed.

    Depth stays bounded because it protects the interpreter stack, not just
    memory.
    """
    return ParseLimits(max_depth=default_max_depth())


def with_max_depth(limits: ParseLimits, max_depth: int) -> ParseLimits:
    return replace(limits, max_depth=max_depth)


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures one parse call with immutable settings.

    ``strict`` turns duplicate object keys into errors; otherwise the first
    occurrence of a key wins.
    """

    strict: bool = False
    limits: ParseLimits = field(default_factory=default_limits)

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if not isinstance(self.limits, ParseLimits):
            raise TypeError("limits must be a ParseLimits instance")
