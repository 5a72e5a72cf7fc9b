"""
Lazy sort errors and runtime switches.
"""

from __future__ import annotations

import os
from typing import Optional

DEFAULT_CHECK_INVARIANTS = True
DEFAULT_DEBUG = False
INVARIANT_VIOLATION_MESSAGE = "Lazy sort engine invariant violated."

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class InvariantViolationError(AssertionError):
    """
    Raised when the engine's work stack or buffer is found in a state the
    partitioning algorithm can never produce on its own.
    """

    def __init__(
        self,
        message: str = INVARIANT_VIOLATION_MESSAGE,
        *,
        lower: int | None = None,
        upper: int | None = None,
        length: int | None = None,
        context: str | None = None,
    ) -> None:
        super().__init__(message)
        self.lower = lower
        self.upper = upper
        self.length = length
        self.context = context


def _resolve_flag(explicit: Optional[bool], env_name: str, default: bool) -> bool:
    if explicit is not None:
        return bool(explicit)

    raw = os.getenv(env_name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def resolve_check_invariants(explicit: Optional[bool] = None) -> bool:
    """
    Resolve whether the engine verifies its invariants.

    Priority:
    1) explicit argument
    2) env LAZYSORT_CHECK_INVARIANTS
    3) DEFAULT_CHECK_INVARIANTS
    """
    return _resolve_flag(explicit, "LAZYSORT_CHECK_INVARIANTS", DEFAULT_CHECK_INVARIANTS)


def resolve_debug(explicit: Optional[bool] = None) -> bool:
    """
    Resolve whether the engine prints debug traces.

    Priority:
    1) explicit argument
    2) env LAZYSORT_DEBUG
    3) DEFAULT_DEBUG
    """
    return _resolve_flag(explicit, "LAZYSORT_DEBUG", DEFAULT_DEBUG)
