"""
fatal internal assertions.

a failure here means the caller broke a precondition (unsorted input to a
sorted operation, mismatched zip lengths, a match that was promised but never
found). these are never caught inside the library.
"""

import logging
import os
from enum import IntEnum
from typing import Any, NoReturn, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')

ASSERTION_LEVEL_ENV = "COLLEX_ASSERTION_LEVEL"


class AssertionLevel(IntEnum):
    NONE = 0
    NORMAL = 1
    AGGRESSIVE = 2
    VERY_AGGRESSIVE = 3


class DebugFailure(AssertionError):
    """raised when an internal precondition does not hold."""
    pass


def _level_from_env() -> AssertionLevel:
    raw = os.environ.get(ASSERTION_LEVEL_ENV)
    if not raw:
        return AssertionLevel.NORMAL
    raw = raw.strip()
    try:
        if raw.lstrip('-').isdigit():
            return AssertionLevel(int(raw))
        return AssertionLevel[raw.upper()]
    except (KeyError, ValueError):
        raise ValueError(f"invalid {ASSERTION_LEVEL_ENV}: '{raw}'")


current_assertion_level: AssertionLevel = _level_from_env()


def set_assertion_level(level: AssertionLevel) -> AssertionLevel:
    """set the global assertion level, returning the previous one."""
    global current_assertion_level
    previous = current_assertion_level
    current_assertion_level = AssertionLevel(level)
    return previous


def should_assert(level: AssertionLevel) -> bool:
    return current_assertion_level >= level


def fail(message: Optional[str] = None) -> NoReturn:
    text = f"debug failure. {message}" if message else "debug failure."
    logger.error(text)
    raise DebugFailure(text)


def assert_(expression: Any, message: Optional[str] = None) -> None:
    if not expression:
        fail(f"false expression: {message}" if message else "false expression.")


def assert_equal(a: Any, b: Any, message: Optional[str] = None) -> None:
    if a != b:
        detail = f" {message}" if message else ""
        fail(f"expected {a!r} == {b!r}.{detail}")


def assert_greater_than_or_equal(a: Any, b: Any) -> None:
    if a < b:
        fail(f"expected {a!r} >= {b!r}")


def check_defined(value: Optional[T], message: Optional[str] = None) -> T:
    if value is None:
        fail(message or "expected value to be defined")
    return value
