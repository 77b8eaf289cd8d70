import re
import time

from typing import Any, Optional, TypeVar

from . import const

T = TypeVar("T")

_INT = re.compile(r"\s*-?[0-9]+\s*")


def isint(value: Any) -> bool:
    """True for things like "34", " -9 ", false for "23f", "a" or "&7"."""
    return _INT.fullmatch(str(value)) is not None


def nth(n: int, *items: T) -> Optional[T]:
    if n < 0 or n >= len(items):
        return None
    return items[n]


def first(*items: T) -> Optional[T]:
    return nth(0, *items)


def rest(*items: T) -> list[T]:
    return list(items[1:])


def datetime() -> str:
    return time.strftime(const.TRACE_DATEFMT)
