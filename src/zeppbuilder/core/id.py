"""Widget ID Generation.

Ids are produced by an injectable generator so that scene mutations never
reach for a hidden clock or global counter.

- UlidIdGenerator: default, ULID-based, lexicographically sortable
- CounterIdGenerator: monotonic counter, deterministic (tests, replays)
"""

import itertools
from typing import NewType, Protocol

from ulid import ULID

WidgetID = NewType("WidgetID", str)
"""Widget identifier"""


class Prefix:
    """ID prefix constants."""

    WIDGET = "w"


class IdGenerator(Protocol):
    """Source of fresh widget ids."""

    def new_id(self) -> WidgetID:
        """Return an id never returned before by this generator."""
        ...


class UlidIdGenerator:
    """ULID-backed generator (`w_01J...`)."""

    def __init__(self, prefix: str = Prefix.WIDGET) -> None:
        self.prefix = prefix

    def new_id(self) -> WidgetID:
        return WidgetID(f"{self.prefix}_{ULID()}")


class CounterIdGenerator:
    """Deterministic generator (`w-1`, `w-2`, ...)."""

    def __init__(self, prefix: str = Prefix.WIDGET, start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def new_id(self) -> WidgetID:
        return WidgetID(f"{self.prefix}-{next(self._counter)}")


def is_valid(id_str: str) -> bool:
    """Check if string is a prefixed ULID widget id."""
    prefix, sep, ulid_part = id_str.partition("_")
    if not sep or not prefix or len(ulid_part) != 26:
        return False
    try:
        ULID.from_str(ulid_part)
        return True
    except ValueError:
        return False


def extract_prefix(id_str: str) -> str | None:
    """Extract prefix from a prefixed ID, or None."""
    for sep in ("_", "-"):
        prefix, found, rest = id_str.partition(sep)
        if found and prefix and rest:
            return prefix
    return None
