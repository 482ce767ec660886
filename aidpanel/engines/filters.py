"""Predicate composition shared by the ledger and list-style screens.

A record passes when every active predicate accepts it. A filter whose value
is the ``"all"`` sentinel or an empty string is inactive and always passes.
"""

from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from aidpanel.formatting import fold_case

ALL = "all"

T = TypeVar("T")
Predicate = Callable[[T], bool]


def is_inactive(value: Any) -> bool:
    return value is None or value == "" or value == ALL


def _always(_record: Any) -> bool:
    return True


def equals(value: Any, getter: Callable[[T], Any]) -> Predicate:
    """Match records whose ``getter`` value equals ``value``."""
    if is_inactive(value):
        return _always

    def predicate(record: T) -> bool:
        return getter(record) == value

    return predicate


def contains_text(term: str | None, *getters: Callable[[T], str | None]) -> Predicate:
    """Case-insensitive substring match against any of the given fields."""
    if is_inactive(term):
        return _always
    needle = fold_case(term)

    def predicate(record: T) -> bool:
        for getter in getters:
            value = getter(record)
            if value is not None and needle in fold_case(str(value)):
                return True
        return False

    return predicate


class FilterEngine(Generic[T]):
    """AND-composition of pure predicates."""

    def __init__(self, *predicates: Predicate) -> None:
        self.predicates = [p for p in predicates if p is not _always]

    def matches(self, record: T) -> bool:
        return all(predicate(record) for predicate in self.predicates)

    def apply(self, records: Iterable[T]) -> list[T]:
        """Return a new list of matching records. The input is never modified."""
        return [record for record in records if self.matches(record)]
