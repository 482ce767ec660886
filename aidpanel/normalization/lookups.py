"""Foreign-key resolution via lookup maps built once per aggregation pass."""

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from aidpanel.models.records import Person, Product

UNKNOWN_PERSON = "Bilinmeyen Kişi"
UNKNOWN_PRODUCT = "Bilinmeyen Ürün"

RecordT = TypeVar("RecordT")


class LookupMap(Generic[RecordT]):
    """An id -> label map with an explicit fallback for dangling references.

    Built in a single pass over a fetched collection. Instances are local to
    one aggregation pass and must not be cached across fetches.
    """

    def __init__(
        self,
        records: Iterable[RecordT],
        key: Callable[[RecordT], str],
        label: Callable[[RecordT], str],
        fallback: str,
    ) -> None:
        self.fallback = fallback
        self._labels: dict[str, str] = {key(record): label(record) for record in records}

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._labels

    def resolve(self, record_id: str | None) -> str:
        """Return the label for ``record_id`` or the fallback label."""
        if record_id is None:
            return self.fallback
        return self._labels.get(record_id) or self.fallback


def person_names(people: Iterable[Person]) -> LookupMap[Person]:
    return LookupMap(people, key=lambda p: p.id, label=lambda p: p.display_name, fallback=UNKNOWN_PERSON)


def product_names(products: Iterable[Product]) -> LookupMap[Product]:
    return LookupMap(products, key=lambda p: p.id, label=lambda p: p.name, fallback=UNKNOWN_PRODUCT)
