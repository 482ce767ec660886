"""Map projection: geo-located people and charity boxes per layer."""

from collections.abc import Iterable, Sequence

from aidpanel.models.enums import MapLayer
from aidpanel.models.records import CharityBox, Person
from aidpanel.models.views import MapPoint
from aidpanel.normalization.geo import normalize_charity_box, normalize_recipient, normalize_volunteer

DEFAULT_LAYERS = frozenset({MapLayer.RECIPIENTS, MapLayer.BOXES})


class MapProjector:
    """Collects map points for the active layers; records without coordinates are dropped."""

    def project(
        self,
        people: Sequence[Person],
        boxes: Sequence[CharityBox],
        layers: Iterable[MapLayer] = DEFAULT_LAYERS,
    ) -> list[MapPoint]:
        active = set(layers)
        candidates: list[MapPoint | None] = []
        if MapLayer.RECIPIENTS in active:
            candidates.extend(normalize_recipient(p) for p in people)
        if MapLayer.VOLUNTEERS in active:
            candidates.extend(normalize_volunteer(p) for p in people)
        if MapLayer.BOXES in active:
            candidates.extend(normalize_charity_box(b) for b in boxes)
        return [point for point in candidates if point is not None]
