"""Map-point normalizers. Records without coordinates yield ``None``."""

from aidpanel.models.enums import MapLayer, MembershipType
from aidpanel.models.records import CharityBox, Person
from aidpanel.models.views import MapPoint


def _has_coordinates(latitude: float | None, longitude: float | None) -> bool:
    return latitude is not None and longitude is not None


def normalize_recipient(person: Person) -> MapPoint | None:
    if not _has_coordinates(person.latitude, person.longitude) or not person.is_aid_recipient:
        return None
    return MapPoint(
        id=f"person-{person.id}",
        latitude=person.latitude,
        longitude=person.longitude,
        layer=MapLayer.RECIPIENTS,
        label=person.display_name,
    )


def normalize_volunteer(person: Person) -> MapPoint | None:
    if not _has_coordinates(person.latitude, person.longitude):
        return None
    if person.membership_type != MembershipType.VOLUNTEER:
        return None
    return MapPoint(
        id=f"person-{person.id}",
        latitude=person.latitude,
        longitude=person.longitude,
        layer=MapLayer.VOLUNTEERS,
        label=person.display_name,
    )


def normalize_charity_box(box: CharityBox) -> MapPoint | None:
    if not _has_coordinates(box.latitude, box.longitude):
        return None
    return MapPoint(
        id=f"box-{box.id}",
        latitude=box.latitude,
        longitude=box.longitude,
        layer=MapLayer.BOXES,
        label=f"{box.code} {box.location}".strip(),
    )
