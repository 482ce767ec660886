"""Tests for map point normalization."""

from aidpanel.models.enums import MapLayer, MembershipType
from aidpanel.models.records import CharityBox, Person
from aidpanel.normalization.geo import normalize_charity_box, normalize_recipient, normalize_volunteer


class TestRecipients:
    def test_geo_located_recipient(self, sample_people):
        point = normalize_recipient(sample_people[0])
        assert point.id == "person-p1"
        assert point.layer == MapLayer.RECIPIENTS
        assert point.label == "Ayşe Yılmaz"
        assert (point.latitude, point.longitude) == (41.01, 28.97)

    def test_recipient_without_coordinates(self, sample_people):
        assert normalize_recipient(sample_people[1]) is None

    def test_non_recipient(self, sample_people):
        assert normalize_recipient(sample_people[2]) is None


class TestVolunteers:
    def test_volunteer(self, sample_people):
        point = normalize_volunteer(sample_people[2])
        assert point.layer == MapLayer.VOLUNTEERS
        assert point.label == "İsmail Kaya"

    def test_standard_member_is_not_volunteer(self, sample_people):
        assert normalize_volunteer(sample_people[0]) is None

    def test_zero_coordinates_are_kept(self):
        person = Person(
            id="9", first_name="Deniz", membership_type=MembershipType.VOLUNTEER, latitude=0.0, longitude=0.0
        )
        assert normalize_volunteer(person) is not None


class TestCharityBoxes:
    def test_label_joins_code_and_location(self, sample_boxes):
        point = normalize_charity_box(sample_boxes[0])
        assert point.id == "box-k1"
        assert point.label == "KMB-001 Fatih"

    def test_box_without_coordinates(self, sample_boxes):
        assert normalize_charity_box(sample_boxes[1]) is None

    def test_label_without_location(self):
        box = CharityBox(id="k3", code="KMB-003", latitude=40.0, longitude=29.0)
        assert normalize_charity_box(box).label == "KMB-003"
