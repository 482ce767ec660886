"""Dashboard aggregation: headline stats, recent activity feed, donation trend."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from aidpanel.engines.stats import StatAggregator
from aidpanel.formatting import format_currency
from aidpanel.models.enums import ActivityKind, ApplicationStatus, MembershipType, ProjectStatus
from aidpanel.models.records import AidApplication, Donation, Person, Project
from aidpanel.models.reports import DashboardReport, DashboardStats, RecentActivity
from aidpanel.normalization.lookups import person_names

PENDING_STATUSES = frozenset({ApplicationStatus.PENDING, ApplicationStatus.IN_REVIEW})


class DashboardAggregator:
    """Builds the dashboard view from people, projects, applications and donations."""

    def __init__(self, per_source: int = 2, feed_size: int = 5, donation_window: int = 6) -> None:
        self.per_source = per_source
        self.feed_size = feed_size
        self.donation_window = donation_window
        self.stats_engine = StatAggregator()

    def build(
        self,
        people: Sequence[Person],
        projects: Sequence[Project],
        applications: Sequence[AidApplication],
        donations: Sequence[Donation],
        today: date,
    ) -> DashboardReport:
        return DashboardReport(
            reference_date=today,
            stats=self.stats(people, projects, applications, donations, today),
            recent_activities=self.recent_activities(people, applications, donations),
            monthly_donations=self.stats_engine.monthly_totals(
                donations,
                date_of=lambda d: d.donation_date,
                value=lambda d: d.amount,
                window=self.donation_window,
            ),
        )

    @staticmethod
    def stats(
        people: Sequence[Person],
        projects: Sequence[Project],
        applications: Sequence[AidApplication],
        donations: Sequence[Donation],
        today: date,
    ) -> DashboardStats:
        start_of_month = today.replace(day=1)
        return DashboardStats(
            total_members=sum(
                1 for p in people
                if p.membership_type is not None and p.membership_type != MembershipType.VOLUNTEER
            ),
            monthly_donations=sum(
                (d.amount for d in donations if d.donation_date >= start_of_month),
                Decimal("0"),
            ),
            active_projects=sum(1 for p in projects if p.status == ProjectStatus.IN_PROGRESS),
            pending_applications=sum(1 for a in applications if a.status in PENDING_STATUSES),
        )

    def recent_activities(
        self,
        people: Sequence[Person],
        applications: Sequence[AidApplication],
        donations: Sequence[Donation],
    ) -> list[RecentActivity]:
        """Newest donations, registrations and applications, merged newest first."""
        names = person_names(people)
        newest_donations = sorted(donations, key=lambda d: d.donation_date, reverse=True)
        registered = [p for p in people if p.registration_date is not None]
        newest_people = sorted(registered, key=lambda p: p.registration_date, reverse=True)
        newest_applications = sorted(applications, key=lambda a: a.applied_at, reverse=True)

        activities: list[RecentActivity] = []
        for donation in newest_donations[: self.per_source]:
            activities.append(RecentActivity(
                id=f"donation-{donation.id}",
                kind=ActivityKind.DONATION,
                timestamp=donation.donation_date,
                description=f"{names.resolve(donation.donor_id)} bağış yaptı.",
                amount_display=format_currency(donation.amount, donation.currency),
                link="/bagis-yonetimi/tum-bagislar",
            ))
        for person in newest_people[: self.per_source]:
            activities.append(RecentActivity(
                id=f"person-{person.id}",
                kind=ActivityKind.PERSON,
                timestamp=person.registration_date,
                description=f"Yeni kişi kaydı: {person.display_name}",
                link=f"/kisiler/{person.id}",
            ))
        for application in newest_applications[: self.per_source]:
            activities.append(RecentActivity(
                id=f"application-{application.id}",
                kind=ActivityKind.APPLICATION,
                timestamp=application.applied_at,
                description=f"{names.resolve(application.applicant_id)} yeni bir başvuru yaptı.",
                link=f"/yardimlar/{application.id}",
            ))
        activities.sort(key=lambda a: a.timestamp, reverse=True)
        return activities[: self.feed_size]
