"""Report generators for the messaging, analytics and dashboard screens."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from aidpanel.formatting import format_currency, format_number
from aidpanel.models.reports import AnalyticsReport, DashboardReport, MessageReport

TEMPLATE_DIR = Path(__file__).parent / "templates"


class StatsReportGenerator:
    """Renders the report series as plain text."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), trim_blocks=True, lstrip_blocks=True)
        self.env.filters["currency"] = format_currency
        self.env.filters["number"] = format_number

    def render_messages(self, report: MessageReport) -> str:
        return self.env.get_template("messages.txt").render(report=report)

    def render_analytics(self, report: AnalyticsReport) -> str:
        return self.env.get_template("analytics.txt").render(report=report)

    def render_dashboard(self, report: DashboardReport) -> str:
        return self.env.get_template("dashboard.txt").render(report=report)
