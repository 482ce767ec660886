"""Month calendar report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from aidpanel.models.views import CalendarCell, CalendarMonth

TEMPLATE_DIR = Path(__file__).parent / "templates"

MONTH_NAMES = [
    "Ocak", "Şubat", "Mart", "Nisan", "Mayıs", "Haziran",
    "Temmuz", "Ağustos", "Eylül", "Ekim", "Kasım", "Aralık",
]
WEEKDAY_NAMES = ["Pzt", "Sal", "Çar", "Per", "Cum", "Cmt", "Paz"]


class CalendarReportGenerator:
    """Renders a CalendarMonth as a Monday-first text grid plus an agenda."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), trim_blocks=True, lstrip_blocks=True)

    @staticmethod
    def weeks(month: CalendarMonth) -> list[list[CalendarCell | None]]:
        """Split blanks and day cells into rows of seven; ``None`` is a blank."""
        slots: list[CalendarCell | None] = [None] * month.leading_blanks + list(month.cells)
        slots += [None] * (-len(slots) % 7)
        return [slots[i:i + 7] for i in range(0, len(slots), 7)]

    def render(self, month: CalendarMonth) -> str:
        template = self.env.get_template("calendar.txt")
        return template.render(
            month=month,
            title=f"{MONTH_NAMES[month.month]} {month.year}",
            weekdays=WEEKDAY_NAMES,
            weeks=self.weeks(month),
        )
