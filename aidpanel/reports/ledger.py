"""Aid ledger report generator."""

from collections.abc import Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from aidpanel.models.views import LedgerEntry

TEMPLATE_DIR = Path(__file__).parent / "templates"


class LedgerReportGenerator:
    """Renders merged ledger entries as a fixed-width table."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), trim_blocks=True, lstrip_blocks=True)

    def render(self, entries: Sequence[LedgerEntry], total: int | None = None) -> str:
        template = self.env.get_template("ledger.txt")
        return template.render(entries=entries, total=len(entries) if total is None else total)
