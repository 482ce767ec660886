"""Typer CLI interface for AidPanel."""

import logging
import sqlite3
from datetime import date
from pathlib import Path
from typing import Any

import typer

DEFAULT_DB = Path.home() / ".aidpanel" / "aidpanel.db"

app = typer.Typer(
    name="aidpanel",
    help="AidPanel: calendar, aid ledger and reports for the association panel.",
)

_KIND_ALIASES = {
    "all": "all",
    "nakit": "Nakit",
    "cash": "Nakit",
    "ayni": "Ayni",
    "in-kind": "Ayni",
    "inkind": "Ayni",
}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """AidPanel: calendar, aid ledger and reports for the association panel."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _db_option() -> Any:
    return typer.Option(
        DEFAULT_DB,
        "--db",
        envvar="AIDPANEL_DB",
        help="Path to the SQLite database file",
    )


def _today_option() -> Any:
    return typer.Option(None, "--today", help="Reference date (YYYY-MM-DD), defaults to today")


def _parse_today(value: str | None) -> date:
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        typer.echo(f"Error: Invalid date '{value}'. Use YYYY-MM-DD.", err=True)
        raise typer.Exit(1)


def _open_screens(db: Path):
    """Open the store and return the screen wiring for it."""
    from aidpanel.db.repository import PanelRepository
    from aidpanel.db.schema import create_schema
    from aidpanel.screens import PanelScreens

    if not db.exists():
        typer.echo("Error: No database found. Import data first with `aidpanel import`.", err=True)
        raise typer.Exit(1)
    conn = create_schema(db)
    return conn, PanelScreens(PanelRepository(conn))


def _require_view(state):
    """Return the rendered view or exit with the screen-level error."""
    from aidpanel.screens import ScreenStatus

    if state.status != ScreenStatus.RENDERED:
        typer.echo(f"Error: {state.error or 'screen did not render'}", err=True)
        raise typer.Exit(1)
    return state.view


@app.command(name="import")
def import_cmd(
    snapshot: Path = typer.Argument(..., help="JSON snapshot file with the source collections"),
    db: Path = _db_option(),
    force: bool = typer.Option(False, "--force", help="Re-import a file that was imported before"),
) -> None:
    """Import a JSON snapshot of the panel's collections into the database."""
    from rich.console import Console
    from rich.table import Table

    from aidpanel.db.repository import PanelRepository
    from aidpanel.db.schema import create_schema
    from aidpanel.exceptions import SnapshotImportError
    from aidpanel.ingestion.snapshot import SnapshotAdapter

    adapter = SnapshotAdapter()
    try:
        data = adapter.parse(snapshot)
    except (FileNotFoundError, SnapshotImportError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    for warning in adapter.validate(data):
        typer.echo(f"Warning: {warning}", err=True)

    db.parent.mkdir(parents=True, exist_ok=True)
    conn = create_schema(db)
    repo = PanelRepository(conn)
    try:
        if not force and repo.check_batch_duplicate(str(snapshot.resolve())):
            typer.echo(
                f"Warning: {snapshot.name} already imported. Skipping (use --force to re-import).",
                err=True,
            )
            raise typer.Exit(0)
        with repo.transaction():
            summary = _save_snapshot(data, snapshot, repo)
    except sqlite3.Error as exc:
        typer.echo(f"Error: Could not store {snapshot.name}: {exc}", err=True)
        raise typer.Exit(1)
    finally:
        conn.close()

    table = Table(title=f"Imported {snapshot.name}", show_header=True)
    table.add_column("Collection", style="cyan")
    table.add_column("Records", style="green", justify="right")
    for name, count in summary.items():
        table.add_row(name, str(count))
    Console().print(table)


def _save_snapshot(data, file_path: Path, repo) -> dict[str, int]:
    """Save every collection of a Snapshot. Returns record counts per collection."""
    savers = {
        "events": repo.save_event,
        "projects": repo.save_project,
        "cases": repo.save_case,
        "cash_payments": repo.save_cash_payment,
        "in_kind_transactions": repo.save_in_kind,
        "products": repo.save_product,
        "people": repo.save_person,
        "financial_records": repo.save_financial_record,
        "messages": repo.save_message,
        "applications": repo.save_application,
        "donations": repo.save_donation,
        "charity_boxes": repo.save_charity_box,
    }
    summary: dict[str, int] = {}
    for name, records in data.collections().items():
        for record in records:
            savers[name](record)
        summary[name] = len(records)
    repo.create_import_batch(
        source="snapshot",
        file_path=str(file_path.resolve()),
        record_count=data.record_count,
    )
    return summary


@app.command()
def calendar(
    year: int | None = typer.Option(None, "--year", "-y", help="Year, defaults to the reference date's"),
    month: int | None = typer.Option(
        None, "--month", "-m", min=1, max=12, help="Month 1-12, defaults to the reference date's"
    ),
    shift: int = typer.Option(0, "--shift", help="Move this many months forward (negative: back)"),
    today: str | None = _today_option(),
    db: Path = _db_option(),
) -> None:
    """Show the month calendar of events, project tasks and hearings."""
    from aidpanel.engines.calendar_projector import CalendarProjector
    from aidpanel.reports import CalendarReportGenerator

    reference = _parse_today(today)
    target_year, target_month = CalendarProjector.month_of(reference)
    if year is not None:
        target_year = year
    if month is not None:
        target_month = month - 1
    target_year, target_month = CalendarProjector.shift(target_year, target_month, shift)

    conn, screens = _open_screens(db)
    try:
        state = screens.calendar(target_year, target_month, reference)
    finally:
        conn.close()
    typer.echo(CalendarReportGenerator().render(_require_view(state)))


@app.command()
def ledger(
    kind: str = typer.Option("all", "--kind", "-k", help="all, Nakit (cash) or Ayni (in-kind)"),
    search: str = typer.Option("", "--search", "-s", help="Filter by person name or description"),
    db: Path = _db_option(),
) -> None:
    """Show the merged cash and in-kind aid ledger, newest first."""
    from aidpanel.reports import LedgerReportGenerator

    kind_value = _KIND_ALIASES.get(kind.lower())
    if kind_value is None:
        valid = ", ".join(_KIND_ALIASES)
        typer.echo(f"Error: Invalid kind '{kind}'. Valid: {valid}", err=True)
        raise typer.Exit(1)

    conn, screens = _open_screens(db)
    try:
        state = screens.ledger(kind_value, search)
    finally:
        conn.close()
    view = _require_view(state)
    typer.echo(LedgerReportGenerator().render(list(view.filtered), total=len(view.entries)))


@app.command()
def report(
    name: str = typer.Argument(..., help="Report to render: messages or analytics"),
    db: Path = _db_option(),
) -> None:
    """Render the messaging or analytics report."""
    from aidpanel.reports import StatsReportGenerator

    generator = StatsReportGenerator()
    key = name.lower()
    if key not in ("messages", "analytics"):
        typer.echo(f"Error: Unknown report '{name}'. Valid: messages, analytics", err=True)
        raise typer.Exit(1)

    conn, screens = _open_screens(db)
    try:
        if key == "messages":
            output = generator.render_messages(_require_view(screens.messages()))
        else:
            output = generator.render_analytics(_require_view(screens.analytics()))
    finally:
        conn.close()
    typer.echo(output)


@app.command()
def dashboard(
    today: str | None = _today_option(),
    db: Path = _db_option(),
) -> None:
    """Show headline stats, the recent activity feed and the donation trend."""
    from aidpanel.reports import StatsReportGenerator

    reference = _parse_today(today)
    conn, screens = _open_screens(db)
    try:
        state = screens.dashboard(reference)
    finally:
        conn.close()
    typer.echo(StatsReportGenerator().render_dashboard(_require_view(state)))


@app.command(name="map")
def map_cmd(
    layer: list[str] | None = typer.Option(
        None, "--layer", "-l", help="Layer to show: recipients, volunteers, boxes (repeatable)"
    ),
    db: Path = _db_option(),
) -> None:
    """List geo-located aid recipients, volunteers and charity boxes."""
    from rich.console import Console
    from rich.table import Table

    from aidpanel.engines.map_projector import DEFAULT_LAYERS
    from aidpanel.models.enums import MapLayer

    try:
        layers = {MapLayer(value.lower()) for value in layer} if layer else set(DEFAULT_LAYERS)
    except ValueError:
        valid = ", ".join(m.value for m in MapLayer)
        typer.echo(f"Error: Invalid layer in {layer}. Valid: {valid}", err=True)
        raise typer.Exit(1)

    conn, screens = _open_screens(db)
    try:
        state = screens.map(layers)
    finally:
        conn.close()
    points = _require_view(state)

    table = Table(title=f"Map points ({len(points)})", show_header=True)
    table.add_column("Layer", style="cyan")
    table.add_column("Label")
    table.add_column("Lat", justify="right")
    table.add_column("Lng", justify="right")
    for point in points:
        table.add_row(point.layer.value, point.label, f"{point.latitude:.4f}", f"{point.longitude:.4f}")
    Console().print(table)
