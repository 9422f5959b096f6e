"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Optional, Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel

from ..adapters.scenario_loader import ScenarioLoader
from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import PayPeriodError
from ..domain.models import PayrollEventType
from ..domain.selection import SelectionSession, SelectionStateMachine
from ..services.payroll_report import PayrollReportService

app = typer.Typer(
    name="payperiod",
    help="Select payroll periods within a locked month and report them",
    add_completion=False
)

console = Console()

WEEKDAY_HEADERS = ["Lun", "Mar", "Mer", "Jeu", "Ven", "Sam", "Dim"]


def _load_config(config_file: Optional[Path], locked_month: Optional[str]) -> AppConfig:
    return AppConfig.load(config_file or get_default_config_path(), locked_month=locked_month)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def replay(
    scenario_file: Annotated[Path, typer.Argument(help="YAML file listing the pointer events to replay")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    locked_month: Annotated[Optional[str], typer.Option("--locked-month", "-m", help="Locked month (YYYY-MM), overrides config and scenario")] = None,
    employee: Annotated[Optional[str], typer.Option("--employee", "-e", help="Employee id the records are created for")] = None,
    event_type: Annotated[Optional[PayrollEventType], typer.Option("--type", "-t", help="Payroll event type")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every engine decision.")] = False,
):
    """
    Replay a recorded pointer-event scenario and print the resulting periods.

    Examples:

        payperiod replay scenario.yaml

        payperiod replay scenario.yaml --locked-month 2025-06 --employee 1
    """
    _configure_logging(verbose)

    try:
        scenario = ScenarioLoader().load(scenario_file)
        if locked_month is None and scenario.locked_month is not None:
            locked_month = str(scenario.locked_month)
        config = _load_config(config_file, locked_month)
        locked = config.get_locked_month()

        kind = event_type or scenario.event_type or config.default_event_type
        employee_id = employee or scenario.employee_id

        machine = SelectionStateMachine(locked_month=locked, weekend_days=config.weekend_days)
        session = SelectionSession()
        for event in scenario.events:
            machine.handle(session, event)

        service = PayrollReportService()
        summary = service.summarize(session.store)

        console.print()
        console.print(f"[bold cyan]🗓️  {kind.label} - {locked.format(config.locale)}[/bold cyan]")
        if employee_id:
            person = config.find_employee(employee_id)
            console.print(f"   Employé: {person.display_name() if person else employee_id}")
        console.print(f"   Événements rejoués: {len(scenario.events)}")
        console.print()

        if session.store.is_empty:
            console.print("[yellow]⚠ Aucune période sélectionnée.[/yellow]\n")
            return

        console.print("[bold]Périodes de paie:[/bold]")
        for period in service.build_periods(session.store, comment=scenario.comment):
            console.print(f"  [yellow]•[/yellow] {period.format_display()}")
        console.print()
        console.print(Panel.fit(
            f"[bold green]{service.format_counter(summary)}[/bold green] - {kind.label}",
            title="Récapitulatif"
        ))

        if employee_id:
            records = service.build_records(
                session.store,
                employee_id=employee_id,
                event_type=kind,
                comment=scenario.comment,
            )
            console.print(f"[green]✓ {len(records)} élément(s) variable(s) prêt(s) pour l'employé {employee_id}[/green]")
        console.print()

    except FileNotFoundError as e:
        console.print(f"[bold red]Erreur:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    except (PayPeriodError, ValueError) as e:
        console.print(f"[bold red]Erreur:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def month(
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
    locked_month: Annotated[Optional[str], typer.Option("--locked-month", "-m", help="Locked month (YYYY-MM)")] = None,
):
    """
    Show the locked month with its selectable days.
    """
    try:
        config = _load_config(config_file, locked_month)
        locked = config.get_locked_month()
        machine = SelectionStateMachine(locked_month=locked, weekend_days=config.weekend_days)

        table = Table(
            title=locked.format(config.locale),
            show_header=True,
            header_style="bold cyan"
        )
        for header in WEEKDAY_HEADERS:
            table.add_column(header, justify="right")

        row = [""] * locked.first_day.weekday
        for day in locked.days():
            label = str(day.day)
            row.append(label if machine.is_selectable(day) else f"[dim]{label}[/dim]")
            if len(row) == 7:
                table.add_row(*row)
                row = []
        if row:
            table.add_row(*(row + [""] * (7 - len(row))))

        console.print()
        console.print(table)
        console.print("[dim]Les jours grisés ne sont pas sélectionnables.[/dim]\n")

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Erreur:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def event_types():
    """
    List the payroll event types.
    """
    table = Table(
        title="Types d'éléments variables",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Code", style="bold yellow")
    table.add_column("Libellé", style="dim")

    for kind in PayrollEventType:
        table.add_row(kind.value, kind.label)

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]payperiod[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
