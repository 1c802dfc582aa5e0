"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Optional, Annotated

import pendulum
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig
from ..domain.exceptions import MissingTimeError, SleepCycleError
from ..services.sleep_planner import PlanDirection, SleepPlan, SleepPlanner
from .messages import MESSAGES, translate

app = typer.Typer(
    name="sleepcycle",
    help="Find bedtimes and wake times that complete whole sleep cycles",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")]
CountOption = Annotated[Optional[int], typer.Option("--count", "-n", min=1, max=10, help="Number of suggestions to show")]
LanguageOption = Annotated[Optional[str], typer.Option("--lang", "-l", help="Output language (en, es, it, pt)")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_file: Optional[Path], language: Optional[str]) -> AppConfig:
    """
    Load configuration and apply command-line overrides.
    Exits with code 1 if the config file is missing or invalid.
    """
    try:
        config = AppConfig.load(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if language is not None:
        if language not in MESSAGES:
            console.print(
                f"[bold red]Error:[/bold red] Unsupported language '{language}'. "
                f"Choose one of: {', '.join(MESSAGES)}"
            )
            raise typer.Exit(2)
        config = config.model_copy(update={"language": language})

    return config


def _build_planner(config: AppConfig, count: Optional[int]) -> SleepPlanner:
    return SleepPlanner(
        calculator=config.cycles.build_calculator(),
        recommendation_count=count if count is not None else config.recommendation_count,
    )


def _render_plan(plan: SleepPlan, config: AppConfig) -> None:
    """
    Print a plan as a table, highlighting the recommended entry.
    Exits with code 1 when the plan is empty.
    """
    lang = config.language

    if plan.is_empty:
        console.print(f"[yellow]⚠ {translate('not_enough_sleep', lang)}[/yellow]")
        console.print(translate("time_window_short", lang))
        raise typer.Exit(1)

    if plan.direction is PlanDirection.WAKE_TIMES:
        title = translate("optimal_wake_times", lang)
        subtitle = translate("choose_wake_time", lang)
        time_header = translate("wake_up_time", lang)
    else:
        title = translate("optimal_bedtimes", lang)
        subtitle = translate("choose_bedtime", lang)
        time_header = translate("bedtime", lang)

    console.print(f"\n[dim]{translate('app_subtitle', lang)}[/dim]")
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print(f"[dim]{subtitle}[/dim]")
    console.print(
        "[dim]"
        + translate(
            "cycle_info",
            lang,
            cycle=config.cycles.cycle_minutes,
            latency=config.cycles.fall_asleep_minutes,
        )
        + "[/dim]\n"
    )

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column(time_header, style="bold yellow")
    table.add_column(translate("complete_cycles", lang))
    table.add_column(translate("of_sleep", lang))
    table.add_column("")

    recommended = plan.recommended
    for suggestion in plan.suggestions:
        badge = (
            f"[bold green]{translate('recommended', lang)}[/bold green]"
            if suggestion == recommended
            else ""
        )
        table.add_row(suggestion.time, str(suggestion.cycles), suggestion.total_sleep, badge)

    console.print(table)
    console.print(f"[dim]{translate('recommended', lang)}: {plan.policy.description}[/dim]")
    console.print()


@app.command()
def wake(
    sleep_time: Annotated[str, typer.Argument(help="When you go to bed (HH:MM)")],
    wake_time: Annotated[str, typer.Argument(help="Latest time you want to wake up (HH:MM)")],
    count: CountOption = None,
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    Suggest wake times for a known bedtime.

    Examples:

        sleepcycle wake 22:00 07:00
        sleepcycle wake 23:30 06:45 --count 3 --lang es
    """
    _configure_logging(verbose)
    config = _load_config(config_file, language)
    planner = _build_planner(config, count)

    try:
        plan = planner.plan_wake_times(sleep_time, wake_time)
    except MissingTimeError:
        console.print(f"[bold red]{translate('missing_info', config.language)}:[/bold red] {translate('enter_both_times', config.language)}")
        raise typer.Exit(2)
    except SleepCycleError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(2)

    _render_plan(plan, config)


@app.command()
def bedtime(
    wake_time: Annotated[str, typer.Argument(help="When you need to wake up (HH:MM)")],
    count: CountOption = None,
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    Suggest bedtimes for a known wake time.

    Examples:

        sleepcycle bedtime 07:00
        sleepcycle bedtime 6:30 --lang it
    """
    _configure_logging(verbose)
    config = _load_config(config_file, language)
    planner = _build_planner(config, count)

    try:
        plan = planner.plan_bedtimes(wake_time)
    except MissingTimeError:
        console.print(f"[bold red]{translate('missing_info', config.language)}:[/bold red] {translate('enter_wake_time', config.language)}")
        raise typer.Exit(2)
    except SleepCycleError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(2)

    _render_plan(plan, config)


@app.command()
def now(
    wake_time: Annotated[str, typer.Argument(help="Latest time you want to wake up (HH:MM)")],
    count: CountOption = None,
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    Suggest wake times if you go to bed right now.

    The current time is read in the configured timezone.
    """
    _configure_logging(verbose)
    config = _load_config(config_file, language)
    planner = _build_planner(config, count)

    sleep_time = pendulum.now(config.timezone).format("HH:mm")
    console.print(f"[dim]{translate('bedtime', config.language)}: {sleep_time} ({config.timezone})[/dim]")

    try:
        plan = planner.plan_wake_times(sleep_time, wake_time)
    except MissingTimeError:
        console.print(f"[bold red]{translate('missing_info', config.language)}:[/bold red] {translate('enter_wake_time', config.language)}")
        raise typer.Exit(2)
    except SleepCycleError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(2)

    _render_plan(plan, config)


@app.command()
def check_alarm(
    alarm_time: Annotated[str, typer.Argument(help="Custom alarm time (HH:MM)")],
    language: LanguageOption = None,
    config_file: ConfigOption = None,
):
    """
    Validate a custom alarm time.
    """
    config = _load_config(config_file, language)

    try:
        alarm = SleepPlanner.validate_custom_alarm(alarm_time)
    except SleepCycleError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        console.print(f"[dim]{translate('enter_time', config.language)}[/dim]")
        raise typer.Exit(2)

    console.print(f"[green]✓ {translate('set_alarm_for', config.language)} {alarm}[/green]")


@app.command()
def show_config(
    config_file: ConfigOption = None,
):
    """
    Show the effective configuration.
    """
    config = _load_config(config_file, None)

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Setting", style="bold yellow")
    table.add_column("Value")

    table.add_row("recommendation_count", str(config.recommendation_count))
    table.add_row("language", config.language)
    table.add_row("timezone", config.timezone)
    for name, value in config.cycles.model_dump().items():
        table.add_row(f"cycles.{name}", str(value))

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]sleepcycle[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
