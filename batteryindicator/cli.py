# batteryindicator/cli.py
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from batteryindicator.app import activate
from batteryindicator.config import CONFIG_PATH, Config, get_config, load_config, save_config
from batteryindicator.errors import BatteryUnavailableError, InvalidReadingError
from batteryindicator.presentation import format_status, resolve_color
from batteryindicator.sources import SOURCES, get_battery_source, read_power
from batteryindicator.ui import TerminalHost

# Root app
app = typer.Typer(add_completion=False, help="Battery indicator CLI")
interval_app = typer.Typer(help="Polling interval commands.")
app.add_typer(interval_app, name="interval")

console = Console()


def _check_source(source: Optional[str]) -> Optional[str]:
    if source is not None and source != "auto" and source not in SOURCES:
        raise typer.BadParameter(f"unknown battery source: {source}", param_hint="--source")
    return source


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")):
    # env and .env only; commands load the YAML file they are pointed at
    configure_logging(debug or Config().debug)


# --------------------------- Commands ---------------------------

@app.command()
def watch(
    interval_ms: Optional[int] = typer.Option(None, help="Polling interval in milliseconds"),
    source: Optional[str] = typer.Option(None, help="Battery source: auto, psutil, pmset or wmic"),
):
    """Show the battery indicator until Ctrl+C."""
    _check_source(source)
    cfg = get_config()
    updates = {}
    if interval_ms is not None:
        updates["polling_interval_ms"] = max(interval_ms, 1)
    if source is not None:
        updates["source"] = source
    cfg = cfg.model_copy(update=updates)

    try:
        found = asyncio.run(_watch(cfg))
    except KeyboardInterrupt:
        return
    if not found:
        rprint("[yellow]No battery found.[/yellow]")
        raise typer.Exit(1)


async def _watch(cfg) -> bool:
    host = TerminalHost(console)
    activation = activate(host, cfg)
    signals = host.watch_focus_signals()
    try:
        await activation.indicator.wait_closed()
        return not activation.indicator.battery_absent
    finally:
        signals.dispose()
        activation.dispose()


@app.command()
def status(source: Optional[str] = typer.Option(None, help="Battery source: auto, psutil, pmset or wmic")):
    """Print the current battery status line once."""
    _check_source(source)
    cfg = get_config()
    src = get_battery_source(source or cfg.source)
    try:
        reading = asyncio.run(read_power(src))
    except BatteryUnavailableError as exc:
        rprint(f"[yellow]No battery found[/yellow]: {exc}")
        raise typer.Exit(1)
    except InvalidReadingError as exc:
        rprint(f"[red]Invalid reading[/red]: {exc}")
        raise typer.Exit(1)
    console.print(Text(format_status(reading, cfg.style), style=resolve_color(reading.percentage, cfg.style) or ""))


# ---- interval ----
@interval_app.command("show")
def interval_show(config_path: Path = typer.Option(CONFIG_PATH, "--config", help="Config file")):
    cfg = load_config(config_path)
    rprint({"polling_interval_ms": cfg.polling_interval_ms})


@interval_app.command("set")
def interval_set(
    value: int = typer.Argument(..., help="Polling interval in milliseconds"),
    config_path: Path = typer.Option(CONFIG_PATH, "--config", help="Config file"),
):
    cfg = load_config(config_path)
    cfg.polling_interval_ms = max(value, 1)
    save_config(cfg, config_path)
    rprint({"polling_interval_ms": cfg.polling_interval_ms})
