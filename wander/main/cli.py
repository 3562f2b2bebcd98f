"""
Command Line Entry Point - Main Layer

Composition root of the command line: builds the observers from the
settings and exposes them as Typer commands.

    wander serve   # run the API with uvicorn
    wander wait    # wait for every service to become ready, exit 0/1
    wander watch   # live health dashboard polling the API
"""

import asyncio
import sys
from typing import List, Optional

import typer
import uvicorn
from rich.console import Console
from rich.live import Live

from wander.application.services.health_monitor import HealthMonitor, MonitorPhase
from wander.application.services.readiness_waiter import (
    ReadinessReport,
    ReadinessTarget,
    ReadinessWaiter,
)
from wander.domain.entities.health import HealthState
from wander.infrastructure.gateways.health_api_gateway import HealthApiGateway
from wander.main.config import AppSettings, get_settings
from wander.presentation.cli.dashboard import render_health
from wander.presentation.cli.report import print_report
from wander.shared import get_logger, update_logging_from_settings

logger = get_logger(__name__)

app = typer.Typer(
    name="wander",
    help="Health aggregation and readiness tooling for the Wander stack",
    add_completion=False,
)

console = Console()


def _load_settings() -> AppSettings:
    settings = get_settings()
    # Logs go to stderr so they never interleave with command output.
    update_logging_from_settings(settings, stream=sys.stderr)
    return settings


def build_readiness_waiter(
    settings: AppSettings,
    *,
    max_wait: Optional[float] = None,
    interval: Optional[float] = None,
) -> ReadinessWaiter:
    readiness = settings.readiness
    gateway = HealthApiGateway(
        f"http://{readiness.host}:{readiness.api_port}",
        timeout=readiness.request_timeout,
    )
    return ReadinessWaiter(
        gateway,
        max_wait=readiness.max_wait if max_wait is None else max_wait,
        interval=readiness.check_interval if interval is None else interval,
    )


async def run_readiness(
    waiter: ReadinessWaiter, targets: List[ReadinessTarget], show_progress: bool = True
) -> ReadinessReport:
    if not show_progress:
        return await waiter.wait_all(targets)
    with console.status("[blue]Checking services...[/blue]", spinner="line"):
        return await waiter.wait_all(targets)


@app.command()
def wait(
    target: Optional[List[str]] = typer.Option(
        None,
        "--target",
        "-t",
        help="Target as NAME=URL; repeatable. Defaults to API, Frontend, Database, Redis",
    ),
    max_wait: Optional[float] = typer.Option(
        None, "--max-wait", help="Budget in seconds per target (MAX_WAIT)"
    ),
    interval: Optional[float] = typer.Option(
        None, "--interval", help="Seconds between attempts (CHECK_INTERVAL)"
    ),
    progress: bool = typer.Option(
        True, "--progress/--no-progress", help="Show a spinner while waiting"
    ),
):
    """Wait for every target to answer successfully within the budget."""
    settings = _load_settings()

    try:
        targets = (
            [ReadinessTarget.parse(raw) for raw in target]
            if target
            else settings.readiness.default_targets()
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--target") from exc

    try:
        waiter = build_readiness_waiter(settings, max_wait=max_wait, interval=interval)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--interval") from exc

    console.print("\n[bold blue]🏥 Running Health Checks[/bold blue]")
    console.rule(style="blue")

    report = asyncio.run(run_readiness(waiter, targets, show_progress=progress))
    print_report(console, report)
    raise typer.Exit(code=report.exit_code)


@app.command()
def watch(
    api_url: Optional[str] = typer.Option(
        None, "--api-url", help="Base URL of the health API (API_URL)"
    ),
    interval: Optional[float] = typer.Option(
        None, "--interval", help="Seconds between evaluations (POLL_INTERVAL)"
    ),
    once: bool = typer.Option(
        False, "--once", help="Evaluate once, print and exit 0 if healthy"
    ),
):
    """Show a live dashboard of the composite health status."""
    settings = _load_settings()
    url = api_url or settings.dashboard.api_url
    poll_interval = settings.dashboard.poll_interval if interval is None else interval
    if poll_interval <= 0:
        raise typer.BadParameter("interval must be positive", param_hint="--interval")
    gateway = HealthApiGateway(url, timeout=settings.dashboard.request_timeout)

    if once:
        monitor = HealthMonitor(gateway, interval=poll_interval)
        state = asyncio.run(monitor.refresh())
        console.print(render_health(state, monitor.phase, url))
        raise typer.Exit(code=0 if state.is_healthy else 1)

    try:
        asyncio.run(_watch(gateway, poll_interval, url))
    except KeyboardInterrupt:
        console.print("[dim]Stopped.[/dim]")


async def _watch(gateway: HealthApiGateway, interval: float, api_url: str) -> None:
    with Live(
        render_health(HealthState.unknown(), MonitorPhase.LOADING, api_url),
        console=console,
        refresh_per_second=4,
    ) as live:

        def _update(state: HealthState) -> None:
            live.update(render_health(state, MonitorPhase.DISPLAYING, api_url))

        async with HealthMonitor(gateway, interval=interval, on_update=_update):
            await asyncio.Event().wait()


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (HOST)"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port (PORT)"),
    reload: Optional[bool] = typer.Option(None, "--reload/--no-reload"),
):
    """Run the health API with uvicorn."""
    settings = get_settings()
    bind_host = host or settings.api.host
    bind_port = port or settings.api.port

    logger.info("Starting API server", host=bind_host, port=bind_port)
    uvicorn.run(
        "wander.main.app:app",
        host=bind_host,
        port=bind_port,
        reload=settings.api.reload if reload is None else reload,
    )


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
