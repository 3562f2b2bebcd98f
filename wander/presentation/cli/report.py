"""Terminal output of the readiness check."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from wander.application.services.readiness_waiter import ReadinessReport, TargetResult


def result_line(result: TargetResult) -> Text:
    if result.ready:
        return Text(f"  ✅ {result.name} is healthy", style="green")
    return Text(f"  ❌ {result.name} health check failed", style="red")


def print_report(console: Console, report: ReadinessReport) -> None:
    """One pass/fail line per target followed by a summary."""
    console.print()
    for result in report.results:
        console.print(result_line(result))
    console.print()
    console.rule(style="blue")

    if report.ok:
        console.print("[bold green]🎉 All services are healthy![/bold green]")
        return

    console.print(
        f"[bold red]❌ {len(report.failed)} service(s) failed health checks[/bold red]"
    )
    console.print()
    console.print("[bold]Troubleshooting:[/bold]")
    console.print("  [blue]•[/blue] Check logs:        [bold]make logs[/bold]")
    console.print("  [blue]•[/blue] Validate setup:    [bold]make validate[/bold]")
    console.print("  [blue]•[/blue] Restart services:  [bold]make restart[/bold]")
