"""Terminal rendering of the health dashboard."""

from __future__ import annotations

from typing import Dict

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from wander.application.services.health_monitor import MonitorPhase
from wander.application.services.status_presentation import present_status
from wander.domain.entities.health import HealthState
from wander.shared.consts import CACHE_COMPONENT, DATABASE_COMPONENT

COMPONENT_LABELS: Dict[str, str] = {
    DATABASE_COMPONENT: "PostgreSQL",
    CACHE_COMPONENT: "Redis",
}


def status_badge(value: object) -> Text:
    presentation = present_status(value)
    return Text(f"{presentation.icon} {presentation.label}", style=presentation.style)


def component_label(name: str) -> str:
    return COMPONENT_LABELS.get(name, name.replace("_", " ").title())


def render_health(state: HealthState, phase: MonitorPhase, api_url: str) -> RenderableType:
    """Build the dashboard for the current monitor state."""
    if phase is MonitorPhase.LOADING:
        body: RenderableType = Spinner("dots", text="Checking system health...")
        return Panel(body, title="System Health", border_style="blue")

    table = Table.grid(padding=(0, 4))
    table.add_column(style="bold")
    table.add_column(justify="right")
    table.add_row("Overall Status", status_badge(state.overall.value))
    for name, component_status in (state.components or {}).items():
        table.add_row(component_label(name), status_badge(component_status.value))

    parts: list[RenderableType] = [table]
    if state.error:
        parts.append(
            Panel(
                Text.assemble(
                    ("Error: ", "bold red"),
                    (state.error, "red"),
                    "\nMake sure the API server is running at ",
                    (api_url, "bold"),
                ),
                border_style="red",
            )
        )
    parts.append(
        Text(
            f"Last checked: {state.timestamp.astimezone().strftime('%H:%M:%S')}",
            style="dim",
            justify="right",
        )
    )
    return Panel(Group(*parts), title="System Health", border_style="blue")
