"""Rich-based display of statuses and status events.

Provides a console observer that echoes status events as they happen, and a
helper that renders a finished status as a table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from status_generic.events import StatusEvent, StatusEventType, StatusObserver

if TYPE_CHECKING:
    from status_generic.protocols import StatusProtocol

__all__ = ["RichStatusObserver", "build_errors_table", "render_status"]


class RichStatusObserver(StatusObserver):
    """Print one console line per status event.

    Example:
        observer = RichStatusObserver()
        status.add_observer(observer)

        status.add_error("Name is required", "name")
        # ✗ Name is required
    """

    _STYLES = {
        StatusEventType.ERROR_ADDED: "red",
        StatusEventType.EXCEPTION_CAPTURED: "yellow",
        StatusEventType.STATUSES_COMBINED: "dim",
        StatusEventType.RESULT_SET: "green",
    }

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
        """
        self._console = console or Console()
        self._counts: dict[StatusEventType, int] = {}

    @property
    def counts(self) -> dict[StatusEventType, int]:
        """Number of events seen, per event type."""
        return dict(self._counts)

    def on_event(self, event: StatusEvent) -> None:
        """Print the event and update the counters.

        Args:
            event: The status event to handle.
        """
        self._counts[event.event_type] = self._counts.get(event.event_type, 0) + 1
        style = self._STYLES[event.event_type]

        if event.event_type == StatusEventType.ERROR_ADDED:
            text = f"✗ {escape(str(event.data['error']))}"
        elif event.event_type == StatusEventType.EXCEPTION_CAPTURED:
            exc = event.data["exception"]
            text = f"! {type(exc).__name__}: {escape(str(exc))}"
        elif event.event_type == StatusEventType.STATUSES_COMBINED:
            text = f"+ combined status, {event.data['error_count']} error(s) in total"
        else:
            text = f"✓ result set: {escape(repr(event.data['result']))}"

        self._console.print(f"[{style}]{text}[/]")


def build_errors_table(status: StatusProtocol, title: str | None = None) -> Table:
    """Build a table with one row per error of ``status``.

    Args:
        status: The status to display.
        title: Optional table title. Defaults to the status message.
    """
    table = Table(
        title=title or status.message,
        show_header=True,
        header_style="bold magenta",
        expand=True,
    )
    table.add_column("Header", style="cyan")
    table.add_column("Error", style="yellow")
    table.add_column("Members", style="blue")
    table.add_column("Code", justify="right", style="red", width=6)

    for error in status.errors:
        table.add_row(
            escape(error.header) or "-",
            escape(error.message),
            escape(", ".join(error.member_names)) or "-",
            "-" if error.status_code is None else str(error.status_code),
        )
    return table


def render_status(
    status: StatusProtocol,
    console: Console | None = None,
    title: str | None = None,
) -> None:
    """Print a status to the console.

    A valid status prints its message in green. An invalid status prints a
    table of its errors inside a red panel.

    Args:
        status: The status to display.
        console: Rich Console instance. If None, creates a new one.
        title: Optional title for the errors table.
    """
    console = console or Console()
    if status.is_valid:
        console.print(f"[green]✓ {escape(status.message)}[/]")
        return
    console.print(Panel(build_errors_table(status, title), border_style="red"))
