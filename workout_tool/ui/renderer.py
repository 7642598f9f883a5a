"""Rich renderer drawing the dashboard screen."""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from workout_tool.core.config import APP_NAME, APP_VERSION
from workout_tool.core.keys import KEY_HELP
from workout_tool.core.state import DashboardSnapshot

HIGHLIGHT_STYLE = "bold black on blue"
BASE_STYLE = "white"


def create_layout() -> Layout:
    layout = Layout()
    layout.split_column(
        Layout(name="title", size=3),
        Layout(name="body"),
        Layout(name="footer", size=1),
    )
    layout["body"].split_row(
        Layout(name="splits", ratio=1),
        Layout(name="exercises", ratio=1),
        Layout(name="stats", ratio=2),
    )
    layout["stats"].split_column(
        Layout(name="counter"),
        Layout(name="timer"),
    )
    return layout


def render_dashboard(
    snapshot: DashboardSnapshot,
    title: str = f"{APP_NAME} Version {APP_VERSION}",
) -> Layout:
    layout = create_layout()

    layout["title"].update(
        Panel(Align.center(Text(title, style=BASE_STYLE)), style=BASE_STYLE)
    )
    layout["splits"].update(
        Panel(_split_list(snapshot), title="Split", title_align="left", style=BASE_STYLE)
    )
    layout["exercises"].update(
        Panel(
            Text("\n".join(snapshot.exercises), style=BASE_STYLE),
            title="Exercises",
            title_align="left",
            style=BASE_STYLE,
        )
    )
    layout["counter"].update(
        Panel(
            Align.center(Text(str(snapshot.set_counter))),
            title="Set Counter",
            title_align="left",
            style=BASE_STYLE,
        )
    )
    layout["timer"].update(
        Panel(
            Align.center(Text(str(snapshot.elapsed_whole_sec))),
            title="Timer",
            title_align="left",
            style=BASE_STYLE,
        )
    )
    layout["footer"].update(_footer(snapshot))
    return layout


def _split_list(snapshot: DashboardSnapshot) -> Text:
    text = Text()
    for index, name in enumerate(snapshot.split_names):
        if index:
            text.append("\n")
        if index == snapshot.split_index:
            text.append(name, style=HIGHLIGHT_STYLE)
        else:
            text.append(name, style=BASE_STYLE)
    return text


def _footer(snapshot: DashboardSnapshot) -> Text:
    text = Text(KEY_HELP, style="dim")
    text.append(" | ", style="dim")
    if snapshot.paused:
        text.append("PAUSED", style="bold yellow")
    else:
        text.append("RUNNING", style="bold green")
    return text


class RichRenderer:
    """Draws snapshots on the alternate screen through ``rich.live.Live``."""

    def __init__(self, console: Console | None = None, title: str | None = None) -> None:
        self._console = console or Console()
        self._title = title or f"{APP_NAME} Version {APP_VERSION}"
        self._live: Live | None = None

    @property
    def console(self) -> Console:
        return self._console

    @property
    def is_active(self) -> bool:
        return self._live is not None

    def render(self, snapshot: DashboardSnapshot) -> None:
        layout = render_dashboard(snapshot, title=self._title)
        if self._live is None:
            self._console.show_cursor(False)
            self._live = Live(
                layout,
                console=self._console,
                screen=True,
                auto_refresh=False,
            )
            self._live.start()
        self._live.update(layout, refresh=True)

    def close(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None
        self._console.show_cursor(True)
