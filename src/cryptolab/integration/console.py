"""
Console rendering of an Outcome, for the demo scripts.

Notes are numbered like the badges in the web front-end, separators become
horizontal rules and blanks become empty rows.
"""

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from ..trace.outcome import Outcome
from ..trace.steps import Blank, Note, Separator


def render_trace(outcome: Outcome) -> Group:
    """Numbered step list built from the outcome's trace."""
    parts = []
    table = None
    number = 0

    for step in outcome.trace:
        if isinstance(step, Separator):
            if table is not None:
                parts.append(table)
                table = None
            parts.append(Rule(style="dim"))
            continue

        if table is None:
            table = Table.grid(padding=(0, 1))
            table.add_column(justify="right", style="magenta", no_wrap=True)
            table.add_column(overflow="fold")

        if isinstance(step, Blank):
            table.add_row("", "")
        elif isinstance(step, Note):
            number += 1
            style = "red" if step.text.startswith("ERROR") else ""
            table.add_row(str(number), Text(step.text, style=style))

    if table is not None:
        parts.append(table)

    return Group(*parts)


def render_outcome(outcome: Outcome, title: str) -> Panel:
    """Panel with the trace and, when successful, the result line."""
    body = [render_trace(outcome)]
    if outcome.ok:
        body.append(Rule(style="cyan"))
        body.append(Text.assemble(("Result: ", "bold cyan"), (outcome.output, "bold")))
        border = "cyan"
    else:
        body.append(Text(f"Failed: {outcome.error_kind.value}", style="bold red"))
        border = "red"
    return Panel(Group(*body), title=title, border_style=border, padding=(0, 1))


def print_outcome(outcome: Outcome, title: str, console: Optional[Console] = None) -> None:
    (console or Console()).print(render_outcome(outcome, title))
