"""Rich Console factory and theme for bentoctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BENTO_THEME = Theme(
    {
        "bento.ok": "bold green",
        "bento.error": "bold red",
        "bento.warning": "bold yellow",
        "bento.op": "bold cyan",
        "bento.key": "dim",
        "bento.slot": "bold blue",
        "bento.type": "magenta",
    }
)

SEVERITY_STYLES: dict[str, str] = {
    "error": "bento.error",
    "warning": "bento.warning",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=BENTO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
