"""Banners and closing messages."""

from __future__ import annotations

from rich.align import Align
from rich.panel import Panel
from rich.text import Text

from git_frameworker.assembler import CopyStep
from git_frameworker.framework.models import TAGLINE, TOOL_NAME
from git_frameworker.utils import console, print_summary_table

GRADIENT_COLORS = ["bright_cyan", "cyan", "bright_blue", "blue", "bright_magenta", "magenta"]


def gradient_text(text: str, bold: bool = True) -> Text:
    """Spread ``GRADIENT_COLORS`` left to right across *text*."""
    styled = Text()
    width = max(len(text), 1)
    for i, char in enumerate(text):
        color = GRADIENT_COLORS[i * len(GRADIENT_COLORS) // width]
        styled.append(char, style=f"bold {color}" if bold else color)
    return styled


def show_banner(name: str = TOOL_NAME, description: str = TAGLINE, clear: bool = True) -> None:
    """Clear the screen and print a name banner with its description."""
    if clear:
        console.clear()
    console.print(
        Panel(
            Align.center(gradient_text(name)),
            border_style="bright_cyan",
            padding=(1, 4),
        )
    )
    if description:
        console.print(Text(f"  {description}", style="cyan"))
    console.print()


def show_plan(steps: list[CopyStep]) -> None:
    """Summarise which template and overlays were copied."""
    data = {"Template": steps[0].label if steps else "-"}
    for index, step in enumerate(steps[1:], start=1):
        data[f"Partial {index}"] = step.label
    print_summary_table(data, title="Project layout")


def show_final_message(project_name: str) -> None:
    console.print()
    console.print(gradient_text(f"Project '{project_name}' created successfully"))
    console.print()
    console.print("To start working on your project run:")
    console.print(f"  [cyan]cd {project_name}[/cyan]", highlight=False)
    console.print()
