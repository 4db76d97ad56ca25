"""Shared utility functions for Git Frameworker.

Provides async command execution, filesystem copy/remove primitives, and the
Rich-based terminal output used by every step: coloured status lines, spinner
steps and summary tables.
"""

from __future__ import annotations

import asyncio
import os
import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from git_frameworker.errors import ErrorKind, ScaffoldError

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 120,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously and capture its output.

    Args:
        cmd: Program and arguments. No shell is involved.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple. A timeout yields
        returncode ``-1`` with an explanatory stderr.

    Raises:
        FileNotFoundError: If the program is not installed.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return -1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}"

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


async def copy_tree(source: str | Path, destination: str | Path) -> None:
    """Recursively copy *source* into *destination*.

    The destination may already exist; its contents are merged with the
    source and files with the same relative path are overwritten.

    Raises:
        ScaffoldError: ``FILESYSTEM`` kind if the copy fails part-way.
    """
    try:
        await asyncio.to_thread(
            shutil.copytree,
            Path(source),
            Path(destination),
            symlinks=True,
            dirs_exist_ok=True,
        )
    except (OSError, shutil.Error) as exc:
        raise ScaffoldError(
            ErrorKind.FILESYSTEM,
            f"Could not copy {source} to {destination}",
            detail=str(exc),
        ) from exc


async def remove_tree(path: str | Path, missing_ok: bool = False) -> None:
    """Recursively delete a directory tree.

    Args:
        path: Directory to remove.
        missing_ok: Treat an already-absent directory as success.

    Raises:
        ScaffoldError: ``FILESYSTEM`` kind if removal fails.
    """
    target = Path(path)
    if missing_ok and not target.exists():
        return
    try:
        await asyncio.to_thread(shutil.rmtree, target)
    except OSError as exc:
        raise ScaffoldError(
            ErrorKind.FILESYSTEM, f"Could not remove {target}", detail=str(exc)
        ) from exc


async def make_dir(path: str | Path) -> Path:
    """Create a single new directory; an existing path is an error."""
    target = Path(path)
    try:
        await asyncio.to_thread(target.mkdir)
    except OSError as exc:
        raise ScaffoldError(
            ErrorKind.FILESYSTEM, f"Could not create directory {target}", detail=str(exc)
        ) from exc
    return target


async def pause(seconds: float) -> None:
    """Cosmetic delay between steps; a no-op for non-positive values."""
    if seconds > 0:
        await asyncio.sleep(seconds)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def create_progress(transient: bool = False) -> Progress:
    """Create a Rich spinner configured for run steps.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=transient,
    )


class StepStatus:
    """Outcome holder for a :func:`spinner_step` block.

    The block may downgrade the final line to a warning or replace the
    success text; an exception escaping the block always reports failure.
    """

    def __init__(self, success_text: str) -> None:
        self.text = success_text
        self.warning = False

    def succeed(self, text: str) -> None:
        self.text = text
        self.warning = False

    def warn(self, text: str) -> None:
        self.text = text
        self.warning = True


@contextmanager
def spinner_step(description: str, success_text: str) -> Iterator[StepStatus]:
    """Show a spinner while the enclosed block runs, then a status line.

    Example::

        with spinner_step("Cloning repo...", "Repo cloned successfully"):
            await fetcher.fetch(url)

    Exceptions propagate unchanged after the failure line is printed.
    """
    status = StepStatus(success_text)
    progress = create_progress(transient=True)
    progress.add_task(description, total=None)
    try:
        with progress:
            yield status
    except ScaffoldError as exc:
        print_error(f"✖ {exc}")
        if exc.detail:
            console.print(f"  [dim]{exc.detail}[/dim]", highlight=False)
        raise
    except Exception as exc:
        print_error(f"✖ {description.rstrip('.')} failed: {exc}")
        raise

    if status.warning:
        print_warning(f"! {status.text}")
    else:
        print_success(f"✔ {status.text}")
