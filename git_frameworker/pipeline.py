"""Git Frameworker run orchestrator.

Sequences one scaffolding run:

1. Greet      -- tool banner.
2. Fetch      -- ask for a repository URL and shallow-clone it to staging.
3. Create     -- ask for the project name and create its directory.
4. Configure  -- look for ``framework.json`` in the clone.
5. Assemble   -- ask the framework's questions and copy the selected template
                 and partials, or copy the whole clone when there is no config.
6. Clean up   -- remove staging (and the project too with ``--clean``).

Usage::

    git-frameworker
    python -m git_frameworker --clean
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import traceback
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from git_frameworker.assembler import CopyStep, ProjectAssembler
from git_frameworker.config import Settings
from git_frameworker.display import show_banner, show_final_message, show_plan
from git_frameworker.errors import ErrorKind, ScaffoldError
from git_frameworker.fetcher import RepositoryFetcher
from git_frameworker.framework import (
    FrameworkConfig,
    has_framework_config,
    load_framework_config,
    run_selection,
)
from git_frameworker.prompter import Prompter, RichPrompter
from git_frameworker.utils import (
    console,
    make_dir,
    pause,
    print_error,
    remove_tree,
    spinner_step,
)


@dataclass
class RunContext:
    """Values gathered while a run progresses, passed to every step."""

    clean: bool = False
    repo_url: str = ""
    project_name: str = ""
    framework: Optional[FrameworkConfig] = None
    plan: list[CopyStep] = field(default_factory=list)

    @property
    def project_path(self) -> Path:
        return Path(self.project_name)


@dataclass(frozen=True)
class RunResult:
    """Outcome of :meth:`Orchestrator.run`."""

    success: bool
    project_name: str = ""
    error_kind: Optional[ErrorKind] = None
    message: str = ""


class Orchestrator:
    """Drives a single scaffolding run.

    Steps raise ``ScaffoldError`` on failure; :meth:`run` stops at the first
    one and reports it in the returned ``RunResult``. Nothing already written
    to disk is rolled back.

    Attributes:
        settings: Run configuration.
        prompter: Source of user answers.
        verbose: Print the traceback of a failure's underlying cause.
    """

    def __init__(
        self,
        settings: Settings,
        prompter: Prompter,
        verbose: bool = False,
    ) -> None:
        self.settings = settings
        self.prompter = prompter
        self.verbose = verbose
        self.fetcher = RepositoryFetcher(settings)

    async def run(self, clean: bool = False) -> RunResult:
        """Execute every step in order.

        Args:
            clean: Also remove the created project during cleanup.
        """
        context = RunContext(clean=clean)
        try:
            show_banner()
            await pause(self.settings.ui_delay)

            await self.fetch_repo(context)
            await self.create_project(context)

            if await self.check_config(context):
                await self.parse_config(context)
                await self.build_project(context)
            else:
                await self.copy_repository(context)

            await self.clean_up(context)
        except ScaffoldError as exc:
            if self.verbose and exc.__cause__ is not None:
                tb = "".join(traceback.format_exception(exc.__cause__))
                console.print(f"[dim]{tb}[/dim]", highlight=False)
            return RunResult(
                success=False,
                project_name=context.project_name,
                error_kind=exc.kind,
                message=str(exc),
            )

        show_final_message(context.project_name)
        return RunResult(success=True, project_name=context.project_name)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    async def fetch_repo(self, context: RunContext) -> None:
        context.repo_url = self.prompter.ask_text("Enter the repo url (ssh or https)")
        with spinner_step("Cloning repo to your local machine...", "Repo cloned successfully"):
            await self.fetcher.fetch(context.repo_url)
            await pause(self.settings.ui_delay)

    async def create_project(self, context: RunContext) -> None:
        default_name = self.settings.default_project_name
        name = self.prompter.ask_text("Enter the project name", default=default_name)
        context.project_name = name or default_name

        with spinner_step(
            "Creating project...",
            f"Project [cyan]{context.project_name}[/cyan] created successfully",
        ):
            await pause(self.settings.ui_delay)
            await make_dir(context.project_path)

    async def check_config(self, context: RunContext) -> bool:
        with spinner_step(
            "Checking if repo has framework config...", "Found framework config"
        ) as status:
            found = await asyncio.to_thread(
                has_framework_config,
                self.settings.staging_dir,
                self.settings.config_filename,
            )
            if not found:
                status.warn("Repo does not have framework config")
        return found

    async def parse_config(self, context: RunContext) -> None:
        with spinner_step("Parsing framework config...", "Parsed framework config"):
            await pause(self.settings.ui_delay)
            context.framework = await asyncio.to_thread(
                load_framework_config,
                self.settings.staging_dir,
                self.settings.config_filename,
            )

    async def build_project(self, context: RunContext) -> None:
        framework = context.framework
        assert framework is not None  # set by parse_config

        show_banner(framework.display_name, framework.description)
        selection = run_selection(framework.questions, self.prompter)

        assembler = ProjectAssembler(self.settings, context.project_path)
        with spinner_step("Building project...", "Project built successfully"):
            context.plan = await assembler.assemble(selection)
        show_plan(context.plan)

    async def copy_repository(self, context: RunContext) -> None:
        assembler = ProjectAssembler(self.settings, context.project_path)
        with spinner_step("Copying repository...", "Repository copied into project"):
            await assembler.copy_verbatim()

    async def clean_up(self, context: RunContext) -> None:
        with spinner_step("Cleaning up...", "Cleaned up successfully"):
            await remove_tree(self.settings.staging_dir)
            if context.clean:
                await remove_tree(context.project_path, missing_ok=True)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-frameworker",
        description="Create a new project from a git repository template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  git-frameworker\n"
            "  git-frameworker --clean      # remove the project afterwards (dry run)\n"
        ),
    )
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Remove the created project directory during cleanup",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print tracebacks for failures",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``git-frameworker`` and ``python -m git_frameworker``."""
    args, _ = build_parser().parse_known_args(argv)

    try:
        settings = Settings.from_env()
    except (ValidationError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid GF_* environment setting: {exc}")
        sys.exit(1)

    orchestrator = Orchestrator(settings, RichPrompter(), verbose=args.verbose)
    try:
        result = asyncio.run(orchestrator.run(clean=args.clean))
    except (KeyboardInterrupt, EOFError):
        console.print("\n\nOperation cancelled by user. Exiting.")
        sys.exit(1)

    if not result.success:
        print_error(f"Project creation failed ({result.error_kind.value}).")
        sys.exit(1)


if __name__ == "__main__":
    main()
