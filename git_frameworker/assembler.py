"""Project assembly from a template selection.

The assembler first turns a ``SelectionResult`` into an ordered copy plan:
the full template, then each selected partial overlay in question order.
Every source in the plan is checked before anything is copied, then the
copies run one after another, each merging into the project directory so
later overlays overwrite earlier files of the same name.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from git_frameworker.config import Settings
from git_frameworker.errors import ErrorKind, ScaffoldError
from git_frameworker.framework.models import (
    Answer,
    QuestionType,
    SelectionResult,
    TemplateKey,
    stringify_value,
)
from git_frameworker.utils import copy_tree


@dataclass(frozen=True)
class CopyStep:
    """One recursive copy in an assembly plan."""

    source: Path
    destination: Path
    label: str


def template_source(settings: Settings, key: TemplateKey) -> Path:
    """Directory holding the full template for *key*.

    An empty key resolves to the ``templates/`` root itself.
    """
    if key.is_empty:
        return settings.templates_path
    return settings.templates_path / key.dirname


def partial_dirname(answer: Answer) -> str | None:
    """Overlay directory name selected by a partial answer, or ``None``.

    confirm: the question name, only when answered yes.
    list: ``name:choice`` with the choice lower-cased.
    input: never selects an overlay.
    """
    if answer.type is QuestionType.CONFIRM:
        return answer.name if answer.value is True else None
    if answer.type is QuestionType.LIST:
        return f"{answer.name}:{stringify_value(answer.value).lower()}"
    return None


def plan_copies(selection: SelectionResult, settings: Settings, project_path: Path) -> list[CopyStep]:
    """Build the ordered copy plan for a selection."""
    key = selection.template_key
    steps = [
        CopyStep(
            source=template_source(settings, key),
            destination=project_path,
            label=f"templates/{key.dirname}",
        )
    ]
    for answer in selection.partials:
        dirname = partial_dirname(answer)
        if dirname is None:
            continue
        steps.append(
            CopyStep(
                source=settings.partials_path / dirname,
                destination=project_path,
                label=f"partials/{dirname}",
            )
        )
    return steps


class ProjectAssembler:
    """Materialises the project directory from the staged repository."""

    def __init__(self, settings: Settings, project_path: Path) -> None:
        self.settings = settings
        self.project_path = Path(project_path)

    def check_plan(self, steps: list[CopyStep]) -> None:
        """Ensure every planned source directory exists.

        Raises:
            ScaffoldError: ``PATH_RESOLUTION`` naming the first missing source.
        """
        for step in steps:
            if not step.source.is_dir():
                raise ScaffoldError(
                    ErrorKind.PATH_RESOLUTION,
                    f"No directory for {step.label} in the framework repository",
                    detail=f"Expected {step.source}; check the question names and "
                    "choices in the framework config against the repository layout.",
                )

    async def assemble(self, selection: SelectionResult) -> list[CopyStep]:
        """Copy the selected template and overlays into the project.

        Returns:
            The executed copy plan, in order.
        """
        steps = plan_copies(selection, self.settings, self.project_path)
        self.check_plan(steps)
        for step in steps:
            await copy_tree(step.source, step.destination)
        return steps

    async def copy_verbatim(self) -> None:
        """Copy the whole staged repository; used when it has no framework config."""
        await copy_tree(self.settings.staging_dir, self.project_path)
