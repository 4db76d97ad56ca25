"""Interactive prompting.

The selector and orchestrator only depend on the :class:`Prompter` protocol;
:class:`RichPrompter` is the terminal implementation built on ``rich.prompt``.
"""

from __future__ import annotations

from typing import Optional, Protocol, Union

from rich.console import Console
from rich.prompt import Confirm, Prompt

from git_frameworker.framework.models import Question, QuestionType
from git_frameworker.utils import console as default_console


class Prompter(Protocol):
    """Anything that can put a question to the user."""

    def ask_text(self, message: str, default: Optional[str] = None) -> str:
        ...

    def ask(self, question: Question) -> Union[bool, str]:
        ...


class RichPrompter:
    """Prompter backed by ``rich.prompt``.

    List answers are constrained to the question's choices; ``Prompt.ask``
    re-asks until the input matches one of them.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def ask_text(self, message: str, default: Optional[str] = None) -> str:
        if default is None:
            answer = Prompt.ask(f"[bold cyan]?[/bold cyan] {message}", console=self.console)
        else:
            answer = Prompt.ask(
                f"[bold cyan]?[/bold cyan] {message}", console=self.console, default=default
            )
        return answer.strip()

    def ask(self, question: Question) -> Union[bool, str]:
        label = f"[bold cyan]?[/bold cyan] {question.prompt_text}"

        if question.type is QuestionType.CONFIRM:
            default = question.default if isinstance(question.default, bool) else True
            return Confirm.ask(label, console=self.console, default=default)

        if question.type is QuestionType.LIST:
            choices = list(question.choices)
            default = question.default if question.default in choices else choices[0]
            return Prompt.ask(label, console=self.console, choices=choices, default=default)

        if isinstance(question.default, str):
            return Prompt.ask(label, console=self.console, default=question.default)
        return Prompt.ask(label, console=self.console)
