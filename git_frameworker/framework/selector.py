"""Answer collection and template selection.

Turns the ordered question list of a ``FrameworkConfig`` plus live answers
into a ``SelectionResult``: the key of the full template to copy and the
partial answers that pick overlays afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from git_frameworker.framework.models import (
    Answer,
    Question,
    QuestionType,
    SelectionResult,
    TemplateKey,
    stringify_value,
)

if TYPE_CHECKING:
    from git_frameworker.prompter import Prompter


def collect_answers(questions: Iterable[Question], prompter: Prompter) -> list[Answer]:
    """Ask every question once, in order, and record the answers."""
    answers: list[Answer] = []
    for question in questions:
        value = prompter.ask(question)
        answers.append(Answer.for_question(question, value))
    return answers


def build_template_key(answers: Iterable[Answer]) -> TemplateKey:
    """Key from non-partial, non-free-text answers in answer order."""
    return TemplateKey(
        parts=tuple(
            (answer.name, stringify_value(answer.value))
            for answer in answers
            if not answer.is_partial and answer.type is not QuestionType.INPUT
        )
    )


def select_template(answers: Sequence[Answer]) -> SelectionResult:
    """Split answers into partial overlays and the full-template key."""
    partials = tuple(answer for answer in answers if answer.is_partial)
    fulls = [answer for answer in answers if not answer.is_partial]
    return SelectionResult(partials=partials, template_key=build_template_key(fulls))


def run_selection(questions: Iterable[Question], prompter: Prompter) -> SelectionResult:
    """Collect answers through *prompter* and compute the selection."""
    return select_template(collect_answers(questions, prompter))
