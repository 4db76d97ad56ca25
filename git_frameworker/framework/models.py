"""Data models for framework configuration and template selection.

``FrameworkConfig`` and ``Question`` are Pydantic v2 models validated straight
from ``framework.json`` (camelCase keys are accepted through aliases).
``Answer``, ``TemplateKey`` and ``SelectionResult`` are plain frozen
dataclasses produced while a run is in progress.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

TOOL_NAME = "Git Frameworker"
TAGLINE = "Easy way to create a project from a git repo"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class QuestionType(str, Enum):
    """How a question is asked and what kind of value it yields."""
    INPUT = "input"
    LIST = "list"
    CONFIRM = "confirm"


# ---------------------------------------------------------------------------
# framework.json models
# ---------------------------------------------------------------------------

class Question(BaseModel):
    """A single question definition from ``framework.json``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Identifier, also used in directory names")
    type: QuestionType = Field(..., description="input, list or confirm")
    message: str = Field(default="", description="Prompt text shown to the user")
    choices: tuple[str, ...] = Field(
        default=(), description="Ordered choices for list questions"
    )
    is_partial: bool = Field(
        default=False,
        alias="isPartial",
        description="Answer selects an overlay under partials/ instead of the template",
    )
    default: Optional[Union[bool, str]] = Field(
        default=None, description="Pre-selected answer, if any"
    )

    @model_validator(mode="after")
    def _list_needs_choices(self) -> "Question":
        if self.type is QuestionType.LIST and not self.choices:
            raise ValueError(f"list question '{self.name}' has no choices")
        return self

    @property
    def prompt_text(self) -> str:
        return self.message or self.name


class FrameworkConfig(BaseModel):
    """Parsed contents of ``framework.json``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    display_name: str = Field(default=TOOL_NAME, alias="frameworkName")
    description: str = Field(default=TAGLINE, alias="frameworkDescription")
    questions: tuple[Question, ...] = Field(default=())


# ---------------------------------------------------------------------------
# Run-time selection values
# ---------------------------------------------------------------------------

def stringify_value(value: Union[bool, str]) -> str:
    """Render an answer value the way directory names spell it.

    Booleans become ``"true"`` / ``"false"``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class Answer:
    """One user response, captured in question order."""

    name: str
    value: Union[bool, str]
    type: QuestionType
    is_partial: bool = False

    @classmethod
    def for_question(cls, question: Question, value: Union[bool, str]) -> "Answer":
        return cls(
            name=question.name,
            value=value,
            type=question.type,
            is_partial=question.is_partial,
        )


@dataclass(frozen=True)
class TemplateKey:
    """Ordered ``(name, value)`` pairs identifying a full template.

    Kept structured during selection; :attr:`dirname` produces the on-disk
    ``name:value_name:value`` spelling.
    """

    parts: tuple[tuple[str, str], ...] = ()

    @property
    def dirname(self) -> str:
        return "_".join(f"{name}:{value}" for name, value in self.parts).lower()

    @property
    def is_empty(self) -> bool:
        return not self.parts


@dataclass(frozen=True)
class SelectionResult:
    """What the selector hands to the assembler."""

    partials: tuple[Answer, ...]
    template_key: TemplateKey
