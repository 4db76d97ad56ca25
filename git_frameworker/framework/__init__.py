"""Framework configuration and template selection.

Key pieces:
    FrameworkConfig       - Parsed ``framework.json``
    load_framework_config - Read and validate it from a staged clone
    run_selection         - Ask the questions and compute a SelectionResult
"""

from .loader import has_framework_config, load_framework_config, parse_framework_config
from .models import (
    Answer,
    FrameworkConfig,
    Question,
    QuestionType,
    SelectionResult,
    TemplateKey,
    stringify_value,
)
from .selector import build_template_key, collect_answers, run_selection, select_template

__all__ = [
    # Models
    "Answer",
    "FrameworkConfig",
    "Question",
    "QuestionType",
    "SelectionResult",
    "TemplateKey",
    "stringify_value",
    # Loading
    "has_framework_config",
    "load_framework_config",
    "parse_framework_config",
    # Selection
    "build_template_key",
    "collect_answers",
    "run_selection",
    "select_template",
]
