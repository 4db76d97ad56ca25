"""Detection and parsing of ``framework.json`` in a staged repository."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from git_frameworker.errors import ErrorKind, ScaffoldError
from git_frameworker.framework.models import FrameworkConfig, QuestionType
from git_frameworker.utils import print_warning

CONFIG_FILENAME = "framework.json"


def has_framework_config(staging: str | Path, filename: str = CONFIG_FILENAME) -> bool:
    """Return ``True`` if the staged repository root holds *filename*.

    Raises:
        ScaffoldError: ``FILESYSTEM`` kind if the staging directory cannot be listed.
    """
    root = Path(staging)
    try:
        return any(entry.name == filename and entry.is_file() for entry in root.iterdir())
    except OSError as exc:
        raise ScaffoldError(
            ErrorKind.FILESYSTEM, f"Could not read staged repository {root}", detail=str(exc)
        ) from exc


def parse_framework_config(raw: str, source: str = CONFIG_FILENAME) -> FrameworkConfig:
    """Validate the text of a ``framework.json`` file.

    Raises:
        ScaffoldError: ``CONFIG_PARSE`` kind for invalid JSON or a wrong shape.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ScaffoldError(
            ErrorKind.CONFIG_PARSE, f"{source} is not valid JSON", detail=str(exc)
        ) from exc

    try:
        config = FrameworkConfig.model_validate(data)
    except ValidationError as exc:
        raise ScaffoldError(
            ErrorKind.CONFIG_PARSE, f"{source} has an invalid structure", detail=str(exc)
        ) from exc

    for question in config.questions:
        if question.is_partial and question.type is QuestionType.INPUT:
            print_warning(
                f"  Question '{question.name}' is a free-text partial; "
                "its answer will not select any partial directory."
            )
    return config


def load_framework_config(staging: str | Path, filename: str = CONFIG_FILENAME) -> FrameworkConfig:
    """Read and parse ``framework.json`` from the staged repository.

    Args:
        staging: Root of the staged clone.
        filename: Configuration file name at that root.

    Returns:
        A validated ``FrameworkConfig``.

    Raises:
        ScaffoldError: ``FILESYSTEM`` if the file cannot be read,
            ``CONFIG_PARSE`` if its content is malformed.
    """
    path = Path(staging) / filename
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ScaffoldError(
            ErrorKind.CONFIG_PARSE, f"{filename} is not UTF-8 text", detail=str(exc)
        ) from exc
    except OSError as exc:
        raise ScaffoldError(
            ErrorKind.FILESYSTEM, f"Could not read {path}", detail=str(exc)
        ) from exc
    return parse_framework_config(raw, source=filename)
