"""Shared pytest fixtures for the Git Frameworker test suite.

Provides reusable fixtures for:
- A staged framework repository laid out on disk
- Settings pointing at that staging directory
- A scripted prompter standing in for the terminal
- A real local git repository to clone from
- Mock subprocess helpers
"""

from __future__ import annotations

import json
import shutil
import subprocess
from pathlib import Path
from typing import Any, Optional, Union
from unittest.mock import AsyncMock, MagicMock

import pytest

from git_frameworker.config import Settings
from git_frameworker.framework.models import Question


# ---------------------------------------------------------------------------
# Framework fixtures
# ---------------------------------------------------------------------------

SAMPLE_FRAMEWORK: dict[str, Any] = {
    "frameworkName": "Acme Stack",
    "frameworkDescription": "Starter projects for the Acme stack",
    "questions": [
        {
            "name": "lang",
            "type": "list",
            "message": "Which language?",
            "choices": ["JS", "TS"],
            "isPartial": False,
        },
        {
            "name": "tests",
            "type": "confirm",
            "message": "Add a test setup?",
            "isPartial": True,
        },
    ],
}


def write_framework_tree(root: Path, framework: Optional[dict[str, Any]] = SAMPLE_FRAMEWORK) -> Path:
    """Lay out templates/ and partials/ for SAMPLE_FRAMEWORK under *root*."""
    root.mkdir(parents=True, exist_ok=True)
    for key, marker in (("lang:js", "js"), ("lang:ts", "ts")):
        template = root / "templates" / key
        (template / "src").mkdir(parents=True)
        (template / "README.md").write_text(f"# {marker} template\n", encoding="utf-8")
        (template / "src" / f"index.{marker}").write_text("export {};\n", encoding="utf-8")

    tests_partial = root / "partials" / "tests"
    (tests_partial / "tests").mkdir(parents=True)
    (tests_partial / "tests" / "sample.test.ts").write_text("test('ok', () => {});\n", encoding="utf-8")
    (tests_partial / "README.md").write_text("# with tests\n", encoding="utf-8")

    if framework is not None:
        (root / "framework.json").write_text(json.dumps(framework, indent=2), encoding="utf-8")
    return root


@pytest.fixture
def sample_framework() -> dict[str, Any]:
    """A fresh copy of the sample ``framework.json`` contents."""
    return json.loads(json.dumps(SAMPLE_FRAMEWORK))


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory (projects are cwd-relative)."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def settings(workdir: Path) -> Settings:
    """Settings with the default relative staging dir and no cosmetic delays."""
    return Settings(ui_delay=0)


@pytest.fixture
def staged_repo(settings: Settings) -> Path:
    """A staged framework clone with framework.json, templates and partials."""
    return write_framework_tree(settings.staging_dir)


@pytest.fixture
def fake_clone(settings: Settings):
    """Factory for a ``_run_git`` stand-in that stages a framework clone.

    Usage:
        with patch("git_frameworker.fetcher._run_git", side_effect=fake_clone()):
            ...

    Args (of the factory):
        framework: framework.json contents, or ``None`` to omit the file.
        raw_config: Literal framework.json text, overriding *framework*.
    """
    def factory(
        framework: Optional[dict[str, Any]] = SAMPLE_FRAMEWORK,
        raw_config: Optional[str] = None,
    ):
        async def _clone(*args: str, **kwargs: Any) -> str:
            root = write_framework_tree(settings.staging_dir, framework)
            (root / ".git").mkdir()
            if raw_config is not None:
                (root / "framework.json").write_text(raw_config, encoding="utf-8")
            return ""

        return _clone

    return factory


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------

class ScriptedPrompter:
    """Prompter that replays canned answers and records what was asked.

    Args:
        texts: Answers for ``ask_text`` calls, consumed in order. An empty
            string stands for "accept the default".
        answers: Answers for framework questions keyed by question name.
    """

    def __init__(
        self,
        texts: Optional[list[str]] = None,
        answers: Optional[dict[str, Union[bool, str]]] = None,
    ) -> None:
        self.texts = list(texts or [])
        self.answers = dict(answers or {})
        self.text_prompts: list[str] = []
        self.asked: list[Question] = []

    def ask_text(self, message: str, default: Optional[str] = None) -> str:
        self.text_prompts.append(message)
        answer = self.texts.pop(0) if self.texts else ""
        return answer or (default or "")

    def ask(self, question: Question) -> Union[bool, str]:
        self.asked.append(question)
        return self.answers[question.name]


@pytest.fixture
def scripted_prompter():
    """Factory for ``ScriptedPrompter`` instances."""
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Git
# ---------------------------------------------------------------------------

@pytest.fixture
def framework_git_repo(tmp_path: Path) -> Path:
    """Real git repository on branch ``main`` holding the sample framework.

    Skips the test when git is not installed.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo_dir = write_framework_tree(tmp_path / "framework-repo")

    def git(*args: str) -> None:
        subprocess.run(["git", *args], cwd=repo_dir, check=True, capture_output=True)

    git("init")
    git("symbolic-ref", "HEAD", "refs/heads/main")
    git("config", "user.email", "test@git-frameworker.local")
    git("config", "user.name", "Git Frameworker Test")
    git("config", "commit.gpgsign", "false")
    git("add", ".")
    git("commit", "-m", "Initial commit")
    yield repo_dir


# ---------------------------------------------------------------------------
# Mock subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", AsyncMock(return_value=proc)):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
