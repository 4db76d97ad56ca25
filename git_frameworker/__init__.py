"""Git Frameworker -- create a new project from a git repository template.

A framework repository may ship a ``framework.json`` whose questions select a
full template under ``templates/`` and optional overlays under ``partials/``.
Repositories without one are copied verbatim.

Quick usage::

    from git_frameworker import Orchestrator, RichPrompter, Settings

    result = asyncio.run(Orchestrator(Settings(), RichPrompter()).run())
"""

from git_frameworker.config import Settings
from git_frameworker.errors import ErrorKind, ScaffoldError
from git_frameworker.pipeline import Orchestrator, RunContext, RunResult
from git_frameworker.prompter import Prompter, RichPrompter

__version__ = "1.0.0"

__all__ = [
    "ErrorKind",
    "Orchestrator",
    "Prompter",
    "RichPrompter",
    "RunContext",
    "RunResult",
    "ScaffoldError",
    "Settings",
]
