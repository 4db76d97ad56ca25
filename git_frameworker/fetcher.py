"""Shallow-cloning a framework repository into the staging directory."""

from __future__ import annotations

from pathlib import Path

from git_frameworker.config import Settings
from git_frameworker.errors import ErrorKind, ScaffoldError
from git_frameworker.utils import remove_tree, run_command


async def _run_git(*args: str, cwd: str | Path | None = None, timeout: int = 300) -> str:
    """Run a git command and return stdout.

    Raises ScaffoldError (``CLONE`` kind) if git is missing, times out or
    exits non-zero.
    """
    cmd = ["git", *args]
    cmd_str = " ".join(cmd)

    try:
        returncode, stdout, stderr = await run_command(cmd, cwd=cwd, timeout=timeout)
    except FileNotFoundError as exc:
        raise ScaffoldError(
            ErrorKind.CLONE, "git is not installed or not on PATH", detail=str(exc)
        ) from exc

    if returncode != 0:
        raise ScaffoldError(
            ErrorKind.CLONE,
            f"Git command failed (exit {returncode}): {cmd_str}",
            detail=stderr,
        )
    return stdout


class RepositoryFetcher:
    """Clones a single branch of a repository into ``settings.staging_dir``.

    The clone's ``.git`` directory is removed straight away so the staged
    tree holds only the framework files.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def clone_args(self, url: str) -> list[str]:
        return [
            "clone",
            f"--depth={self.settings.clone_depth}",
            f"--branch={self.settings.branch}",
            "--",
            url,
            str(self.settings.staging_dir),
        ]

    async def fetch(self, url: str) -> Path:
        """Clone *url* and strip version-control metadata.

        Returns:
            The staging directory.

        Raises:
            ScaffoldError: ``CLONE`` for an empty URL or a failed clone,
                ``FILESYSTEM`` if ``.git`` cannot be removed.
        """
        url = url.strip()
        if not url:
            raise ScaffoldError(ErrorKind.CLONE, "No repository URL given")

        await _run_git(*self.clone_args(url), timeout=self.settings.clone_timeout)
        await remove_tree(self.settings.git_metadata_path)
        return self.settings.staging_dir
