"""Git Frameworker configuration.

Typed runtime settings for a scaffolding run. Uses a Pydantic v2 model so
values are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Global Git Frameworker settings.

    Created once by the CLI entry point and passed to the ``Orchestrator``.
    All paths are relative to the current working directory unless
    ``staging_dir`` is given as an absolute path.
    """

    staging_dir: Path = Field(default=Path(".git-repo-temp"))
    branch: str = Field(default="main", min_length=1)
    clone_depth: int = Field(default=1, ge=1)
    clone_timeout: int = Field(default=300, ge=10, description="Clone timeout in seconds")
    config_filename: str = Field(default="framework.json", min_length=1)
    templates_dir: str = Field(default="templates", min_length=1)
    partials_dir: str = Field(default="partials", min_length=1)
    default_project_name: str = Field(default="new-project", min_length=1)
    ui_delay: float = Field(
        default=0.3, ge=0, description="Cosmetic pause between steps in seconds"
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def config_path(self) -> Path:
        """Path to ``framework.json`` inside the staged clone."""
        return self.staging_dir / self.config_filename

    @property
    def templates_path(self) -> Path:
        """Root of the full-template directories."""
        return self.staging_dir / self.templates_dir

    @property
    def partials_path(self) -> Path:
        """Root of the partial overlay directories."""
        return self.staging_dir / self.partials_dir

    @property
    def git_metadata_path(self) -> Path:
        """The clone's ``.git`` directory, stripped right after cloning."""
        return self.staging_dir / ".git"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            GF_STAGING_DIR, GF_BRANCH, GF_CLONE_DEPTH, GF_CLONE_TIMEOUT,
            GF_CONFIG_FILENAME, GF_DEFAULT_PROJECT_NAME, GF_UI_DELAY.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GF_STAGING_DIR"):
            kwargs["staging_dir"] = Path(os.environ["GF_STAGING_DIR"])
        if os.environ.get("GF_BRANCH"):
            kwargs["branch"] = os.environ["GF_BRANCH"]
        if os.environ.get("GF_CLONE_DEPTH"):
            kwargs["clone_depth"] = int(os.environ["GF_CLONE_DEPTH"])
        if os.environ.get("GF_CLONE_TIMEOUT"):
            kwargs["clone_timeout"] = int(os.environ["GF_CLONE_TIMEOUT"])
        if os.environ.get("GF_CONFIG_FILENAME"):
            kwargs["config_filename"] = os.environ["GF_CONFIG_FILENAME"]
        if os.environ.get("GF_DEFAULT_PROJECT_NAME"):
            kwargs["default_project_name"] = os.environ["GF_DEFAULT_PROJECT_NAME"]
        if os.environ.get("GF_UI_DELAY"):
            kwargs["ui_delay"] = float(os.environ["GF_UI_DELAY"])

        return cls(**kwargs)
