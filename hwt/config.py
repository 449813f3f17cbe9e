"""hwt configuration.

Typed generator settings built on Pydantic v2 so they are validated at
construction time and can be overridden from environment variables.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in _TRUE_VALUES


class Config(BaseModel):
    """Global generator configuration.

    Created once by the CLI entry point and handed to ``ProjectGenerator``.
    """

    init_vcs: bool = Field(default=True, description="Run `git init` in the new project")
    vcs_branch: str = Field(default="main", min_length=1)
    init_module: bool = Field(default=True, description="Run `go mod init` in the new project")
    tool_timeout: int = Field(default=60, ge=1, description="External tool timeout in seconds")

    # Calendar format of the TODAY placeholder.
    date_format: str = Field(default="%m/%d/%Y")

    staging_prefix: str = Field(default=".hwt-staging-", min_length=1)
    drone_filename: str = Field(default=".drone.yml", min_length=1)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            HWT_INIT_VCS, HWT_VCS_BRANCH, HWT_INIT_MODULE, HWT_TOOL_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}

        init_vcs = _env_flag("HWT_INIT_VCS")
        if init_vcs is not None:
            kwargs["init_vcs"] = init_vcs
        init_module = _env_flag("HWT_INIT_MODULE")
        if init_module is not None:
            kwargs["init_module"] = init_module
        if os.environ.get("HWT_VCS_BRANCH"):
            kwargs["vcs_branch"] = os.environ["HWT_VCS_BRANCH"]
        if os.environ.get("HWT_TOOL_TIMEOUT"):
            kwargs["tool_timeout"] = int(os.environ["HWT_TOOL_TIMEOUT"])

        return cls(**kwargs)
