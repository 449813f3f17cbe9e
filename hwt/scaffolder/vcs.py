"""External tool invocations for a freshly generated project.

Runs ``git init`` and ``go mod init`` with an explicit working directory.
Any failure (missing binary, timeout, non-zero exit) raises
:class:`ExternalToolError`.
"""

from __future__ import annotations

import subprocess
from pathlib import Path


class ExternalToolError(Exception):
    """Raised when an external tool invocation fails."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


def run_tool(
    *cmd: str,
    cwd: str | Path,
    timeout: float = 60.0,
) -> str:
    """Run a command in *cwd* and return its stripped stdout.

    Raises ExternalToolError if the command cannot be started, times out or
    exits with a non-zero code.
    """
    cmd_str = " ".join(cmd)

    try:
        result = subprocess.run(
            list(cmd),
            cwd=str(cwd),
            capture_output=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ExternalToolError(
            f"Command not found: {cmd[0]}",
            command=cmd_str,
        ) from exc
    except OSError as exc:
        raise ExternalToolError(
            f"Cannot run {cmd[0]}: {exc}",
            command=cmd_str,
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise ExternalToolError(
            f"Command timed out after {timeout}s: {cmd_str}",
            command=cmd_str,
        ) from exc

    stdout = result.stdout.decode("utf-8", errors="replace").strip()
    stderr = result.stderr.decode("utf-8", errors="replace").strip()

    if result.returncode != 0:
        raise ExternalToolError(
            f"Command failed (exit {result.returncode}): {cmd_str}\n{stderr}",
            command=cmd_str,
            stderr=stderr,
        )

    return stdout


def init_repository(root: str | Path, branch: str = "main", timeout: float = 60.0) -> None:
    """Initialise an empty git repository in *root*."""
    run_tool("git", "init", "--quiet", f"--initial-branch={branch}", cwd=root, timeout=timeout)


def init_module(root: str | Path, module: str, timeout: float = 60.0) -> None:
    """Create the Go module manifest for *module* in *root*."""
    run_tool("go", "mod", "init", module, cwd=root, timeout=timeout)
