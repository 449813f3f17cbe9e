"""Interactive collection of project metadata.

Asks for the project name, organization, author, docker image tag, the
Drone CI flag and the target path, in that order. An empty answer (or one
that could form placeholder marker text) is reported and the same question is
asked again. Values passed in up front become the prompt defaults.
"""

from __future__ import annotations

from rich.prompt import Confirm, Prompt

from hwt.scaffolder.generator import ProjectMetadata
from hwt.scaffolder.placeholders import forms_marker
from hwt.utils import console, print_error, print_value


class InputValidationError(ValueError):
    """Raised when a collected value is unusable."""

    def __init__(self, label: str, message: str) -> None:
        self.label = label
        super().__init__(message)


def require(value: str | None, label: str) -> str:
    """Return *value* stripped, or raise ``InputValidationError``."""
    value = (value or "").strip()
    if not value:
        raise InputValidationError(label, f"empty {label.lower()}")
    if forms_marker(value):
        raise InputValidationError(
            label, f"{label.lower()} must not contain '#' or parts of placeholder markers"
        )
    return value


def ask_text(label: str, default: str = "") -> str:
    """Prompt until a valid, non-empty answer is given."""
    kwargs = {"default": default} if default else {}
    while True:
        answer = Prompt.ask(label, console=console, **kwargs)
        try:
            return require(answer, label)
        except InputValidationError as exc:
            print_error(str(exc))


def collect_metadata(
    name: str = "",
    organization: str = "",
    author: str = "",
    docker_tag: str = "",
    drone: bool | None = None,
    path: str = "",
    *,
    interactive: bool = True,
) -> ProjectMetadata:
    """Collect the values of a new project.

    With ``interactive=False`` every value comes from the arguments or its
    default and nothing is asked; a missing required value raises
    ``InputValidationError``.
    """
    if interactive:
        name = ask_text("Project name", name)
    else:
        name = require(name, "Project name")
    print_value("Project name", name)

    if interactive:
        organization = ask_text("Project organization", organization)
    else:
        organization = require(organization, "Project organization")
    print_value("Project organization", organization)

    if interactive:
        author = ask_text("Project author", author)
    else:
        author = require(author, "Project author")
    print_value("Project author", author)

    docker_default = docker_tag or f"{organization}/{name}"
    if interactive:
        docker_tag = ask_text("Docker image tag", docker_default)
    else:
        docker_tag = require(docker_default, "Docker image tag")
    print_value("Docker image tag", docker_tag)

    if interactive:
        drone = Confirm.ask("Enable DroneCI", default=bool(drone), console=console)
    drone = bool(drone)
    print_value("Enable DroneCI", drone, color="white")

    path_default = path or f"./{name}"
    if interactive:
        path = ask_text("Project path", path_default)
    else:
        path = require(path_default, "Project path")
    print_value("Project path", path, color="bright_yellow")

    return ProjectMetadata(
        name=name,
        organization=organization,
        author=author,
        docker_tag=docker_tag,
        path=path,
        drone_enabled=drone,
    )
