"""Command line entry point.

Usage::

    hwt new [name] [--org ORG] [--author AUTHOR] [--docker-tag TAG]
            [--drone | --no-drone] [--path PATH] [--yes]
    hwt pack <template-dir> [--output FILE]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from hwt import __version__
from hwt.config import Config
from hwt.prompts import InputValidationError, collect_metadata
from hwt.scaffolder import (
    ArchiveDecodeError,
    ExternalToolError,
    FilesystemError,
    ProjectGenerator,
    collect_tree,
    encode_archive,
    pack_entries,
)
from hwt.utils import console, print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hwt",
        description="Bare project generator of HereweTech",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  hwt new my-service\n"
            "  hwt new my-service --org acme --author Jane --no-drone --yes\n"
            "  hwt pack ./templates > archive.b64\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"hwt {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    new = subparsers.add_parser("new", help="Generate new project")
    new.add_argument("name", nargs="?", default="", help="Project name")
    new.add_argument("--org", default="", help="Project organization")
    new.add_argument("--author", default="", help="Project author")
    new.add_argument("--docker-tag", default="", help="Docker image tag (default: <org>/<name>)")
    new.add_argument(
        "--drone",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate a .drone.yml descriptor",
    )
    new.add_argument("--path", default="", help="Project path (default: ./<name>)")
    new.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Accept the given values and defaults without prompting",
    )
    new.add_argument("--skip-git", action="store_true", help="Do not run `git init`")
    new.add_argument("--skip-mod", action="store_true", help="Do not run `go mod init`")

    pack = subparsers.add_parser("pack", help="Encode a template directory for embedding")
    pack.add_argument("directory", help="Template source directory")
    pack.add_argument("--output", "-o", default=None, help="Write the blob to a file")

    return parser


def run_new(args: argparse.Namespace) -> int:
    """Collect metadata and generate a project. Returns the exit code."""
    console.print("Generate new project")

    config = Config.from_env()
    overrides = {}
    if args.skip_git:
        overrides["init_vcs"] = False
    if args.skip_mod:
        overrides["init_module"] = False
    if overrides:
        config = config.model_copy(update=overrides)

    try:
        metadata = collect_metadata(
            name=args.name,
            organization=args.org,
            author=args.author,
            docker_tag=args.docker_tag,
            drone=args.drone,
            path=args.path,
            interactive=not args.yes,
        )
    except InputValidationError as exc:
        print_error(str(exc))
        return 1
    except (EOFError, KeyboardInterrupt):
        print_error("Aborted")
        return 1

    generator = ProjectGenerator(metadata, config)
    try:
        root = generator.generate()
    except (ArchiveDecodeError, FilesystemError, ExternalToolError) as exc:
        print_error(str(exc))
        return 1

    print_summary_table(
        {
            "Path": str(root),
            "Docker image tag": metadata.docker_tag,
            "Files": str(len(generator.files_written)),
            "DroneCI": "yes" if metadata.drone_enabled else "no",
        },
        title=metadata.name,
    )
    print_success("Project created. Run 'go mod tidy' in your project directory and enjoy it.")
    return 0


def run_pack(args: argparse.Namespace) -> int:
    """Print (or write) the embeddable blob for a template directory."""
    try:
        entries = collect_tree(args.directory)
    except NotADirectoryError as exc:
        print_error(str(exc))
        return 1

    blob = encode_archive(pack_entries(entries))
    if args.output:
        Path(args.output).write_text(blob, encoding="ascii")
        print_success(f"Packed {len(entries)} entries into {args.output}")
    else:
        sys.stdout.write(blob)
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``hwt``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "new":
        code = run_new(args)
    elif args.command == "pack":
        code = run_pack(args)
    else:
        parser.print_help()
        code = 0

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
