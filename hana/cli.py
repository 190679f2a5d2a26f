"""create-hana command-line entry point.

Maps command-line flags onto a raw answer mapping, resolves it into a
``Config``, runs one generation pass, and writes the result.

Usage::

    create-hana my-app --type react --css-framework tailwindcss
    python -m hana my-api --type node --node-framework express --language javascript
    create-hana my-app --answers answers.json --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from typing import Any

from pydantic import ValidationError
from rich.markup import escape

from hana import __version__
from hana.config import get_package_manager, load_answers, resolve_config
from hana.errors import HanaError
from hana.options import (
    BUILD_TOOL_OPTIONS,
    COMMON_CODE_QUALITY_TOOLS_OPTIONS,
    COMMON_LANGUAGE_OPTIONS,
    COMMON_MANAGER_OPTIONS,
    CSS_FRAMEWORK_OPTIONS,
    CSS_PREPROCESSOR_OPTIONS,
    NODE_FRAMEWORK_OPTIONS,
    PROJECT_TYPE_OPTIONS,
    REACT_ROUTING_LIBRARY_OPTIONS,
    VUE_ROUTING_LIBRARY_OPTIONS,
    option_values,
)
from hana.scaffolder import ProjectGenerator
from hana.utils import console, format_duration, print_error, print_success, print_summary_table
from hana.writer import write_project

# argparse dests that map 1:1 onto config fields
_ANSWER_FIELDS: tuple[str, ...] = (
    "target_dir",
    "project_type",
    "language",
    "pkg_manager",
    "build_tool",
    "css_framework",
    "css_preprocessor",
    "routing_library",
    "node_framework",
    "code_quality_tools",
    "code_quality_config",
    "git",
    "install_deps",
    "remove_exist_folder",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-hana",
        description="create-hana -- scaffold a React, Vue, or Node project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-hana my-app --type react --css-framework tailwindcss\n"
            "  create-hana my-app --type vue --routing vue-router --git\n"
            "  create-hana my-api --type node --node-framework express\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "target_dir",
        nargs="?",
        default=None,
        help="Project directory (default: hana-project)",
    )
    parser.add_argument(
        "--type", "-t",
        dest="project_type",
        choices=option_values(PROJECT_TYPE_OPTIONS),
        help="Project type",
    )
    parser.add_argument("--language", "-l", choices=option_values(COMMON_LANGUAGE_OPTIONS))
    parser.add_argument("--pkg-manager", "-p", choices=option_values(COMMON_MANAGER_OPTIONS))

    frontend = parser.add_argument_group("react / vue options")
    frontend.add_argument("--build-tool", choices=option_values(BUILD_TOOL_OPTIONS))
    frontend.add_argument("--css-framework", choices=option_values(CSS_FRAMEWORK_OPTIONS))
    frontend.add_argument("--css-preprocessor", choices=option_values(CSS_PREPROCESSOR_OPTIONS))
    frontend.add_argument(
        "--routing",
        dest="routing_library",
        choices=option_values(REACT_ROUTING_LIBRARY_OPTIONS) + option_values(VUE_ROUTING_LIBRARY_OPTIONS),
    )

    node = parser.add_argument_group("node options")
    node.add_argument("--node-framework", choices=option_values(NODE_FRAMEWORK_OPTIONS))

    quality = parser.add_argument_group("code quality")
    quality.add_argument(
        "--code-quality",
        dest="code_quality_tools",
        choices=option_values(COMMON_CODE_QUALITY_TOOLS_OPTIONS),
    )
    quality.add_argument(
        "--code-quality-config",
        action="store_true",
        default=None,
        help="Also write the linter/formatter config file",
    )

    post = parser.add_argument_group("after writing")
    post.add_argument("--git", action="store_true", default=None, help="Run git init")
    post.add_argument(
        "--install",
        dest="install_deps",
        action="store_true",
        default=None,
        help="Install dependencies",
    )
    post.add_argument(
        "--force", "-f",
        dest="remove_exist_folder",
        action="store_true",
        default=None,
        help="Delete a non-empty target directory first",
    )

    parser.add_argument(
        "--answers",
        default=None,
        help="JSON file with answers; command-line flags override it",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be written without touching the disk",
    )
    return parser


def collect_answers(args: argparse.Namespace) -> dict[str, Any]:
    """Merge the ``--answers`` file with every flag the user actually passed."""
    answers: dict[str, Any] = {}
    if args.answers:
        answers.update(load_answers(args.answers))
    for field in _ANSWER_FIELDS:
        value = getattr(args, field)
        if value is not None:
            answers[field] = value
    return answers


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-hana`` / ``python -m hana``."""
    args = build_parser().parse_args(argv)

    try:
        answers = collect_answers(args)
    except (OSError, ValidationError) as exc:
        console.print(f"[bold red]Error:[/bold red] Cannot read answers file: {escape(str(exc))}")
        sys.exit(1)

    try:
        config = resolve_config(answers)
    except ValidationError as exc:
        print_error("Invalid options:")
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            console.print(f"  - {location}: {error['msg']}")
        sys.exit(1)

    started = time.monotonic()
    try:
        context = ProjectGenerator(config).generate()
    except HanaError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)

    if args.dry_run:
        print_summary_table(
            {path: f"{len(content)} chars" for path, content in sorted(context.files.items())},
            title=f"{config.project_name} (dry run)",
        )
        return

    try:
        written = asyncio.run(write_project(context))
    except HanaError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if not config.remove_exist_folder:
            console.print("  Use --force to replace the existing directory.")
        sys.exit(1)

    print_summary_table(
        {
            "Project": config.project_name,
            "Type": config.project_type or "blank",
            "Language": config.language,
            "Files": str(len(written)),
            "Location": str(context.project_dir),
            "Elapsed": format_duration(time.monotonic() - started),
        },
        title="create-hana",
    )
    print_success(f"Project {config.project_name} created.")

    manager = get_package_manager(config.pkg_manager)
    console.print("\nNext steps:")
    console.print(f"  cd {config.project_name}")
    if not config.install_deps:
        console.print(f"  {' '.join(manager.install_command())}")
    if context.package_json.scripts and "dev" in context.package_json.scripts:
        console.print(f"  {manager.run('dev')}")


if __name__ == "__main__":
    main()
