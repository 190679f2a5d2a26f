"""Helpers shared by the project-type and feature generators."""

from __future__ import annotations

from typing import Any

from hana.errors import InvalidProjectTypeError

from .context import ProjectContext
from .templates import TemplateRenderer, generate_gitignore, generate_readme_template

FRONTEND_PROJECT_TYPES: tuple[str, ...] = ("react", "vue")

# V18 LTS
NODE_ENGINES: dict[str, str] = {"node": ">=18.12.0"}

TYPESCRIPT_VERSION = "~5.8.3"
VITE_VERSION = "^7.0.4"


def expect_project_type(config: Any, *expected: str | None) -> Any:
    """Return *config* if its ``project_type`` is one of *expected*.

    Every generator calls this before reading type-specific fields or
    touching the context, so a mismatch leaves the context untouched.

    Raises:
        InvalidProjectTypeError: carrying the offending ``project_type``.
    """
    if config.project_type not in expected:
        raise InvalidProjectTypeError(config.project_type, expected)
    return config


def set_manifest_basics(context: ProjectContext, description: str) -> None:
    """Name, description, version, license and engines for a fresh project."""
    package_json = context.package_json
    package_json.name = context.config.project_name
    package_json.description = description
    package_json.version = "1.0.0"
    package_json.license = "MIT"
    package_json.engines = dict(NODE_ENGINES)


def write_readme_and_gitignore(context: ProjectContext, description: str) -> None:
    config = context.config
    context.files["README.md"] = generate_readme_template(
        config.project_type,
        config.project_name,
        description,
        config.pkg_manager,
    )
    context.files[".gitignore"] = generate_gitignore()


def render_tsconfig(
    renderer: TemplateRenderer,
    *,
    dom: bool,
    bundler: bool,
    include: list[str],
    jsx: str | None = None,
) -> str:
    return renderer.render(
        "tsconfig.json.j2",
        {"dom": dom, "bundler": bundler, "jsx": jsx, "include": include},
    )
