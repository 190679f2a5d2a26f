"""Jinja2 template rendering for project scaffolding.

Provides the ``TemplateRenderer`` class, which loads ``.j2`` templates from the
``hana/scaffolder/templates/`` directory, and the pure template functions
(gitignore, README, HTML shell, favicon, ...) built on top of it.  Every
function here is deterministic: identical arguments give identical text.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from hana.config import PACKAGE_MANAGERS


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Templates are looked up relative to a configurable directory.  Undefined
    variables raise ``jinja2.UndefinedError``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any] | None = None) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"react/app.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**(context or {}))

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def get_source(self, template_path: str) -> str:
        """Return the raw, unrendered source of a template.

        Editors render their base template themselves, so the orchestrator
        hands them the source rather than a compiled template.
        """
        source, _filename, _uptodate = self.env.loader.get_source(self.env, template_path)
        return source

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*."""
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


@lru_cache(maxsize=1)
def default_renderer() -> TemplateRenderer:
    """Shared renderer over the bundled templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Pure template functions
# ---------------------------------------------------------------------------


def render_template(template: str, variables: dict[str, str]) -> str:
    """Substitute ``{{ key }}`` placeholders in *template*.

    Unlike a Jinja2 render, placeholders without a matching variable are left
    untouched, which makes this safe for text that itself contains braces.
    """
    result = template
    for key, value in variables.items():
        result = re.sub(r"{{\s*" + re.escape(key) + r"\s*}}", lambda _m: value, result)
    return result


def get_file_extension(language: str) -> str:
    """``.ts`` for TypeScript, ``.js`` for everything else."""
    return ".ts" if language == "typescript" else ".js"


def generate_vite_env_file() -> str:
    return default_renderer().render("vite-env.d.ts.j2")


def generate_gitignore() -> str:
    return default_renderer().render("gitignore.j2")


def generate_readme_template(
    project_type: str | None,
    project_name: str,
    description: str | None = None,
    pkg_manager: str | None = None,
) -> str:
    """Build the README: title, description, optional getting-started, license."""
    manager = PACKAGE_MANAGERS.get(pkg_manager) if pkg_manager else None
    return default_renderer().render(
        "README.md.j2",
        {
            "project_name": project_name,
            "description": description or f"A {project_type or 'blank'} project",
            "install_command": " ".join(manager.install_command()) if manager else None,
            "dev_command": manager.run("dev") if manager and project_type else None,
        },
    )


def generate_html_template(title: str, main_script_path: str, mount_id: str = "app") -> str:
    return default_renderer().render(
        "index.html.j2",
        {"title": title, "main_script_path": main_script_path, "mount_id": mount_id},
    )


def generate_hana_logo() -> str:
    return default_renderer().render("favicon.svg.j2")
