"""Code quality tooling: ESLint, ESLint + Prettier, or Biome.

Applies to every project type, including blank projects.  Dependencies and
scripts are always added; the tool's config file only when
``code_quality_config`` is set.
"""

from __future__ import annotations

from typing import Any

from .context import ProjectContext
from .templates import TemplateRenderer, default_renderer

ESLINT_DEV_DEPENDENCIES: dict[str, str] = {
    "eslint": "^9.31.0",
    "@eslint/js": "^9.31.0",
}

# eslint.config.ts is loaded through jiti
ESLINT_TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {
    "typescript-eslint": "^8.36.0",
    "jiti": "^2.4.2",
}

PRETTIER_DEV_DEPENDENCIES: dict[str, str] = {
    "prettier": "^3.6.2",
    "eslint-config-prettier": "^10.1.5",
}

BIOME_DEV_DEPENDENCIES: dict[str, str] = {"@biomejs/biome": "2.1.1"}


class CodeQualityGenerator:
    """Adds the selected linter/formatter."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or default_renderer()

    @staticmethod
    def applies(config: Any) -> bool:
        return config.code_quality_tools != "none"

    def generate(self, context: ProjectContext) -> None:
        tool = context.config.code_quality_tools
        if tool in ("eslint", "eslint-prettier"):
            self._eslint(context, prettier=tool == "eslint-prettier")
        elif tool == "biome":
            self._biome(context)

    def _eslint(self, context: ProjectContext, *, prettier: bool) -> None:
        config = context.config
        package_json = context.package_json

        package_json.add_dev_dependencies(ESLINT_DEV_DEPENDENCIES)
        if config.is_typescript:
            package_json.add_dev_dependencies(ESLINT_TYPESCRIPT_DEV_DEPENDENCIES)
        package_json.add_scripts({"lint": "eslint .", "lint:fix": "eslint . --fix"})

        if prettier:
            package_json.add_dev_dependencies(PRETTIER_DEV_DEPENDENCIES)
            package_json.add_scripts({"format": "prettier --write ."})

        if config.code_quality_config:
            context.files[f"eslint.config{context.file_extension}"] = self.renderer.render(
                "quality/eslint.config.j2",
                {"typescript": config.is_typescript, "prettier": prettier},
            )
            if prettier:
                context.files[".prettierrc"] = self.renderer.render("quality/prettierrc.j2")

    def _biome(self, context: ProjectContext) -> None:
        context.package_json.add_dev_dependencies(BIOME_DEV_DEPENDENCIES)
        context.package_json.add_scripts({
            "lint": "biome lint .",
            "format": "biome format --write .",
            "check": "biome check --write .",
        })
        if context.config.code_quality_config:
            context.files["biome.json"] = self.renderer.render("quality/biome.json.j2")
