"""CSS framework and CSS preprocessor generation for React and Vue projects.

With Vite selected, the CSS framework registers its Vite plugin and adds its
stylesheet import to the entry file through the shared editors.  Without a
build tool only the dev dependency is added.
"""

from __future__ import annotations

from typing import Any

from .base import FRONTEND_PROJECT_TYPES, expect_project_type
from .context import ProjectContext
from .editor import MainEditor, ViteConfigEditor
from .templates import TemplateRenderer, default_renderer

TAILWIND_VERSION = "^4.1.11"
UNOCSS_VERSION = "^66.3.3"

PREPROCESSOR_DEV_DEPENDENCIES: dict[str, dict[str, str]] = {
    "less": {"less": "^4.3.0"},
    "scss": {"sass": "^1.89.2"},
}


class CssFrameworkGenerator:
    """Adds Tailwind CSS or UnoCSS."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or default_renderer()

    @staticmethod
    def applies(config: Any) -> bool:
        return config.project_type in FRONTEND_PROJECT_TYPES and config.css_framework != "none"

    def generate(self, context: ProjectContext) -> None:
        config = expect_project_type(context.config, *FRONTEND_PROJECT_TYPES)

        if config.css_framework == "tailwindcss":
            self._tailwindcss(context, vite=config.build_tool == "vite")
        elif config.css_framework == "unocss":
            self._unocss(context, vite=config.build_tool == "vite")

    def _tailwindcss(self, context: ProjectContext, *, vite: bool) -> None:
        if not vite:
            context.package_json.add_dev_dependencies({"tailwindcss": TAILWIND_VERSION})
            return

        vite_editor = context.require_editor(ViteConfigEditor.target)
        main_editor = context.require_editor(MainEditor.target)

        context.package_json.add_dev_dependencies({
            "tailwindcss": TAILWIND_VERSION,
            "@tailwindcss/vite": TAILWIND_VERSION,
        })
        context.files["src/styles/global.css"] = '@import "tailwindcss";'
        vite_editor.add_import("import tailwindcss from '@tailwindcss/vite'")
        vite_editor.add_plugin("tailwindcss()")
        main_editor.add_import("import './styles/global.css'")

    def _unocss(self, context: ProjectContext, *, vite: bool) -> None:
        if not vite:
            context.package_json.add_dev_dependencies({"unocss": UNOCSS_VERSION})
            return

        vite_editor = context.require_editor(ViteConfigEditor.target)
        main_editor = context.require_editor(MainEditor.target)

        context.package_json.add_dev_dependencies({"unocss": UNOCSS_VERSION})
        context.files[f"uno.config{context.file_extension}"] = self.renderer.render(
            "unocss/uno.config.j2"
        )
        vite_editor.add_import("import UnoCSS from 'unocss/vite'")
        vite_editor.add_plugin("UnoCSS()")
        main_editor.add_import("import 'virtual:uno.css'")


class CssPreprocessorGenerator:
    """Adds the Less or Sass compiler; Vite picks either up without a plugin."""

    @staticmethod
    def applies(config: Any) -> bool:
        return config.project_type in FRONTEND_PROJECT_TYPES and config.css_preprocessor is not None

    def generate(self, context: ProjectContext) -> None:
        config = expect_project_type(context.config, *FRONTEND_PROJECT_TYPES)
        packages = PREPROCESSOR_DEV_DEPENDENCIES.get(config.css_preprocessor)
        if packages:
            context.package_json.add_dev_dependencies(packages)
