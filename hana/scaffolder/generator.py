"""Main scaffolding orchestrator.

Takes a resolved ``Config`` and runs one generation pass:

1. Build the ``ProjectContext`` with one editor per shared target file the
   config needs (the entry file for React/Vue, the Vite config when Vite is
   the build tool).
2. Run the project-type generator.
3. Run the optional-feature generators in a fixed order: CSS framework, CSS
   preprocessor, routing library, code quality.
4. Render every editor into the file map.

The order decides the order of imports, plugins and dependency entries in
the output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from hana.config import CommonConfig, Config, resolve_config

from .base import FRONTEND_PROJECT_TYPES
from .blank_gen import BlankGenerator
from .context import Generator, ProjectContext
from .css_gen import CssFrameworkGenerator, CssPreprocessorGenerator
from .editor import MainEditor, ViteConfigEditor
from .node_gen import NodeGenerator
from .quality_gen import CodeQualityGenerator
from .react_gen import ReactGenerator
from .routing_gen import RoutingGenerator
from .templates import TemplateRenderer, default_renderer, get_file_extension
from .vue_gen import VueGenerator

# project_type -> (entry file path suffix, main editor base template)
_MAIN_ENTRY: dict[str, tuple[str, str]] = {
    "react": ("x", "react/main.j2"),
    "vue": ("", "vue/main.j2"),
}

VITE_CONFIG_TEMPLATE = "vite.config.j2"


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``Config``, produces a ``ProjectContext`` containing:
    - the complete in-memory file map (relative path -> contents)
    - the populated ``package.json`` model
    - the (already rendered) editors for the shared target files

    Nothing is written to disk; see :func:`hana.writer.write_project`.
    """

    def __init__(
        self,
        config: Config | dict[str, Any],
        cwd: str | Path | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = resolve_config(config)
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.renderer = renderer or default_renderer()
        self.project_generator = self._project_generator_for(self.config)
        self.feature_generators = [
            CssFrameworkGenerator(self.renderer),
            CssPreprocessorGenerator(),
            RoutingGenerator(self.renderer),
            CodeQualityGenerator(self.renderer),
        ]

    # -- Public API --------------------------------------------------------

    def generate(self) -> ProjectContext:
        """Run one complete generation pass and return the finished context."""
        context = self._build_context()

        # 1. Project type
        self.project_generator.generate(context)

        # 2. Optional features, in declared order
        for feature in self.feature_generators:
            if feature.applies(context.config):
                feature.generate(context)

        # 3. Serialise the shared target files
        self._render_editors(context)

        return context

    # -- Context building --------------------------------------------------

    def _build_context(self) -> ProjectContext:
        config = self.config
        file_extension = get_file_extension(config.language)
        context = ProjectContext(
            config=config,
            project_dir=self.cwd / config.project_name,
            cwd=self.cwd,
            file_extension=file_extension,
        )

        if config.project_type in FRONTEND_PROJECT_TYPES:
            suffix, template = _MAIN_ENTRY[config.project_type]
            context.add_editor(MainEditor(f"src/main{file_extension}{suffix}", template))

            if config.build_tool == "vite":
                vite_editor = context.add_editor(
                    ViteConfigEditor(f"vite.config{file_extension}", VITE_CONFIG_TEMPLATE)
                )
                vite_editor.add_import("import { defineConfig } from 'vite'")

        return context

    def _render_editors(self, context: ProjectContext) -> None:
        for editor in context.editors.values():
            base_template = self.renderer.get_source(editor.template)
            context.files[editor.path] = editor.render(base_template)

    # -- Generator selection -----------------------------------------------

    def _project_generator_for(self, config: CommonConfig) -> Generator:
        if config.project_type == "react":
            return ReactGenerator(self.renderer)
        if config.project_type == "vue":
            return VueGenerator(self.renderer)
        if config.project_type == "node":
            return NodeGenerator(self.renderer)
        return BlankGenerator()


def generate_project(
    config: Config | dict[str, Any],
    cwd: str | Path | None = None,
) -> ProjectContext:
    """Convenience wrapper: ``ProjectGenerator(config, cwd).generate()``."""
    return ProjectGenerator(config, cwd).generate()
