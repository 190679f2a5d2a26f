"""Routing library generation.

React routers are wired up inside ``App`` by the React generator; this module
only writes the router module, a default home page, and the dependency.  Vue
Router is registered on the app instance through the main editor instead.
"""

from __future__ import annotations

from typing import Any

from .base import FRONTEND_PROJECT_TYPES, expect_project_type
from .context import ProjectContext
from .editor import MainEditor
from .templates import TemplateRenderer, default_renderer

# routing_library -> (dependencies, router template)
REACT_ROUTERS: dict[str, tuple[dict[str, str], str]] = {
    "react-router": ({"react-router": "^7.6.3"}, "routing/react-router.j2"),
    "tanstack-router": ({"@tanstack/react-router": "^1.125.6"}, "routing/tanstack-router.j2"),
    "wouter": ({"wouter": "^3.7.1"}, "routing/wouter.j2"),
}

VUE_ROUTER_DEPENDENCIES: dict[str, str] = {"vue-router": "^4.5.1"}


class RoutingGenerator:
    """Adds the selected routing library to a React or Vue project."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or default_renderer()

    @staticmethod
    def applies(config: Any) -> bool:
        return config.project_type in FRONTEND_PROJECT_TYPES and config.routing_library is not None

    def generate(self, context: ProjectContext) -> None:
        config = expect_project_type(context.config, *FRONTEND_PROJECT_TYPES)
        if config.project_type == "react":
            self._react(context, config.routing_library)
        else:
            self._vue(context)

    def _react(self, context: ProjectContext, routing_library: str) -> None:
        dependencies, template = REACT_ROUTERS[routing_library]
        ext = context.file_extension

        context.package_json.add_dependencies(dependencies)
        context.files[f"src/router/index{ext}x"] = self.renderer.render(
            template, {"typescript": context.config.is_typescript}
        )
        context.files[f"src/pages/home/index{ext}x"] = self.renderer.render("routing/react-home.j2")

    def _vue(self, context: ProjectContext) -> None:
        main_editor = context.require_editor(MainEditor.target)

        context.package_json.add_dependencies(VUE_ROUTER_DEPENDENCIES)
        context.files[f"src/router/index{context.file_extension}"] = self.renderer.render(
            "routing/vue-router.j2"
        )
        context.files["src/pages/home.vue"] = self.renderer.render("routing/vue-home.j2")
        main_editor.add_import("import router from './router'")
        main_editor.add_plugin("app.use(router)")
