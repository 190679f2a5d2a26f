"""Node project generation (plain script or Express server)."""

from __future__ import annotations

from .base import (
    TYPESCRIPT_VERSION,
    expect_project_type,
    render_tsconfig,
    set_manifest_basics,
    write_readme_and_gitignore,
)
from .context import ProjectContext
from .templates import TemplateRenderer, default_renderer

NODE_TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {
    "typescript": TYPESCRIPT_VERSION,
    "tsx": "^4.20.3",
    "@types/node": "^24.0.13",
}

EXPRESS_DEPENDENCIES: dict[str, str] = {"express": "^5.1.0"}
EXPRESS_TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {"@types/express": "^5.0.3"}


class NodeGenerator:
    """Generates a Node.js project skeleton."""

    description = "A Node project"

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or default_renderer()

    def generate(self, context: ProjectContext) -> None:
        config = expect_project_type(context.config, "node")
        entry = f"src/index{context.file_extension}"
        express = config.node_framework == "express"

        context.files[entry] = self.renderer.render(
            "node/index.j2",
            {"framework": config.node_framework, "typescript": config.is_typescript},
        )
        if config.is_typescript:
            context.files["tsconfig.json"] = render_tsconfig(
                self.renderer, dom=False, bundler=False, include=["src"]
            )
        write_readme_and_gitignore(context, self.description)

        package_json = context.package_json
        set_manifest_basics(context, self.description)
        package_json.type = "module"
        if config.is_typescript:
            package_json.main = "dist/index.js"
            package_json.add_scripts({
                "dev": f"tsx watch {entry}",
                "build": "tsc",
                "start": "node dist/index.js",
            })
            package_json.add_dev_dependencies(NODE_TYPESCRIPT_DEV_DEPENDENCIES)
        else:
            package_json.main = entry
            package_json.add_scripts({
                "dev": f"node --watch {entry}",
                "start": f"node {entry}",
            })

        if express:
            package_json.add_dependencies(EXPRESS_DEPENDENCIES)
            if config.is_typescript:
                package_json.add_dev_dependencies(EXPRESS_TYPESCRIPT_DEV_DEPENDENCIES)
