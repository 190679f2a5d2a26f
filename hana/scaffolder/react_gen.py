"""React project generation.

Generates the React sources, the HTML shell and root files, and the
manifest.  With Vite selected it also registers ``@vitejs/plugin-react`` in the
Vite config editor.  The entry file (``src/main.{js,ts}x``) is not written
here: its imports and the ``createRoot`` call go into the main editor so that
feature generators can add their own imports before it is rendered.
"""

from __future__ import annotations

from .base import (
    TYPESCRIPT_VERSION,
    VITE_VERSION,
    expect_project_type,
    render_tsconfig,
    set_manifest_basics,
    write_readme_and_gitignore,
)
from .context import ProjectContext
from .editor import MainEditor, ViteConfigEditor
from .templates import (
    TemplateRenderer,
    default_renderer,
    generate_hana_logo,
    generate_html_template,
    generate_vite_env_file,
)

REACT_DEPENDENCIES: dict[str, str] = {
    "react": "^19.1.0",
    "react-dom": "^19.1.0",
}

REACT_TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {
    "typescript": TYPESCRIPT_VERSION,
    "@types/react": "^19.1.8",
    "@types/react-dom": "^19.1.6",
}

REACT_VITE_DEV_DEPENDENCIES: dict[str, str] = {
    "vite": VITE_VERSION,
    "@vitejs/plugin-react": "^4.6.0",
}


class ReactGenerator:
    """Generates a React project skeleton."""

    description = "A React project"

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or default_renderer()

    def generate(self, context: ProjectContext) -> None:
        config = expect_project_type(context.config, "react")
        main_editor = context.require_editor(MainEditor.target)
        vite_editor = (
            context.require_editor(ViteConfigEditor.target)
            if config.build_tool == "vite"
            else None
        )
        ext = context.file_extension

        if vite_editor is not None:
            vite_editor.add_import("import react from '@vitejs/plugin-react'")
            vite_editor.add_plugin("react()")

        # 1. Generate src directory structure
        context.files[f"src/app{ext}x"] = self.renderer.render(
            "react/app.j2", {"routing_library": config.routing_library}
        )
        context.files[f"src/components/counter{ext}x"] = self.renderer.render("react/counter.j2")

        main_editor.add_import("import { createRoot } from 'react-dom/client'")
        main_editor.add_import("import App from './app'")
        non_null = "!" if config.is_typescript else ""
        main_editor.add_plugin(
            f"createRoot(document.getElementById('root'){non_null}).render(<App />)"
        )

        if config.is_typescript:
            context.files["src/vite-env.d.ts"] = generate_vite_env_file()
            context.files["tsconfig.json"] = render_tsconfig(
                self.renderer, dom=True, bundler=True, jsx="react-jsx", include=["src"]
            )

        # 2. Generate root files
        context.files["public/favicon.svg"] = generate_hana_logo()
        context.files["index.html"] = generate_html_template(
            "react project", f"/{main_editor.path}", mount_id="root"
        )
        write_readme_and_gitignore(context, self.description)

        # 3. Modify package.json
        package_json = context.package_json
        set_manifest_basics(context, self.description)
        package_json.type = "module"
        package_json.add_dependencies(REACT_DEPENDENCIES)
        if config.is_typescript:
            package_json.add_dev_dependencies(REACT_TYPESCRIPT_DEV_DEPENDENCIES)
        if vite_editor is not None:
            package_json.add_dev_dependencies(REACT_VITE_DEV_DEPENDENCIES)
            package_json.add_scripts({
                "dev": "vite",
                "build": "tsc --noEmit && vite build" if config.is_typescript else "vite build",
                "preview": "vite preview",
            })
