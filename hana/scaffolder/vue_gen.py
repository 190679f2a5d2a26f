"""Vue 3 project generation.

Mirrors the React generator: single-file components are written directly,
while the entry file is assembled through the main editor.  Its base template
creates the app, renders the editor's registration statements (e.g.
``app.use(router)``), and only then mounts it.
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

VUE_DEPENDENCIES: dict[str, str] = {"vue": "^3.5.17"}

VUE_TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {
    "typescript": TYPESCRIPT_VERSION,
    "vue-tsc": "^3.0.1",
}

VUE_VITE_DEV_DEPENDENCIES: dict[str, str] = {
    "vite": VITE_VERSION,
    "@vitejs/plugin-vue": "^6.0.0",
}


class VueGenerator:
    """Generates a Vue 3 project skeleton."""

    description = "A Vue project"

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or default_renderer()

    def generate(self, context: ProjectContext) -> None:
        config = expect_project_type(context.config, "vue")
        main_editor = context.require_editor(MainEditor.target)
        vite_editor = (
            context.require_editor(ViteConfigEditor.target)
            if config.build_tool == "vite"
            else None
        )
        template_ctx = {
            "typescript": config.is_typescript,
            "router": config.routing_library == "vue-router",
        }

        if vite_editor is not None:
            vite_editor.add_import("import vue from '@vitejs/plugin-vue'")
            vite_editor.add_plugin("vue()")

        context.files["src/app.vue"] = self.renderer.render("vue/app.vue.j2", template_ctx)
        context.files["src/components/counter.vue"] = self.renderer.render(
            "vue/counter.vue.j2", template_ctx
        )

        main_editor.add_import("import { createApp } from 'vue'")
        main_editor.add_import("import App from './app.vue'")

        if config.is_typescript:
            context.files["src/vite-env.d.ts"] = generate_vite_env_file()
            context.files["tsconfig.json"] = render_tsconfig(
                self.renderer,
                dom=True,
                bundler=True,
                jsx="preserve",
                include=["src/**/*.ts", "src/**/*.vue"],
            )

        context.files["public/favicon.svg"] = generate_hana_logo()
        context.files["index.html"] = generate_html_template(
            "vue project", f"/{main_editor.path}", mount_id="app"
        )
        write_readme_and_gitignore(context, self.description)

        package_json = context.package_json
        set_manifest_basics(context, self.description)
        package_json.type = "module"
        package_json.add_dependencies(VUE_DEPENDENCIES)
        if config.is_typescript:
            package_json.add_dev_dependencies(VUE_TYPESCRIPT_DEV_DEPENDENCIES)
        if vite_editor is not None:
            package_json.add_dev_dependencies(VUE_VITE_DEV_DEPENDENCIES)
            package_json.add_scripts({
                "dev": "vite",
                "build": "vue-tsc --noEmit && vite build" if config.is_typescript else "vite build",
                "preview": "vite preview",
            })
