"""create-hana scaffolder -- builds a project's files in memory.

Takes a resolved ``Config`` and produces a ``ProjectContext`` whose ``files``
map and ``package_json`` model describe the complete project.  Shared target
files (the Vite config, the entry file) are assembled from fragments through
``SourceEditor`` instances and rendered once every generator has run.

Quick usage::

    from hana.scaffolder import ProjectGenerator

    context = ProjectGenerator(
        {"project_type": "react", "language": "typescript", "css_framework": "tailwindcss"}
    ).generate()
    context.files["vite.config.ts"]
"""

from hana.scaffolder.context import PackageJsonConfig, ProjectContext
from hana.scaffolder.editor import MainEditor, SourceEditor, ViteConfigEditor
from hana.scaffolder.generator import ProjectGenerator, generate_project
from hana.scaffolder.templates import TemplateRenderer

__all__ = [
    "MainEditor",
    "PackageJsonConfig",
    "ProjectContext",
    "ProjectGenerator",
    "SourceEditor",
    "TemplateRenderer",
    "ViteConfigEditor",
    "generate_project",
]
