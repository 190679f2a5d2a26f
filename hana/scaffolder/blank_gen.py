"""Generation for a project with no project type selected."""

from __future__ import annotations

from .base import expect_project_type, write_readme_and_gitignore
from .context import ProjectContext


class BlankGenerator:
    """Writes only the README, ``.gitignore`` and manifest basics."""

    description = "A blank project"

    def generate(self, context: ProjectContext) -> None:
        expect_project_type(context.config, None)
        write_readme_and_gitignore(context, self.description)

        package_json = context.package_json
        package_json.name = context.config.project_name
        package_json.description = self.description
        package_json.version = "1.0.0"
        package_json.license = "MIT"
