"""Shared state threaded through one generation pass.

A ``ProjectContext`` is created once by ``ProjectGenerator``, mutated by each
generator in turn, rendered, and then handed to the writer.  Generators get
the context as an argument and must not keep a reference to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hana.config import Config
from hana.errors import MissingEditorError

from .editor import MainEditor, SourceEditor, ViteConfigEditor


# ---------------------------------------------------------------------------
# package.json model
# ---------------------------------------------------------------------------


class PackageJsonConfig(BaseModel):
    """Mutable mirror of a ``package.json`` manifest.

    Dependency maps are merged into by generators; the last write for a
    package name wins and conflicting version ranges are not reported.
    """

    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    name: str = ""
    version: str = "0.0.0"
    description: str | None = None
    private: bool | None = None
    type: Literal["module", "commonjs"] | None = None
    main: str | None = None
    module: str | None = None
    types: str | None = None
    scripts: dict[str, str] | None = None
    dependencies: dict[str, str] | None = None
    dev_dependencies: dict[str, str] | None = None
    peer_dependencies: dict[str, str] | None = None
    files: list[str] | None = None
    keywords: list[str] | None = None
    author: str | None = None
    license: str | None = None
    engines: dict[str, str] | None = None
    exports: dict[str, Any] | None = None

    def add_dependencies(self, packages: dict[str, str]) -> None:
        self.dependencies = {**(self.dependencies or {}), **packages}

    def add_dev_dependencies(self, packages: dict[str, str]) -> None:
        self.dev_dependencies = {**(self.dev_dependencies or {}), **packages}

    def add_scripts(self, scripts: dict[str, str]) -> None:
        self.scripts = {**(self.scripts or {}), **scripts}

    def to_dict(self) -> dict[str, Any]:
        """Serialisable manifest with npm's camelCase keys and no unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------


@dataclass
class ProjectContext:
    """Everything one generation pass reads and writes.

    Attributes:
        config: The resolved answers.
        project_dir: Absolute directory the project will be written to.
        cwd: Directory the generation was started from.
        package_json: Manifest mutated in place by generators.
        files: Relative path -> final file contents.
        file_extension: ``.js`` or ``.ts``; generators append ``x`` for JSX.
        editors: Target key -> editor, in creation (and render) order.
    """

    config: Config
    project_dir: Path
    cwd: Path
    package_json: PackageJsonConfig = field(default_factory=PackageJsonConfig)
    files: dict[str, str] = field(default_factory=dict)
    file_extension: Literal[".js", ".ts"] = ".ts"
    editors: dict[str, SourceEditor] = field(default_factory=dict)

    def add_editor(self, editor: SourceEditor) -> SourceEditor:
        self.editors[editor.target] = editor
        return editor

    def require_editor(self, target: str) -> SourceEditor:
        """Return the editor for *target* or raise ``MissingEditorError``."""
        try:
            return self.editors[target]
        except KeyError:
            raise MissingEditorError(target) from None

    @property
    def vite_config_editor(self) -> ViteConfigEditor | None:
        return self.editors.get(ViteConfigEditor.target)  # type: ignore[return-value]

    @property
    def main_editor(self) -> MainEditor | None:
        return self.editors.get(MainEditor.target)  # type: ignore[return-value]


class Generator(Protocol):
    """A unit that maps the context's config into file and manifest mutations."""

    def generate(self, context: ProjectContext) -> None: ...
