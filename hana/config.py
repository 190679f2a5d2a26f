"""create-hana configuration.

Typed description of a resolved set of scaffolding answers.  ``Config`` is a
discriminated union keyed by ``project_type``: every variant is a frozen
Pydantic v2 model that forbids unknown keys, so a field belonging to one
project type is rejected outright when another project type is selected.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    field_validator,
)
from pydantic.alias_generators import to_camel, to_snake

DEFAULT_PROJECT_NAME = "hana-project"

Language = Literal["typescript", "javascript"]
PackageManagerName = Literal["pnpm", "yarn", "npm", "bun"]
CodeQualityTool = Literal["eslint", "eslint-prettier", "biome", "none"]
BuildTool = Literal["vite", "none"]
CssFramework = Literal["tailwindcss", "unocss", "none"]
CssPreprocessor = Literal["less", "scss"]
ReactRoutingLibrary = Literal["react-router", "tanstack-router", "wouter"]
VueRoutingLibrary = Literal["vue-router"]
NodeFramework = Literal["none", "express"]


# ---------------------------------------------------------------------------
# Common fields
# ---------------------------------------------------------------------------


class CommonConfig(BaseModel):
    """Answers shared by every project type.

    Keys may be given in snake_case or in the camelCase spelling used by the
    interactive prompts (``targetDir``, ``pkgManager``, ...).
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    target_dir: str | None = Field(default=None, description="Project directory, relative to cwd")
    remove_exist_folder: bool = Field(
        default=False, description="Delete a non-empty target directory before writing"
    )
    git: bool = Field(default=False, description="Run `git init` after writing")
    install_deps: bool = Field(default=False, description="Install dependencies after writing")
    language: Language = Field(default="typescript")
    pkg_manager: PackageManagerName = Field(default="pnpm")
    code_quality_tools: CodeQualityTool = Field(default="none")
    code_quality_config: bool = Field(
        default=False, description="Also write the linter/formatter config file"
    )

    @property
    def project_name(self) -> str:
        """Name used for the manifest and the README heading."""
        return self.target_dir or DEFAULT_PROJECT_NAME

    @property
    def is_typescript(self) -> bool:
        return self.language == "typescript"


# ---------------------------------------------------------------------------
# Per-project-type variants
# ---------------------------------------------------------------------------


class BlankProjectConfig(CommonConfig):
    """No project type selected: manifest, README and gitignore only."""

    project_type: None = None

    @field_validator("project_type", mode="before")
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        return None if value == "blank" else value


class NodeProjectConfig(CommonConfig):
    project_type: Literal["node"] = "node"
    node_framework: NodeFramework = Field(default="none")


class ReactProjectConfig(CommonConfig):
    project_type: Literal["react"] = "react"
    build_tool: BuildTool = Field(default="vite")
    css_framework: CssFramework = Field(default="none")
    css_preprocessor: CssPreprocessor | None = Field(default=None)
    routing_library: ReactRoutingLibrary | None = Field(default=None)


class VueProjectConfig(CommonConfig):
    project_type: Literal["vue"] = "vue"
    build_tool: BuildTool = Field(default="vite")
    css_framework: CssFramework = Field(default="none")
    css_preprocessor: CssPreprocessor | None = Field(default=None)
    routing_library: VueRoutingLibrary | None = Field(default=None)


FrontendProjectConfig = Union[ReactProjectConfig, VueProjectConfig]


def _project_type_tag(value: Any) -> str:
    """Pick the union member from a raw mapping or an existing model."""
    if isinstance(value, dict):
        project_type = value.get("project_type", value.get("projectType"))
    else:
        project_type = getattr(value, "project_type", None)
    return project_type or "blank"


Config = Annotated[
    Union[
        Annotated[BlankProjectConfig, Tag("blank")],
        Annotated[NodeProjectConfig, Tag("node")],
        Annotated[ReactProjectConfig, Tag("react")],
        Annotated[VueProjectConfig, Tag("vue")],
    ],
    Discriminator(_project_type_tag),
]

_CONFIG_ADAPTER: TypeAdapter[Config] = TypeAdapter(Config)


def resolve_config(raw: dict[str, Any] | CommonConfig) -> Config:
    """Validate raw answers into the matching ``Config`` variant.

    Args:
        raw: Answer mapping (snake_case or camelCase keys) or an already
            resolved config, which is returned unchanged.

    Raises:
        pydantic.ValidationError: Unknown project type, an invalid option
            value, or a field that belongs to a different project type.
    """
    if isinstance(raw, CommonConfig):
        return raw
    return _CONFIG_ADAPTER.validate_python(raw)


_ANSWERS_ADAPTER: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])


def load_answers(path: str | Path) -> dict[str, Any]:
    """Read a JSON answers file into a mapping with snake_case keys.

    camelCase keys (``projectType``, ``cssFramework``, ...) are renamed so
    that callers can merge further answers under the field names.

    Raises:
        OSError: The file cannot be read.
        pydantic.ValidationError: The file is not a JSON object.
    """
    raw = _ANSWERS_ADAPTER.validate_json(Path(path).read_text(encoding="utf-8"))
    return {to_snake(key): value for key, value in raw.items()}


def load_config(path: str | Path) -> Config:
    """Load previously-saved answers from a JSON file."""
    return resolve_config(load_answers(path))


# ---------------------------------------------------------------------------
# Package managers
# ---------------------------------------------------------------------------


class PackageManager(BaseModel):
    """How to drive one JavaScript package manager."""

    model_config = ConfigDict(frozen=True)

    name: str
    command: str
    install_args: list[str] = Field(default_factory=lambda: ["install"])
    lock_file: str
    run_prefix: str = Field(description="Prefix for running a package.json script")

    def install_command(self) -> list[str]:
        return [self.command, *self.install_args]

    def run(self, script: str) -> str:
        """Return the shell command that runs *script* (e.g. ``npm run dev``)."""
        return f"{self.run_prefix} {script}"


PACKAGE_MANAGERS: dict[str, PackageManager] = {
    "pnpm": PackageManager(name="pnpm", command="pnpm", lock_file="pnpm-lock.yaml", run_prefix="pnpm"),
    "yarn": PackageManager(
        name="yarn", command="yarn", install_args=[], lock_file="yarn.lock", run_prefix="yarn"
    ),
    "npm": PackageManager(name="npm", command="npm", lock_file="package-lock.json", run_prefix="npm run"),
    "bun": PackageManager(name="bun", command="bun", lock_file="bun.lock", run_prefix="bun run"),
}


def get_package_manager(name: str) -> PackageManager:
    return PACKAGE_MANAGERS[name]
