"""Answer options for every scaffolding question.

Each option list is an ordered tuple of ``Option`` pairs.  The first entry is
the default offered to the user.  The CLI derives its ``choices`` from these
tuples so the accepted values never drift from the config model's literals.
"""

from __future__ import annotations

from typing import NamedTuple


class Option(NamedTuple):
    label: str
    value: str


# ---------------------------------------------------------------------------
# Common options (every project type)
# ---------------------------------------------------------------------------

PROJECT_TYPE_OPTIONS: tuple[Option, ...] = (
    Option("React", "react"),
    Option("Vue", "vue"),
    Option("Node", "node"),
    Option("Blank", "blank"),
)

COMMON_LANGUAGE_OPTIONS: tuple[Option, ...] = (
    Option("TypeScript", "typescript"),
    Option("JavaScript", "javascript"),
)

COMMON_MANAGER_OPTIONS: tuple[Option, ...] = (
    Option("pnpm", "pnpm"),
    Option("yarn", "yarn"),
    Option("npm", "npm"),
    Option("bun", "bun"),
)

COMMON_CODE_QUALITY_TOOLS_OPTIONS: tuple[Option, ...] = (
    Option("ESLint", "eslint"),
    Option("ESLint and Prettier", "eslint-prettier"),
    Option("Biome", "biome"),
    Option("None", "none"),
)


# ---------------------------------------------------------------------------
# Frontend options (react / vue)
# ---------------------------------------------------------------------------

BUILD_TOOL_OPTIONS: tuple[Option, ...] = (
    Option("Vite", "vite"),
    Option("None", "none"),
)

CSS_FRAMEWORK_OPTIONS: tuple[Option, ...] = (
    Option("Tailwind CSS", "tailwindcss"),
    Option("UnoCSS", "unocss"),
    Option("None", "none"),
)

CSS_PREPROCESSOR_OPTIONS: tuple[Option, ...] = (
    Option("Less", "less"),
    Option("Sass (SCSS)", "scss"),
)

REACT_ROUTING_LIBRARY_OPTIONS: tuple[Option, ...] = (
    Option("React Router", "react-router"),
    Option("TanStack Router", "tanstack-router"),
    Option("Wouter", "wouter"),
)

VUE_ROUTING_LIBRARY_OPTIONS: tuple[Option, ...] = (
    Option("Vue Router", "vue-router"),
)


# ---------------------------------------------------------------------------
# Node options
# ---------------------------------------------------------------------------

NODE_FRAMEWORK_OPTIONS: tuple[Option, ...] = (
    Option("None", "none"),
    Option("Express", "express"),
)


def option_values(options: tuple[Option, ...]) -> list[str]:
    """Return the raw ``value`` of every option, preserving order."""
    return [option.value for option in options]
