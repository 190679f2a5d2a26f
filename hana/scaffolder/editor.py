"""Incremental source-file editing for shared target files.

Several generators contribute to the same few files -- the Vite config and
the application entry point.  Rather than each generator rewriting the whole
file, they add *fragments* to a ``SourceEditor``:

- ``add_import(statement)`` -- one import line.
- ``add_plugin(expression)`` -- one plugin entry / registration statement.

Both fragment lists are insertion-ordered sets: exact duplicates collapse to
the first occurrence, everything else keeps the order it was added in.  Only
exact-string matches are deduplicated; two textually different but
equivalent imports are both kept.

After every generator has run, ``render(base_template)`` substitutes the
fragments into the ``{{ imports }}`` and ``{{ body }}`` markers of the
target's Jinja2 base template.  The first render freezes the editor.
"""

from __future__ import annotations

from typing import Any, ClassVar

from jinja2 import Environment, StrictUndefined, meta

from hana.errors import EditorFrozenError, TemplateMarkerError

IMPORTS_MARKER = "imports"
BODY_MARKER = "body"

_ENV = Environment(
    undefined=StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


class SourceEditor:
    """Accumulates imports and plugin entries for one target file.

    Attributes:
        target: Key naming the logical file this editor governs.
        body_separator: How body fragments are joined, per the target's syntax.
        path: Relative output path of the rendered file.
        template: Name of the base template the orchestrator renders into.
    """

    target: ClassVar[str] = "source"
    body_separator: ClassVar[str] = "\n"

    def __init__(self, path: str, template: str) -> None:
        self.path = path
        self.template = template
        self._imports: dict[str, None] = {}
        self._plugins: dict[str, None] = {}
        self._rendered = False

    # -- Fragment accumulation ---------------------------------------------

    def add_import(self, statement: str) -> None:
        """Append an import statement unless the identical string is present."""
        self._ensure_open()
        self._imports.setdefault(statement, None)

    def add_plugin(self, expression: str) -> None:
        """Append a plugin / registration expression unless already present."""
        self._ensure_open()
        self._plugins.setdefault(expression, None)

    @property
    def imports(self) -> tuple[str, ...]:
        return tuple(self._imports)

    @property
    def plugins(self) -> tuple[str, ...]:
        return tuple(self._plugins)

    @property
    def rendered(self) -> bool:
        return self._rendered

    # -- Rendering -----------------------------------------------------------

    def render(self, base_template: str, **context: Any) -> str:
        """Render the accumulated fragments into *base_template*.

        Args:
            base_template: Jinja2 source containing both ``{{ imports }}``
                and ``{{ body }}``.
            **context: Extra template variables for the base template.  The
                fragments take precedence over ``imports`` / ``body`` keys.

        Returns:
            The final file text.  Rendering again without new fragments
            yields identical output.

        Raises:
            TemplateMarkerError: The template lacks one or both markers.
            jinja2.UndefinedError: The template uses a variable that is not
                in *context*.  The editor stays open.
        """
        declared = meta.find_undeclared_variables(_ENV.parse(base_template))
        missing = [m for m in (IMPORTS_MARKER, BODY_MARKER) if m not in declared]
        if missing:
            raise TemplateMarkerError(self.target, missing)

        text = _ENV.from_string(base_template).render(
            {
                **context,
                IMPORTS_MARKER: "\n".join(self._imports),
                BODY_MARKER: self.body_separator.join(self._plugins),
            }
        )
        self._rendered = True
        return text

    def _ensure_open(self) -> None:
        if self._rendered:
            raise EditorFrozenError(self.target)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={self.path!r}, "
            f"imports={len(self._imports)}, plugins={len(self._plugins)})"
        )


class ViteConfigEditor(SourceEditor):
    """Editor for ``vite.config.{js,ts}``; plugins render as an array literal."""

    target: ClassVar[str] = "viteConfig"
    body_separator: ClassVar[str] = ", "


class MainEditor(SourceEditor):
    """Editor for the application entry file; body entries are statements."""

    target: ClassVar[str] = "main"
    body_separator: ClassVar[str] = "\n"
