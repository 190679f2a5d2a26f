"""Exception hierarchy for project generation.

Validation errors abort the whole generation pass; programmer errors flag a
misconfigured template or editor.  Nothing here is retried.
"""

from __future__ import annotations

from pathlib import Path


class HanaError(Exception):
    """Base class for every error raised by create-hana."""


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class InvalidProjectTypeError(HanaError):
    """Raised when a generator is invoked against the wrong ``project_type``."""

    def __init__(self, project_type: str | None, expected: tuple[str | None, ...]) -> None:
        self.project_type = project_type
        self.expected = expected
        super().__init__(
            f"Invalid project type: {project_type!r} "
            f"(expected {' or '.join(repr(e) for e in expected)})"
        )


class MissingEditorError(HanaError):
    """Raised when a feature needs an editor the active config did not create."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"No editor registered for target {target!r}")


# ---------------------------------------------------------------------------
# Programmer / configuration errors
# ---------------------------------------------------------------------------


class TemplateMarkerError(HanaError):
    """Raised when a base template lacks the editor's insertion markers."""

    def __init__(self, target: str, missing: list[str]) -> None:
        self.target = target
        self.missing = missing
        super().__init__(
            f"Template for {target!r} is missing insertion marker(s): "
            + ", ".join(f"{{{{ {m} }}}}" for m in missing)
        )


class EditorFrozenError(HanaError):
    """Raised when fragments are added to an editor that was already rendered."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Editor {target!r} has already been rendered")


# ---------------------------------------------------------------------------
# Writer errors
# ---------------------------------------------------------------------------


class ProjectDirectoryExistsError(HanaError):
    """Raised when the target directory is non-empty and removal was not requested."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Target directory is not empty: {path}")
