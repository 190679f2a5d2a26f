"""Persist a generated ``ProjectContext`` to disk.

Runs once, after generation has finished: prepares the target directory,
writes every file plus ``package.json``, then optionally initialises a git
repository and installs dependencies.  A failing git or install step is
reported as a warning; the written project is left in place.
"""

from __future__ import annotations

import asyncio
import json
import shutil
from pathlib import Path

from hana.config import get_package_manager
from hana.errors import ProjectDirectoryExistsError
from hana.scaffolder.context import ProjectContext
from hana.utils import console, describe_command, print_step, print_warning, run_command

INSTALL_TIMEOUT = 600


async def write_project(context: ProjectContext) -> list[Path]:
    """Write the context's files and manifest under ``context.project_dir``.

    Args:
        context: A fully generated (and rendered) project context.

    Returns:
        Every written file path, ``package.json`` last.

    Raises:
        ProjectDirectoryExistsError: The directory exists, is not empty, and
            ``config.remove_exist_folder`` is not set.
    """
    config = context.config
    project_dir = context.project_dir

    await asyncio.to_thread(_prepare_directory, project_dir, config.remove_exist_folder)

    written: list[Path] = []
    for relative_path, content in context.files.items():
        out = project_dir / relative_path
        await asyncio.to_thread(_write_file, out, content)
        written.append(out)

    manifest = project_dir / "package.json"
    await asyncio.to_thread(_write_file, manifest, render_package_json(context))
    written.append(manifest)

    if config.git:
        await _git_init(project_dir)
    if config.install_deps:
        await _install_dependencies(project_dir, config.pkg_manager)

    return written


def render_package_json(context: ProjectContext) -> str:
    """Serialise the manifest the way npm writes it (2-space indent, trailing newline)."""
    return json.dumps(context.package_json.to_dict(), indent=2, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# Post-write steps
# ---------------------------------------------------------------------------


async def _git_init(project_dir: Path) -> bool:
    result = await run_command(["git", "init"], cwd=project_dir)
    if not result.ok:
        print_warning(f"  git init failed: {result.reason()}")
        return False
    print_step("Initialised git repository")
    return True


async def _install_dependencies(project_dir: Path, pkg_manager: str) -> bool:
    manager = get_package_manager(pkg_manager)
    cmd = manager.install_command()
    console.print(f"  Installing dependencies with [bold]{describe_command(cmd)}[/bold]...")
    result = await run_command(cmd, cwd=project_dir, timeout=INSTALL_TIMEOUT)
    if not result.ok:
        print_warning(f"  {manager.name} install failed: {result.reason()}")
        return False
    print_step(f"Dependencies installed ({manager.lock_file})")
    return True


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _prepare_directory(project_dir: Path, remove_existing: bool) -> None:
    """Create *project_dir*, emptying it first when asked to.

    The directory itself is kept, so ``--force`` on ``.`` clears the
    working directory's contents without deleting the directory.
    """
    if project_dir.exists() and any(project_dir.iterdir()):
        if not remove_existing:
            raise ProjectDirectoryExistsError(project_dir)
        for entry in project_dir.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
    project_dir.mkdir(parents=True, exist_ok=True)


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
