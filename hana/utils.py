"""Console output and subprocess helpers for create-hana.

Generation itself never prints; only the writer and the CLI talk to the
console, always through the helpers below.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import NamedTuple

from rich.console import Console
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Subprocesses
# ---------------------------------------------------------------------------


class CommandResult(NamedTuple):
    """Outcome of :func:`run_command`; unpacks as ``(returncode, stdout, stderr)``."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def reason(self) -> str:
        """Short failure description for a warning line."""
        return self.stderr or f"exit code {self.returncode}"


def describe_command(cmd: str | list[str]) -> str:
    return cmd if isinstance(cmd, str) else " ".join(cmd)


async def run_command(
    cmd: str | list[str],
    cwd: str | Path | None = None,
    timeout: float = 300,
    env: dict[str, str] | None = None,
) -> CommandResult:
    """Run *cmd* in a child process and capture its output.

    Args:
        cmd: Argument list (run directly) or a string (run through the shell).
        cwd: Working directory for the child process.
        timeout: Seconds to wait before the process is killed.
        env: Extra environment variables layered over ``os.environ``.

    Returns:
        A ``CommandResult`` with stripped, UTF-8 decoded output.  A missing
        executable yields return code ``127``; a timeout yields ``-1``.
    """
    spawn_kwargs = {
        "stdout": asyncio.subprocess.PIPE,
        "stderr": asyncio.subprocess.PIPE,
        "cwd": str(cwd) if cwd else None,
        "env": {**os.environ, **env} if env else None,
    }

    try:
        if isinstance(cmd, str):
            process = await asyncio.create_subprocess_shell(cmd, **spawn_kwargs)
        else:
            process = await asyncio.create_subprocess_exec(*cmd, **spawn_kwargs)
    except FileNotFoundError as exc:
        return CommandResult(127, "", str(exc))

    try:
        out, err = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return CommandResult(-1, "", f"Command timed out after {timeout}s: {describe_command(cmd)}")

    return CommandResult(
        process.returncode or 0,
        out.decode("utf-8", errors="replace").strip(),
        err.decode("utf-8", errors="replace").strip(),
    )


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Human-readable elapsed time: ``"250ms"``, ``"3.7s"``, ``"1m 5s"``."""
    if seconds < 1:
        return f"{max(int(seconds * 1000), 0)}ms"
    minutes, secs = divmod(seconds, 60)
    if minutes:
        return f"{int(minutes)}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------


def print_summary_table(rows: dict[str, str], title: str = "create-hana") -> None:
    """Print *rows* as a two-column table followed by a blank line."""
    table = Table(title=title, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")
    for label, value in rows.items():
        table.add_row(label, str(value))
    console.print(table)
    console.print()


def print_step(message: str) -> None:
    """One completed post-write step, e.g. ``+ Initialised git repository``."""
    console.print(f"  [green]+[/green] {message}")


def print_success(message: str) -> None:
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    console.print(f"[bold yellow]{message}[/bold yellow]")
