"""Asynchronous external-process execution.

Runs the package-manager commands a generator plans (``npm install``,
``npm run sass:build``) and launches the editor on a freshly generated project.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """Raised when a command exits non-zero or cannot be started."""

    def __init__(self, command: str, returncode: int, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed ({returncode}): {command}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)


def _display(cmd: str | list[str]) -> str:
    return cmd if isinstance(cmd, str) else " ".join(cmd)


async def run_command(
    cmd: str | list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously, capturing its output.

    Args:
        cmd: Shell command string or list of arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits until the process exits.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.
    """
    logger.debug("running %s (cwd=%s)", _display(cmd), cwd)
    if isinstance(cmd, list):
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd) if cwd else None,
        )
    else:
        process = await asyncio.create_subprocess_shell(
            cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd) if cwd else None,
        )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {_display(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


async def run_checked(
    cmd: str | list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
) -> str:
    """Run *cmd* and return its stdout, raising ``CommandError`` on failure."""
    try:
        returncode, stdout, stderr = await run_command(cmd, cwd=cwd, timeout=timeout)
    except OSError as exc:
        raise CommandError(_display(cmd), 127, str(exc)) from exc
    if returncode != 0:
        raise CommandError(_display(cmd), returncode, stderr)
    return stdout


async def open_in_editor(path: Path, editor: str = "code") -> bool:
    """Open *path* in *editor*; return ``False`` if it could not be launched."""
    try:
        await run_checked([editor, str(path)], timeout=30)
    except CommandError as exc:
        logger.debug("could not open %s with %s: %s", path, editor, exc)
        return False
    return True
