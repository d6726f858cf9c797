"""Python version resolution for the project being containerized."""

from __future__ import annotations

import logging
import platform
import re
import subprocess
from pathlib import Path, PurePosixPath
from typing import Protocol

from containerize_py.errors import InterpreterError
from containerize_py.models import VENV_DIR_NAMES

logger = logging.getLogger(__name__)

SYSTEM_PYTHON = "python"

_VERSION_RE = re.compile(r"\d+\.\d+\.\d+(?:(?:a|b|rc)\d+)?")


class CommandRunner(Protocol):
    """Protocol for running an interpreter and capturing its output."""

    def run(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        """Run a command, returning stdout and stderr merged into ``stdout``."""
        ...


class SubprocessRunner:
    """Subprocess-backed command runner.

    No timeout is applied: a hung interpreter hangs the caller.
    """

    def run(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        """Run a command with stderr folded into stdout."""
        try:
            return subprocess.run(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as exc:
            raise InterpreterError(
                command=args,
                reason="non-zero exit status",
                returncode=exc.returncode,
                output=exc.stdout or "",
            ) from exc
        except OSError as exc:
            raise InterpreterError(command=args, reason=str(exc)) from exc


def interpreter_suffix(system: str) -> PurePosixPath:
    """Return the interpreter location inside a virtual environment.

    ``system`` is a ``platform.system()`` value.
    """
    if system == "Windows":
        return PurePosixPath("Scripts", "python.exe")
    return PurePosixPath("bin", "python")


def find_venv_interpreter(source_dir: Path, system: str | None = None) -> Path | None:
    """Return the interpreter of the first virtual environment found, if any."""
    suffix = interpreter_suffix(system or platform.system())
    for name in VENV_DIR_NAMES:
        candidate = source_dir.joinpath(name, *suffix.parts)
        logger.debug(f"Probing {candidate}")
        if candidate.exists():
            return candidate
    return None


def parse_version_output(output: str, command: list[str] | None = None) -> str:
    """Extract ``X.Y.Z`` from the output of ``python --version``.

    The output must read exactly ``Python X.Y.Z``; anything else is rejected
    rather than guessed at.
    """
    tokens = output.strip().split(" ")
    if len(tokens) != 2 or tokens[0] != "Python" or not _VERSION_RE.fullmatch(tokens[1]):
        raise InterpreterError(
            command=command or [SYSTEM_PYTHON, "--version"],
            reason="unexpected version output",
            output=output,
        )
    return tokens[1]


def query_version(executable: str, runner: CommandRunner) -> str:
    """Ask an interpreter for its version."""
    args = [executable, "--version"]
    logger.debug(f"Running {' '.join(args)}")
    result = runner.run(args)
    return parse_version_output(result.stdout or "", command=args)


def resolve_python_version(
    source_dir: Path,
    runner: CommandRunner | None = None,
    system: str | None = None,
) -> str:
    """Resolve the Python version the project runs on.

    Prefers the project's own virtual environment and falls back to the
    ``python`` found on PATH. There is no further fallback.
    """
    runner = runner or SubprocessRunner()
    executable = find_venv_interpreter(source_dir, system)
    if executable is None:
        logger.debug("No virtual environment found, using system interpreter")
        return query_version(SYSTEM_PYTHON, runner)
    logger.info(f"Using virtual environment interpreter {executable}")
    return query_version(str(executable), runner)
