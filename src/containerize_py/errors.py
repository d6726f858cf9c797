"""Errors raised while containerizing a project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class ContainerizeError(Exception):
    """Base class for expected containerize-py failures."""


class UsageError(ContainerizeError):
    """Error raised when the command line is malformed."""


class PrerequisiteError(ContainerizeError):
    """Error raised when a directory or required project file is missing."""


@dataclass(frozen=True)
class InterpreterError(ContainerizeError):
    """Error raised when the Python version cannot be resolved."""

    command: list[str]
    reason: str
    returncode: int | None = None
    output: str = ""

    def __str__(self) -> str:
        command_str = " ".join(self.command)
        parts = [f"failed to execute {command_str}: {self.reason}"]
        if self.returncode is not None:
            parts.append(f"Exit code: {self.returncode}")
        if self.output.strip():
            parts.append(f"Output: {self.output.strip()}")
        return "\n".join(parts)


@dataclass(frozen=True)
class OutputWriteError(ContainerizeError):
    """Error raised when a generated file cannot be written."""

    path: Path
    cause: OSError

    def __str__(self) -> str:
        return f"Unable to write {self.path}: {self.cause}"
