"""Pytest fixtures for containerize-py tests."""

import subprocess
from collections.abc import Generator
from pathlib import Path

import pytest


class FakeRunner:
    """Fake command runner returning canned interpreter output."""

    def __init__(self, output: str = "Python 3.11.4\n", error: Exception | None = None) -> None:
        self.output = output
        self.error = error
        self.commands: list[list[str]] = []

    def run(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        self.commands.append(args)
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(args=args, returncode=0, stdout=self.output)


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config at a file that does not exist yet."""
    config_path = tmp_path / "user-config" / "config.yaml"
    monkeypatch.setattr("containerize_py.user_config.CONFIG_FILE", config_path)
    return config_path


@pytest.fixture
def project_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Provide a minimal Python project with requirements.txt and main.py."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "requirements.txt").write_text("requests==2.32.3\n")
    (project / "main.py").write_text('print("hello")\n')
    yield project


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Provide a runner that reports Python 3.11.4."""
    return FakeRunner()


def make_interpreter(project: Path, venv: str, system: str = "Linux") -> Path:
    """Create an empty interpreter file inside a fake virtual environment."""
    if system == "Windows":
        interpreter = project / venv / "Scripts" / "python.exe"
    else:
        interpreter = project / venv / "bin" / "python"
    interpreter.parent.mkdir(parents=True)
    interpreter.write_text("")
    return interpreter
