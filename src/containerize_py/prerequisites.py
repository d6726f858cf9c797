"""Checks a project must pass before its container files are generated."""

import logging
from pathlib import Path

from containerize_py.errors import PrerequisiteError
from containerize_py.models import MAIN_FILE, REQUIREMENTS_FILE

logger = logging.getLogger(__name__)

NO_REQUIREMENTS_MESSAGE = f"""{REQUIREMENTS_FILE} not found.
You can create it in 2 ways:
1. Using pipreqs (recommended)
  pipreqs /path/your_project

2. Using pip freeze (the virtual environment must be active):
  pip freeze > {REQUIREMENTS_FILE}
"""

NO_MAIN_MESSAGE = f"""{MAIN_FILE} not found.
It's mandatory to use this file to launch your project.
"""


def check_directory(path: Path) -> None:
    """Raise PrerequisiteError unless path is an existing directory."""
    if not path.is_dir():
        raise PrerequisiteError(f"{path} is not a directory.")
    logger.debug(f"Directory OK: {path}")


def check_requirements_file(source_dir: Path) -> None:
    """Check that requirements.txt sits directly under the project directory."""
    requirements = source_dir / REQUIREMENTS_FILE
    if not requirements.exists():
        raise PrerequisiteError(NO_REQUIREMENTS_MESSAGE)
    logger.debug(f"Found {requirements}")


def check_main_file(source_dir: Path) -> None:
    """Check that main.py sits directly under the project directory."""
    main_file = source_dir / MAIN_FILE
    if not main_file.exists():
        raise PrerequisiteError(NO_MAIN_MESSAGE)
    logger.debug(f"Found {main_file}")
