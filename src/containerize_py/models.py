"""Configuration models for containerize-py."""

from enum import StrEnum
from pathlib import Path, PurePath

from pydantic import BaseModel, ConfigDict, Field

from containerize_py import __version__

DEFAULT_BASE_IMAGE = "alpine"
BUILD_FILE_NAME = "Containerfile"
IGNORE_FILE_NAME = ".containerignore"
REQUIREMENTS_FILE = "requirements.txt"
MAIN_FILE = "main.py"

# Probed in this order; the first one holding an interpreter wins
VENV_DIR_NAMES = ("venv", ".venv", "env", ".env")


class KnownBaseImage(StrEnum):
    """Common tag suffixes of the official python images.

    Any other suffix is accepted as-is; these only feed the usage text.
    """

    ALPINE = "alpine"
    SLIM_BOOKWORM = "slim-bookworm"
    SLIM_BULLSEYE = "slim-bullseye"
    SLIM_BUSTER = "slim-buster"

    @property
    def description(self) -> str:
        return _BASE_IMAGE_DESCRIPTIONS[self]


_BASE_IMAGE_DESCRIPTIONS = {
    KnownBaseImage.ALPINE: (
        "The lightest, but can lead to compatibility issues with glibc dependent "
        "libraries. Popular libraries (e.g., pandas, numpy, scipy) may need manual "
        "compilation due to native dependencies."
    ),
    KnownBaseImage.SLIM_BOOKWORM: "Good for new projects.",
    KnownBaseImage.SLIM_BULLSEYE: "For production projects requiring stability.",
    KnownBaseImage.SLIM_BUSTER: "End of support. Maybe good for some very old projects.",
}


class BuildConfig(BaseModel):
    """Everything needed to render the container files for one project."""

    model_config = ConfigDict(frozen=True)

    tool_version: str = Field(__version__, description="containerize-py release version")
    source_path: Path = Field(..., description="Python project directory")
    output_path: Path = Field(..., description="Directory receiving the generated files")
    python_version: str = Field(..., description="Interpreter version, e.g. '3.11.4'")
    base_image: str = Field(DEFAULT_BASE_IMAGE, description="python image tag suffix")
    build_file_name: str = Field(BUILD_FILE_NAME, description="Generated build-file name")
    ignore_file_name: str = Field(IGNORE_FILE_NAME, description="Generated ignore-file name")

    @property
    def image(self) -> str:
        """Full base image reference used in the FROM line."""
        return f"python:{self.python_version}-{self.base_image}"

    @property
    def copy_source(self) -> str:
        """Source directory for the COPY line.

        Relative to the output directory when the project sits inside it,
        otherwise the path exactly as given on the command line.
        """
        source = self.source_path.absolute()
        output = self.output_path.absolute()
        if source.is_relative_to(output):
            return PurePath(source.relative_to(output)).as_posix()
        return self.source_path.as_posix()
