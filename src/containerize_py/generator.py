"""Container file generator - renders and writes the build and ignore files."""

import logging
from collections.abc import Callable
from pathlib import Path

from containerize_py.errors import OutputWriteError
from containerize_py.models import BuildConfig
from containerize_py.template_engine import (
    BUILD_FILE_TEMPLATE,
    IGNORE_FILE_TEMPLATE,
    create_jinja_environment,
    get_template_context,
    render_template,
)

logger = logging.getLogger(__name__)


class ContainerizeGenerator:
    """Generates the container files for a configured project."""

    def __init__(self, config: BuildConfig) -> None:
        self.config = config
        self.env = create_jinja_environment()
        self.context = get_template_context(config)

    def render(self) -> dict[str, str]:
        """Render both files, keyed by file name in write order."""
        return {
            self.config.ignore_file_name: render_template(
                self.env, IGNORE_FILE_TEMPLATE, self.context
            ),
            self.config.build_file_name: render_template(
                self.env, BUILD_FILE_TEMPLATE, self.context
            ),
        }

    def generate(self, on_write: Callable[[str], None] | None = None) -> list[Path]:
        """Write the rendered files into the output directory.

        ``on_write`` is called with each file name just before it is written.
        Existing files are overwritten. Files written before a failure are
        left in place.
        """
        written: list[Path] = []
        for name, content in self.render().items():
            if on_write is not None:
                on_write(name)
            written.append(self.write_file(name, content))
        logger.info(f"Container files written to {self.config.output_path}")
        return written

    def write_file(self, name: str, content: str) -> Path:
        """Write a single rendered file into the output directory."""
        path = self.config.output_path / name
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(path=path, cause=e) from e
        logger.debug(f"Created file: {path}")
        return path
