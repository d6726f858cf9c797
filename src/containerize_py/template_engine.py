"""Template engine for rendering the container files."""

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from containerize_py import __version__
from containerize_py.models import (
    BUILD_FILE_NAME,
    DEFAULT_BASE_IMAGE,
    IGNORE_FILE_NAME,
    BuildConfig,
    KnownBaseImage,
)

logger = logging.getLogger(__name__)

BUILD_FILE_TEMPLATE = "Containerfile.j2"
IGNORE_FILE_TEMPLATE = "containerignore.j2"
USAGE_TEMPLATE = "usage.txt.j2"


def get_templates_dir() -> Path:
    """Get the directory containing built-in templates."""
    return Path(__file__).parent / "templates"


def create_jinja_environment() -> Environment:
    """Create a Jinja2 environment with the templates directory."""
    templates_dir = get_templates_dir()
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def get_template_context(config: BuildConfig) -> dict[str, Any]:
    """Build the template context from a build configuration."""
    return {
        "tool": {
            "version": config.tool_version,
        },
        "build": {
            "image": config.image,
            "base_image": config.base_image,
            "python_version": config.python_version,
            "copy_source": config.copy_source,
            "build_file_name": config.build_file_name,
            "ignore_file_name": config.ignore_file_name,
        },
    }


def get_usage_context(tool_version: str = __version__) -> dict[str, Any]:
    """Build the context for the usage text, which needs no resolved project."""
    return {
        "tool": {"version": tool_version},
        "build": {
            "build_file_name": BUILD_FILE_NAME,
            "ignore_file_name": IGNORE_FILE_NAME,
        },
        "default_base_image": DEFAULT_BASE_IMAGE,
        "known_base_images": list(KnownBaseImage),
    }


def render_template(env: Environment, template_name: str, context: dict[str, Any]) -> str:
    """Render a template with the given context."""
    template = env.get_template(template_name)
    return template.render(**context)


def render_usage(tool_version: str = __version__) -> str:
    """Render the command-line usage text."""
    env = create_jinja_environment()
    return render_template(env, USAGE_TEMPLATE, get_usage_context(tool_version))
