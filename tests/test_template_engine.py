"""Tests for template engine functionality."""

from pathlib import Path

import pytest

from containerize_py.models import BuildConfig, KnownBaseImage
from containerize_py.template_engine import (
    BUILD_FILE_TEMPLATE,
    IGNORE_FILE_TEMPLATE,
    create_jinja_environment,
    get_template_context,
    get_templates_dir,
    get_usage_context,
    render_template,
    render_usage,
)

EXPECTED_CONTAINERFILE = """\
# Generated with containerize-py 1.2.3
FROM python:3.11.4-alpine
WORKDIR /app
COPY . .
RUN pip install --no-cache-dir -r requirements.txt
CMD ["python3", "main.py"]
"""

EXPECTED_CONTAINERIGNORE = """\
# Generated with containerize-py 1.2.3
# Virtual environments
.venv/
venv/
.env/
env/

# Cache
__pycache__/
*.pyc
*.pyo

# Container files
Containerfile
.containerignore
"""


@pytest.fixture
def config(tmp_path: Path) -> BuildConfig:
    """Provide a build configuration writing beside the project."""
    return BuildConfig(
        tool_version="1.2.3",
        source_path=tmp_path,
        output_path=tmp_path,
        python_version="3.11.4",
    )


class TestGetTemplatesDir:
    """Tests for get_templates_dir function."""

    def test_templates_dir_exists(self) -> None:
        """Test that templates directory exists."""
        templates_dir = get_templates_dir()
        assert templates_dir.exists()
        assert templates_dir.is_dir()


class TestCreateJinjaEnvironment:
    """Tests for create_jinja_environment function."""

    def test_environment_can_load_templates(self) -> None:
        """Test that environment can load built-in templates."""
        env = create_jinja_environment()

        templates = env.list_templates()
        assert "Containerfile.j2" in templates
        assert "containerignore.j2" in templates
        assert "usage.txt.j2" in templates


class TestGetTemplateContext:
    """Tests for get_template_context function."""

    def test_basic_context(self, config: BuildConfig) -> None:
        """Test context generation for a basic config."""
        context = get_template_context(config)

        assert context["tool"]["version"] == "1.2.3"
        assert context["build"]["image"] == "python:3.11.4-alpine"
        assert context["build"]["copy_source"] == "."
        assert context["build"]["build_file_name"] == "Containerfile"
        assert context["build"]["ignore_file_name"] == ".containerignore"


class TestRenderContainerfile:
    """Tests for the build-file template."""

    def test_full_output(self, config: BuildConfig) -> None:
        """Test the complete rendered build file."""
        env = create_jinja_environment()
        content = render_template(env, BUILD_FILE_TEMPLATE, get_template_context(config))
        assert content == EXPECTED_CONTAINERFILE

    def test_base_image_line(self, tmp_path: Path) -> None:
        """Test that the FROM line follows the selected base image."""
        config = BuildConfig(
            source_path=tmp_path,
            output_path=tmp_path,
            python_version="3.12.1",
            base_image="slim-bookworm",
        )
        env = create_jinja_environment()
        content = render_template(env, BUILD_FILE_TEMPLATE, get_template_context(config))

        assert "FROM python:3.12.1-slim-bookworm\n" in content

    def test_copy_from_separate_output(self, tmp_path: Path) -> None:
        """Test that a project outside the output directory is copied by its given path."""
        source = tmp_path / "app"
        output = tmp_path / "deploy"
        source.mkdir()
        output.mkdir()
        config = BuildConfig(source_path=source, output_path=output, python_version="3.11.4")
        env = create_jinja_environment()
        content = render_template(env, BUILD_FILE_TEMPLATE, get_template_context(config))

        assert f"COPY {source.as_posix()} .\n" in content
        assert "COPY ../" not in content

    def test_no_html_escaping(self, tmp_path: Path) -> None:
        """Test that free-form base images are substituted verbatim."""
        config = BuildConfig(
            source_path=tmp_path,
            output_path=tmp_path,
            python_version="3.11.4",
            base_image="a<b>&c",
        )
        env = create_jinja_environment()
        content = render_template(env, BUILD_FILE_TEMPLATE, get_template_context(config))

        assert "FROM python:3.11.4-a<b>&c\n" in content


class TestRenderContainerignore:
    """Tests for the ignore-file template."""

    def test_full_output(self, config: BuildConfig) -> None:
        """Test the complete rendered ignore file."""
        env = create_jinja_environment()
        content = render_template(env, IGNORE_FILE_TEMPLATE, get_template_context(config))
        assert content == EXPECTED_CONTAINERIGNORE

    @pytest.mark.parametrize("base_image", ["alpine", "slim-bullseye", "custom"])
    def test_always_lists_generated_files(self, tmp_path: Path, base_image: str) -> None:
        """Test that both generated files are excluded for any configuration."""
        config = BuildConfig(
            source_path=tmp_path,
            output_path=tmp_path,
            python_version="3.9.18",
            base_image=base_image,
        )
        env = create_jinja_environment()
        content = render_template(env, IGNORE_FILE_TEMPLATE, get_template_context(config))
        lines = content.splitlines()

        assert "Containerfile" in lines
        assert ".containerignore" in lines


class TestRenderUsage:
    """Tests for the usage text."""

    def test_usage_context(self) -> None:
        """Test the usage context needs no resolved project."""
        context = get_usage_context("9.9.9")
        assert context["tool"]["version"] == "9.9.9"
        assert context["default_base_image"] == "alpine"
        assert context["known_base_images"] == list(KnownBaseImage)

    def test_usage_contents(self) -> None:
        """Test that the usage text covers syntax, images and parameters."""
        usage = render_usage("9.9.9")

        assert usage.startswith("containerize-py 9.9.9\n")
        assert "Creates the Containerfile and .containerignore" in usage
        assert "containerize-py [--from=python_image] <project_dir> [output_dir]" in usage
        assert "By default the image is alpine." in usage
        for image in KnownBaseImage:
            assert f"  - {image.value}: {image.description}" in usage
        assert "<project_dir> : Your python project location" in usage
        assert "[output_dir]  : Container files location." in usage
