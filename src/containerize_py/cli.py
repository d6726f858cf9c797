"""CLI interface for containerize-py."""

import logging
from pathlib import Path
from typing import Annotated

import click
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from typer.core import TyperCommand

from containerize_py import __version__
from containerize_py.errors import (
    ContainerizeError,
    InterpreterError,
    OutputWriteError,
    UsageError,
)
from containerize_py.generator import ContainerizeGenerator
from containerize_py.interpreter import resolve_python_version
from containerize_py.models import BuildConfig
from containerize_py.prerequisites import (
    check_directory,
    check_main_file,
    check_requirements_file,
)
from containerize_py.template_engine import render_usage
from containerize_py.user_config import get_default_base_image

app = typer.Typer(
    name="containerize-py",
    help="Create a Containerfile and .containerignore from a Python project.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"containerize-py {__version__}", markup=False, highlight=False)
        raise typer.Exit()


def _print_usage() -> None:
    err_console.print(render_usage(), markup=False, highlight=False, soft_wrap=True, end="")


def _print_error(message: str) -> None:
    err_console.print(f"[red]{escape(message.rstrip())}[/red]", highlight=False, soft_wrap=True)


class ContainerizeCommand(TyperCommand):
    """Command that answers any malformed invocation with the usage text."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            logger.debug(f"Usage error: {e.format_message()}")
            _print_usage()
            raise typer.Exit(1) from None


def _split_paths(paths: list[Path] | None) -> tuple[Path, Path]:
    """Return (project_dir, output_dir) from the positional arguments."""
    if not paths or len(paths) > 2:
        raise UsageError("expected <project_dir> [output_dir]")
    source_path = paths[0]
    output_path = paths[1] if len(paths) == 2 else source_path
    return source_path, output_path


def _containerize(
    source_path: Path,
    output_path: Path,
    base_image: str,
    dry_run: bool,
) -> None:
    """Validate the project, resolve its Python version and write the container files."""
    console.print("Checking directories...")
    check_directory(source_path)
    check_directory(output_path)

    console.print("Checking for requirements.txt...")
    check_requirements_file(source_path)

    console.print("Checking for main.py...")
    check_main_file(source_path)

    console.print("Getting Python project version...")
    python_version = resolve_python_version(source_path)
    logger.debug(f"Resolved Python version {python_version}")

    config = BuildConfig(
        source_path=source_path,
        output_path=output_path,
        python_version=python_version,
        base_image=base_image,
    )
    generator = ContainerizeGenerator(config)

    if dry_run:
        for name, content in generator.render().items():
            console.print(
                Panel(
                    escape(content.rstrip()),
                    title=escape(str(output_path / name)),
                    border_style="yellow",
                )
            )
        console.print("[yellow]Dry run: no files were written.[/yellow]")
        return

    labels = {
        config.ignore_file_name: "ignore file",
        config.build_file_name: "container file",
    }
    generator.generate(on_write=lambda name: console.print(f"Writing {labels[name]}..."))

    console.print("[green]Done![/green]")
    console.print(
        "Check that no files containing sensitive information (passwords, API keys, etc.) "
        "are present in your project. If there are any, make sure to include them in "
        f"{config.ignore_file_name}",
        highlight=False,
        soft_wrap=True,
    )


@app.command(cls=ContainerizeCommand)
def containerize(
    paths: Annotated[
        list[Path] | None,
        typer.Argument(
            help="<project_dir> [output_dir]. The output directory defaults to the project.",
            show_default=False,
        ),
    ] = None,
    from_image: Annotated[
        str | None,
        typer.Option(
            "--from",
            help="Base python image tag (e.g., alpine, slim-bookworm, slim-bullseye)",
            show_default=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show the generated files without writing them"),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the containerize-py version and exit",
        ),
    ] = None,
) -> None:
    """Create the Containerfile and .containerignore for a Python project."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        source_path, output_path = _split_paths(paths)
    except UsageError as e:
        logger.debug(f"Usage error: {e}")
        _print_usage()
        raise typer.Exit(1) from None

    base_image = from_image if from_image is not None else get_default_base_image()

    try:
        _containerize(source_path, output_path, base_image, dry_run)
    except InterpreterError as e:
        _print_error(f"Unable to get Python version: {e}")
        raise typer.Exit(1) from None
    except OutputWriteError as e:
        _print_error(f"Error: {e}")
        raise typer.Exit(1) from None
    except ContainerizeError as e:
        _print_error(str(e))
        raise typer.Exit(1) from None
    except Exception as e:
        _print_error(f"Unexpected error: {e}")
        if verbose:
            import traceback

            traceback.print_exc()
        raise typer.Exit(1) from None


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
