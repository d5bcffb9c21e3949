"""Main CLI entry point for the html2mjml command.

This module provides the Typer application that converts an HTML file into
MJML. It uses options on the main command rather than subcommands.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from ..converter import BeautifulSoupParser, HtmlToMjmlConverter
from ..element_mapping import MappingRegistry
from ..errors import (
    ConfigError,
    FilesystemError,
    InvalidMappingError,
    MalformedInputError,
)
from ..models import ConversionOptions
from ..renderer import MjmlPythonCompiler
from .config_loader import ConfigLoader
from .models import ConverterConfig, ExitCode
from .output import OutputHandler

app = typer.Typer(
    name="html2mjml",
    help="""Convert HTML email markup to MJML.

EXAMPLES:
  html2mjml newsletter.html                      # MJML to stdout
  html2mjml newsletter.html -o newsletter.mjml   # MJML to a file
  html2mjml newsletter.html --render             # Rendered email HTML
  cat page.html | html2mjml -                    # Read from stdin""",
    add_completion=False,
    rich_markup_mode=None,
)

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'html2mjml' namespace logger to avoid affecting
    third-party libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("html2mjml")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)8s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)


def _read_input(input_file: str) -> str:
    if input_file == "-":
        return sys.stdin.read()
    try:
        return Path(input_file).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FilesystemError(input_file, 'read', 'File not found')
    except OSError as e:
        raise FilesystemError(input_file, 'read', str(e))


def _write_output(output_file: str, text: str) -> None:
    try:
        Path(output_file).write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise FilesystemError(output_file, 'write', str(e))


def _build_converter(config: ConverterConfig, parser: Optional[str]) -> HtmlToMjmlConverter:
    registry = MappingRegistry()
    for tag_name, mapping in config.mappings.items():
        registry.register(tag_name, mapping)
    return HtmlToMjmlConverter(
        registry=registry,
        parser=BeautifulSoupParser(parser or config.parser),
        compiler=MjmlPythonCompiler(),
    )


@app.command()
def main(
    input_file: str = typer.Argument(
        ...,
        help="HTML file to convert, or - to read from stdin",
    ),
    output_file: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the result to this file instead of stdout",
    ),
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML configuration file with options and custom mappings",
    ),
    render: Optional[bool] = typer.Option(
        None,
        "--render/--no-render",
        help="Compile the MJML and output rendered email HTML (needs the mjml package)",
    ),
    preserve_class_names: Optional[bool] = typer.Option(
        None,
        "--preserve-class-names/--drop-class-names",
        help="Copy class attributes to css-class",
    ),
    inline_styles: Optional[bool] = typer.Option(
        None,
        "--inline-styles/--no-inline-styles",
        help="Resolve inline styles and <style> class rules into attributes",
    ),
    wrap: Optional[bool] = typer.Option(
        None,
        "--wrap/--no-wrap",
        help="Wrap bare fragments in a synthesized html/body",
    ),
    parser: Optional[str] = typer.Option(
        None,
        "--parser",
        help="HTML tree builder: html.parser or lxml",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Do not print conversion warnings",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Verbosity level: -v for INFO, -vv for DEBUG",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Convert an HTML document to MJML."""
    _configure_logging(verbose)
    output = OutputHandler(verbosity=verbose, no_color=no_color)

    try:
        config = ConfigLoader.load(config_file) if config_file else ConverterConfig()
        if parser is not None and parser not in ConfigLoader.ALLOWED_PARSERS:
            raise ConfigError(f"Unsupported parser {parser!r}", 'parser')

        overrides = {
            'validate_output': render if render is not None else config.options.validate_output,
            # The CLI prints warnings itself
            'show_warnings': False,
        }
        if preserve_class_names is not None:
            overrides['preserve_class_names'] = preserve_class_names
        if inline_styles is not None:
            overrides['inline_styles'] = inline_styles
        if wrap is not None:
            overrides['wrap_content'] = wrap
        options = ConversionOptions.merged(overrides, base=config.options)

        converter = _build_converter(config, parser)
        html = _read_input(input_file)
        output.debug(f"Read {len(html)} characters from {input_file}")

        result = converter.convert_with_result(html, options)

        if output_file:
            _write_output(output_file, result.output)
            output.success(f"Wrote {'HTML' if result.html is not None else 'MJML'} to {output_file}")
        else:
            output.print_result(result.output)

        if not quiet and config.options.show_warnings:
            output.print_warnings(result.warnings)

        raise typer.Exit(ExitCode.SUCCESS)

    except MalformedInputError as e:
        logger.error(f"Conversion failed: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.MALFORMED_INPUT)

    except (ConfigError, InvalidMappingError) as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    except FilesystemError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    except typer.Exit:
        raise

    except Exception as e:
        logger.exception("Unexpected error during conversion")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
