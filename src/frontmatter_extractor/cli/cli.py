"""
Frontmatter Extractor CLI Application.

Main entry point for the command-line interface. Locates markdown documents,
extracts their frontmatter in parallel and writes the records as JSON to
standard output or to a file.
"""

import logging
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .. import __version__
from ..core import DocumentLocator, ExtractionPipeline, FrontmatterParser, ResultEmitter
from ..core.types import PipelineResult
from ..exceptions import (
    ConfigurationError,
    InputPathError,
    OutputWriteError,
)
from ..utils.config import ConfigManager, ExtractorConfig

# Logs and errors go to stderr so stdout carries only records
err_console = Console(stderr=True)

app = typer.Typer(
    name="frontmatter-extract",
    help="A tool to extract frontmatter from markdown files",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def setup_logging(verbose: bool = False, level_name: Optional[str] = None) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        verbose: Enable INFO logging (default is WARNING)
        level_name: Explicit level name, overrides ``verbose``

    Returns:
        Configured logger instance
    """
    logging.getLogger().handlers.clear()

    if level_name:
        log_level = getattr(logging, level_name.upper(), logging.WARNING)
    else:
        log_level = logging.INFO if verbose else logging.WARNING

    rich_handler = RichHandler(
        console=err_console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(log_level)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
    )

    logger = logging.getLogger("frontmatter_extractor")
    logger.setLevel(log_level)
    return logger


def _fail(message: str, code: int = 1) -> None:
    """Report a fatal error on stderr and exit."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code)


def _load_config(config_path: Optional[str], workers: Optional[int]) -> ExtractorConfig:
    try:
        return ConfigManager(config_file=config_path).load({"max_workers": workers})
    except ConfigurationError as e:
        _fail(f"Configuration error: {e}")


def _report_failures(result: PipelineResult, logger: logging.Logger) -> None:
    """Log skipped documents and shadowed keys (verbose mode only)."""
    for outcome in result.failures:
        logger.warning(f"Skipped {outcome.path} ({outcome.reason.value}): {outcome.message}")
    for record in result.records:
        if record.shadowed_keys:
            logger.warning(
                f"{record.file}: document keys {', '.join(record.shadowed_keys)} "
                f"replaced by extracted fields"
            )
    counts = result.failure_counts()
    if counts:
        summary = ", ".join(f"{reason.value}={n}" for reason, n in counts.items())
        logger.info(f"Skipped {result.failed_extractions} documents: {summary}")


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"frontmatter-extract {__version__}")
        raise typer.Exit()


@app.command()
def extract(
    input_path: str = typer.Argument(
        ...,
        metavar="INPUT",
        help="Input file or directory",
    ),
    output: Optional[str] = typer.Argument(
        None,
        metavar="[OUTPUT]",
        help="Output file (default: standard output)",
    ),
    recursive: bool = typer.Option(
        False,
        "--recursive",
        "-R",
        help="Recursively process directories",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a JSON configuration file",
        metavar="PATH",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Number of parallel workers (default: number of CPUs)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Extract frontmatter from markdown files as JSON.

    Each document's YAML block is printed as one pretty JSON object with an
    extra "file" key holding the document path. Documents without a valid
    block are skipped.

    Example:
        frontmatter-extract -R notes/ records.json --verbose
    """
    logger = setup_logging(verbose)
    config = _load_config(config_path, workers)
    if config.log_level:
        logger = setup_logging(verbose, config.log_level)

    locator = DocumentLocator(config.extensions)
    try:
        paths = locator.locate(input_path, recursive=recursive)
    except InputPathError as e:
        _fail(str(e))

    pipeline = ExtractionPipeline(FrontmatterParser(), max_workers=config.max_workers)
    result = pipeline.run(paths)

    emitter = ResultEmitter(indent=config.indent)
    try:
        emitter.emit(result.records, output)
    except OutputWriteError as e:
        _fail(str(e))

    if verbose:
        _report_failures(result, logger)
        rprint(f"Processed {result.successful_extractions} files")


def cli_main() -> None:
    """
    Main CLI entry point with error handling.

    This function is called by the console script entry point.
    """
    try:
        app()
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        raise SystemExit(130)


if __name__ == "__main__":
    cli_main()
