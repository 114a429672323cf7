"""
Main Typer app and command definitions for Complexity CLI.
"""

from typing import Optional

import typer

from .completions import Completions
from .decorators import with_error_handling
from .handlers import CommandHandlers
from .options import resolve_options

# Create main typer app
app = typer.Typer(
    help="Complexity CLI - estimate the time and space complexity of code without running it",
    add_completion=True,
    rich_markup_mode="markdown",
)
config_app = typer.Typer(help="Show or create the configuration file")
app.add_typer(config_app, name="config")


# ---- Commands ----


@app.command()
@with_error_handling
def analyze(
    path: Optional[str] = typer.Argument(
        None, help="Source file to analyze ('-' or omitted reads stdin)"
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language of the code (default: from the file extension)",
        autocompletion=Completions.languages,
    ),
    signatures: Optional[bool] = typer.Option(
        None, "--signatures/--no-signatures", help="Show which idioms fired"
    ),
    trace: Optional[bool] = typer.Option(
        None, "--trace/--no-trace", help="Show the rule cascade step by step"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Save the analysis as JSON"
    ),
    show_source: bool = typer.Option(False, "--source", help="Echo the analyzed code"),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Estimate time and space complexity."""
    options = resolve_options(
        language_override=language,
        source_path=path,
        config_override=config,
        debug_override=debug,
        signatures_override=signatures,
        trace_override=trace,
        verbose=verbose,
    )

    CommandHandlers.handle_analyze(options, path, json_output, output, show_source)


@app.command()
@with_error_handling
def chart(
    path: Optional[str] = typer.Argument(
        None, help="Source file to analyze ('-' or omitted reads stdin)"
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Language of the code (default: from the file extension)",
        autocompletion=Completions.languages,
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="HTML file to write (default: temp file)"
    ),
    samples: Optional[int] = typer.Option(
        None, "--samples", "-n", min=1, max=1000, help="Largest n to plot"
    ),
    open_browser: Optional[bool] = typer.Option(
        None, "--open/--no-open", help="Open the chart in a browser"
    ),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
):
    """Plot the growth curves of the estimated complexity."""
    options = resolve_options(
        language_override=language,
        source_path=path,
        config_override=config,
        debug_override=debug,
    )

    CommandHandlers.handle_chart(options, path, output, samples, open_browser)


@app.command()
@with_error_handling
def languages():
    """List supported languages."""
    CommandHandlers.handle_languages()


@config_app.command("show")
@with_error_handling
def config_show(
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
):
    """Show the effective configuration."""
    options = resolve_options(config_override=config, debug_override=debug)
    CommandHandlers.handle_config_show(options)


@config_app.command("init")
@with_error_handling
def config_init(
    path: Optional[str] = typer.Option(
        None, "--path", help="Where to write (default: ~/.complexity_cli_config.json)"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
):
    """Write a default configuration file."""
    CommandHandlers.handle_config_init(path, force)


def main():
    app()


if __name__ == "__main__":
    main()
