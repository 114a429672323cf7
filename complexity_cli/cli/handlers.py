"""
Command handlers for Complexity CLI - business logic separated from CLI interface.
"""

import os
import sys
import time
from pathlib import Path
from typing import Optional, Tuple

from complexity_cli.analyzer import analyze_methods, detect_signatures, explain
from complexity_cli.core.config import ComplexityConfig, get_config
from complexity_cli.core.constants import CONFIG_FILENAME, REPORT_SUFFIX
from complexity_cli.core.data_utils import save_json
from complexity_cli.core.exceptions import ConfigurationError, InputError
from complexity_cli.core.logging import log_context, log_info, logged_operation
from complexity_cli.output import (
    print_analysis_footer,
    print_analysis_header,
    print_config,
    print_json,
    print_languages,
    print_method_reports,
    print_result,
    print_signature_table,
    print_source,
    print_success,
    print_trace,
)
from complexity_cli.plugins import all_plugins
from complexity_cli.visualization import ComplexityVisualizer

from .options import ResolvedOptions

STDIN_MARKER = "-"


def read_source(path: Optional[str]) -> Tuple[str, str]:
    """
    Read the code to analyze.

    Args:
        path: File path, or None / "-" for standard input

    Returns:
        Tuple of (code, display name)

    Raises:
        InputError: If the file cannot be read
    """
    if not path or path == STDIN_MARKER:
        return sys.stdin.read(), "<stdin>"

    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read(), os.path.basename(path)
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e


def report_path(output_path: str, source_name: str) -> str:
    """A directory gets a report named after the source; anything else is used as is."""
    if os.path.isdir(output_path):
        stem = Path(source_name).stem.strip("<>") or "stdin"
        return os.path.join(output_path, f"{stem}{REPORT_SUFFIX}")
    return output_path


class CommandHandlers:
    """Handles the business logic for CLI commands."""

    @staticmethod
    @logged_operation("analyze_command")
    def handle_analyze(
        options: ResolvedOptions,
        path: Optional[str],
        json_output: bool,
        output_path: Optional[str],
        show_source: bool,
    ):
        """Handle the analyze command."""
        code, source_name = read_source(path)

        with log_context(language=options.language, source=source_name):
            explanation = explain(code, options.language)
            result = explanation.result
            reports = analyze_methods(code, explanation.language)
            log_info(
                f"Analyzed {source_name}: time={result.time.label}, space={result.space.label}"
            )

            if output_path:
                output_path = report_path(output_path, source_name)
                save_json(
                    output_path,
                    {
                        "analyzed_at": time.strftime("%Y-%m-%d %H:%M:%S"),
                        "source": source_name,
                        "language": explanation.language,
                        "result": result.to_dict(),
                        "methods": [
                            {
                                "name": report.name,
                                "time_complexity": report.complexity.label,
                                "is_backtracking": report.is_backtracking,
                            }
                            for report in reports
                        ],
                    },
                )

            if json_output:
                print_json(result.to_dict())
                return result

            print_analysis_header(source_name, explanation.language)
            if show_source:
                print_source(code, explanation.language)
            print_result(result)
            if options.signatures:
                print_signature_table(detect_signatures(code, explanation.language))
            if options.trace:
                print_trace(explanation)
            print_method_reports(reports)
            if output_path:
                print_success(f"Saved analysis to {output_path}")
            print_analysis_footer()
            return result

    @staticmethod
    @logged_operation("chart_command")
    def handle_chart(
        options: ResolvedOptions,
        path: Optional[str],
        output_path: Optional[str],
        samples: Optional[int],
        open_browser: Optional[bool],
    ) -> str:
        """Handle the chart command."""
        code, source_name = read_source(path)
        chart_config = options.config.chart

        with log_context(language=options.language, source=source_name):
            explanation = explain(code, options.language)

            if output_path is None and options.config.get_chart_dir():
                chart_dir = options.config.get_chart_dir()
                chart_dir.mkdir(parents=True, exist_ok=True)
                stem = Path(source_name).stem.strip("<>") or "chart"
                output_path = str(chart_dir / f"{stem}_complexity.html")

            visualizer = ComplexityVisualizer(
                explanation.result,
                explanation.language,
                samples=samples or chart_config.samples,
                source_name=source_name,
            )
            html_file = visualizer.visualize(
                output_path,
                open_browser=(
                    chart_config.open_browser if open_browser is None else open_browser
                ),
            )
            print_result(explanation.result)
            print_success(f"Chart written to {html_file}")
            return html_file

    @staticmethod
    def handle_languages():
        """Handle the languages command."""
        print_languages([plugin.describe() for plugin in all_plugins()])

    @staticmethod
    def handle_config_show(options: ResolvedOptions):
        """Handle the config show command."""
        print_config(get_config().to_dict())

    @staticmethod
    @logged_operation("config_init_command")
    def handle_config_init(path: Optional[str], force: bool) -> Path:
        """Handle the config init command."""
        if path:
            target = Path(path).expanduser()
        else:
            target = Path.home() / f".{CONFIG_FILENAME}"
        if target.exists() and not force:
            raise ConfigurationError(
                f"{target} already exists; pass --force to overwrite it."
            )
        saved = ComplexityConfig().save(target)
        print_success(f"Wrote default configuration to {saved}")
        return saved
