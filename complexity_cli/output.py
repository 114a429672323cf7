import json
from typing import Any, Dict, List, Optional, Union

from rich.box import ROUNDED
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.style import Style
from rich.syntax import Syntax
from rich.table import Table
from rich.tree import Tree

from complexity_cli.analyzer.combiner import AnalysisResult, Explanation
from complexity_cli.analyzer.lattice import ComplexityClass
from complexity_cli.analyzer.methods import MethodReport

# ==============================================================================
# Constants & Global Console
# ==============================================================================

console = Console()

SUCCESS_STYLE = Style(color="green", bold=True)
FAIL_STYLE = Style(color="red", bold=True)
INFO_STYLE = Style(color="blue", bold=True)
CYAN_STYLE = Style(color="cyan")
DIM_STYLE = Style(dim=True)

CLASS_DESCRIPTIONS = {
    ComplexityClass.CONSTANT: "Constant - a fixed amount of work regardless of input size.",
    ComplexityClass.LOGARITHMIC: "Logarithmic - the input is halved at each step.",
    ComplexityClass.LINEAR: "Linear - grows in step with the input size.",
    ComplexityClass.LINEARITHMIC: "Linearithmic - typical of sorting and divide-and-conquer.",
    ComplexityClass.QUADRATIC: "Quadratic - likely two nested loops over the input.",
    ComplexityClass.CUBIC: "Cubic or higher - three or more nested loops.",
    ComplexityClass.EXPONENTIAL: "Exponential - recursive calls branch at each step.",
    ComplexityClass.FACTORIAL: "Factorial - every ordering or placement is explored.",
    ComplexityClass.LINEAR_EXPONENTIAL: "Exponential with linear work per call (e.g. subsets).",
}

# ==============================================================================
# Private Helper Functions
# ==============================================================================


def _create_panel(
    content: RenderableType,
    title: Optional[str] = None,
    border_style: Union[str, Style] = "blue",
    padding: tuple = (1, 2),
    **kwargs: Any,
) -> Panel:
    """Helper function to create a Rich Panel."""
    return Panel(
        content,
        title=title,
        border_style=border_style,
        padding=padding,
        box=ROUNDED,
        **kwargs,
    )


def _create_table(
    title: Optional[str] = None,
    show_header: bool = True,
    header_style: Union[str, Style] = "bold blue",
    **kwargs: Any,
) -> Table:
    """Helper function to create a Rich Table."""
    return Table(
        title=title,
        box=ROUNDED,
        show_header=show_header,
        header_style=header_style,
        **kwargs,
    )


def _print_status_message(icon: str, msg: str, style: Union[str, Style]):
    """Helper function to print simple status messages."""
    console.print(f"[{style}]{icon}  {msg}[/{style}]")


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


# ==============================================================================
# Status Messages
# ==============================================================================


def print_success(msg: str):
    _print_status_message("✓", msg, SUCCESS_STYLE)


def print_error(msg: str):
    _print_status_message("✗", msg, FAIL_STYLE)


def print_json(data: Dict[str, Any]):
    """Print plain JSON (no markup) for scripting."""
    console.print_json(json.dumps(data))


# ==============================================================================
# Complexity Analysis Output
# ==============================================================================


def print_analysis_header(source_name: str, language: str):
    """Print complexity analysis header."""
    console.print()
    console.print(
        _create_panel(
            f"[bold]COMPLEXITY ANALYSIS[/bold]  [dim]{source_name} ({language})[/dim]"
        )
    )


def print_source(code: str, language: str):
    """Show the analyzed code with syntax highlighting."""
    console.print(Syntax(code, language, line_numbers=True, theme="ansi_dark"))


def print_result(result: AnalysisResult):
    """Display the time and space estimate with a one-line description each."""
    tree = Tree("[bold blue]Estimate[/bold blue]")

    time_node = tree.add(f"[cyan]Time Complexity: {result.time.label}[/cyan]")
    time_node.add(f"[dim]{CLASS_DESCRIPTIONS[result.time]}[/dim]")

    space_node = tree.add(f"[cyan]Space Complexity: {result.space.label}[/cyan]")
    space_node.add(f"[dim]{CLASS_DESCRIPTIONS[result.space]}[/dim]")

    console.print(_create_panel(tree))


def print_signature_table(signatures: Dict[str, bool]):
    """Table of idiom detectors and whether each fired."""
    table = _create_table(title="[bold]Signatures[/bold]")
    table.add_column("Detector", style=CYAN_STYLE)
    table.add_column("Fired", justify="center")

    for name, fired in signatures.items():
        table.add_row(name.replace("_", " "), _flag(fired))

    console.print(table)


def print_trace(explanation: Explanation):
    """Table of cascade rules with the running estimate after each."""
    table = _create_table(title="[bold]Cascade[/bold]")
    table.add_column("#", justify="right", style=DIM_STYLE)
    table.add_column("Rule", style=CYAN_STYLE)
    table.add_column("Fired", justify="center")
    table.add_column("Time")
    table.add_column("Space")

    for index, step in enumerate(explanation.steps, start=1):
        table.add_row(
            str(index),
            step.rule.replace("_", " "),
            _flag(step.fired),
            step.result.time.label,
            step.result.space.label,
        )

    console.print(table)


def print_method_reports(reports: List[MethodReport]):
    """Display the per-method estimates of an explicit-method dialect."""
    if not reports:
        return

    tree = Tree("[bold blue]Methods[/bold blue]")
    for report in reports:
        node = tree.add(f"[bold]{report.name}[/bold]")
        node.add(f"[cyan]Time Complexity: {report.complexity.label}[/cyan]")
        if report.is_backtracking:
            node.add("[yellow]Backtracking candidate[/yellow]")

    console.print(_create_panel(tree, title="[blue]Per-method breakdown[/blue]"))


def print_analysis_footer():
    """Print complexity analysis footer."""
    console.print(Rule(style=INFO_STYLE))


# ==============================================================================
# Languages & Configuration Output
# ==============================================================================


def print_languages(descriptions: List[Dict[str, Any]]):
    """Table of supported dialects."""
    table = _create_table(title="[bold]Supported Languages[/bold]")
    table.add_column("Language", style=CYAN_STYLE)
    table.add_column("Aliases")
    table.add_column("Extensions")
    table.add_column("Nesting")
    table.add_column("Per-method", justify="center")

    for info in descriptions:
        table.add_row(
            info["name"],
            ", ".join(info["aliases"]) or "-",
            ", ".join(info["extensions"]) or "-",
            info["nesting"],
            _flag(info["explicit_methods"]),
        )

    console.print(table)


def print_config(config_data: Dict[str, Any]):
    """Display the effective configuration."""
    tree = Tree("[bold blue]Configuration[/bold blue]")
    for key, value in config_data.items():
        if isinstance(value, dict):
            branch = tree.add(f"[bold]{key}[/bold]")
            for child, child_value in value.items():
                branch.add(f"{child}: [cyan]{child_value}[/cyan]")
        else:
            tree.add(f"{key}: [cyan]{value}[/cyan]")

    console.print(_create_panel(tree))
