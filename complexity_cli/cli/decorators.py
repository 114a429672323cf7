"""
Decorators for Complexity CLI commands.
"""

import traceback
from functools import wraps
from typing import Callable

import typer
from rich.markup import escape

from complexity_cli.core.exceptions import ComplexityCLIError
from complexity_cli.output import console, print_error


def with_error_handling(func: Callable) -> Callable:
    """
    Report a failing command in red and exit with code 1.

    Errors of the CLI's own hierarchy print their message only; anything else
    is reported as unexpected, with the traceback when ``--debug`` is set.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except ComplexityCLIError as e:
            print_error(escape(str(e)))
            raise typer.Exit(code=1)
        except Exception as e:
            print_error(f"Unexpected error in {func.__name__}: {escape(str(e))}")
            if kwargs.get("debug"):
                console.print(traceback.format_exc(), markup=False)
            raise typer.Exit(code=1)

    return wrapper
