"""
Logging for Complexity CLI.

One ``complexity_cli`` logger, configured once per process: a Rich handler on
stderr for the terminal and, optionally, a plain file handler whose lines are
prefixed with the active context (language, source, command).
"""

import logging
import time
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler

# stderr, so `analyze --json` output on stdout stays machine-readable
console = Console(stderr=True)

LOGGER_NAME = "complexity_cli"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"
CONTEXT_FIELDS = ("language", "source", "command")

_logger: Optional[logging.Logger] = None


class ContextFilter(logging.Filter):
    """Stamps the fields of every open ``log_context`` onto each record."""

    def __init__(self):
        super().__init__()
        self._frames: List[Dict[str, Any]] = []

    @property
    def context(self) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for frame in self._frames:
            merged.update(frame)
        return merged

    def push(self, **fields):
        self._frames.append({k: v for k, v in fields.items() if v is not None})

    def pop(self):
        if self._frames:
            self._frames.pop()

    def filter(self, record):
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


class ComplexityLogFormatter(logging.Formatter):
    """Formatter that prefixes the active context, e.g. ``[language=java]``."""

    def format(self, record):
        message = super().format(record)
        tags = [
            f"{name}={getattr(record, name)}"
            for name in CONTEXT_FIELDS
            if getattr(record, name, None)
        ]
        if not tags:
            return message
        return f"[{', '.join(tags)}] {message}"


def _console_level(debug: bool, verbose: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logger(
    debug: bool = False, log_file: Optional[Path] = None, verbose: bool = False
) -> logging.Logger:
    """
    Configure the package logger. Later calls return the first configuration.

    Args:
        debug: Show debug records and source paths on the console
        log_file: Also write every record (DEBUG and up) to this file
        verbose: Show info records on the console

    Returns:
        The configured logger
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug or log_file else logging.INFO)
    logger.propagate = False
    logger.handlers.clear()
    logger.addFilter(ContextFilter())

    terminal = RichHandler(
        console=console,
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
        tracebacks_show_locals=debug,
        markup=False,
    )
    terminal.setLevel(_console_level(debug, verbose))
    logger.addHandler(terminal)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(ComplexityLogFormatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """The package logger, configured with defaults on first use."""
    return _logger if _logger is not None else setup_logger()


def _context_filter(logger: logging.Logger) -> Optional[ContextFilter]:
    return next((f for f in logger.filters if isinstance(f, ContextFilter)), None)


@contextmanager
def log_context(**fields):
    """
    Add context fields to every record logged inside the block.

    Nested blocks override outer fields of the same name until they exit.

    Example:
        with log_context(language="java", source="Solution.java"):
            log_debug("Classifying")
    """
    context_filter = _context_filter(get_logger())
    if context_filter is None:
        yield
        return

    context_filter.push(**fields)
    try:
        yield
    finally:
        context_filter.pop()


def _log(level: int, message: str, **fields):
    logger = get_logger()
    if not fields:
        logger.log(level, message)
        return
    with log_context(**fields):
        logger.log(level, message)


def log_debug(message: str, **fields):
    _log(logging.DEBUG, message, **fields)


def log_info(message: str, **fields):
    _log(logging.INFO, message, **fields)


def log_warning(message: str, **fields):
    _log(logging.WARNING, message, **fields)


def log_file_operation(operation: str, path, **fields):
    """Debug line for a file read or write."""
    _log(logging.DEBUG, f"File {operation}: {path}", **fields)


def logged_operation(operation_name: str):
    """
    Decorator for command handlers: tags records with the command name and
    logs how long the handler ran, or how long it ran before failing.

    When the first argument carries a ``language`` (resolved CLI options),
    records are tagged with it too.

    Example:
        @logged_operation("analyze_command")
        def handle_analyze(options, path, ...):
            ...
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger()
            language = getattr(args[0], "language", None) if args else None

            with log_context(command=operation_name, language=language):
                logger.debug(f"Starting {operation_name}")
                started = time.perf_counter()
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    elapsed = time.perf_counter() - started
                    logger.error(f"{operation_name} failed after {elapsed:.3f}s: {e}")
                    raise
                elapsed = time.perf_counter() - started
                logger.debug(f"Finished {operation_name} in {elapsed:.3f}s")
                return result

        return wrapper

    return decorator


def configure_logging(
    debug: bool = False, verbose: bool = False, log_file: Optional[str] = None
):
    """Set up logging from CLI flags and the configured log file."""
    setup_logger(
        debug=debug, log_file=Path(log_file) if log_file else None, verbose=verbose
    )
