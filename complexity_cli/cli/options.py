"""
Resolved options and configuration handling for Complexity CLI.
"""

from dataclasses import dataclass
from typing import Optional

from complexity_cli.core.config import ComplexityConfig, load_config_file, set_config
from complexity_cli.core.exceptions import ConfigurationError
from complexity_cli.core.logging import configure_logging, log_debug, log_info, log_warning
from complexity_cli.plugins.registry import detect_language, resolve_language


@dataclass
class ResolvedOptions:
    """Container for resolved CLI options."""

    language: Optional[str]
    debug: bool
    signatures: bool
    trace: bool
    config: ComplexityConfig  # Include the full config object


def resolve_language_choice(
    language_override: Optional[str],
    source_path: Optional[str],
    config: ComplexityConfig,
) -> Optional[str]:
    """Flag, then file extension, then configured default; None if all are unset."""
    candidate = None
    if language_override:
        log_debug(f"Resolving language from override: {language_override}")
        candidate = language_override
    else:
        detected = detect_language(source_path)
        if detected:
            log_debug(f"Detected language from extension: {detected}")
            return detected
        if config.analysis.default_language:
            log_debug(f"Using language from config: {config.analysis.default_language}")
            candidate = config.analysis.default_language

    if candidate is None:
        return None

    try:
        return resolve_language(candidate)
    except ConfigurationError as e:
        # The classifier falls back to its default dialect for unknown tags
        log_warning(str(e))
        return candidate


def resolve_options(
    language_override: Optional[str] = None,
    source_path: Optional[str] = None,
    config_override: Optional[str] = None,
    debug_override: bool = False,
    signatures_override: Optional[bool] = None,
    trace_override: Optional[bool] = None,
    verbose: bool = False,
) -> ResolvedOptions:
    """Resolves options based on command args, config files, and defaults."""
    config_data = load_config_file(config_override)
    config = ComplexityConfig.from_dict(config_data)

    if debug_override:
        config.debug = True

    configure_logging(debug=config.debug, verbose=verbose, log_file=config.log_file)
    log_debug(f"Loaded config file: {config_override or 'default locations'}")

    signatures = config.analysis.signatures
    if signatures_override is not None:
        signatures = signatures_override

    trace = config.analysis.trace
    if trace_override is not None:
        trace = trace_override

    set_config(config)

    resolved = ResolvedOptions(
        language=resolve_language_choice(language_override, source_path, config),
        debug=config.debug,
        signatures=signatures,
        trace=trace,
        config=config,
    )

    log_info(
        "Options resolved",
        language=resolved.language,
        source=source_path,
    )

    return resolved
