import os
from typing import Optional

from complexity_cli.core import constants
from complexity_cli.core.exceptions import ConfigurationError, PluginError
from complexity_cli.core.logging import log_debug


def resolve_language(lang: str) -> str:
    """Resolve language alias to standard name."""
    lowered = lang.strip().lower()

    if lowered in constants.SUPPORTED_LANGUAGES:
        return lowered

    resolved = constants.LANGUAGE_ALIASES.get(lowered)
    if resolved:
        return resolved

    supported = ", ".join(sorted(constants.SUPPORTED_LANGUAGES))
    aliases = ", ".join(sorted(constants.LANGUAGE_ALIASES.keys()))
    raise ConfigurationError(
        f"Unsupported language: '{lang}'. "
        f"Supported languages: {supported}. "
        f"Aliases: {aliases}"
    )


def detect_language(file_path: Optional[str]) -> Optional[str]:
    """Guess the language from a file extension; None when unknown."""
    if not file_path:
        return None
    _, ext = os.path.splitext(file_path)
    return constants.LANGUAGE_EXTENSIONS.get(ext.lower())


def get_dialect(language: Optional[str]):
    """
    Return the plugin for ``language``, falling back to the default dialect.

    Unknown or missing tags never raise here; the classifier degrades to the
    default dialect's patterns instead.
    """
    # Import here to avoid circular dependency
    from . import get_plugin

    name = constants.DEFAULT_DIALECT
    if language:
        try:
            name = resolve_language(language)
        except ConfigurationError:
            log_debug(
                f"Unknown language '{language}', using {constants.DEFAULT_DIALECT} patterns"
            )

    plugin = get_plugin(name)
    if plugin is None:
        raise PluginError(f"No plugin registered for language: {name}")
    return plugin
