class ComplexityCLIError(Exception):
    """Base exception for all Complexity CLI errors."""

    pass


class ConfigurationError(ComplexityCLIError):
    """Raised when configuration is invalid or a language is unknown."""

    pass


class PluginError(ComplexityCLIError):
    """Raised when a language plugin is missing or misconfigured."""

    pass


class InputError(ComplexityCLIError):
    """Raised when the source to analyze cannot be read."""

    pass
