"""
Constants used throughout the application.
"""

# File names
CONFIG_FILENAME = "complexity_cli_config.json"
REPORT_SUFFIX = "_complexity.json"

# Dialect used when a language tag is unknown
DEFAULT_DIALECT = "javascript"

# Language configuration
# NOTE: These are dynamically loaded from language plugins
SUPPORTED_LANGUAGES = set()  # Will be populated by plugins
LANGUAGE_ALIASES = {}  # Will be populated by plugins
LANGUAGE_EXTENSIONS = {}  # Will be populated by plugins
