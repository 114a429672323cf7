from typing import Dict, List, Optional, Type

from .language_plugin import FunctionDecl, LanguagePlugin
from .registry import detect_language, get_dialect, resolve_language

from .languages.cpp_plugin import CppPlugin
from .languages.java_plugin import JavaPlugin
from .languages.javascript_plugin import JavaScriptPlugin
from .languages.python_plugin import PythonPlugin

# Import constants to populate
from complexity_cli.core import constants


PLUGINS: Dict[str, LanguagePlugin] = {}


def register_plugin(plugin_cls: Type[LanguagePlugin]):
    """Register a plugin and update global constants."""
    plugin = plugin_cls()
    PLUGINS[plugin.name] = plugin

    constants.SUPPORTED_LANGUAGES.add(plugin.name)

    for alias in getattr(plugin, "aliases", []):
        constants.LANGUAGE_ALIASES[alias] = plugin.name

    for ext in getattr(plugin, "extensions", []):
        constants.LANGUAGE_EXTENSIONS[ext] = plugin.name


def get_plugin(name: str) -> Optional[LanguagePlugin]:
    return PLUGINS.get(name)


def all_plugins() -> List[LanguagePlugin]:
    return [PLUGINS[name] for name in sorted(PLUGINS)]


# Register all available plugins
register_plugin(PythonPlugin)
register_plugin(JavaScriptPlugin)
register_plugin(JavaPlugin)
register_plugin(CppPlugin)
