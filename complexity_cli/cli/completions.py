"""
Autocompletion functions for Complexity CLI.
"""

from typing import List

from complexity_cli.core import constants


class Completions:
    """Autocompletion provider for Complexity CLI."""

    @staticmethod
    def languages(incomplete: str) -> List[str]:
        """Complete language names and aliases."""
        langs = sorted(constants.SUPPORTED_LANGUAGES | set(constants.LANGUAGE_ALIASES))
        return [lang for lang in langs if lang.startswith(incomplete.lower())]
