import re

from complexity_cli.analyzer.nesting import BraceNesting

from ..language_plugin import LanguagePlugin

# Return type (qualified, templated, pointer or reference) then name and params
TYPED_FUNCTION_HEADER = re.compile(
    r"^[ \t]*(?:(?:static|inline|virtual|constexpr|const|unsigned|signed|extern)\s+)*"
    r"(?!(?:else|new|return|throw|delete)\b)[\w:<>,]+[\s*&]+(\w+)\s*\([^)]*\)\s*"
    r"(?:const\s*)?(?:noexcept\s*)?(?:override\s*)?\{",
    re.MULTILINE,
)


class CppPlugin(LanguagePlugin):
    """
    C++ dialect: brace blocks and typed function headers.

    Plain C shares the dialect: the `c` tag and `.c`/`.h` files resolve here.
    """

    name = "cpp"
    aliases = ["c++", "cxx", "cc", "c"]
    extensions = [".cpp", ".cc", ".cxx", ".hpp", ".hh", ".h", ".c"]
    function_patterns = (TYPED_FUNCTION_HEADER,)

    def nesting_strategy(self):
        return BraceNesting()

    def _body_offset(self, match):
        return match.end() - 1
