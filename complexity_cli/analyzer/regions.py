"""
Scoped-region extraction: the body of a function or method.
"""

import re

# Code after the colon that ends a `def` header: `def f(n): return n`
_INLINE_BODY = re.compile(r"\)\s*(?:->[^:\n]*)?:(.*)$")


def extract_body(source: str, start_offset: int) -> str:
    """
    Return the balanced ``{...}`` region that starts at or after ``start_offset``.

    Counting begins at the first ``{``; the returned text runs from that brace
    to the ``}`` that brings the depth back to zero, both inclusive. An
    unterminated region yields everything scanned from the first brace, and
    text with no brace at all yields an empty string.
    """
    depth = 0
    body_start = None

    for i in range(max(start_offset, 0), len(source)):
        char = source[i]
        if char == "{":
            if body_start is None:
                body_start = i
            depth += 1
        elif char == "}" and body_start is not None:
            depth -= 1
            if depth == 0:
                return source[body_start : i + 1]

    if body_start is None:
        return ""
    return source[body_start:]


def _indentation(line: str) -> int:
    expanded = line.expandtabs(4)
    return len(expanded) - len(expanded.lstrip())


def extract_indented_body(source: str, start_offset: int) -> str:
    """
    Return the indentation-delimited block under the header at ``start_offset``.

    The header is the line containing ``start_offset``. Code after the colon
    that ends the header (``def f(n): return n``) is the first body line,
    without its indentation. The block is then every following line indented
    deeper than the header; blank lines are kept and the first non-blank line
    at or above the header's indentation ends it.
    """
    start_offset = max(start_offset, 0)
    line_start = source.rfind("\n", 0, start_offset) + 1
    line_end = source.find("\n", start_offset)
    header = source[line_start:] if line_end == -1 else source[line_start:line_end]

    body_lines = []
    inline = _INLINE_BODY.search(header, start_offset - line_start)
    if inline:
        code = inline.group(1).strip()
        if code and not code.startswith("#"):
            body_lines.append(code)

    if line_end == -1:
        return "\n".join(body_lines)

    header_indent = _indentation(header)

    for line in source[line_end + 1 :].split("\n"):
        if not line.strip():
            body_lines.append(line)
            continue
        if _indentation(line) <= header_indent:
            break
        body_lines.append(line)

    while body_lines and not body_lines[-1].strip():
        body_lines.pop()

    return "\n".join(body_lines)
