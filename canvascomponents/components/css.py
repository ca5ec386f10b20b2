"""
Component style handling: minification and the Canvas property allow-list.

The minifier is a single character scan rather than a chain of regexes so
that quoted strings survive untouched and a ``+`` inside ``calc()`` keeps its
surrounding spaces. It also doubles as the syntax check: unbalanced braces,
unterminated comments and unterminated strings raise StyleError.
"""

from __future__ import annotations

from collections.abc import Iterator

from canvascomponents.components.allowed_properties import ALLOWED_CSS_PROPERTIES
from canvascomponents.errors import StyleError, UnsupportedPropertyError

# Whitespace next to these is never significant
_STRIP_AROUND = frozenset("{};,")
# Combinators: only safe to squeeze outside parentheses (calc(1px + 2px))
_STRIP_AROUND_TOP_LEVEL = frozenset(">~+")
_STRIP_AFTER = frozenset("(:")
_STRIP_BEFORE = frozenset(")!")

# At-rules whose body holds rules (selectors), not declarations
_RULE_LIST_AT_RULES = frozenset(
    {"media", "supports", "document", "container", "layer", "scope", "starting-style"}
)


def _holds_rules(prelude: str) -> bool:
    if not prelude.startswith("@"):
        return False
    name = prelude[1:].split(" ", 1)[0].split("(", 1)[0].lower()
    return name in _RULE_LIST_AT_RULES or name.endswith("keyframes")


def _scan_string(css: str, start: int, line: int, filename: str | None) -> int:
    """Return the index just past the string literal opening at ``start``."""
    quote = css[start]
    i = start + 1
    while i < len(css):
        ch = css[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n":
            break
        i += 1
    raise StyleError(f"Unterminated string (line {line})", filename)


def _needs_space(prev: str, nxt: str, paren_depth: int, in_declarations: bool) -> bool:
    if prev in _STRIP_AROUND or nxt in _STRIP_AROUND:
        return False
    if paren_depth == 0 and (prev in _STRIP_AROUND_TOP_LEVEL or nxt in _STRIP_AROUND_TOP_LEVEL):
        return False
    if prev in _STRIP_AFTER or nxt in _STRIP_BEFORE:
        return False
    # "color : red" in a declaration block; "a :hover" in a selector keeps its space
    return not (nxt == ":" and in_declarations and paren_depth == 0)


def minify_css(css: str, filename: str | None = None) -> str:
    """
    Minify a stylesheet.

    Args:
        css: Raw stylesheet text.
        filename: Component file, used in error messages only.

    Returns:
        The stylesheet with comments removed and whitespace collapsed.

    Raises:
        StyleError: On unbalanced braces/parentheses or unterminated
            comments and strings.
    """
    out: list[str] = []
    pending_space = False
    # (line the block opened on, block holds declarations)
    brace_stack: list[tuple[int, bool]] = []
    prelude_start = 0
    paren_depth = 0
    line = 1
    i = 0
    n = len(css)

    def emit(token: str) -> None:
        nonlocal pending_space, prelude_start
        in_declarations = bool(brace_stack) and brace_stack[-1][1]
        if pending_space and out and _needs_space(out[-1][-1], token[0], paren_depth, in_declarations):
            out.append(" ")
        pending_space = False
        out.append(token)
        if token in ("{", "}", ";"):
            prelude_start = len(out)

    while i < n:
        ch = css[i]

        if ch.isspace():
            if ch == "\n":
                line += 1
            pending_space = True
            i += 1
        elif css.startswith("/*", i):
            end = css.find("*/", i + 2)
            if end == -1:
                raise StyleError(f"Unterminated comment (line {line})", filename)
            line += css.count("\n", i, end)
            pending_space = True
            i = end + 2
        elif ch in "\"'":
            end = _scan_string(css, i, line, filename)
            emit(css[i:end])
            i = end
        elif ch == "{":
            prelude = "".join(out[prelude_start:]).strip()
            emit(ch)
            brace_stack.append((line, not _holds_rules(prelude)))
            i += 1
        elif ch == "}":
            if not brace_stack:
                raise StyleError(f"Unexpected '}}' (line {line})", filename)
            brace_stack.pop()
            pending_space = False
            # ";}" -> "}"
            if out and out[-1] == ";":
                out.pop()
            emit(ch)
            i += 1
        elif ch == ";" and out and out[-1] in (";", "{"):
            # empty declaration
            i += 1
        else:
            if ch == "(":
                paren_depth += 1
            elif ch == ")":
                if paren_depth == 0:
                    raise StyleError(f"Unexpected ')' (line {line})", filename)
                paren_depth -= 1
            emit(ch)
            i += 1

    if brace_stack:
        raise StyleError(f"Unclosed block opened on line {brace_stack[-1][0]}", filename)
    if paren_depth:
        raise StyleError("Unclosed '('", filename)

    return "".join(out).strip()


def iter_declared_properties(css: str) -> Iterator[str]:
    """
    Yield the property name of every declaration in a stylesheet.

    Selectors and at-rule preludes (text before a ``{``) are skipped, so
    ``a:hover`` is never mistaken for a property. Semicolons inside strings
    or parentheses (``url(data:image/png;base64,...)``) do not split.
    """
    buffer: list[str] = []
    depth = 0
    paren_depth = 0
    i = 0
    n = len(css)

    def flush() -> str | None:
        text = "".join(buffer).strip()
        buffer.clear()
        if depth == 0 or ":" not in text:
            return None
        name = text.split(":", 1)[0].strip().lower()
        return name or None

    while i < n:
        ch = css[i]
        if css.startswith("/*", i):
            end = css.find("*/", i + 2)
            i = n if end == -1 else end + 2
            continue
        if ch in "\"'":
            end = css.find(ch, i + 1)
            end = n if end == -1 else end + 1
            buffer.append(css[i:end])
            i = end
            continue

        if ch == "(":
            paren_depth += 1
        elif ch == ")":
            paren_depth = max(paren_depth - 1, 0)

        if paren_depth == 0 and ch == "{":
            buffer.clear()
            depth += 1
        elif paren_depth == 0 and ch in ";}":
            name = flush()
            if name:
                yield name
            if ch == "}":
                depth = max(depth - 1, 0)
        else:
            buffer.append(ch)
        i += 1

    name = flush()
    if name:
        yield name


def check_allowed_properties(css: str, filename: str | None = None) -> None:
    """Raise UnsupportedPropertyError for the first property Canvas would strip."""
    for name in iter_declared_properties(css):
        if name not in ALLOWED_CSS_PROPERTIES:
            raise UnsupportedPropertyError(name, filename)
