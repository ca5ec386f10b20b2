"""
JavaScript minification for component scripts and the assembled bundle.

A small tokenizer, not a parser: it knows enough about strings, template
literals, regular expression literals and comments to strip whitespace and
comments safely, and enough about brackets to reject obviously broken
scripts before they end up inside a bookmarklet.

Whitespace is dropped unless removing it would glue two tokens together
(``a + +b``, ``return x``). Newlines are kept wherever automatic semicolon
insertion might depend on them.
"""

from __future__ import annotations

from canvascomponents.errors import ScriptError

_LINE_TERMINATORS = frozenset("\n\u2028\u2029")
# U+2028/U+2029 are legal inside string literals
_STRING_TERMINATORS = frozenset("\n\r")
_CLOSERS = {")": "(", "]": "[", "}": "{"}

# After these keywords a "/" starts a regular expression, not a division
_REGEX_AFTER_KEYWORDS = frozenset(
    {
        "await",
        "case",
        "delete",
        "do",
        "else",
        "in",
        "instanceof",
        "new",
        "of",
        "return",
        "throw",
        "typeof",
        "void",
        "yield",
    }
)

# "(...)" after these is a statement header; a "/" after its ")" starts a regex
_HEADER_KEYWORDS = frozenset({"if", "while", "for", "with"})

# A newline before one of these can never end a statement
_CONTINUATION_CHARS = frozenset(".,;:?)]}=*%&|^<>")

_WORD = "word"
_NUMBER = "number"
_STRING = "string"
_TEMPLATE = "template"
_REGEX = "regex"
_PUNCT = "punct"

_VALUE_KINDS = frozenset({_WORD, _NUMBER, _STRING, _TEMPLATE, _REGEX})


def _is_ident_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_$\\#" or ord(ch) > 127


class _Minifier:
    def __init__(self, source: str, filename: str | None):
        self.src = source
        self.filename = filename
        self.out: list[str] = []
        self.kinds: list[str] = []
        self.line = 1
        # (opener, line, opener is a statement header paren)
        self.brackets: list[tuple[str, int, bool]] = []
        self.closed_header = False
        self.pending_space = False
        self.pending_newline = False

    def error(self, message: str, line: int | None = None) -> ScriptError:
        return ScriptError(message, line if line is not None else self.line, self.filename)

    # -- scanning helpers -------------------------------------------------

    def scan_string(self, start: int) -> int:
        src = self.src
        quote = src[start]
        i = start + 1
        while i < len(src):
            ch = src[i]
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                return i + 1
            if ch in _STRING_TERMINATORS:
                break
            i += 1
        raise self.error("Unterminated string literal")

    def scan_template(self, start: int) -> int:
        src = self.src
        i = start + 1
        while i < len(src):
            ch = src[i]
            if ch == "\\":
                i += 2
            elif ch == "`":
                return i + 1
            elif src.startswith("${", i):
                i = self.skip_substitution(i + 2)
            else:
                i += 1
        raise self.error("Unterminated template literal")

    def skip_substitution(self, start: int) -> int:
        """Return the index just past the ``}`` closing a ``${`` substitution."""
        src = self.src
        depth = 1
        i = start
        while i < len(src):
            ch = src[i]
            if ch in "\"'":
                i = self.scan_string(i)
            elif ch == "`":
                i = self.scan_template(i)
            elif ch == "{":
                depth += 1
                i += 1
            elif ch == "}":
                depth -= 1
                i += 1
                if depth == 0:
                    return i
            else:
                i += 1
        raise self.error("Unterminated template literal")

    def scan_regex(self, start: int) -> int:
        src = self.src
        i = start + 1
        in_class = False
        while i < len(src):
            ch = src[i]
            if ch == "\\":
                i += 2
                continue
            if ch in _LINE_TERMINATORS:
                break
            if ch == "[":
                in_class = True
            elif ch == "]":
                in_class = False
            elif ch == "/" and not in_class:
                i += 1
                while i < len(src) and _is_ident_char(src[i]):
                    i += 1
                return i
            i += 1
        raise self.error("Unterminated regular expression")

    def scan_number(self, start: int) -> int:
        src = self.src
        i = start
        is_hex = src.startswith(("0x", "0X"), start)
        while i < len(src):
            ch = src[i]
            if ch.isalnum() or ch in "._":
                i += 1
            elif ch in "+-" and not is_hex and src[i - 1] in "eE":
                i += 1
            else:
                break
        return i

    def scan_word(self, start: int) -> int:
        i = start
        while i < len(self.src) and _is_ident_char(self.src[i]):
            i += 1
        return i

    # -- token decisions --------------------------------------------------

    def regex_allowed(self) -> bool:
        if not self.out:
            return True
        prev, kind = self.out[-1], self.kinds[-1]
        if kind == _WORD:
            return prev in _REGEX_AFTER_KEYWORDS
        if kind in _VALUE_KINDS:
            return False
        if prev == ")":
            return self.closed_header
        return prev != "]"

    def ends_statement(self) -> bool:
        prev, kind = self.out[-1], self.kinds[-1]
        if kind in _VALUE_KINDS or prev in (")", "]", "}"):
            return True
        # postfix ++ / --
        return len(self.out) >= 2 and prev in "+-" and self.out[-2] == prev

    def needs_space(self, token: str, kind: str) -> bool:
        prev, prev_kind = self.out[-1], self.kinds[-1]
        a, b = prev[-1], token[0]
        if _is_ident_char(a) and _is_ident_char(b):
            return True
        if a == b and a in "+-/":
            return True
        if prev_kind == _REGEX and _is_ident_char(b):
            return True
        return prev_kind == _NUMBER and b == "."

    def emit(self, token: str, kind: str) -> None:
        if self.out:
            if self.pending_newline and self.ends_statement() and token[0] not in _CONTINUATION_CHARS:
                self.out.append("\n")
                self.kinds.append(_PUNCT)
            elif (self.pending_space or self.pending_newline) and self.needs_space(token, kind):
                self.out.append(" ")
                self.kinds.append(_PUNCT)
        self.pending_space = False
        self.pending_newline = False
        self.out.append(token)
        self.kinds.append(kind)

    def emit_punct(self, ch: str) -> None:
        if ch in "([{":
            header = (
                ch == "("
                and bool(self.out)
                and self.kinds[-1] == _WORD
                and self.out[-1] in _HEADER_KEYWORDS
            )
            self.brackets.append((ch, self.line, header))
        elif ch in _CLOSERS:
            if not self.brackets or self.brackets[-1][0] != _CLOSERS[ch]:
                raise self.error(f"Unexpected '{ch}'")
            _, _, header = self.brackets.pop()
            if ch == ")":
                self.closed_header = header
        self.emit(ch, _PUNCT)

    # -- main loop --------------------------------------------------------

    def run(self) -> str:
        src = self.src
        n = len(src)
        i = 0
        while i < n:
            ch = src[i]
            if ch in _LINE_TERMINATORS:
                self.line += 1
                self.pending_newline = True
                i += 1
            elif ch.isspace() or ch == "\ufeff":
                self.pending_space = True
                i += 1
            elif src.startswith("//", i):
                while i < n and src[i] not in _LINE_TERMINATORS:
                    i += 1
                self.pending_space = True
            elif src.startswith("/*", i):
                end = src.find("*/", i + 2)
                if end == -1:
                    raise self.error("Unterminated comment")
                newlines = src.count("\n", i, end)
                if newlines:
                    self.line += newlines
                    self.pending_newline = True
                self.pending_space = True
                i = end + 2
            elif ch in "\"'`" or (ch == "/" and self.regex_allowed()):
                if ch == "`":
                    end, kind = self.scan_template(i), _TEMPLATE
                elif ch == "/":
                    end, kind = self.scan_regex(i), _REGEX
                else:
                    end, kind = self.scan_string(i), _STRING
                token = src[i:end]
                self.emit(token, kind)
                self.line += token.count("\n")
                i = end
            elif ch.isdigit() or (ch == "." and i + 1 < n and src[i + 1].isdigit()):
                end = self.scan_number(i)
                self.emit(src[i:end], _NUMBER)
                i = end
            elif _is_ident_char(ch):
                end = self.scan_word(i)
                self.emit(src[i:end], _WORD)
                i = end
            else:
                self.emit_punct(ch)
                i += 1

        if self.brackets:
            opener, line, _ = self.brackets[-1]
            raise self.error(f"Unclosed '{opener}'", line)
        return "".join(self.out)


def minify_js(source: str, filename: str | None = None) -> str:
    """
    Minify a script.

    Args:
        source: JavaScript source text.
        filename: Used in error messages only.

    Raises:
        ScriptError: On unterminated literals/comments or unbalanced brackets.
    """
    if not source.strip():
        return ""
    return _Minifier(source, filename).run()
