"""Markup minification: drop comments, collapse whitespace."""

from __future__ import annotations

import re

# Whitespace around these survives collapsing (a single space is kept)
INLINE_TAGS: frozenset[str] = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "b",
        "bdi",
        "bdo",
        "big",
        "button",
        "cite",
        "code",
        "del",
        "dfn",
        "em",
        "font",
        "i",
        "img",
        "input",
        "ins",
        "kbd",
        "label",
        "mark",
        "math",
        "nobr",
        "object",
        "q",
        "rp",
        "rt",
        "rtc",
        "ruby",
        "s",
        "samp",
        "select",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "svg",
        "textarea",
        "time",
        "tt",
        "u",
        "var",
    }
)

_TOKEN_PATTERN = re.compile(
    r"(?P<comment><!--.*?-->)"
    r"|(?P<raw><(?P<rawtag>pre|textarea|script|style)\b[^>]*>.*?</(?P=rawtag)\s*>)"
    r"|(?P<tag></?(?P<tagname>[A-Za-z][\w:-]*)(?:\"[^\"]*\"|'[^']*'|[^'\">])*>)",
    re.DOTALL | re.IGNORECASE,
)
_QUOTED_PATTERN = re.compile(r"(\"[^\"]*\"|'[^']*')")
# HTML whitespace only; a non-breaking space is content
_WHITESPACE_PATTERN = re.compile(r"[ \t\n\r\f]+")


def _collapse_tag(tag: str) -> str:
    """Collapse whitespace between attributes, leaving quoted values alone."""
    parts = _QUOTED_PATTERN.split(tag)
    for index in range(0, len(parts), 2):
        parts[index] = _WHITESPACE_PATTERN.sub(" ", parts[index])
    collapsed = "".join(parts)
    return re.sub(r"\s+(/?>)$", r"\1", collapsed)


def _tokenize(markup: str) -> list[tuple[str, str, bool]]:
    """Split markup into (kind, text, inline) tuples; comments are dropped here."""
    tokens: list[tuple[str, str, bool]] = []

    def add_text(text: str) -> None:
        # text on both sides of a dropped comment becomes one run
        if tokens and tokens[-1][0] == "text":
            text = tokens.pop()[1] + text
        tokens.append(("text", text, True))

    position = 0
    for match in _TOKEN_PATTERN.finditer(markup):
        if match.start() > position:
            add_text(markup[position : match.start()])
        position = match.end()

        if match.group("comment"):
            comment = match.group("comment")
            # conditional comments are markup, not commentary
            if comment.startswith("<!--[if") or comment.startswith("<!--<![endif"):
                tokens.append(("raw", comment, True))
        elif match.group("raw"):
            name = match.group("rawtag").lower()
            tokens.append(("raw", match.group("raw"), name in INLINE_TAGS))
        else:
            name = match.group("tagname").lower()
            tokens.append(("tag", _collapse_tag(match.group("tag")), name in INLINE_TAGS))

    if position < len(markup):
        add_text(markup[position:])
    return tokens


def minify_html(markup: str) -> str:
    """
    Minify a markup fragment.

    Comments are removed and runs of whitespace become one space. Whitespace
    touching a block-level tag is removed entirely; next to inline tags a
    single space is kept because it renders. The bodies of pre, textarea,
    script and style elements are left exactly as written.
    """
    tokens = _tokenize(markup)
    pieces: list[str] = []

    for index, (kind, text, _inline) in enumerate(tokens):
        if kind != "text":
            pieces.append(text)
            continue

        text = _WHITESPACE_PATTERN.sub(" ", text)
        prev_inline = index > 0 and tokens[index - 1][2]
        next_inline = index + 1 < len(tokens) and tokens[index + 1][2]

        if not prev_inline:
            text = text.lstrip(" ")
        if not next_inline:
            text = text.rstrip(" ")
        pieces.append(text)

    return "".join(pieces).strip(" ")
