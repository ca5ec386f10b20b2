"""Bookmarklet encoding."""

from __future__ import annotations

from html import escape
from urllib.parse import quote

from canvascomponents.config import BOOKMARKLET_TITLE
from canvascomponents.errors import BuildError

# Characters ECMAScript's encodeURI leaves alone, beyond ASCII letters/digits
_ENCODE_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"

BOOKMARKLET_HINT = "<p>Drag the link to the left into your bookmarks bar.</p>"


def encode_uri(text: str) -> str:
    """Percent-encode like JavaScript's ``encodeURI`` (UTF-8, reserved chars kept)."""
    try:
        return quote(text, safe=_ENCODE_URI_SAFE)
    except UnicodeEncodeError as exc:
        # lone surrogates; encodeURI throws URIError for the same input
        raise BuildError(f"Script cannot be URI-encoded: {exc}") from exc


def create_bookmarklet(js: str) -> str:
    """Wrap minified script in an IIFE and turn it into a ``javascript:`` URI."""
    return encode_uri("javascript:!function(){" + js + "}()")


def bookmarklet_html(uri: str, title: str = BOOKMARKLET_TITLE) -> str:
    """HTML snippet with a draggable link to the bookmarklet."""
    return f'<a href="{escape(uri)}" title="{escape(title)}">{escape(title, quote=False)}</a>{BOOKMARKLET_HINT}'
