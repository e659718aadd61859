"""JSON syntax highlighting for the result page.

The markup is inserted into HTML as-is, and model output is untrusted, so
every piece of text is HTML-escaped. Removing the spans therefore gives the
serialized JSON only after entities such as `&lt;` and `&amp;` are unescaped.
"""

import json
import re
from html import escape
from typing import Any

TOKEN_RE = re.compile(
    r'(?P<string>"(?:\\u[a-zA-Z0-9]{4}|\\[^u]|[^\\"])*")(?P<colon>\s*:)?'
    r"|\b(?P<boolean>true|false)\b"
    r"|\b(?P<null>null)\b"
    r"|(?P<number>-?[0-9]+(?:\.[0-9]*)?(?:[eE][+\-]?[0-9]+)?)"
)


def token_class(match: re.Match) -> str:
    """Classify a token match as key, string, boolean, null or number."""
    if match.group("string") is not None:
        return "key" if match.group("colon") is not None else "string"
    if match.group("boolean") is not None:
        return "boolean"
    if match.group("null") is not None:
        return "null"
    return "number"


def highlight(value: Any) -> str:
    """Wrap each JSON token in a ``<span>`` carrying its token class.

    Non-string values are serialized with two-space indentation first. All
    text is HTML-escaped, so removing the spans and unescaping entities gives
    back the serialized JSON exactly.

    Args:
        value: Any JSON value, or JSON text

    Returns:
        HTML markup suitable for a ``<pre>`` block
    """
    text = value if isinstance(value, str) else json.dumps(value, indent=2, ensure_ascii=False)

    parts = []
    pos = 0
    for match in TOKEN_RE.finditer(text):
        parts.append(escape(text[pos : match.start()], quote=False))
        parts.append(
            f'<span class="{token_class(match)}">{escape(match.group(0), quote=False)}</span>'
        )
        pos = match.end()
    parts.append(escape(text[pos:], quote=False))
    return "".join(parts)
