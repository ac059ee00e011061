"""Lucene special-character escaping.

Reserved characters (Lucene classic query parser):
    + - & | ! ( ) { } [ ] ^ " ~ * ? : \\ /

Each one is prefixed with a backslash. Whitespace and every other character
pass through untouched.
"""

from __future__ import annotations

import re

_RE_RESERVED = re.compile(r'([+\-&|!(){}\[\]^"~*?:\\/])')


def escape_special_characters(raw: str) -> str:
    """Backslash-escape every Lucene reserved character in ``raw``."""
    return _RE_RESERVED.sub(r"\\\1", raw)
