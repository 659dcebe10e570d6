"""Label normalizers.

Turns human readable labels ("Cast time", "Effect #1") and URIs into stable
keys and filenames. All functions are pure, accept any string and are
idempotent: `f(f(x)) == f(x)`.
"""

from __future__ import annotations

import re
from typing import List

_NON_WORD = re.compile(r"[^0-9A-Za-z\s\-_]")
_SEPARATOR_RUN = re.compile(r"[\s\-_]+")


def trim(s: str) -> str:
    return s.strip()


def _words(s: str) -> List[str]:
    # separators are whitespace, dash and underscore; anything else that is
    # not ASCII alphanumeric is dropped before splitting
    s = _NON_WORD.sub("", s)
    return [w for w in _SEPARATOR_RUN.split(s) if w]


def snake_case(s: str) -> str:
    """`"  Cast--Time "` -> `"cast_time"`."""
    return "_".join(w.lower() for w in _words(s))


def _camel_word(word: str) -> str:
    # words that are already camelCase ("castTime") are kept as-is
    if not word[0].isupper() and any(c.isupper() for c in word):
        return word
    return word.lower()


def camel_case(s: str) -> str:
    """`"Cast time"` -> `"castTime"`, `"Effect #1"` -> `"effect1"`."""
    words = [_camel_word(w) for w in _words(s)]
    if not words:
        return ""
    head, rest = words[0], words[1:]
    return head + "".join(w[0].upper() + w[1:] for w in rest)
