"""HTML text helpers used before (and instead of) structural parsing.

Wowhead markup is regular enough that a few regexes clean it up; the
table walk itself is done with BeautifulSoup.
"""

from __future__ import annotations

import re
from copy import copy
from typing import Optional

from bs4 import Tag

from hunter_data.core.scraping.normalizer import trim

_BR = re.compile(r"<br\b[^>]*/?>", re.IGNORECASE)


def slice_between(html: str, pattern: str) -> Optional[str]:
    """Return the first capture group of `pattern` in `html`, or None."""
    m = re.search(pattern, html, re.DOTALL)
    return m.group(1) if m else None


def strip_elements(html: str, element: str) -> str:
    """Remove `<element ...>` / `</element>` pairs, keeping their content.

    Nested pairs are peeled one level per pass until none remain.
    """
    rx = re.compile(rf"<{element}\b[^>]*>(.*?)</{element}>", re.DOTALL)
    while True:
        stripped = rx.sub(r"\1", html)
        if stripped == html:
            return stripped
        html = stripped


def replace_line_breaks(html: str, replacement: str = "\n") -> str:
    """`<br>`, `<br/>` and `<br />` become `replacement`."""
    return _BR.sub(replacement, html)


def inner_html(tag: Tag, unwrap: tuple[str, ...] = ("a",)) -> str:
    """Inner markup of `tag` with `unwrap` tags removed (content kept), trimmed.

    Works on a copy; the parsed tree is left untouched.
    """
    clone = copy(tag)
    for name in unwrap:
        for el in clone.find_all(name):
            el.unwrap()
    return trim(clone.decode_contents())
