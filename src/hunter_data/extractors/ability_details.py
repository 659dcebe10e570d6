"""Ability detail extractor: the "Spell Details" table of a spell page.

Rows come in three shapes:

- icon-tab rows, whose value cell embeds a small `table.icontab` linking to
  another spell (Spirit Mend, Molten Armor, ...):

    <tr>
      <th>Effect #1</th>
      <td>Apply Aura: Proc Trigger Spell
        <table class="icontab"><tr>
          <th id="icontab-icon1"></th>
          <td><a href="/spell=159786">Molten Hide</a></td>
        </tr></table>
        <script>WH.ge('icontab-icon1')...</script>
      </td>
    </tr>

- the Flags row, an unordered list of flags;
- generic rows, `<tr><th>Cast time</th><td>Instant</td></tr>`.

Rows without a header (container rows, the inner icon-tab rows) are skipped.
"""

from __future__ import annotations

import re
from copy import copy
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup, Tag

from hunter_data.core.errors import ExtractionError
from hunter_data.core.models import EntityId
from hunter_data.core.scraping.normalizer import camel_case, trim
from hunter_data.core.scraping.parser import (
    inner_html,
    replace_line_breaks,
    slice_between,
    strip_elements,
)

SPELL_DETAILS_SECTION = (
    r'</h2>\s*(<table[^>]*?id="spelldetails"[^>]*>.*?)<h2[^>]*>Related</h2>'
)
DECORATION_TAGS = ("dfn", "small", "span")
SPELL_HREF = re.compile(r"^(?:https?://[^/]+)?/spell=(\d+)")

DetailRecord = Dict[str, Any]


def extract_details_table(body: str) -> str:
    """Cut the spell details table out of the page and clean it for parsing."""
    section = slice_between(body, SPELL_DETAILS_SECTION)
    if section is None:
        raise ExtractionError("spell details section not found")
    for element in DECORATION_TAGS:
        section = strip_elements(section, element)
    # unclosed <br> tags confuse the row walk
    return replace_line_breaks(section, "\n")


def _header(row: Tag) -> Optional[str]:
    th = row.find("th")
    if th is None:
        return None
    return trim(th.get_text()) or None


def _icontab_anchor(row: Tag) -> Optional[Tag]:
    cell = row.find("td")
    if cell is None:
        return None
    icontab = cell.find("table", class_="icontab", recursive=False)
    if icontab is None:
        return None
    first_cell = icontab.find("td")
    if first_cell is None:
        return None
    return first_cell.find("a", href=True)


def _spell_id_from_href(href: str) -> Optional[EntityId]:
    m = SPELL_HREF.match(href)
    if m:
        return EntityId(m.group(1))
    cleaned = trim(href.replace("/spell=", ""))
    return EntityId(cleaned) if cleaned else None


def parse_icontab_row(row: Tag, anchor: Tag) -> Dict[str, Any]:
    cell = copy(row.find("td"))
    for nested in cell.find_all(["table", "script"]):
        nested.decompose()
    return {
        "description": trim(cell.decode_contents()),
        "spellId": _spell_id_from_href(str(anchor["href"])),
        "spellName": trim(anchor.get_text()),
    }


def parse_flags(cell: Tag) -> list[str]:
    return [inner_html(li) for li in cell.find_all("li")]


def parse_row(record: DetailRecord, row: Tag) -> DetailRecord:
    """Fold one `tr` into `record`. Icon-tab shape wins over flags/generic."""
    header = _header(row)
    if header is None:
        return record
    key = camel_case(header)
    if not key:
        return record

    anchor = _icontab_anchor(row)
    if anchor is not None:
        record[key] = parse_icontab_row(row, anchor)
        return record

    cell = row.find("td")
    if cell is None:
        return record
    if key == "flags":
        record[key] = parse_flags(cell)
    else:
        record[key] = inner_html(cell)
    return record


def parse_ability_details(body: str) -> DetailRecord:
    """Return `{camelCaseHeader: value}` for the spell details table in `body`.

    Raises `ExtractionError` when the page has no spell details section.
    """
    table = extract_details_table(body)
    soup = BeautifulSoup(table, "html.parser")
    record: DetailRecord = {}
    for row in soup.find_all("tr"):
        record = parse_row(record, row)
    return record
