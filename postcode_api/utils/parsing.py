from __future__ import annotations
import logging
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from postcode_api.models.schemas import PostcodeRecord

logger = logging.getLogger(__name__)


def cell_text(cell: Tag) -> str:
    return cell.get_text().strip()


def split_suburb_state(text: str) -> tuple[str, str]:
    """Split "SUBURB, STATE" on the first comma. No comma means no state."""
    suburb, _, state = text.strip().partition(",")
    return suburb.strip(), state.strip()


def parse_postcode_row(row: Tag) -> Optional[PostcodeRecord]:
    cells = row.find_all("td")
    # Columns are: 0=Postcode, 1="SUBURB, STATE", 2=Category
    if len(cells) < 2:
        return None

    postcode = cell_text(cells[0])
    suburb, state = split_suburb_state(cell_text(cells[1]))
    if not postcode or not suburb:
        return None

    return PostcodeRecord(postcode=postcode, suburb=suburb, state=state)


def parse_postcode_table(soup: BeautifulSoup, selector: str) -> tuple[list[PostcodeRecord], bool]:
    """
    Collect postcode records from every row under the results table selector.

    Returns the records in page order and whether the selector matched any rows.
    The first matched row is the header and is always skipped.
    """
    rows = soup.select(f"{selector} tr")
    records: list[PostcodeRecord] = []

    for index, row in enumerate(rows):
        if index == 0:
            continue
        record = parse_postcode_row(row)
        if record is None:
            logger.debug(f"Skipping malformed postcode row {index}")
            continue
        records.append(record)

    return records, bool(rows)
