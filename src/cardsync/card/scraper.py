#!/usr/bin/env python3
"""
Card Activity Page Scraper

Extracts raw activity rows from a saved card activity HTML page.

Each transaction row is an element matching
``#activity-panel [data-type='transaction']`` whose first five child elements
hold, in order: the type, the yearless date, the description block, the
status and the amount. Rows appear newest first.

The scraper does not interpret anything; it only lifts text out of the page.
Elements that are absent are reported as None so the parser can reject the
row.
"""

import logging
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from .models import RawCardEntry

logger = logging.getLogger(__name__)

TRANSACTION_SELECTOR = "#activity-panel [data-type='transaction']"


def _first_text(parent: Tag | None, tag_name: str) -> str | None:
    """Text of the first `tag_name` descendant, or None if there is none."""
    if parent is None:
        return None
    element = parent.find(tag_name)
    if not isinstance(element, Tag):
        return None
    return element.get_text().strip()


def _description_fragments(parent: Tag | None) -> tuple[str, ...]:
    """Non-empty text fragments under every paragraph, in document order."""
    if parent is None:
        return ()
    fragments: list[str] = []
    for paragraph in parent.find_all("p"):
        fragments.extend(paragraph.stripped_strings)
    return tuple(fragments)


def parse_activity_row(row: Tag) -> RawCardEntry:
    """Lift the raw labels out of a single transaction row."""
    children: list[Tag | None] = [child for child in row.find_all(recursive=False) if isinstance(child, Tag)]
    # Pad so short rows yield None labels instead of IndexError
    children.extend([None] * (5 - len(children)))
    type_el, date_el, description_el, status_el, amount_el = children[:5]

    return RawCardEntry(
        type_label=_first_text(type_el, "span"),
        date_label=_first_text(date_el, "span"),
        description_fragments=_description_fragments(description_el),
        status_label=_first_text(status_el, "div"),
        amount_text=_first_text(amount_el, "div"),
    )


def scrape_card_entries(html: str) -> list[RawCardEntry]:
    """
    Extract all transaction rows from an activity page.

    Args:
        html: Page HTML

    Returns:
        Raw entries in page order (newest first)
    """
    soup = BeautifulSoup(html, "html.parser")
    rows = soup.select(TRANSACTION_SELECTOR)
    logger.debug("Found %d activity rows", len(rows))
    return [parse_activity_row(row) for row in rows]


def load_card_entries(html_path: str | Path) -> list[RawCardEntry]:
    """
    Read a saved activity page and extract its rows.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    html_path = Path(html_path)
    if not html_path.exists():
        raise FileNotFoundError(f"Activity page not found: {html_path}")

    with open(html_path, encoding="utf-8") as f:
        content = f.read()

    entries = scrape_card_entries(content)
    logger.info("Scraped %d card activity rows from %s", len(entries), html_path)
    return entries
