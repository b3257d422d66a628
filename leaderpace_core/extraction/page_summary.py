"""Condensed text view of a timing page, small enough for an LLM prompt."""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

MAX_SUMMARY_CHARS = 20000
MAX_TABLE_ROWS = 20
MAX_CHECKPOINTS = 30

PROVIDERS = {
    "eqtiming": "live.eqtiming.com",
    "skiclassics": "skiclassics.com",
}

CHECKPOINT_SELECTOR = "[data-checkpoint], .col-point-scroll, .checkpoint, h1, h2, h3, h4"


def _get_text(el) -> str:
    if not el:
        return ""
    return " ".join(el.get_text(separator=" ", strip=True).split())


def detect_provider(html: str, url: Optional[str] = None) -> str:
    haystack = f"{url or ''} {html[:50000] if html else ''}".lower()
    for provider, marker in PROVIDERS.items():
        if marker in haystack or provider in haystack:
            return provider
    return "generic"


def _checkpoints(soup: BeautifulSoup) -> List[str]:
    seen = []
    for el in soup.select(CHECKPOINT_SELECTOR):
        text = el.get("data-checkpoint") or _get_text(el)
        if text and text not in seen:
            seen.append(text[:120])
        if len(seen) >= MAX_CHECKPOINTS:
            break
    return seen


def _results_table(soup: BeautifulSoup) -> Optional[List[str]]:
    """Header + first rows of the table with the most rows, as pipe-joined lines."""
    tables = soup.find_all("table")
    if not tables:
        return None
    table = max(tables, key=lambda t: len(t.find_all("tr")))
    rows = table.find_all("tr")
    if not rows:
        return None

    lines = []
    header_cells = table.find_all("th")
    if header_cells:
        lines.append(" | ".join(_get_text(th) for th in header_cells))
    body_rows = [r for r in rows if r.find("td")]
    for row in body_rows[:MAX_TABLE_ROWS]:
        lines.append(" | ".join(_get_text(td) for td in row.find_all(["td", "th"])))
    return lines


def build_page_summary(html: str, url: Optional[str] = None, max_chars: int = MAX_SUMMARY_CHARS) -> str:
    soup = BeautifulSoup(html or "", "html.parser")
    for el in soup(["script", "style", "noscript", "svg"]):
        el.decompose()

    parts = [f"Provider: {detect_provider(html, url)}"]
    title = _get_text(soup.title)
    if title:
        parts.append(f"Title: {title}")

    checkpoints = _checkpoints(soup)
    if checkpoints:
        parts.append("Checkpoints:\n" + "\n".join(f"- {c}" for c in checkpoints))

    table = _results_table(soup)
    if table:
        parts.append("Results table:\n" + "\n".join(table))
    else:
        parts.append("Page text:\n" + _get_text(soup.body or soup))

    summary = "\n\n".join(parts)
    if len(summary) > max_chars:
        summary = summary[:max_chars]
    logger.debug(f"Page summary: {len(summary)} chars (from {len(html or '')} chars of HTML)")
    return summary
