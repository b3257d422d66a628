import logging
import re
from typing import Optional

from ..leader_data import LeaderData, parse_clock
from .heuristics import parse_number
from .page_summary import build_page_summary, MAX_SUMMARY_CHARS

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a race data analyst. You read live results from ski and running races "
    "and report how far the race leader has come."
)

PROMPT_TEMPLATE = """Find the race LEADER (the participant furthest along the course) in this live results page.

Report the leader's distance in kilometers at their latest checkpoint and their elapsed time there.

Answer with exactly one line in this format:
distance: X, time: H:MM:SS

If you cannot find the leader, answer exactly:
distance: null, time: null

Page:
{summary}"""

DISTANCE_REPLY_RE = re.compile(r"distance\s*:\s*(null|\d+(?:[.,]\d+)?)", re.IGNORECASE)
TIME_REPLY_RE = re.compile(r"time\s*:\s*(null|\d{1,3}:\d{2}:\d{2})", re.IGNORECASE)


def build_prompt(html: str, url: Optional[str] = None, max_chars: int = MAX_SUMMARY_CHARS) -> str:
    return PROMPT_TEMPLATE.format(summary=build_page_summary(html, url, max_chars))


def parse_llm_reply(text: str) -> Optional[LeaderData]:
    """Parse "distance: X, time: H:MM:SS". A null or missing distance means no data."""
    if not text:
        return None
    dist_match = DISTANCE_REPLY_RE.search(text)
    if not dist_match or dist_match.group(1).lower() == "null":
        return None
    distance = parse_number(dist_match.group(1))
    if distance is None:
        return None

    elapsed = None
    time_match = TIME_REPLY_RE.search(text)
    if time_match and time_match.group(1).lower() != "null":
        elapsed = parse_clock(time_match.group(1))
    return LeaderData(distance_km=distance, elapsed_time=elapsed)


class LLMLeaderExtractor:
    """
    Single-shot LLM fallback.

    The client only needs an async ``ainvoke(prompt, system=None) -> {"text": ...}``.
    """

    def __init__(self, llm, max_chars: int = MAX_SUMMARY_CHARS):
        self.llm = llm
        self.max_chars = max_chars

    async def extract(self, html: str, url: Optional[str] = None) -> Optional[LeaderData]:
        if not html or not html.strip():
            return None
        prompt = build_prompt(html, url, self.max_chars)
        try:
            response = await self.llm.ainvoke(prompt, system=SYSTEM_PROMPT)
        except Exception as e:
            logger.error(f"LLM extraction failed: {e}")
            return None

        text = response.get("text", "") if isinstance(response, dict) else str(response)
        data = parse_llm_reply(text)
        if data is None:
            logger.info(f"LLM found no leader data (reply: {text[:100]!r})")
        return data
