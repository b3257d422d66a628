#!/usr/bin/env python3
import logging
from typing import Optional

from ..leader_data import LeaderData
from .heuristics import extract_with_heuristics
from .llm_extractor import LLMLeaderExtractor

logger = logging.getLogger(__name__)


class LeaderExtractor:
    """Regex heuristics first, then the LLM fallback when one is configured."""

    def __init__(self, llm_extractor: Optional[LLMLeaderExtractor] = None):
        self.llm_extractor = llm_extractor

    async def extract(self, html: str, url: Optional[str] = None,
                      max_distance_km: Optional[float] = None) -> Optional[LeaderData]:
        if not html or not html.strip():
            return None

        data = extract_with_heuristics(html, max_distance_km)
        if data is not None:
            logger.info(f"Heuristics found leader at {data.distance_km} km (time: {data.elapsed_time})")
            return data

        if self.llm_extractor is None:
            logger.info("Heuristics found nothing and no LLM is configured")
            return None

        data = await self.llm_extractor.extract(html, url)
        if data is not None and max_distance_km is not None and data.distance_km > max_distance_km:
            logger.warning(f"LLM distance {data.distance_km} km exceeds race total {max_distance_km} km, ignoring")
            return None
        if data is not None:
            logger.info(f"LLM found leader at {data.distance_km} km (time: {data.elapsed_time})")
        return data
