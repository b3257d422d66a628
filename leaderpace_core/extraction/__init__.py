"""
Extraction module - leader distance and time from timing-page HTML

Regex heuristics first, a single-shot LLM prompt over a condensed page
summary as fallback.
"""

from .heuristics import (
    extract_with_heuristics,
    find_distance_candidate,
    parse_leader_distance,
    parse_number,
)
from .page_summary import build_page_summary, detect_provider
from .llm_extractor import LLMLeaderExtractor, build_prompt, parse_llm_reply
from .extractor import LeaderExtractor

__all__ = [
    'extract_with_heuristics',
    'find_distance_candidate',
    'parse_leader_distance',
    'parse_number',
    'build_page_summary',
    'detect_provider',
    'LLMLeaderExtractor',
    'build_prompt',
    'parse_llm_reply',
    'LeaderExtractor',
]
