#!/usr/bin/env python3
"""
LeaderTracker - render -> extract -> cache pipeline and the pace derivation on top.

Collaborators are injected so tests can substitute fakes:

    tracker = LeaderTracker(config, renderer=FakeRenderer(html), extractor=LeaderExtractor())
    outcome = await tracker.derive_tempo(PaceRequest("vasaloppet", 30, elapsed_minutes=150))
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from .cache import LeaderCache
from .config import Config, config as default_config
from .dry_run import DryRunLeaderSource
from .errors import LeaderDataUnavailable, RenderError
from .extraction import LeaderExtractor, LLMLeaderExtractor
from .leader_data import LeaderData
from .llm import create_llm_client
from .pace import derive_pace, resolve_self_elapsed_minutes
from .races import get_race, get_race_url
from .rendering import RendererSelector, create_renderer
from .request_parsing import PaceRequest

logger = logging.getLogger(__name__)


@dataclass
class LeaderLookup:
    data: Optional[LeaderData]
    live: bool
    cached: bool = False
    url: Optional[str] = None
    error: Optional[str] = None


@dataclass
class PaceOutcome:
    new_speed: float
    leader_distance_km: float
    race_name: str
    progress_km: float
    live: bool
    cached: bool = False

    def to_dict(self) -> dict:
        return {
            "newSpeed": self.new_speed,
            "leaderDistanceKm": self.leader_distance_km,
            "raceName": self.race_name,
            "progressKm": self.progress_km,
            "live": self.live,
            "cached": self.cached,
        }


class LeaderTracker:
    def __init__(
        self,
        config: Config,
        renderer: RendererSelector,
        extractor: LeaderExtractor,
        cache: Optional[LeaderCache] = None,
        dry_run_source: Optional[DryRunLeaderSource] = None,
    ):
        self.config = config
        self.renderer = renderer
        self.extractor = extractor
        self.cache = cache if cache is not None else LeaderCache(config.cache_ttl_seconds)
        self.dry_run_source = dry_run_source or DryRunLeaderSource()

    async def _render_and_extract(self, url: str, total_km: float) -> Optional[LeaderData]:
        html = await self.renderer.render(url, self.config.render_timeout_ms)
        return await self.extractor.extract(html, url=url, max_distance_km=total_km)

    async def fetch_leader(self, url: str, total_km: float) -> LeaderLookup:
        """Cached leader data for a page, rendering and extracting on a miss."""
        data, hit = self.cache.get(url)
        if hit:
            logger.info(f"Cache hit for {url}")
            return LeaderLookup(data, live=True, cached=True, url=url)

        logger.info(f"Cache miss for {url}, rendering")
        try:
            data = await asyncio.wait_for(
                self._render_and_extract(url, total_km),
                timeout=self.config.pipeline_deadline,
            )
        except RenderError as e:
            logger.error(f"Rendering failed for {url}: {e}")
            return LeaderLookup(None, live=True, url=url, error=str(e))
        except asyncio.TimeoutError:
            message = f"Pipeline exceeded {self.config.pipeline_deadline:.0f} s deadline"
            logger.error(f"{message} for {url}")
            return LeaderLookup(None, live=True, url=url, error=message)

        self.cache.put(url, data)
        return LeaderLookup(data, live=True, url=url)

    async def get_leader_data(self, race_name: str, dry_run: bool = False) -> LeaderLookup:
        if dry_run:
            return LeaderLookup(self.dry_run_source.leader(), live=False)

        url = get_race_url(race_name)
        logger.info(f"Attempting to scrape race URL: {url}")
        logger.info(f"Configuration: {self.config.describe()}")
        self.config.require_live()
        return await self.fetch_leader(url, get_race(race_name).total_km)

    async def derive_tempo(self, request: PaceRequest) -> PaceOutcome:
        race = get_race(request.race_name)
        lookup = await self.get_leader_data(request.race_name, request.dry_run)
        if lookup.data is None:
            raise LeaderDataUnavailable(lookup.url or request.race_name, lookup.error)

        leader = lookup.data
        logger.info(f"Leader data: {leader.to_dict()}")
        self_elapsed = resolve_self_elapsed_minutes(request.progress_km, request.elapsed_minutes, request.speed_mps)
        pace = derive_pace(race.total_km, leader.distance_km, leader.elapsed_time,
                           request.progress_km, self_elapsed)

        return PaceOutcome(
            new_speed=round(pace, 2),
            leader_distance_km=round(leader.distance_km, 2),
            race_name=request.race_name,
            progress_km=request.progress_km,
            live=lookup.live,
            cached=lookup.cached,
        )


def create_tracker(config: Optional[Config] = None) -> LeaderTracker:
    """Wire the production collaborators from configuration."""
    config = config or default_config
    llm = create_llm_client(config.llm)
    llm_extractor = LLMLeaderExtractor(llm) if llm else None
    return LeaderTracker(
        config=config,
        renderer=create_renderer(config),
        extractor=LeaderExtractor(llm_extractor),
        cache=LeaderCache(config.cache_ttl_seconds),
    )
