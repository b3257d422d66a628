"""
leaderpace_core - live-race leader tracking and required-pace derivation

Renders a race-timing page, extracts the leader's distance and elapsed time,
caches it briefly, and tells a trailing runner which pace keeps them within
1.5x of the leader's finish time.
"""

from .config import Config, config
from .errors import (
    LeaderPaceError,
    ConfigurationError,
    RenderError,
    ValidationError,
    LeaderDataUnavailable,
)
from .leader_data import LeaderData
from .cache import LeaderCache
from .pace import derive_pace
from .races import RaceDefinition, get_race
from .tracker import LeaderTracker, PaceOutcome, create_tracker

__version__ = "1.0.0"

__all__ = [
    'Config',
    'config',
    'LeaderPaceError',
    'ConfigurationError',
    'RenderError',
    'ValidationError',
    'LeaderDataUnavailable',
    'LeaderData',
    'LeaderCache',
    'derive_pace',
    'RaceDefinition',
    'get_race',
    'LeaderTracker',
    'PaceOutcome',
    'create_tracker',
]
