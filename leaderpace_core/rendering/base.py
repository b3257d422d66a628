"""
Base class for rendering strategies.

Each strategy:
- Turns a URL into fully rendered HTML
- Is attempted exactly once per render (no retries inside a strategy)
- Is bounded by the per-attempt timeout
- Reports the outcome as a RenderResult instead of raising
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    strategy: str
    success: bool
    html: str = ""
    duration_ms: int = 0
    error: Optional[BaseException] = None

    @property
    def size(self) -> int:
        return len(self.html)


class RenderStrategy(ABC):
    """Abstract base class for all rendering strategies"""

    name = "base"

    @property
    def available(self) -> bool:
        """False when the strategy is not configured and must be skipped."""
        return True

    @abstractmethod
    async def _render(self, url: str, timeout_ms: int) -> str:
        """Return rendered HTML or raise."""

    async def attempt(self, url: str, timeout_ms: int) -> RenderResult:
        start = time.monotonic()
        try:
            html = await asyncio.wait_for(self._render(url, timeout_ms), timeout=timeout_ms / 1000.0)
        except asyncio.TimeoutError as e:
            duration = int((time.monotonic() - start) * 1000)
            err = TimeoutError(f"{self.name} exceeded {timeout_ms} ms")
            err.__cause__ = e
            return RenderResult(self.name, False, duration_ms=duration, error=err)
        except Exception as e:
            duration = int((time.monotonic() - start) * 1000)
            return RenderResult(self.name, False, duration_ms=duration, error=e)

        duration = int((time.monotonic() - start) * 1000)
        if not html or not html.strip():
            return RenderResult(self.name, False, duration_ms=duration,
                                error=ValueError(f"{self.name} returned empty content"))
        return RenderResult(self.name, True, html=html, duration_ms=duration)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"
