"""
Error types and JSON error bodies.

Extraction failures are not errors: extractors return None and the caller
decides what to do.
"""

import logging
import traceback
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)


class LeaderPaceError(Exception):
    """Base class for errors surfaced to API callers."""

    category = "internal"
    status_code = 500


class ConfigurationError(LeaderPaceError):
    """A required environment setting is missing."""

    category = "configuration"

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            f"Missing required configuration: {', '.join(self.missing)}. "
            "Set these as environment variables or in a .env file."
        )


class RenderError(LeaderPaceError):
    """Every rendering strategy failed for a URL."""

    category = "render"

    def __init__(self, url: str, attempts: Optional[Dict[str, str]] = None):
        self.url = url
        self.attempts = dict(attempts or {})
        if self.attempts:
            tried = "; ".join(f"{name}: {err}" for name, err in self.attempts.items())
        else:
            tried = "no rendering strategy available"
        super().__init__(f"Could not render {url} ({tried})")


class ValidationError(LeaderPaceError):
    """Malformed or missing request input."""

    category = "validation"
    status_code = 400


class LeaderDataUnavailable(LeaderPaceError):
    """The live pipeline produced no leader data for a race page."""

    category = "leader_data"

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        message = (
            f"Failed to extract leader data from race page: {url}. Possible reasons: "
            "the render service may be unreachable, the race may not have started yet, "
            "the race page format may have changed, or AI extraction failed."
        )
        if reason:
            message = f"{message} Last error: {reason}"
        super().__init__(message)


def status_for(error: Exception) -> int:
    return getattr(error, "status_code", 500)


def create_error_response(error: Exception, include_details: bool = False) -> Dict:
    """
    Create standardized error response body for the API.

    Args:
        error: The exception
        include_details: Whether to include the formatted traceback

    Returns:
        {"success": False, "error": str, "category": str[, "details": str]}
    """
    response = {
        "success": False,
        "error": str(error),
        "category": getattr(error, "category", "internal"),
    }
    if isinstance(error, ConfigurationError):
        response["missing"] = error.missing
    if include_details:
        response["details"] = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
    return response
