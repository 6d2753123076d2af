"""Time utility tools."""

from datetime import datetime, timezone
from typing import Callable, Optional


class TimeTools:
    """Time-related utilities for the MCP server."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def get_current_time(self) -> str:
        """Get current UTC time in ISO format."""
        return self._clock().astimezone(timezone.utc).isoformat()
