"""Wall-clock source and RFC 3339 formatting.

This module provides the clock identifiers read their timestamp from.
"""

from datetime import datetime, timezone

from auid.interfaces.encoding import IClock


class SystemClock(IClock):
    """Clock backed by the system's UTC wall-clock time.

    Identifiers only keep whole seconds, so ``format`` renders RFC 3339 at
    second precision (e.g. ``2025-01-01T12:00:00Z``).
    """

    def now(self) -> datetime:
        """Get the current datetime in UTC.

        Returns:
            The current datetime with UTC timezone.
        """
        return datetime.now(timezone.utc)

    def format(self, when: datetime) -> str:
        """Format a datetime as an RFC 3339 string at second precision.

        Naive datetimes are assumed to be UTC.

        Args:
            when: The datetime to format.

        Returns:
            The formatted timestamp string.

        Example:
            >>> dt = datetime(2025, 1, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
            >>> SystemClock().format(dt)
            '2025-01-01T12:00:00Z'
        """
        if when.tzinfo is not None:
            when = when.astimezone(timezone.utc)
        else:
            when = when.replace(tzinfo=timezone.utc)

        return when.strftime("%Y-%m-%dT%H:%M:%SZ")
