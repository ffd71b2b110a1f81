"""
Wall-clock helpers shared by health and aggregation payloads.
"""

from __future__ import annotations

from datetime import UTC, datetime


# nosemgrep: no-default-parameter-values (current time when omitted)
def iso_timestamp(moment: datetime | None = None) -> str:
    """
    Format a moment as ISO-8601 UTC with millisecond precision.

    Args:
        moment: Time to format; the current time when omitted

    Returns:
        String like "2025-01-15T10:30:00.123Z"
    """
    if moment is None:
        moment = datetime.now(UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_duration(seconds: float) -> str:
    """
    Render a duration compactly, dropping leading zero units.

    Returns:
        String like "2d 3h 15m 42s" or "15m 42s"
    """
    remaining = int(seconds)
    parts: list[str] = []
    for suffix, unit in (("d", 86400), ("h", 3600), ("m", 60)):
        amount, remaining = divmod(remaining, unit)
        if amount or parts:
            parts.append(f"{amount}{suffix}")
    parts.append(f"{remaining}s")
    return " ".join(parts)


class Uptime:
    """Time elapsed since construction, for /info and shutdown logs."""

    def __init__(self) -> None:
        self.start_time = datetime.now(UTC)

    @property
    def uptime_seconds(self) -> float:
        """Seconds since start."""
        return (datetime.now(UTC) - self.start_time).total_seconds()

    @property
    def uptime_formatted(self) -> str:
        """Human-readable uptime."""
        return format_duration(self.uptime_seconds)
