"""Timestamp helpers for log output and the remote view."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(moment: datetime) -> str:
    """Serialize a datetime the way snapshots store it (ISO 8601, UTC, ms precision)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    """Parse a snapshot timestamp; a trailing Z is accepted."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def format_log_date(value: str) -> str:
    """Format like `git log` does: 'Sun Oct 18 09:30:00 2026 +0000'."""
    return parse_iso(value).strftime("%a %b %d %H:%M:%S %Y %z")


def format_time_ago(value: str, now: datetime | None = None) -> str:
    """Coarse relative time: 'just now', '5 minutes ago', '2 days ago'."""
    now = now or utc_now()
    seconds = int((now - parse_iso(value)).total_seconds())
    if seconds < 60:
        return "just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes} minute{'s' if minutes > 1 else ''} ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours} hour{'s' if hours > 1 else ''} ago"
    days = hours // 24
    return f"{days} day{'s' if days > 1 else ''} ago"
