from datetime import UTC, datetime


def now() -> datetime:
    return datetime.now(UTC)


def timestamp_ms(value: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return int(value.timestamp() * 1000)
