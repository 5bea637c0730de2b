from datetime import datetime, timedelta, timezone

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def flag_to_bool(v: int) -> bool:
    """Steam boolean flags: only exactly 1 is true; 2, 0xFFFFFFFF etc. are false."""
    return v == 1


def epoch_seconds_to_datetime(v: int) -> datetime:
    """Unsigned 32-bit seconds since the Unix epoch, as an aware UTC datetime."""
    return UNIX_EPOCH + timedelta(seconds=v)
