"""Id and timestamp helpers shared by entities and services."""
import random
import string
import time
from datetime import datetime, timezone
from typing import Optional

_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(prefix: str, now_ms: Optional[int] = None) -> str:
    """
    Generate a record id of the form ``<prefix>_<epoch-millis>_<9 base36 chars>``.
    
    Uniqueness is probabilistic: two ids minted in the same millisecond
    collide only if their random suffixes match.
    
    Args:
        prefix: Record kind, e.g. "post" or "user"
        now_ms: Optional epoch milliseconds (defaults to current time)
        
    Returns:
        Generated id string
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    suffix = "".join(random.choice(_ALPHABET) for _ in range(9))
    return f"{prefix}_{now_ms}_{suffix}"


def utc_now() -> datetime:
    """Get current timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision and a Z suffix."""
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp written by ``format_timestamp``.
    
    Naive values are assumed to be UTC.
    
    Raises:
        ValueError: If the string is not a valid ISO-8601 timestamp
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
