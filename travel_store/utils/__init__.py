"""Utility helpers."""
from travel_store.utils.identifiers import generate_id, utc_now, format_timestamp, parse_timestamp

__all__ = ["generate_id", "utc_now", "format_timestamp", "parse_timestamp"]
