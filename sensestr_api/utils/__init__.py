from .datetime_utils import ensure_utc, next_timestamp, to_iso, utc_now

__all__ = ["ensure_utc", "next_timestamp", "to_iso", "utc_now"]
