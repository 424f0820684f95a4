from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    # naive UTC, matching what SQLite hands back for DateTime columns
    return datetime.now(timezone.utc).replace(tzinfo=None)
