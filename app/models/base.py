from datetime import datetime, timezone

from sqlalchemy import DateTime


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# every timestamp column stores timezone-aware UTC values
AwareDateTime = DateTime(timezone=True)
