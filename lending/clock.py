from collections.abc import Callable
from datetime import datetime, timezone
from typing import TypeAlias

Clock: TypeAlias = Callable[[], datetime]


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the way all lending timestamps are kept."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
