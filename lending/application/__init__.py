__all__ = [
    "PatronEventsHandler",
    "handle_with_retry",
]

from lending.application.patron_events_handler import PatronEventsHandler
from lending.application.retry import handle_with_retry
