import logging
from collections.abc import Callable

from lending.config import Config
from lending.events import PatronEvent
from lending.exceptions import ConcurrentBookWriteError

logger = logging.getLogger(__name__)


def handle_with_retry(
    handler: Callable[[PatronEvent], None],
    event: PatronEvent,
    config: Config | None = None,
) -> None:
    """
    Handles an event, replaying it when the book was changed in the meantime.

    The handler loads the book on every call, so each replay is evaluated against
    the fresh state and may end differently than the first attempt, e.g. with a
    transition error. Transition errors are never retried.

    Args:
        handler: Callable handling a single event, e.g. PatronEventsHandler.
        event: The event to handle.
        config: Configuration with the number of attempts. Defaults to Config().
    """
    attempts = (config or Config()).conflict_attempts
    for attempt in range(1, attempts + 1):
        try:
            handler(event)
        except ConcurrentBookWriteError as error:
            if attempt == attempts:
                raise
            logger.warning(
                "Book %s changed concurrently while handling %s (attempt %d of %d)",
                error.book_id,
                type(event).__name__,
                attempt,
                attempts,
            )
        else:
            return
