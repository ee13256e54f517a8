import functools
import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


def handle_errors(message: str):
    """Turn any unexpected failure in a route into a 500 carrying `message`.

    HTTPExceptions raised by the route pass through untouched. The underlying
    exception is logged but never sent to the client.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception:
                logger.exception(f"{func.__name__} failed")
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=message,
                )

        return wrapper

    return decorator
