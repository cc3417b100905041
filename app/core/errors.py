import functools
from typing import Any, Callable, Optional

from loguru import logger


class CmsError(Exception):
    """Raised when the CMS answers with a non-success HTTP status."""

    def __init__(self, status_code: Optional[int], status_text: str, detail: Any = None):
        self.status_code = status_code
        self.status_text = status_text
        self.detail = detail
        super().__init__(f"Strapi API error: {status_code} {status_text}")


class CmsConnectionError(CmsError):
    """Transport-level failure: the CMS could not be reached at all."""

    def __init__(self, message: str):
        super().__init__(None, message)


def fail_soft(default: Callable[[], Any], message: str):
    """
    Wrap an async service call so that any error is logged and replaced by a
    fresh default value.

    Args:
        default: Factory for the fallback value (``list``, ``lambda: None``...).
        message: Log prefix; formatted with the call's keyword and positional
            arguments, e.g. ``"Error fetching post {0!r}"``.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                # args[0] is the service instance
                try:
                    prefix = message.format(*args[1:], **kwargs)
                except (IndexError, KeyError):
                    prefix = message
                logger.error(f"{prefix}: {e}")
                return default()

        return wrapper

    return decorator
