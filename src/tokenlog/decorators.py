from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

__all__ = ['log_exception']


def log_exception(logger: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator that logs exceptions and re-raises them.

    Works with Logger and MultiLogger instances.
    """
    def wrapper(fn: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(fn)
        def wrapped_fn(*args: Any, **kwargs: Any) -> Any:
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                logger.exception(exc)
                raise
        return wrapped_fn
    return wrapper
