"""Shared logger handle.
"""
from __future__ import annotations

from tokenlog._logger import Logger

__all__ = ['LoggerHolder']


class LoggerHolder:
    """Explicit owner of a process-wide logger.

    Pass a holder around instead of reaching for hidden module state; the
    package keeps one default holder behind :func:`tokenlog.get_logger`.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger

    def get(self) -> Logger:
        """Get the held logger (lazy initialization)."""
        if self._logger is None:
            self._logger = Logger()
        return self._logger

    def set(self, logger: Logger | None) -> None:
        """Replace the held logger, noting the change on the outgoing one."""
        if self._logger is not None:
            self._logger.info(f'replacing current logger with {logger!r}')
        self._logger = logger

    def clear(self) -> None:
        """Close and drop the held logger."""
        logger, self._logger = self._logger, None
        if logger is not None:
            logger.close()
