"""Multiplexing logger - one call, many loggers.
"""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from typing import Any

from tokenlog._logger import Logger
from tokenlog.levels import Severity
from tokenlog.stream import WriteOnlyStream

__all__ = ['MultiLogger']


class MultiLogger(WriteOnlyStream):
    """Send every message to all attached loggers.

    >>> log = MultiLogger(Logger('buffer'), Logger('/var/log/app.log'))  # doctest: +SKIP
    >>> log.info('to both')  # doctest: +SKIP
    """

    def __init__(self, *loggers: Logger) -> None:
        self.loggers: list[Logger] = list(loggers)

    def attach(self, logger: Logger) -> None:
        """Attach a logger, it picks up the token already in use."""
        if self.loggers:
            logger.token = self.loggers[0].token
        self.loggers.append(logger)

    def detach(self, logger: Logger) -> None:
        if logger in self.loggers:
            self.loggers.remove(logger)

    @property
    def token(self) -> str | None:
        return self.loggers[0].token if self.loggers else None

    @token.setter
    def token(self, value: str | None) -> None:
        for logger in self.loggers:
            logger.token = value

    @property
    def level(self) -> str | None:
        return self.loggers[0].level if self.loggers else None

    @level.setter
    def level(self, value: Severity | int | str) -> None:
        for logger in self.loggers:
            logger.level = value

    def debug(self, msg: Any) -> None:
        self._each('debug', msg)

    def info(self, msg: Any) -> None:
        self._each('info', msg)

    def warn(self, msg: Any) -> None:
        self._each('warn', msg)

    def error(self, msg: Any) -> None:
        self._each('error', msg)

    def fatal(self, msg: Any) -> None:
        self._each('fatal', msg)

    def unknown(self, msg: Any) -> None:
        self._each('unknown', msg)

    def log(self, level: Severity | int | str, msg: Any) -> None:
        self._each('log', level, msg)

    def exception(self, exc: BaseException | str | None = None) -> None:
        self._each('exception', exc)

    warning = warn
    critical = fatal

    def save_token(self, obj: Any) -> None:
        self._each('save_token', obj)

    def restore_token(self, obj: Any) -> None:
        self._each('restore_token', obj)

    def close(self) -> None:
        self._each('close')

    @contextmanager
    def silence(self, temporary_level: Severity | int | str = Severity.ERROR) -> Iterator[MultiLogger]:
        with ExitStack() as stack:
            for logger in self.loggers:
                stack.enter_context(logger.silence(temporary_level))
            yield self

    def _each(self, name: str, *args: Any) -> None:
        for logger in self.loggers:
            getattr(logger, name)(*args)

    def __repr__(self) -> str:
        return f'<{type(self).__name__} loggers={self.loggers!r}>'
