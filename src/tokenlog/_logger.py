"""Logger facade - the public surface over the loguru backends.

Users interact with this module, never with loguru directly.
"""
from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from typing import Any

from libb import scriptname
from tokenlog import config as config_log
from tokenlog._backend import Backend, BackendKind, create_backend, resolve_backend
from tokenlog.callsite import called_from, clean_trace, format_trace
from tokenlog.levels import Severity, to_name, to_ordinal
from tokenlog.stream import WriteOnlyStream

__all__ = ['Logger']


class Logger(WriteOnlyStream):
    """Logging facade with tokens, silencing and call-site annotation.

    Every message is prefixed with the ``file:line`` that produced it and,
    when :attr:`token` is set, with ``[token]``::

        >>> log = Logger('buffer', progname='worker')  # doctest: +SKIP
        >>> log.token = 'job-42'  # doctest: +SKIP
        >>> log.info('started')  # doctest: +SKIP
        >>> log.buffer  # doctest: +SKIP
        '2024-01-01 12:00:00.000001 worker(123) [INFO] [job-42] jobs.py:7: started\\n'

    The backend is chosen by assignment to :attr:`backend`: a
    :class:`~tokenlog._backend.Backend` instance, a kind tag (``'buffer'``,
    ``'syslog'``, ``'standard'``), a log file path or a writable stream.

    Instances are not thread safe. The token and the backend are shared by
    every caller of the instance, so concurrent users need their own logger
    or an external lock.
    """

    # Process wide switch, turn off to see what silence() would hide
    silencer: bool = config_log.log.silencer

    def __init__(self, backend: Any = None, progname: str | None = None,
                 level: Severity | int | str | None = None):
        self.progname = progname or scriptname()
        self.token: str | None = None
        self._tokens: dict[int, str | None] = {}
        self._level = to_ordinal(config_log.log.level if level is None else level)
        self._backend: Backend | None = None
        self._kind = BackendKind.STANDARD
        self._target: Any = None
        self.backend = backend

    #
    # backend lifecycle
    #

    @property
    def backend(self) -> Backend:
        """The active backend, rebuilt on demand after :meth:`close`."""
        if self._backend is None:
            self._backend = self._create_backend()
        return self._backend

    @backend.setter
    def backend(self, value: Any) -> None:
        if isinstance(value, Backend):
            self._close_backend()
            self._kind, self._target = BackendKind.STANDARD, None
            self._backend = value
            return
        kind, target = resolve_backend(value)
        self._close_backend()
        self._kind, self._target = kind, target
        self._backend = self._create_backend()

    def close(self) -> None:
        """Close any connections/descriptors held by the current backend."""
        self._close_backend()

    def _close_backend(self) -> None:
        backend, self._backend = self._backend, None
        if backend is not None:
            with suppress(Exception):
                backend.close()

    def _create_backend(self) -> Backend:
        if self._kind is BackendKind.SYSLOG:
            try:
                return create_backend(self._kind, self.progname, level=self._level)
            except (ImportError, OSError) as exc:
                self.backend = BackendKind.STANDARD
                self.error(f"Couldn't open syslog ({exc}), reverting to standard logger")
                return self._backend
        return create_backend(self._kind, self.progname, self._target, self._level)

    @property
    def buffer(self) -> str | None:
        """Contents of the buffer when the active backend is a buffer."""
        if self._backend is None:
            return None
        return self._backend.buffer

    def _is_sync(self) -> bool:
        return self._kind is not BackendKind.BUFFER

    #
    # levels
    #

    @property
    def level(self) -> str:
        """Current threshold as a symbolic name."""
        return to_name(self.backend.level)

    @level.setter
    def level(self, level: Severity | int | str) -> None:
        level = to_ordinal(level)
        self.backend.level = level
        self._level = level

    def debug(self, msg: Any) -> None:
        self._add(Severity.DEBUG, msg)

    def info(self, msg: Any) -> None:
        self._add(Severity.INFO, msg)

    def warn(self, msg: Any) -> None:
        self._add(Severity.WARN, msg)

    def error(self, msg: Any) -> None:
        self._add(Severity.ERROR, msg)

    def fatal(self, msg: Any) -> None:
        self._add(Severity.FATAL, msg)

    def unknown(self, msg: Any) -> None:
        self._add(Severity.UNKNOWN, msg)

    def log(self, level: Severity | int | str, msg: Any) -> None:
        self._add(level, msg)

    # Aliases
    warning = warn
    critical = fatal

    def exception(self, exc: BaseException | str | None = None) -> None:
        """Log an exception with error level.

        Exceptions are rendered with their backtrace, minus the frames of
        this package. Strings are logged as they are. Without an argument
        the exception currently being handled is logged, or a note saying
        there is none.
        """
        if exc is None:
            exc = sys.exc_info()[1]
            if exc is None:
                self._add(Severity.ERROR, 'exception() called with no exception being handled')
                return
        if isinstance(exc, BaseException):
            trace = ', '.join(clean_trace(format_trace(exc.__traceback__)))
            exc = f'EXCEPTION: {exc}: [{trace}]'
        self._add(Severity.ERROR, exc, skip_caller=True)

    def _add(self, severity: Severity | int | str, message: Any,
             skip_caller: bool = False) -> None:
        severity = to_ordinal(severity)
        if not skip_caller:
            message = f'{called_from()}: {message}'
        # token goes outermost: "[token] file:line: message"
        if self.token is not None:
            message = f'[{self.token}] {message}'
        self.backend.add(severity, message)

    #
    # tokens
    #

    def save_token(self, obj: Any) -> None:
        """Save the current token and associate it with ``obj``."""
        if self.token is not None:
            self._tokens[id(obj)] = self.token

    def restore_token(self, obj: Any) -> str | None:
        """Restore the token that has been associated with ``obj``."""
        self.token = self._tokens.pop(id(obj), None)
        return self.token

    #
    # silencing
    #

    @contextmanager
    def silence(self, temporary_level: Severity | int | str = Severity.ERROR) -> Iterator[Logger]:
        """Raise the threshold to ``temporary_level`` for the block.

            >>> with log.silence('fatal'):  # doctest: +SKIP
            ...     noisy_call()
        """
        if not type(self).silencer:
            yield self
            return
        old_level, self.level = self.level, temporary_level
        try:
            yield self
        finally:
            self.level = old_level

    def __repr__(self) -> str:
        return f'<{type(self).__name__} progname={self.progname!r} backend={self._kind.value}>'
