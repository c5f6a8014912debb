"""Loguru backends - internal implementation detail.

This module is NOT part of the public API. Users should never import from here.

Every backend owns exactly one loguru sink. All backends log through the
shared loguru logger with their ``backend_id`` bound into the record, and
each sink only accepts records carrying its own id, so independent façade
loggers never see each other's lines.
"""
from __future__ import annotations

import io
import itertools
import os
import sys
from contextlib import suppress
from enum import StrEnum
from typing import IO, TYPE_CHECKING, Any

from loguru import logger as _loguru

from tokenlog import config as config_log
from tokenlog.exceptions import ConfigurationError
from tokenlog.formatter import Formatter, SyslogFormatter
from tokenlog.levels import Severity, to_ordinal
from tokenlog.sinks import SyslogSink

if TYPE_CHECKING:
    from loguru import Record

__all__ = [
    'Backend',
    'BackendKind',
    'BufferBackend',
    'StandardBackend',
    'SyslogBackend',
    'create_backend',
    'default_logfile',
    'resolve_backend',
]


class BackendKind(StrEnum):
    """Symbolic backend kinds."""
    STANDARD = 'standard'
    BUFFER = 'buffer'
    SYSLOG = 'syslog'


_KIND_TAGS = {kind.value for kind in BackendKind}

_backend_ids = itertools.count(1)
_loguru_prepared = False


def _prepare_loguru() -> None:
    """Remove loguru's default stderr handler, once per process.

    It has no filter and would echo every façade line a second time.
    """
    global _loguru_prepared
    if _loguru_prepared:
        return
    with suppress(ValueError):
        _loguru.remove(0)
    _loguru_prepared = True


class Backend:
    """One loguru sink plus the severity threshold guarding it."""

    kind: BackendKind | None = None
    formatter_class: type[Formatter] = Formatter

    def __init__(self, progname: str, level: Severity | int | str = Severity.DEBUG):
        _prepare_loguru()
        self.progname = progname
        self.level = level
        self.formatter = self.formatter_class()
        self.backend_id = next(_backend_ids)
        self._sink_id: int | None = None
        self._logger = _loguru.bind(backend_id=self.backend_id, progname=progname)

    @property
    def level(self) -> Severity:
        return self._level

    @level.setter
    def level(self, value: Severity | int | str) -> None:
        self._level = to_ordinal(value)

    @property
    def buffer(self) -> str | None:
        """Accumulated output, only buffering backends have one."""
        return None

    def _owns(self, record: Record) -> bool:
        return record['extra'].get('backend_id') == self.backend_id

    def _attach(self, sink: Any, **kwargs) -> None:
        self._sink_id = _loguru.add(
            sink,
            level=0,  # thresholds are checked in add()
            format=self.formatter.for_loguru,
            filter=self._owns,
            colorize=False,
            backtrace=False,
            diagnose=False,
            **kwargs,
        )

    def add(self, severity: Severity | int | str, message: str) -> bool:
        """Emit ``message`` unless ``severity`` is below the threshold.

        Returns True if the line was handed to the sink.
        """
        severity = to_ordinal(severity)
        if severity < self._level or self._sink_id is None:
            return False
        self._logger.bind(severity=severity).log(int(severity), message)
        return True

    def close(self) -> None:
        sink_id, self._sink_id = self._sink_id, None
        if sink_id is not None:
            _loguru.remove(sink_id)

    def __repr__(self) -> str:
        return f'<{type(self).__name__} progname={self.progname!r} level={self._level.name}>'


class StandardBackend(Backend):
    """File or stream backed backend.

    A path target gets its parent directory created. When that is impossible
    the backend falls back to stderr and says so on stderr, it never raises.
    """

    kind = BackendKind.STANDARD

    def __init__(self, progname: str, target: str | IO[str] | None = None,
                 level: Severity | int | str = Severity.DEBUG):
        super().__init__(progname, level)
        if target is None:
            target = default_logfile(progname)
        self.target = target
        if isinstance(target, str):
            self._open_file(target)
        else:
            self._attach(target)

    def _open_file(self, path: str) -> None:
        try:
            dirname = os.path.dirname(os.path.abspath(path))
            os.makedirs(dirname, exist_ok=True)
            if not os.access(dirname, os.W_OK):
                raise PermissionError(f'{dirname} is not writable')
            self._attach(path, mode='a', encoding='utf-8')
        except OSError:
            # Written around the logger, which cannot write yet
            print(f'{path} not writable, using stderr for logging', file=sys.stderr)
            self.target = sys.stderr
            self._attach(sys.stderr)


class BufferBackend(Backend):
    """In-memory backend, handy for tests and for shipping a job log later."""

    kind = BackendKind.BUFFER

    def __init__(self, progname: str, level: Severity | int | str = Severity.DEBUG):
        super().__init__(progname, level)
        self.stream = io.StringIO()
        self._attach(self.stream)

    @property
    def buffer(self) -> str:
        return self.stream.getvalue()


class SyslogBackend(Backend):
    """System log backend, tagged with program name and pid.

    Raises OSError when the syslog socket cannot be reached.
    """

    kind = BackendKind.SYSLOG
    formatter_class = SyslogFormatter

    def __init__(self, progname: str, level: Severity | int | str = Severity.DEBUG,
                 address: str | tuple[str, int] | None = None):
        super().__init__(progname, level)
        self.sink = SyslogSink(progname, address)
        self._attach(self.sink)

    def close(self) -> None:
        super().close()
        self.sink.close()


def default_logfile(progname: str) -> str:
    """Default log path for a program."""
    return os.path.join(config_log.log.dir, f'{progname}.log')


def resolve_backend(value: Any) -> tuple[BackendKind, Any]:
    """Turn a backend assignment into a ``(kind, target)`` pair.

    Kind tags select a kind, any other string or path-like is a log file,
    and an object with ``write`` is a stream for the standard backend.
    """
    if value is None:
        return BackendKind.STANDARD, None
    if isinstance(value, BackendKind):
        return value, None
    if isinstance(value, str):
        if value in _KIND_TAGS:
            return BackendKind(value), None
        return BackendKind.STANDARD, value
    if isinstance(value, os.PathLike):
        return BackendKind.STANDARD, os.fspath(value)
    if callable(getattr(value, 'write', None)):
        return BackendKind.STANDARD, value
    raise ConfigurationError(f'Unsupported backend value: {value!r}')


def create_backend(kind: BackendKind | str, progname: str, target: Any = None,
                   level: Severity | int | str = Severity.DEBUG) -> Backend:
    """Build a backend of the given kind."""
    kind = BackendKind(kind)
    if kind is BackendKind.BUFFER:
        return BufferBackend(progname, level)
    if kind is BackendKind.SYSLOG:
        return SyslogBackend(progname, level)
    return StandardBackend(progname, target, level)
