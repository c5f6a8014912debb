"""Write-only stream behaviour for loggers.

Lets a logger stand in wherever a text stream is expected::

    print('progress', file=logger)
    sys.stderr = logger

Every read-side operation raises :class:`io.UnsupportedOperation`.
"""
from __future__ import annotations

import io
from collections.abc import Iterable
from typing import NoReturn

__all__ = ['WriteOnlyStream']


class WriteOnlyStream:
    """Mixin mapping the stream write API onto ``info``.

    Hosts provide ``info(msg)`` and ``close()``.
    """

    def write(self, buf: str) -> int:
        """Write buffer lines to the logger at info level."""
        for line in buf.rstrip().splitlines():
            self.info(line.rstrip())
        return len(buf)

    def writelines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        """Sinks flush on every line."""

    def writable(self) -> bool:
        return True

    def readable(self) -> bool:
        return False

    def seekable(self) -> bool:
        return False

    def isatty(self) -> bool:
        """Return False as this is not a TTY.
        """
        return False

    @property
    def closed(self) -> bool:
        # a closed logger reopens its backend on the next write
        return False

    def close_read(self) -> None:
        return None

    def close_write(self) -> None:
        self.close()

    @property
    def sync(self) -> bool:
        return self._is_sync()

    @sync.setter
    def sync(self, value: bool) -> NoReturn:
        raise io.UnsupportedOperation(f'{self!r} cannot change sync mode')

    def _is_sync(self) -> bool:
        return True

    def _raise_write_only(self, *args, **kwargs) -> NoReturn:
        raise io.UnsupportedOperation(
            f'{self!r} is a buffer-less, write-only, non-seekable stream.')

    read = _raise_write_only
    readline = _raise_write_only
    readlines = _raise_write_only
    readinto = _raise_write_only
    seek = _raise_write_only
    tell = _raise_write_only
    truncate = _raise_write_only
    fileno = _raise_write_only
    detach = _raise_write_only
    __iter__ = _raise_write_only
    __next__ = _raise_write_only
