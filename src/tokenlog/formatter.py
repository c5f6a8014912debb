"""Line formatting for façade backends.

The default line layout is::

    YYYY-MM-DD HH:MM:SS.ffffff progname(pid) [LEVEL] message

Override :attr:`Formatter.format` to change it for every logger in the
process.
"""
from __future__ import annotations

import datetime
import os
from typing import TYPE_CHECKING, Any

from tokenlog.levels import Severity, to_ordinal

if TYPE_CHECKING:
    from loguru import Record

__all__ = ['Formatter', 'SyslogFormatter']


class Formatter:
    """Render one log line from severity, time, program name and message.
    """

    # Filled with (timestamp, progname, pid, SEVERITY, message)
    format = '%s %s(%d) [%s] %s\n'

    def __call__(self, severity: Severity | int | str, time: datetime.datetime,
                 progname: str, msg: Any) -> str:
        stamp = time.strftime('%Y-%m-%d %H:%M:%S.%f')
        return self.format % (stamp, progname, os.getpid(), to_ordinal(severity).name, msg)

    def for_loguru(self, record: Record) -> str:
        """Dynamic loguru ``format=`` callable.

        The rendered line rides in the record and the returned template only
        references it. loguru parses the template for color markup and braces
        but substitutes field values verbatim.
        """
        line = self(record['extra']['severity'], record['time'],
                    record['extra']['progname'], record['message'])
        record['extra']['line'] = line
        return '{extra[line]}'


class SyslogFormatter(Formatter):
    """Syslog supplies its own timestamp and ident, keep only level and text.
    """

    # Filled with (SEVERITY, message)
    format = '[%s] %s'

    def __call__(self, severity: Severity | int | str, time: datetime.datetime,
                 progname: str, msg: Any) -> str:
        return self.format % (to_ordinal(severity).name, msg)
