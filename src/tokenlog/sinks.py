"""Loguru sinks - callable classes that receive log messages.
"""
from __future__ import annotations

import logging
import os
from logging.handlers import SysLogHandler
from typing import TYPE_CHECKING

from tokenlog import config as config_log
from tokenlog.exceptions import ConfigurationError
from tokenlog.levels import Severity

if TYPE_CHECKING:
    from loguru import Message

__all__ = ['SyslogSink', 'syslog_address']

# Local syslog sockets, tried in order when no host is configured
_SYSLOG_SOCKETS = ('/dev/log', '/var/run/syslog')


def syslog_address() -> str | tuple[str, int]:
    """Resolve where syslog messages go from config.

    A configured host wins; otherwise the first existing local socket.
    """
    if config_log.syslog.host:
        return config_log.syslog.host, config_log.syslog.port or 514
    if config_log.syslog.socket:
        return config_log.syslog.socket
    for path in _SYSLOG_SOCKETS:
        if os.path.exists(path):
            return path
    return _SYSLOG_SOCKETS[0]


class SyslogSink:
    """Syslog sink using stdlib SysLogHandler.

    Raises OSError at construction when the syslog socket is unreachable
    and ConfigurationError for an unknown facility name.
    """

    def __init__(self, progname: str, address: str | tuple[str, int] | None = None,
                 facility: str | None = None):
        facility = facility or config_log.syslog.facility
        if facility not in SysLogHandler.facility_names:
            raise ConfigurationError(f'Unknown syslog facility: {facility!r}')
        address = address or syslog_address()
        self.handler = SysLogHandler(
            address=address,
            facility=SysLogHandler.facility_names[facility],
        )
        # SysLogHandler ignores unix socket connect errors and keeps a closed socket
        if isinstance(address, str) and self.handler.socket.fileno() == -1:
            self.handler.close()
            raise ConnectionRefusedError(f'cannot connect to syslog socket {address}')
        self.handler.ident = f'{progname}[{os.getpid()}]: '

    def __call__(self, message: Message) -> None:
        record = message.record
        # syslog has no priority above critical
        level = min(int(record['extra']['severity']), int(Severity.FATAL))
        log_record = logging.LogRecord(
            name=record['extra'].get('progname', ''),
            level=level,
            pathname='',
            lineno=0,
            msg=str(message).rstrip('\n'),
            args=(),
            exc_info=None,
        )
        # SysLogHandler.emit reports its own failures via handleError
        self.handler.emit(log_record)

    def close(self) -> None:
        self.handler.close()
