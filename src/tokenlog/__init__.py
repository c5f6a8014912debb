"""Leveled logging facade with tokens, silencing and call-site annotation.

Public API - users should only import from this module.

Usage:
    import tokenlog

    # A logger on a file, a buffer or syslog
    log = tokenlog.Logger('/var/log/worker.log', progname='worker')
    log.info('Application started')
    # -> 2024-01-01 12:00:00.000001 worker(123) [INFO] main.py:4: Application started

    # Correlate lines with a unit of work
    log.save_token(job)
    log.token = job.id
    log.info('processing')
    log.restore_token(job)

    # Hide chatter below fatal for a block
    with log.silence('fatal'):
        noisy_call()

    # Process-wide logger
    tokenlog.set_logger(log)
    tokenlog.error('Something failed')
"""
from tokenlog._backend import Backend, BackendKind, BufferBackend
from tokenlog._backend import StandardBackend, SyslogBackend
from tokenlog._logger import Logger
from tokenlog.decorators import log_exception
from tokenlog.exceptions import ConfigurationError
from tokenlog.formatter import Formatter, SyslogFormatter
from tokenlog.holder import LoggerHolder
from tokenlog.levels import Severity, to_name, to_ordinal
from tokenlog.multi import MultiLogger

# Package default holder
_holder = LoggerHolder()


def get_logger() -> Logger:
    """Get the process-wide logger, created on first use."""
    return _holder.get()


def set_logger(logger: Logger | None) -> None:
    """Replace the process-wide logger."""
    _holder.set(logger)


# Module-level convenience functions
def debug(msg: str) -> None:
    """Log a debug message."""
    get_logger().debug(msg)


def info(msg: str) -> None:
    """Log an info message."""
    get_logger().info(msg)


def warn(msg: str) -> None:
    """Log a warning message."""
    get_logger().warn(msg)


def error(msg: str) -> None:
    """Log an error message."""
    get_logger().error(msg)


def fatal(msg: str) -> None:
    """Log a fatal message."""
    get_logger().fatal(msg)


def unknown(msg: str) -> None:
    """Log a message with unknown level."""
    get_logger().unknown(msg)


def exception(exc: BaseException | str | None = None) -> None:
    """Log an exception, by default the one being handled."""
    get_logger().exception(exc)


# Aliases
warning = warn
critical = fatal


__all__ = [
    # Logger access
    'get_logger',
    'set_logger',
    'Logger',
    'LoggerHolder',
    'MultiLogger',
    # Logging methods
    'debug',
    'info',
    'warn',
    'warning',
    'error',
    'exception',
    'fatal',
    'critical',
    'unknown',
    # Backends
    'Backend',
    'BackendKind',
    'BufferBackend',
    'StandardBackend',
    'SyslogBackend',
    # Levels and formatting
    'Severity',
    'to_name',
    'to_ordinal',
    'Formatter',
    'SyslogFormatter',
    # Utilities
    'ConfigurationError',
    'log_exception',
]
