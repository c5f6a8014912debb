"""Severity model.

Ordinals follow the stdlib :mod:`logging` numbering so a severity can be
handed to loguru or a :class:`logging.LogRecord` unchanged.

>>> to_ordinal('warn')
<Severity.WARN: 30>
>>> to_name(50)
'fatal'
>>> to_ordinal('Warning') is Severity.WARN
True
"""
from __future__ import annotations

from enum import IntEnum

from tokenlog.exceptions import ConfigurationError

__all__ = ['Severity', 'to_ordinal', 'to_name', 'SEVERITIES']


class Severity(IntEnum):
    """Log levels ordered by increasing urgency."""
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50
    UNKNOWN = 60


# Symbolic name -> ordinal, the canonical pairs only
SEVERITIES: dict[str, Severity] = {s.name.lower(): s for s in Severity}

# Accepted on input, never produced by to_name
_ALIASES = {
    'warning': Severity.WARN,
    'critical': Severity.FATAL,
}


def to_ordinal(level: Severity | int | str) -> Severity:
    """Resolve a severity name or ordinal to a :class:`Severity`.

    Raises ConfigurationError for anything that is not a defined level.
    """
    if isinstance(level, Severity):
        return level
    if isinstance(level, str):
        name = level.strip().lower()
        if name in SEVERITIES:
            return SEVERITIES[name]
        if name in _ALIASES:
            return _ALIASES[name]
        raise ConfigurationError(f'Unknown severity name: {level!r}')
    if isinstance(level, int) and not isinstance(level, bool):
        try:
            return Severity(level)
        except ValueError:
            raise ConfigurationError(f'Unknown severity ordinal: {level!r}') from None
    raise ConfigurationError(f'Unsupported severity value: {level!r}')


def to_name(level: Severity | int | str) -> str:
    """Return the symbolic (lower case) name of a severity."""
    return to_ordinal(level).name.lower()


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
