"""Locate the code that issued a log call.
"""
from __future__ import annotations

import inspect
import os
import re
import traceback
from collections.abc import Iterable

__all__ = ['INTERNAL_PATTERN', 'UNKNOWN_CALLSITE', 'called_from', 'clean_trace', 'format_trace']

# Any module of this package: the façade, the multi logger, the holder, ...
INTERNAL_PATTERN = re.compile(r'[\\/]tokenlog[\\/][^\\/]+\.py$')

UNKNOWN_CALLSITE = 'unknown:0'


def is_internal(filename: str) -> bool:
    return INTERNAL_PATTERN.search(filename) is not None


def called_from() -> str:
    """Return ``file:line`` of the first caller outside this package.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            filename = frame.f_code.co_filename
            if not is_internal(filename):
                return f'{os.path.basename(filename)}:{frame.f_lineno}'
            frame = frame.f_back
        return UNKNOWN_CALLSITE
    finally:
        del frame


def format_trace(tb) -> list[str]:
    """Render a traceback as ``file:line:in func`` entries, oldest first.
    """
    return [f'{fs.filename}:{fs.lineno}:in {fs.name}'
            for fs in traceback.extract_tb(tb)]


def clean_trace(trace: Iterable[str]) -> list[str]:
    """Remove references to this package from a rendered backtrace.
    """
    return [line for line in trace if not _internal_entry(line)]


def _internal_entry(line: str) -> bool:
    filename = line.split(':in ', 1)[0].rsplit(':', 1)[0]
    return is_internal(filename)
