from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

import os

# Single wildcard marker understood by the pattern matcher.
WILDCARD: str = '*'

# Separators recognized when splitting an input token into directory/pattern.
PATH_SEPARATORS: tuple[str, ...] = tuple(dict.fromkeys(s for s in ('/', os.sep, os.altsep) if s))

HOME_SHORTHAND: str = '~'
HOME_ENV_VAR: str = 'HOME'

# Written between two consecutive files, never after the last one.
OUTPUT_SEPARATOR: bytes = b'\n'
OUTPUT_ENCODING: str = 'utf-8'

# Unicode White_Space characters, stripped from the end of each file's text.
TRAILING_WHITESPACE: str = (
    '\t\n\x0b\x0c\r \x85\xa0\u1680'
    '\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a'
    '\u2028\u2029\u202f\u205f\u3000'
)

ENV_JSON_LOGS: str = 'CONCATENER_JSON_LOGS'
ENV_TRACE_IO: str = 'CONCATENER_TRACE_IO'
