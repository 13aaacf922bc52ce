# -*- encoding: utf-8 -*-
# @File   : lexer.py
# @Time   : 2024/10/12 21:31:52
# @Author : Kariko Lin

"""Line classification and value escaping.

Nothing here keeps state; `parser.IniParser` drives these per line.
"""

from typing import NamedTuple

from .consts import (
    COMMENT_PREFIXES,
    DELIMITER,
    ESCAPES,
    QUOTE,
    SECTION_CLOSE,
    SECTION_OPEN,
    LineKind,
)


class IniLine(NamedTuple):
    kind: LineKind
    # section name for SECTION, raw left side for ASSIGNMENT.
    name: str = ''
    # raw right side, or None if there's no delimiter at all.
    value: str | None = None


def classify(line: str) -> IniLine:
    """Classify one *trimmed* line.

    Anything neither blank, comment nor `[header]` is an assignment,
    even without `=` (which then fails validation in the parser).
    """
    if not line or line.startswith(COMMENT_PREFIXES):
        return IniLine(LineKind.SKIP)
    if line.startswith(SECTION_OPEN) and line.endswith(SECTION_CLOSE):
        # all brackets on both edges, i.e. `[[a]]` -> `a`.
        return IniLine(
            LineKind.SECTION, line.strip(SECTION_OPEN + SECTION_CLOSE))
    key, sep, val = line.partition(DELIMITER)
    return IniLine(LineKind.ASSIGNMENT, key, val if sep else None)


def unescape(raw: str) -> str:
    """Turn literal `\\n`, `\\r`, `\\t` into control chars,
    then strip every leading and trailing `"`."""
    for seq, char in ESCAPES.items():
        raw = raw.replace(seq, char)
    return raw.strip(QUOTE)


def escape(value: str) -> str:
    """Inverse of `unescape()` for control chars only.

    Stripped quotes are gone for good, so they can't be restored here.
    """
    for seq, char in ESCAPES.items():
        value = value.replace(char, seq)
    return value
