# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 21:06:40
# @Author : Kariko Lin

from enum import Enum

INI_SUFFIX = '.ini'
COMMENT_PREFIXES = (';', '#')

SECTION_OPEN = '['
SECTION_CLOSE = ']'
DELIMITER = '='
QUOTE = '"'

# literal two-char sequence -> control char.
ESCAPES = {
    '\\n': '\n',
    '\\r': '\r',
    '\\t': '\t',
}

# chardet guesses below this are ignored.
CHARDET_CONFIDENCE = 0.8
DEFAULT_ENCODING = 'utf-8'
FALLBACK_ENCODING = 'gbk'


class LineKind(str, Enum):
    SKIP = 'skip'
    SECTION = 'section'
    ASSIGNMENT = 'assignment'
