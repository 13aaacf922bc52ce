# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 23:10:52
# @Author : Kariko Lin

from .consts import LineKind
from .errors import (
    IniError,
    UnsupportedFormat,
    IniSyntaxError,
    InvalidKeyValuePair,
    EmptyKey,
    EmptyValue,
    IniParseError
)
from .lexer import IniLine, classify, escape, unescape
from .model import IniSection, IniDocument
from .parser import IniParser

__all__ = [
    'IniDocument', 'IniSection', 'IniParser',
    'LineKind', 'IniLine', 'classify', 'escape', 'unescape',
    'IniError', 'UnsupportedFormat', 'IniSyntaxError',
    'InvalidKeyValuePair', 'EmptyKey', 'EmptyValue', 'IniParseError'
]
