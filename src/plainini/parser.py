# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 22:41:09
# @Author : Kariko Lin

"""Note: the format here is a *plain* INI, which means:

1. Whole-line comments only (`;` or `#`), no trailing ones.
2. No continuation lines, no nested sections, every value a `str`.
3. Only `\\n`, `\\r`, `\\t` escapes, and quotes around values are stripped.

Parsing is fail-fast: the first malformed line stops the whole pass.
"""

import logging
from io import StringIO
from os import PathLike
from os.path import basename
from typing import TextIO
from warnings import warn

import chardet

from .abstract import FileHandler
from .consts import (
    CHARDET_CONFIDENCE,
    DEFAULT_ENCODING,
    FALLBACK_ENCODING,
    INI_SUFFIX,
    LineKind,
)
from .errors import (
    EmptyKey,
    EmptyValue,
    InvalidKeyValuePair,
    UnsupportedFormat,
)
from .lexer import classify, unescape
from .model import IniDocument

logger = logging.getLogger(__name__)


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, rootfile: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(rootfile)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: TextIO, ins: IniDocument | None = None
    ) -> IniDocument:
        """读取解码好的字符串流。

        Pairs go into `ins` (a new document if `None`), which is returned.
        Line numbers in errors count blank and comment lines too.

        May raise `IniSyntaxError`, or `OSError` from `buf`.
        """
        if ins is None:
            ins = IniDocument()
        this_sect = ins.header
        declared: set[str] = set()
        lineno = 0
        while raw := buf.readline():
            lineno += 1
            line = raw.strip()
            kind, name, val = classify(line)
            match kind:
                case LineKind.SKIP:
                    continue
                case LineKind.SECTION:
                    if name in declared:
                        warn(f'第 {lineno} 行重复声明了 [{name}]，'
                             '其键值对将与之前的合并。',
                             stacklevel=2)
                    declared.add(name)
                    this_sect = ins.setdefault(name)
                case LineKind.ASSIGNMENT:
                    if val is None:
                        raise InvalidKeyValuePair(lineno, line)
                    key, val = name.strip(), val.strip()
                    if not key:
                        raise EmptyKey(lineno, line)
                    if not val:
                        raise EmptyValue(lineno, line)
                    this_sect[key] = unescape(val)
        logger.debug('parsed %d lines, %d sections declared',
                     lineno, len(declared))
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        encoding = codec.get('encoding') or DEFAULT_ENCODING
        if (codec.get('confidence') or 0) < CHARDET_CONFIDENCE:
            encoding = DEFAULT_ENCODING
        logger.debug('%s: decoding as %s (chardet: %r)',
                     filename, encoding, codec)

        # fallbacks
        try:
            buf = raw.decode(encoding)
        except UnicodeDecodeError:
            buf = raw.decode(FALLBACK_ENCODING)
        return StringIO(buf)

    def check_suffix(self) -> None:
        # a bare `.ini` file name counts as well.
        if not basename(self._fn).endswith(INI_SUFFIX):
            raise UnsupportedFormat(self._fn)

    def readinto(self, ins: IniDocument) -> IniDocument:
        """Parse the file into an existing document.

        The file is parsed on its own first, and merged into `ins` only
        when the whole pass succeeds, so a decoding retry never feeds
        `ins` twice.
        """
        self.check_suffix()
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            # only `\n` ends a line, a bare `\r` stays in the value.
            with open(self._fn, 'r', encoding=self._codec,
                      newline='\n') as fp:
                logger.debug('reading %s (%s)', self._fn, self._codec)
                staged = self.readstream(fp)
        except UnicodeDecodeError as e:
            logger.warning('%s is not %s encoded (%s), guessing encoding.',
                           self._fn, self._codec or 'locale', e.reason)
            staged = self.readstream(self._decode_file(self._fn))
        ins.merge(staged)
        return ins

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。"""
        return self.readinto(IniDocument())

    def write(self, instance: IniDocument, *, escape: bool = False) -> None:
        """保存到 INI 文件。

        注：值中被转义出来的控制字符默认*原样*写出，
        需要能再次读回同样的值时请设`escape=True`。
        """
        with open(self._fn, 'w', encoding=self._codec,
                  newline='\n') as fp:
            instance.write_stream(fp, escape)

    def __str__(self) -> str:
        return f'{super().__str__()} ({self._codec or "locale"})'
