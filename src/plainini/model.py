# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:03:27
# @Author : Kariko Lin

"""
Basically INI Structure: ordered sections, plus "global" pairs on top.

Reading and file handling live in `parser`.
"""

from collections.abc import Mapping, MutableMapping
from io import StringIO
from os import PathLike
from typing import Iterator, TextIO

from .consts import DELIMITER
from .errors import IniParseError, IniSyntaxError
from .lexer import escape as escape_value


class IniSection(MutableMapping[str, str]):
    """INI 小节字典。

    A write-through view of one section's pairs (or of the global pairs,
    where `name` is `None`). Keys are unique, the latter wins.

    All pairs *should* be `str: str`, however in runtime
    we wouldn't limit that much.
    """

    def __init__(self, name: str | None, data: dict[str, str]) -> None:
        self._name = name
        # shared with IniDocument, never copied here.
        self._data = data

    @property
    def name(self) -> str | None:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return '' if self._name is None else f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name or '', len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """INI 文件表示。支持以下形式的小节和键值对：

        ```ini
        ; whole-line comments only, starting with ';' or '#'.
        ; pairs above any section go to self.header.
        key = val

        [section]
        key233 = val666
        # 'a<TAB>b', quotes stripped.
        tabbed = "a\\tb"
        ```

    Sections keep the order they are first declared (or created),
    tracked by an explicit list rather than the dict itself.

    `load_from_string()` and `parse_file()` *accumulate* into this instance,
    they never reset it. Call `clear()` first for a fresh read.
    """
    # two list model: one stores section declarations,
    # another stores real dicts, shared with IniSection views.
    def __init__(self) -> None:
        self.__header: dict[str, str] = {}
        self.__raw_dicts: dict[str, dict[str, str]] = {}
        self.__sections: list[str] = []

    @property
    def header(self) -> IniSection:
        """位于文件头部的，不属于任何小节的游离键值对。"""
        return IniSection(None, self.__header)

    def __getitem__(self, key: str) -> IniSection:
        if key not in self:
            raise KeyError(key)
        return IniSection(key, self.__raw_dicts[key])

    def __setitem__(self, key: str, value: Mapping[str, str]) -> None:
        # shouldn't keep ptr to external dict.
        self.__raw_dicts[key] = dict(value)
        if key not in self.__sections:
            self.__sections.append(key)

    def __delitem__(self, key: str) -> None:
        del self.__raw_dicts[key]
        self.__sections.remove(key)

    def __contains__(self, key: object) -> bool:
        return key in self.__raw_dicts

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return '<IniDocument sections=%d globals=%d>' % (
            len(self.__sections), len(self.__header))

    def setdefault(  # type: ignore[override]
        self, key: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        if key not in self:
            self[key] = {} if default is None else default
        return self[key]

    def clear(self) -> None:
        self.__header.clear()
        self.__raw_dicts.clear()
        self.__sections.clear()

    def merge(self, another: 'IniDocument') -> None:
        """To merge `another` into self, the same way a parse pass does:
        known sections are reused, pairs of `another` win."""
        self.__header.update(another.header)
        for decl, data in another.items():
            self.setdefault(decl).update(data)

    # accessors

    def get_section_names(self) -> tuple[str, ...]:
        return tuple(self.__sections)

    def get_sections(self) -> dict[str, dict[str, str]]:
        """Copy of every section's pairs, in section order."""
        return {i: self.__raw_dicts[i].copy() for i in self.__sections}

    def get_global_keys(self) -> dict[str, str]:
        return self.__header.copy()

    def get_value(self, section: str, key: str) -> tuple[str, bool]:
        """Returns `(value, True)`, or `('', False)` if either
        the section or the key is missing."""
        pairs = self.__raw_dicts.get(section)
        if pairs is None or key not in pairs:
            return '', False
        return pairs[key], True

    def set_value(self, section: str, key: str, value: str) -> None:
        """Creates `section` if absent, then writes the pair.

        Global pairs are only reachable through `self.header`.
        """
        self.setdefault(section)[key] = value

    # serializing

    def write_stream(self, fp: TextIO, escape: bool = False) -> None:
        """Global pairs first (insertion order), then each section
        with its keys sorted.

        Values are written as is unless `escape=True`,
        which turns control chars back into `\\n`, `\\r`, `\\t`.
        Stripped quotes are never restored.
        """
        fmt = escape_value if escape else str
        for key, val in self.__header.items():
            fp.write(f'{key}{DELIMITER}{fmt(val)}\n')
        for sect in self.__sections:
            fp.write(f'[{sect}]\n')
            pairs = self.__raw_dicts[sect]
            for key in sorted(pairs):
                fp.write(f'{key}{DELIMITER}{fmt(pairs[key])}\n')

    def to_string(self, escape: bool = False) -> str:
        buf = StringIO()
        self.write_stream(buf, escape)
        return buf.getvalue()

    # parsing entries

    def load_from_string(self, text: str) -> None:
        """Parse `text` into this document.

        On failure the document may be partially updated.
        """
        from .parser import IniParser  # parser imports this module.
        try:
            IniParser.readstream(StringIO(text), self)
        except IniSyntaxError as e:
            raise IniParseError('failed to parse input string', e) from e

    def parse_file(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        """Parse an `.ini` file into this document.

        Raises `UnsupportedFormat` before touching the disk
        if the suffix is anything else.
        """
        from .parser import IniParser
        parser = IniParser(filename, encoding)
        parser.check_suffix()
        try:
            parser.readinto(self)
        except (IniSyntaxError, OSError, UnicodeError) as e:
            raise IniParseError(
                f'failed to parse file {parser.filename}', e) from e
