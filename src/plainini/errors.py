# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:20:13
# @Author : Kariko Lin


class IniError(Exception):
    """Base of errors raised when reading INI documents."""
    pass


class UnsupportedFormat(IniError):
    """The file to parse does not end with `.ini`."""
    def __init__(self, filename: str) -> None:
        super().__init__(f'.ini format is only supported: {filename}')
        self.filename = filename

    def __reduce__(self):
        return self.__class__, (self.filename,)


class IniSyntaxError(IniError):
    """To record a malformed line, located by its 1-based line number.

    Blank and comment lines count as well,
    so `lineno` always points at the raw position in source.
    """
    reason = 'syntax error'

    def __init__(self, lineno: int, line: str) -> None:
        super().__init__(f'line {lineno}: {self.reason}: {line}')
        self.lineno = lineno
        self.line = line

    def __reduce__(self):
        return self.__class__, (self.lineno, self.line)


class InvalidKeyValuePair(IniSyntaxError):
    reason = 'invalid key-value pair'


class EmptyKey(IniSyntaxError):
    reason = 'key cannot be empty'


class EmptyValue(IniSyntaxError):
    reason = 'value cannot be empty'


class IniParseError(IniError):
    """Wraps whatever stopped a parse pass with call-site context.

    The original exception is kept as `cause` (and `__cause__`).
    """
    def __init__(self, context: str, cause: BaseException) -> None:
        super().__init__(f'{context}: {cause}')
        self.context = context
        self.cause = cause

    def __reduce__(self):
        return self.__class__, (self.context, self.cause)
