# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2025/03/02 14:15:03
# @Author : Kariko Lin


class YsoError(Exception):
    """Base of all errors raised by this package."""
    pass


class KeyNotFound(YsoError, KeyError):
    """A section or key looked up by index does not exist."""
    def __init__(self, key: str, where: str = 'key') -> None:
        super().__init__(key)
        self.key = key
        self.where = where

    def __str__(self) -> str:
        return f'{self.where} not found: {self.key!r}'


class MalformedInput(YsoError, ValueError):
    """To record structural errors when reading YSO text.

    `line_no` is 1-based, `None` when the error is not tied to a line.
    """
    def __init__(
        self, msg: str,
        line_no: int | None = None, line: str | None = None
    ) -> None:
        super().__init__(msg)
        self.msg = msg
        self.line_no = line_no
        self.line = line

    def __str__(self) -> str:
        if self.line_no is None:
            return self.msg
        return f'line {self.line_no}: {self.msg}: {self.line!r}'


class UnclosedSectionHeader(MalformedInput):
    pass


class UnterminatedMultilineValue(MalformedInput):
    pass


class EmptyName(MalformedInput):
    pass
