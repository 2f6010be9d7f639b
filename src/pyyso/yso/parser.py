# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2025/03/02 15:02:18
# @Author : Kariko Lin

"""Readers and writers of YSO documents.

The text format is line based:

    ```
    # comment, `;` works as well
    [section]
    key:value
    long:\"\"\"
    first line
    second line
    \"\"\"
    ```

A single pass without backtracking. Each line (trimmed) is either
blank, a comment, a section header, a `key:value` pair, or ignored.
Once a value opens the multi-line mark, lines are taken *verbatim*
until one contains the mark again.
"""

import logging
from io import StringIO
from os import PathLike
from typing import TextIO
from warnings import warn

import chardet
import yaml

from ..abstract import FileHandler
from .consts import (
    COMMENT_MARKS,
    KEY_DELIMITER,
    MULTILINE_MARK,
    SECTION_CLOSE,
    SECTION_OPEN
)
from .errors import (
    EmptyName,
    MalformedInput,
    UnclosedSectionHeader,
    UnterminatedMultilineValue
)
from .model import YsoObject, YsoSection


def _is_comment(line: str) -> bool:
    return line.startswith(COMMENT_MARKS)


def _header_start(line: str) -> int:
    """Index of the `[` opening a section header, -1 if not a header.

    A line led by `[` is always a header (`[a:b]` included).
    Otherwise any `:` makes it a pair, like `list:[1,2]` or `a[0]:v`.
    """
    beg = line.find(SECTION_OPEN)
    if beg <= 0:
        return beg
    if KEY_DELIMITER in line:
        return -1
    return beg


class _LineScanner:
    """Hands out raw lines (terminator stripped) and counts them."""
    def __init__(self, buf: TextIO) -> None:
        self._buf = buf
        self.line_no = 0

    def readline(self) -> str | None:
        if not (i := self._buf.readline()):
            return None
        self.line_no += 1
        return i.removesuffix('\n').removesuffix('\r')


class YsoParser(FileHandler[YsoObject]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    @staticmethod
    def readstream(buf: TextIO) -> YsoObject:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        Raises `MalformedInput` and returns nothing on structural errors.
        """
        ret = YsoObject()
        scan = _LineScanner(buf)
        pending = scan.readline()
        while pending is not None:
            line = pending.strip()
            if (
                not line or _is_comment(line)
                or (beg := _header_start(line)) == -1
            ):
                pending = scan.readline()
                continue
            name = YsoParser.__section_name(line, beg, scan.line_no)
            logging.debug(f'YSO: [{name}] starts at line {scan.line_no}.')
            # the body hands back the header line it stopped at.
            ret[name], pending = YsoParser.__read_section(scan)
        return ret

    @staticmethod
    def __section_name(line: str, beg: int, line_no: int) -> str:
        end = line.find(SECTION_CLOSE, beg + 1)
        if end == -1:
            raise UnclosedSectionHeader(
                f"expected '{SECTION_CLOSE}'", line_no, line)
        name = line[beg + 1:end].strip()
        if not name:
            raise EmptyName('empty section name', line_no, line)
        return name

    @staticmethod
    def __read_section(scan: _LineScanner) -> tuple[YsoSection, str | None]:
        ret = YsoSection()
        while (raw := scan.readline()) is not None:
            line = raw.strip()
            if not line or _is_comment(line):
                continue
            if _header_start(line) != -1:
                return ret, raw
            if KEY_DELIMITER not in line:
                continue
            key, val = line.split(KEY_DELIMITER, 1)
            key = key.strip()
            if not key:
                raise EmptyName('empty key', scan.line_no, line)
            if MULTILINE_MARK in val:
                # keep what follows the mark untrimmed.
                opening = raw[raw.find(KEY_DELIMITER) + 1:]
                ret[key] = YsoParser.__read_multiline(scan, opening)
            else:
                ret[key] = val.strip()
        return ret, None

    @staticmethod
    def __read_multiline(scan: _LineScanner, opening: str) -> str:
        opened_at = scan.line_no
        head = opening[opening.find(MULTILINE_MARK) + len(MULTILINE_MARK):]
        if MULTILINE_MARK in head:  # `key:"""value"""`
            return head[:head.find(MULTILINE_MARK)]

        # an empty text right after the opening mark (or right before
        # the closing one) is layout, not content.
        segments = [head] if head else []
        while (raw := scan.readline()) is not None:
            if (end := raw.find(MULTILINE_MARK)) != -1:
                if end > 0:
                    segments.append(raw[:end])
                logging.debug(
                    f'YSO: multi-line value at lines {opened_at}'
                    f'-{scan.line_no}.')
                return '\n'.join(segments)
            segments.append(raw)
        raise UnterminatedMultilineValue(
            f"expected '{MULTILINE_MARK}'", opened_at, opening.strip())

    @staticmethod
    def __pack(value: str) -> str:
        # an embedded mark is NOT escaped, the format has no way to.
        if '\n' in value:
            return f'{MULTILINE_MARK}{value}{MULTILINE_MARK}'
        return value

    @staticmethod
    def render(instance: YsoObject, header: str = '') -> str:
        """Serialize to YSO text. Values with newlines get triple-quoted.

        `header` goes to the very first line, followed by a blank one.
        Better make it a comment (`# ...`) so it never reads back as data.
        """
        buf = StringIO()
        if header.strip():
            for i in header.splitlines():
                line = i.strip()
                if line and not _is_comment(line) \
                        and _header_start(line) != -1:
                    warn(
                        f'Header line {i!r} would be read back '
                        'as a section declaration.')
            buf.write(f'{header}\n\n')
        for name, section in instance.items():
            buf.write(f'[{name}]\n')
            for k, v in section.items():
                buf.write(f'{k}{KEY_DELIMITER}{YsoParser.__pack(v)}\n')
            buf.write('\n')
        return buf.getvalue()

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('gbk')
        return StringIO(buf)

    def read(self) -> YsoObject:
        """读取`YsoParser`实例指定的文件。

        A wrong `encoding` falls back to `chardet` detection.
        """
        logging.debug(f'YSO: reading {self}.')
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            logging.warning(
                f'{self._fn} is not {self._codec}, guessing its codec.')
            return self.readstream(self._decode_file(self._fn))

    def write(self, instance: YsoObject, header: str = '') -> None:
        """保存到 YSO 文件，会覆盖已存在的文件。"""
        logging.debug(f'YSO: writing {len(instance)} section(s) to {self}.')
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(self.render(instance, header))


class _LiteralDumper(yaml.SafeDumper):
    """Dumps multi-line strings as `|` blocks."""
    pass


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    style = '|' if '\n' in data else None
    return dumper.represent_scalar('tag:yaml.org,2002:str', data, style=style)


_LiteralDumper.add_representer(str, _represent_str)


class YsoYamlParser(FileHandler[YsoObject]):
    """Exchange a YSO document with a YAML mapping of mappings:

        ```yaml
        section:
          key: value
          long: |-
            first line
            second line
        ```
    """
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    def read(self) -> YsoObject:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src = yaml.load(fp, yaml.SafeLoader)
        ret = YsoObject()
        if src is None:
            return ret
        if not isinstance(src, dict):
            raise MalformedInput(f'{self._fn}: YAML root is not a mapping')
        for name, pairs in src.items():
            if pairs is None:
                pairs = {}
            if not isinstance(pairs, dict):
                raise MalformedInput(
                    f'{self._fn}: section {name!r} is not a mapping')
            # may there be some pure digits considered as int
            ret[str(name)] = {
                str(k): '' if v is None else str(v) for k, v in pairs.items()
            }
        return ret

    def write(self, instance: YsoObject, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.dump(
                instance.to_dict(), fp, _LiteralDumper,
                allow_unicode=True, indent=indent, sort_keys=False,
                default_flow_style=False)


def parse(stream: TextIO) -> YsoObject:
    return YsoParser.readstream(stream)


def loads(text: str) -> YsoObject:
    return YsoParser.readstream(StringIO(text))


def render(instance: YsoObject, header: str = '') -> str:
    return YsoParser.render(instance, header)


dumps = render


def load(filename: str | PathLike[str], encoding: str = 'utf-8') -> YsoObject:
    return YsoParser(filename, encoding).read()


def save(
    filename: str | PathLike[str], instance: YsoObject,
    header: str = '', encoding: str = 'utf-8'
) -> None:
    YsoParser(filename, encoding).write(instance, header)
