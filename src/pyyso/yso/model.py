# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2025/03/02 14:20:37
# @Author : Kariko Lin

"""
Basically YSO structure: named sections of string pairs, nothing nested.

    ```
    [section]
    key:value
    doc:\"\"\"first line
    second line\"\"\"
    ```

Both containers sit on plain `dict`s.
Iteration order is NOT part of the format, don't rely on it.

An instance is not guarded against concurrent mutation,
lock it yourself if it is shared between threads.
"""

from collections.abc import Mapping, MutableMapping
from typing import Iterator

from .errors import KeyNotFound


class YsoSection(MutableMapping[str, str]):
    """一个 YSO 小节：扁平的`key:value`字符串表，没有嵌套也没有类型。

    取不存在的键抛出`KeyNotFound`（它同时是`KeyError`，所以`in`和`get`照常可用）。
    多行值按原样保存，写出时才套上三引号。
    """
    def __init__(self, pairs: Mapping[str, str] | None = None) -> None:
        self.__data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    def __getitem__(self, key: str) -> str:
        if key not in self.__data:
            raise KeyNotFound(key, 'key')
        return self.__data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self.__data[key] = value

    def __delitem__(self, key: str) -> None:
        if key not in self.__data:
            raise KeyNotFound(key, 'key')
        del self.__data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__data

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __repr__(self) -> str:
        return f'YsoSection({self.__data!r})'

    def key_exists(self, key: str) -> bool:
        return key in self.__data

    def get_value(self, key: str) -> str:
        """Same as `self[key]`, raises `KeyNotFound` if absent."""
        return self[key]

    def get_or_create_value(self, key: str) -> str:
        """Get the value of `key`, storing an empty string first if absent."""
        return self.__data.setdefault(key, '')

    def to_dict(self) -> dict[str, str]:
        return self.__data.copy()


class YsoObject(MutableMapping[str, YsoSection]):
    """YSO 文档表示：小节名 -> `YsoSection`。

    通过`obj[name]`（或`get_section`）取不存在的小节会抛出`KeyNotFound`；
    需要自动创建时请用`get_or_create_section`。
    """
    def __init__(
        self,
        sections: Mapping[str, Mapping[str, str]] | None = None
    ) -> None:
        self.__sections: dict[str, YsoSection] = {}
        if sections:
            for name, pairs in sections.items():
                self[name] = pairs

    def __getitem__(self, name: str) -> YsoSection:
        if name not in self.__sections:
            raise KeyNotFound(name, 'section')
        return self.__sections[name]

    def __setitem__(
        self, name: str, value: YsoSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in section setting operation.
        self.__sections[name] = YsoSection(value)

    def __delitem__(self, name: str) -> None:
        if name not in self.__sections:
            raise KeyNotFound(name, 'section')
        del self.__sections[name]

    def __contains__(self, name: object) -> bool:
        return name in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if self.keys() != other.keys():
            return False
        return all(self[i] == other[i] for i in self)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'YsoObject({self.to_dict()!r})'

    def section_exists(self, name: str) -> bool:
        return name in self.__sections

    def get_section(self, name: str) -> YsoSection:
        """Same as `self[name]`, raises `KeyNotFound` if absent."""
        return self[name]

    def get_or_create_section(self, name: str) -> YsoSection:
        """Get the live section `name`, adding an empty one if absent."""
        if name not in self.__sections:
            self.__sections[name] = YsoSection()
        return self.__sections[name]

    def setdefault(  # type: ignore[override]
        self, name: str, default: Mapping[str, str] | None = None
    ) -> YsoSection:
        """If `name` not in self, then store a copy of `default`;
        either way return the live section."""
        if name not in self.__sections:
            self[name] = {} if default is None else default
        return self.__sections[name]

    def update(  # type: ignore[override]
        self, other: Mapping[str, Mapping[str, str]], /
    ) -> None:
        """Merge `other` into self, key by key.

        Unlike `dict.update`, a section already present is not replaced:
        incoming keys overwrite existing ones and the rest are kept.
        """
        for name, section in other.items():
            self.get_or_create_section(name).update(section)

    def merge(self, *others: Mapping[str, Mapping[str, str]]) -> None:
        """Merge each of `others` in turn, later ones win."""
        for i in others:
            self.update(i)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__sections.items()}

