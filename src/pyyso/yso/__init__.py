# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2025/03/02 14:09:55
# @Author : Kariko Lin

from .errors import (
    YsoError,
    KeyNotFound,
    MalformedInput,
    UnclosedSectionHeader,
    UnterminatedMultilineValue,
    EmptyName
)
from .model import YsoSection, YsoObject
from .parser import (
    YsoParser,
    YsoYamlParser,
    parse,
    loads,
    render,
    dumps,
    load,
    save
)
