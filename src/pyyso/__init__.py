# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2025/03/02 14:05:12
# @Author : Kariko Lin

import logging

from .yso import (
    YsoError, KeyNotFound, MalformedInput,
    UnclosedSectionHeader, UnterminatedMultilineValue, EmptyName,
    YsoSection, YsoObject,
    YsoParser, YsoYamlParser,
    parse, loads, render, dumps, load, save
)

__all__ = [
    'YsoError', 'KeyNotFound', 'MalformedInput',
    'UnclosedSectionHeader', 'UnterminatedMultilineValue', 'EmptyName',
    'YsoSection', 'YsoObject',
    'YsoParser', 'YsoYamlParser',
    'parse', 'loads', 'render', 'dumps', 'load', 'save'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
