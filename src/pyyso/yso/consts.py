# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2025/03/02 14:12:40
# @Author : Kariko Lin

MULTILINE_MARK = '"""'
COMMENT_MARKS = ('#', ';')
KEY_DELIMITER = ':'
SECTION_OPEN = '['
SECTION_CLOSE = ']'
