#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
PlayerColorParam 核心模块

提供二进制 I/O 封装、数据结构定义和字符串区管理。
"""

from .binary_io import (
    BinaryReader, BinaryWriter, POINTER_SIZE, pointer_displacement, pointer_value,
)
from .schema import (
    FileHeader, EntryRecord, EntryKey, Color,
    FORMAT_VERSION, HEADER_SIZE, ENTRY_RECORD_SIZE,
    CHARACTER_ID_LENGTH, STRING_FIELD_WIDTH, narrow_u8,
)
from .string_table import StringRegion

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "POINTER_SIZE",
    "pointer_displacement",
    "pointer_value",
    "FileHeader",
    "EntryRecord",
    "EntryKey",
    "Color",
    "FORMAT_VERSION",
    "HEADER_SIZE",
    "ENTRY_RECORD_SIZE",
    "CHARACTER_ID_LENGTH",
    "STRING_FIELD_WIDTH",
    "narrow_u8",
    "StringRegion",
]
