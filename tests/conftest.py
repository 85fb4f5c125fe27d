#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
pytest 全局配置

提供共享 fixtures 和测试数据。
"""

import struct
from typing import List, Tuple

import pytest

from playercolor import PlayerColorParam, EntryKey, Color


# ==================== 测试数据 ====================

# 两个条目共享 ("1jnt01", 3)，Header 与 Entry 表之间有 8 字节额外数据
EXAMPLE_BINARY = bytes([
    0xE8, 0x03, 0x00, 0x00,  # version: u32 = 1000
    0x02, 0x00, 0x00, 0x00,  # entry_count: u32 = 2
    0x10, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # data_offset: u64 = 16
    0x68, 0x65, 0x6C, 0x6C, 0x6F, 0x00, 0x00, 0x00,  # "hello"
    0x30, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # string_pointer: u64 = 48
    0x03, 0x00, 0x00, 0x00,  # costume_index: u32 = 3
    0x40, 0x00, 0x00, 0x00,  # red: u32 = 64
    0x52, 0x00, 0x00, 0x00,  # blue: u32 = 82
    0xC5, 0x00, 0x00, 0x00,  # green: u32 = 197
    0x20, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # string_pointer: u64 = 32
    0x03, 0x00, 0x00, 0x00,  # costume_index: u32 = 3
    0x8F, 0x00, 0x00, 0x00,  # red: u32 = 143
    0xF6, 0x00, 0x00, 0x00,  # blue: u32 = 246
    0x48, 0x00, 0x00, 0x00,  # green: u32 = 72
    0x31, 0x6A, 0x6E, 0x74, 0x30, 0x31, 0x00, 0x00,  # "1jnt01"
    0x31, 0x6A, 0x6E, 0x74, 0x30, 0x31, 0x00, 0x00,  # "1jnt01"
])

# 四条目表的规范编码结果
FOUR_ENTRY_BINARY = bytes([
    0xE8, 0x03, 0x00, 0x00,  # version: u32 = 1000
    0x04, 0x00, 0x00, 0x00,  # entry_count: u32 = 4
    0x08, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # data_offset: u64 = 8
    0x60, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # string_pointer: u64 = 96
    0x02, 0x00, 0x00, 0x00,  # costume_index: u32 = 2
    0xFF, 0x00, 0x00, 0x00,  # red: u32 = 255
    0xFF, 0x00, 0x00, 0x00,  # blue: u32 = 255
    0xFF, 0x00, 0x00, 0x00,  # green: u32 = 255
    0x50, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # string_pointer: u64 = 80
    0x03, 0x00, 0x00, 0x00,  # costume_index: u32 = 3
    0x40, 0x00, 0x00, 0x00,  # red: u32 = 64
    0x52, 0x00, 0x00, 0x00,  # blue: u32 = 82
    0xC5, 0x00, 0x00, 0x00,  # green: u32 = 197
    0x40, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # string_pointer: u64 = 64
    0x03, 0x00, 0x00, 0x00,  # costume_index: u32 = 3
    0x8F, 0x00, 0x00, 0x00,  # red: u32 = 143
    0xF6, 0x00, 0x00, 0x00,  # blue: u32 = 246
    0x48, 0x00, 0x00, 0x00,  # green: u32 = 72
    0x30, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # string_pointer: u64 = 48
    0x00, 0x00, 0x00, 0x00,  # costume_index: u32 = 0
    0x00, 0x00, 0x00, 0x00,  # red: u32 = 0
    0x00, 0x00, 0x00, 0x00,  # blue: u32 = 0
    0x00, 0x00, 0x00, 0x00,  # green: u32 = 0
    0x31, 0x6A, 0x6E, 0x74, 0x30, 0x31, 0x00, 0x00,  # "1jnt01"
    0x31, 0x6A, 0x6E, 0x74, 0x30, 0x31, 0x00, 0x00,  # "1jnt01"
    0x31, 0x6A, 0x6E, 0x74, 0x30, 0x31, 0x00, 0x00,  # "1jnt01"
    0x32, 0x6A, 0x73, 0x70, 0x30, 0x31, 0x00, 0x00,  # "2jsp01"
])


# ==================== Fixtures ====================

@pytest.fixture
def example_binary() -> bytes:
    """两个条目共享同一 (character_id, costume_index) 的示例数据"""
    return EXAMPLE_BINARY


@pytest.fixture
def four_entry_binary() -> bytes:
    """four_entry_param 的规范编码结果"""
    return FOUR_ENTRY_BINARY


@pytest.fixture
def four_entry_param() -> PlayerColorParam:
    """
    四条目颜色表

    插入顺序刻意不同于规范排序顺序。
    """
    param = PlayerColorParam()
    param.insert(EntryKey("1jnt01", 3, 0), Color(red=64, green=197, blue=82))
    param.insert(EntryKey("1jnt01", 3, 1), Color(red=143, green=72, blue=246))
    param.insert(EntryKey("2jsp01", 0, 0), Color(red=0, green=0, blue=0))
    param.insert(EntryKey("1jnt01", 2, 0), Color(red=255, green=255, blue=255))
    return param


@pytest.fixture
def make_binary():
    """
    构造 PlayerColorParam 二进制数据的工厂

    条目依次排列在 Header (及 extra) 之后，字符串按条目顺序
    放在 Entry 表之后，每个字符串以单个 NUL 结尾。

    Returns:
        函数 (entries, version=1000, extra=b'') -> bytes，
        entries 为 (character_id_bytes, costume, red, blue, green) 列表
    """
    def _make(
        entries: List[Tuple[bytes, int, int, int, int]],
        version: int = 1000,
        extra: bytes = b''
    ) -> bytes:
        header = struct.pack('<IIQ', version, len(entries), 8 + len(extra))
        table_start = len(header) + len(extra)
        strings_start = table_start + 24 * len(entries)

        records = b''
        strings = b''
        for index, (character_id, costume, red, blue, green) in enumerate(entries):
            field_end = table_start + 24 * index + 8
            target = strings_start + len(strings)
            records += struct.pack(
                '<QIIII', target - field_end + 8, costume, red, blue, green
            )
            strings += character_id + b'\x00'
        return header + extra + records + strings

    return _make
