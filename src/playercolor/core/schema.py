#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
PlayerColorParam 数据结构定义

定义 FileHeader、EntryRecord 两个磁盘结构，
以及内存中使用的 EntryKey、Color。

文件布局 (全部 Little-Endian):

    [FileHeader 16 bytes][可选的额外数据][EntryRecord * N][字符串区]
"""

import struct
from dataclasses import dataclass
from typing import ClassVar, Tuple

from .binary_io import POINTER_SIZE, pointer_displacement, pointer_value


# ==================== 常量定义 ====================

# 唯一受支持的格式版本
FORMAT_VERSION = 1000

HEADER_SIZE = 16

# 单条 Entry 记录大小 (指针 8 + costume 4 + 三个颜色通道 4*3)
ENTRY_RECORD_SIZE = 24

# 字符串区固定槽位: 6 字节内容 + 2 字节零填充
CHARACTER_ID_LENGTH = 6
STRING_PADDING = 2
STRING_FIELD_WIDTH = CHARACTER_ID_LENGTH + STRING_PADDING

_BYTE_MASK = 0xFF

# alt_index 为单字节
MAX_ALT_INDEX = _BYTE_MASK


def narrow_u8(value: int) -> int:
    """截断为低 8 位 (高 24 位直接丢弃，不做校验)"""
    return value & _BYTE_MASK


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= _BYTE_MASK:
        raise ValueError(f"{name} 必须在 0-255 之间, 实际为 {value}")


# ==================== 文件头 ====================

@dataclass
class FileHeader:
    """
    文件头 (16 bytes)

    data_offset 是相对指针: 以 data_offset 字段末尾为基准，
    位移 (data_offset - 8) 处为 Entry 表起点。编码时固定为 8，
    即 Entry 表紧跟文件头。
    """
    FORMAT: ClassVar[str] = '<IIQ'
    SIZE: ClassVar[int] = HEADER_SIZE

    version: int = FORMAT_VERSION
    entry_count: int = 0
    data_offset: int = POINTER_SIZE

    def pack(self) -> bytes:
        """序列化为字节"""
        return struct.pack(
            self.FORMAT,
            self.version,
            self.entry_count,
            self.data_offset
        )

    @classmethod
    def unpack(cls, data: bytes) -> 'FileHeader':
        """从字节反序列化"""
        values = struct.unpack(cls.FORMAT, data)
        return cls(
            version=values[0],
            entry_count=values[1],
            data_offset=values[2]
        )


# ==================== Entry 记录 ====================

@dataclass
class EntryRecord:
    """
    Entry 记录 (24 bytes)

    磁盘上的颜色字段顺序为 red, blue, green。
    所有 u32 字段只有低字节有意义。
    """
    FORMAT: ClassVar[str] = '<QIIII'
    SIZE: ClassVar[int] = ENTRY_RECORD_SIZE

    string_pointer: int = POINTER_SIZE   # 相对指针，指向字符串区中的角色 ID
    costume_index: int = 0
    red: int = 0
    blue: int = 0
    green: int = 0

    def pack(self) -> bytes:
        """序列化为字节"""
        return struct.pack(
            self.FORMAT,
            self.string_pointer,
            self.costume_index,
            self.red,
            self.blue,
            self.green
        )

    @classmethod
    def unpack(cls, data: bytes) -> 'EntryRecord':
        """从字节反序列化"""
        values = struct.unpack(cls.FORMAT, data)
        return cls(
            string_pointer=values[0],
            costume_index=values[1],
            red=values[2],
            blue=values[3],
            green=values[4]
        )

    @classmethod
    def from_entry(cls, key: 'EntryKey', color: 'Color', displacement: int) -> 'EntryRecord':
        """
        由内存条目构造记录

        Args:
            key: 条目键 (alt_index 不写入文件)
            color: 颜色
            displacement: 字符串相对于指针字段末尾的位移
        """
        red, blue, green = color.to_disk()
        return cls(
            string_pointer=pointer_value(displacement),
            costume_index=key.costume_index,
            red=red,
            blue=blue,
            green=green
        )

    def string_position(self, record_position: int) -> int:
        """
        解析字符串指针

        Args:
            record_position: 本记录起始的绝对位置

        Returns:
            角色 ID 字符串的绝对位置
        """
        return record_position + POINTER_SIZE + pointer_displacement(self.string_pointer)

    @property
    def costume(self) -> int:
        """截断后的服装索引"""
        return narrow_u8(self.costume_index)

    @property
    def color(self) -> 'Color':
        """截断后的颜色值"""
        return Color.from_disk(self.red, self.blue, self.green)


# ==================== 内存结构 ====================

@dataclass(frozen=True, order=True)
class EntryKey:
    """
    条目键

    字段顺序即规范排序顺序: character_id, costume_index, alt_index。
    alt_index 不存储在文件中，解码时按出现顺序推导。
    """
    character_id: str
    costume_index: int
    alt_index: int = 0

    def __post_init__(self):
        _check_byte("costume_index", self.costume_index)
        _check_byte("alt_index", self.alt_index)

    @property
    def group(self) -> Tuple[str, int]:
        """(character_id, costume_index) 分组键"""
        return self.character_id, self.costume_index


@dataclass(frozen=True)
class Color:
    """RGB 颜色 (每通道 0-255)"""
    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self):
        _check_byte("red", self.red)
        _check_byte("green", self.green)
        _check_byte("blue", self.blue)

    @classmethod
    def from_disk(cls, red: int, blue: int, green: int) -> 'Color':
        """
        从磁盘字段构造

        参数顺序与磁盘字段顺序一致 (red, blue, green)，
        每个 32 位值只保留低字节。
        """
        return cls(
            red=narrow_u8(red),
            green=narrow_u8(green),
            blue=narrow_u8(blue)
        )

    def to_disk(self) -> Tuple[int, int, int]:
        """按磁盘字段顺序返回 (red, blue, green)"""
        return self.red, self.blue, self.green

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """
        从 '#rrggbb' 或 'rrggbb' 构造

        Examples:
            >>> Color.from_hex("#40c552")
            Color(red=64, green=197, blue=82)
        """
        text = value.lstrip('#')
        if len(text) != 6:
            raise ValueError(f"无效的颜色值: {value!r}")
        return cls(
            red=int(text[0:2], 16),
            green=int(text[2:4], 16),
            blue=int(text[4:6], 16)
        )

    def to_hex(self) -> str:
        """转换为 '#rrggbb'"""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
