#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
二进制 I/O 封装

提供 BinaryWriter 和 BinaryReader 类，封装所有底层流操作，
使编解码模块不需要直接操作流指针。

相对指针约定: 指针字段存储的值减去指针自身宽度 (8 字节)，
即为从指针字段末尾开始的位移量。
"""

import struct
import sys
from typing import BinaryIO, Tuple, Any

from ..exceptions import TruncatedDataError, InvalidStringError


POINTER_SIZE = 8

_U64_MASK = (1 << 64) - 1
_I64_SIGN = 1 << 63


# ==================== 相对指针 ====================

def pointer_displacement(raw: int) -> int:
    """
    将相对指针原始值换算为位移量

    原始值减去指针宽度后按 64 位有符号数解释，允许向后引用。

    Args:
        raw: 指针字段中存储的无符号 64 位值

    Returns:
        相对于指针字段末尾的位移 (可为负)
    """
    displacement = (raw - POINTER_SIZE) & _U64_MASK
    if displacement & _I64_SIGN:
        displacement -= 1 << 64
    return displacement


def pointer_value(displacement: int) -> int:
    """
    将位移量换算为相对指针原始值 (pointer_displacement 的逆运算)

    Args:
        displacement: 目标相对于指针字段末尾的位移

    Returns:
        写入指针字段的无符号 64 位值
    """
    return (displacement + POINTER_SIZE) & _U64_MASK


class BinaryWriter:
    """
    二进制写入器

    封装所有底层写操作。
    定长结构由 schema 模块打包后通过 write_bytes() 写入。
    """

    def __init__(self, file: BinaryIO):
        """
        初始化写入器

        Args:
            file: 可写的二进制流 (文件或 io.BytesIO)
        """
        self._file = file
        self._position = 0

    @property
    def position(self) -> int:
        """当前写入位置 (相对于写入器创建时的流位置)"""
        return self._position

    # ==================== 原始写入 ====================

    def write_bytes(self, data: bytes) -> int:
        """
        写入原始字节

        Args:
            data: 要写入的字节

        Returns:
            写入的字节数
        """
        written = self._file.write(data)
        self._position += written
        return written

    # ==================== 字符串写入 ====================

    def write_cstring(self, s: str, padding: int = 1) -> int:
        """
        写入以 NUL 结尾的字符串

        格式: [UTF-8 字节][padding 个 0x00]

        Args:
            s: 要写入的字符串
            padding: 结尾零字节个数

        Returns:
            写入的总字节数
        """
        return self.write_bytes(s.encode('utf-8') + b'\x00' * padding)


class BinaryReader:
    """
    二进制读取器

    封装所有底层读操作，提供类型化的读取方法。
    流必须可随机访问 (seek/tell)。
    """

    def __init__(self, file: BinaryIO):
        """
        初始化读取器

        Args:
            file: 以 'rb' 模式打开的文件对象或 io.BytesIO
        """
        self._file = file
        self._position = file.tell()

    @property
    def position(self) -> int:
        """当前读取位置"""
        return self._position

    # ==================== 原始读取 ====================

    def read_bytes(self, size: int) -> bytes:
        """
        读取指定字节数

        Args:
            size: 要读取的字节数

        Returns:
            读取的字节

        Raises:
            TruncatedDataError: 流中不足请求的字节数
        """
        data = self._file.read(size)
        if len(data) < size:
            raise TruncatedDataError(self._position, size, len(data))
        self._position += size
        return data

    def read_struct(self, fmt: str) -> Tuple[Any, ...]:
        """
        按 struct 格式读取

        Args:
            fmt: struct 格式字符串

        Returns:
            解包后的值元组
        """
        size = struct.calcsize(fmt)
        data = self.read_bytes(size)
        return struct.unpack(fmt, data)

    def read_u8(self) -> int:
        """读取无符号 8 位整数"""
        return self.read_struct('<B')[0]

    # ==================== 字符串读取 ====================

    def read_cstring(self) -> str:
        """
        读取以 NUL 结尾的 UTF-8 字符串

        读取后位置停在终止符之后。

        Returns:
            解码后的字符串 (不含终止符)

        Raises:
            TruncatedDataError: 流结束前未遇到终止符
            InvalidStringError: 字节序列不是合法的 UTF-8
        """
        start = self._position
        data = bytearray()
        while True:
            byte = self.read_u8()
            if byte == 0:
                break
            data.append(byte)
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidStringError(start, bytes(data)) from e

    def read_cstring_at(self, position: int) -> str:
        """
        跳转到指定位置读取字符串，读取后恢复原位置

        Args:
            position: 字符串起始的绝对位置

        Returns:
            解码后的字符串
        """
        saved = self._position
        self.seek(position)
        try:
            return self.read_cstring()
        finally:
            self.seek(saved)

    # ==================== 位置控制 ====================

    def seek(self, position: int):
        """
        移动到指定位置

        越过流末尾的位置允许跳转，之后的读取会失败。

        Args:
            position: 目标位置

        Raises:
            TruncatedDataError: 目标位置为负或超出流可寻址范围
        """
        if not 0 <= position <= sys.maxsize:
            raise TruncatedDataError.out_of_range(self._position, position)
        try:
            self._file.seek(position)
        except (OverflowError, OSError) as e:
            raise TruncatedDataError.out_of_range(self._position, position) from e
        self._position = position

    def skip(self, size: int):
        """
        跳过指定字节 (可为负)

        Args:
            size: 要跳过的字节数
        """
        self.seek(self._position + size)
