#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
PlayerColorParam 编码器

将 PlayerColorParam 序列化为二进制数据。
"""

import io
import logging
import os
from typing import BinaryIO, List, Tuple, Union

from .core.binary_io import BinaryWriter, pointer_value
from .core.schema import (
    FileHeader, EntryRecord, EntryKey, Color,
    FORMAT_VERSION, HEADER_SIZE, ENTRY_RECORD_SIZE,
)
from .core.string_table import StringRegion
from .param import PlayerColorParam


logger = logging.getLogger(__name__)


class ParamEncoder:
    """
    PlayerColorParam 编码器

    输出布局:

        [FileHeader][EntryRecord * N][字符串槽位 * N]

    Entry 按 EntryKey 规范顺序排列，相同的表总是得到相同的字节。
    """

    def __init__(self, param: PlayerColorParam, strict: bool = True):
        """
        初始化编码器

        Args:
            param: 要编码的颜色表 (不会被修改)
            strict: 是否拒绝不满足 6 字节角色 ID 假设的条目
        """
        self._entries: List[Tuple[EntryKey, Color]] = param.sorted_items()
        self._strict = strict

        entry_count = len(self._entries)
        self._strings = StringRegion(HEADER_SIZE + entry_count * ENTRY_RECORD_SIZE)
        for key, _ in self._entries:
            self._strings.add(key.character_id)

    @property
    def entry_count(self) -> int:
        """条目数量"""
        return len(self._entries)

    def encode_to(self, stream: BinaryIO) -> int:
        """
        写入到二进制流

        Args:
            stream: 可写的二进制流

        Returns:
            写入的字节数

        Raises:
            CharacterIdLengthError: 严格模式下角色 ID 长度不符
        """
        # 校验先于任何写入
        self._strings.validate(self._strict)

        writer = BinaryWriter(stream)

        # ========== 1. 写入 FileHeader ==========
        header = FileHeader(
            version=FORMAT_VERSION,
            entry_count=self.entry_count,
            data_offset=pointer_value(0)  # Entry 表紧跟 Header
        )
        writer.write_bytes(header.pack())

        # ========== 2. 写入 Entry 表 ==========
        for index, (key, color) in enumerate(self._entries):
            displacement = self._strings.pointer_to(index, writer.position)
            record = EntryRecord.from_entry(key, color, displacement)
            writer.write_bytes(record.pack())

        # ========== 3. 写入字符串区 ==========
        self._strings.pack(writer)

        logger.debug(
            "PlayerColorParam: 已编码 %d 条目, %d 字节",
            self.entry_count, writer.position
        )
        return writer.position

    def encode(self) -> bytes:
        """编码为字节数据"""
        buffer = io.BytesIO()
        self.encode_to(buffer)
        return buffer.getvalue()


def encode_to_stream(
    param: PlayerColorParam,
    stream: BinaryIO,
    strict: bool = True
) -> int:
    """
    编码并写入二进制流

    Args:
        param: 颜色表
        stream: 可写的二进制流
        strict: 是否校验角色 ID 长度

    Returns:
        写入的字节数
    """
    return ParamEncoder(param, strict=strict).encode_to(stream)


def encode(param: PlayerColorParam, strict: bool = True) -> bytes:
    """
    编码为字节数据

    Args:
        param: 颜色表
        strict: 是否校验角色 ID 长度

    Returns:
        二进制数据
    """
    return ParamEncoder(param, strict=strict).encode()


def write(
    param: PlayerColorParam,
    path: Union[str, os.PathLike],
    strict: bool = True
) -> None:
    """
    写入文件

    先完成编码再打开文件，编码失败时不会留下残缺文件。

    Args:
        param: 颜色表
        path: 输出文件路径
        strict: 是否校验角色 ID 长度
    """
    data = encode(param, strict=strict)
    with open(path, 'wb') as f:
        f.write(data)
    logger.debug("已写入 %s (%d 字节)", path, len(data))
