#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
PlayerColorParam 解码器

将二进制数据解析为 PlayerColorParam。
"""

import io
import logging
import os
from collections import Counter
from typing import BinaryIO, Tuple, Union

from .core.binary_io import BinaryReader, pointer_displacement
from .core.schema import (
    FileHeader, EntryRecord, EntryKey, Color,
    FORMAT_VERSION, MAX_ALT_INDEX,
)
from .exceptions import InvalidFormatError, VersionMismatchError
from .param import PlayerColorParam


logger = logging.getLogger(__name__)


class ParamDecoder:
    """
    PlayerColorParam 解码器

    一次性使用: 每个实例只对应一次解码，
    alt_index 计数器随实例创建、随实例丢弃。
    """

    def __init__(self, stream: BinaryIO):
        """
        初始化解码器

        Args:
            stream: 可随机访问的二进制流，从当前位置开始解析
        """
        self._reader = BinaryReader(stream)
        self._alt_counter: Counter = Counter()

    def decode(self) -> PlayerColorParam:
        """
        执行解码

        Returns:
            按文件顺序插入的 PlayerColorParam

        Raises:
            VersionMismatchError: 版本号不受支持
            TruncatedDataError: 数据截断或指针越界
            InvalidStringError: 角色 ID 不是合法的 UTF-8
        """
        # ========== 1. 读取 FileHeader ==========
        header = self._read_header()

        # ========== 2. 跳转到 Entry 表 ==========
        self._reader.skip(pointer_displacement(header.data_offset))
        logger.debug(
            "PlayerColorParam: %d 条目, Entry 表位于 %d",
            header.entry_count, self._reader.position
        )

        # ========== 3. 逐条读取 Entry ==========
        param = PlayerColorParam()
        for _ in range(header.entry_count):
            key, color = self._read_entry()
            param.insert(key, color)
        return param

    def _read_header(self) -> FileHeader:
        header = FileHeader.unpack(self._reader.read_bytes(FileHeader.SIZE))
        if header.version != FORMAT_VERSION:
            raise VersionMismatchError(header.version, [FORMAT_VERSION])
        return header

    def _read_entry(self) -> Tuple[EntryKey, Color]:
        """
        读取单条 Entry

        字符串指针以指针字段末尾为基准，读取字符串后必须回到
        记录之后，才能继续读取下一条记录。
        """
        record_position = self._reader.position
        record = EntryRecord.unpack(self._reader.read_bytes(EntryRecord.SIZE))
        character_id = self._reader.read_cstring_at(
            record.string_position(record_position)
        )
        costume_index = record.costume

        group = (character_id, costume_index)
        alt_index = self._alt_counter[group]
        if alt_index > MAX_ALT_INDEX:
            raise InvalidFormatError(
                f"角色 {character_id!r} 服装 {costume_index} "
                f"的条目超过 {MAX_ALT_INDEX + 1} 个"
            )
        self._alt_counter[group] += 1

        key = EntryKey(character_id, costume_index, alt_index)
        return key, record.color


def decode_stream(stream: BinaryIO) -> PlayerColorParam:
    """
    从二进制流解码

    Args:
        stream: 可随机访问的二进制流

    Returns:
        PlayerColorParam 实例
    """
    return ParamDecoder(stream).decode()


def decode(data: bytes) -> PlayerColorParam:
    """
    从字节数据解码

    超出已解析区域的字节会被忽略。

    Args:
        data: 原始字节数据

    Returns:
        PlayerColorParam 实例
    """
    return decode_stream(io.BytesIO(data))


def read(path: Union[str, os.PathLike]) -> PlayerColorParam:
    """
    从文件读取

    Args:
        path: 文件路径

    Returns:
        PlayerColorParam 实例
    """
    with open(path, 'rb') as f:
        param = decode_stream(f)
    logger.debug("已读取 %s (%d 条目)", path, len(param))
    return param
