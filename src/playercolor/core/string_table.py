#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
字符串区管理

提供 StringRegion 类，负责字符串区的槽位布局与相对指针计算。
"""

import logging
from typing import List, TYPE_CHECKING

from .binary_io import POINTER_SIZE
from .schema import (
    CHARACTER_ID_LENGTH,
    STRING_PADDING,
    STRING_FIELD_WIDTH,
)
from ..exceptions import CharacterIdLengthError

if TYPE_CHECKING:
    from .binary_io import BinaryWriter


logger = logging.getLogger(__name__)


class StringRegion:
    """
    字符串区

    每个 Entry 独占一个固定宽度的槽位 (不去重)，
    即同一角色 ID 出现 N 次，字符串区中就写入 N 份。
    槽位顺序与 Entry 顺序一致。
    """

    def __init__(self, base: int):
        """
        初始化字符串区

        Args:
            base: 字符串区起始的绝对位置
        """
        self._base = base
        self._strings: List[str] = []

    def add(self, s: str) -> int:
        """
        追加一个槽位

        Args:
            s: 角色 ID

        Returns:
            槽位索引
        """
        self._strings.append(s)
        return len(self._strings) - 1

    def slot_position(self, index: int) -> int:
        """第 index 个槽位的绝对位置"""
        return self._base + STRING_FIELD_WIDTH * index

    def pointer_to(self, index: int, field_position: int) -> int:
        """
        计算指向槽位的相对位移

        Args:
            index: 槽位索引
            field_position: 指针字段起始的绝对位置

        Returns:
            相对于指针字段末尾的位移
        """
        return self.slot_position(index) - (field_position + POINTER_SIZE)

    def __len__(self) -> int:
        """返回槽位数量"""
        return len(self._strings)

    def validate(self, strict: bool = True) -> None:
        """
        检查所有字符串是否符合固定槽位假设

        Args:
            strict: True 时抛出异常，False 时仅记录警告

        Raises:
            CharacterIdLengthError: 严格模式下存在不符合的字符串
        """
        for s in self._strings:
            encoded = s.encode('utf-8')
            if len(encoded) == CHARACTER_ID_LENGTH and b'\x00' not in encoded:
                continue
            if strict:
                raise CharacterIdLengthError(s, len(encoded), CHARACTER_ID_LENGTH)
            logger.warning(
                "角色 ID %r 长度为 %d 字节, 字符串区布局将与指针不一致",
                s, len(encoded)
            )

    def pack(self, writer: 'BinaryWriter') -> int:
        """
        序列化到 BinaryWriter

        格式: [id_1][0x00 0x00][id_2][0x00 0x00]...

        Args:
            writer: 二进制写入器

        Returns:
            写入的字节数
        """
        start = writer.position
        for s in self._strings:
            writer.write_cstring(s, padding=STRING_PADDING)
        return writer.position - start
