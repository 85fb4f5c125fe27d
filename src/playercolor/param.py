#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
PlayerColorParam 颜色表

按插入顺序保存 EntryKey -> Color 的映射。
"""

import os
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .core.schema import EntryKey, Color


class PlayerColorParam:
    """
    角色/服装颜色覆盖表

    键唯一，插入顺序保留；编码时按 EntryKey 自然顺序重新排序。
    编解码器不会修改已有的表。
    """

    def __init__(self, entries: Optional[Dict[EntryKey, Color]] = None):
        """
        初始化颜色表

        Args:
            entries: 初始条目 (会被复制)
        """
        self._entries: Dict[EntryKey, Color] = dict(entries) if entries else {}

    # ==================== 构建 ====================

    def insert(self, key: EntryKey, color: Color) -> None:
        """
        以显式键插入条目

        键已存在时覆盖颜色，位置不变。
        """
        self._entries[key] = color

    def add(self, character_id: str, costume_index: int, color: Color) -> EntryKey:
        """
        追加条目，自动分配 alt_index

        alt_index 取该 (character_id, costume_index) 下第一个未被占用的序号，
        与解码时按出现顺序分配的规则一致。

        Args:
            character_id: 角色 ID
            costume_index: 服装索引
            color: 颜色

        Returns:
            新条目的键
        """
        alt_index = 0
        while EntryKey(character_id, costume_index, alt_index) in self._entries:
            alt_index += 1
        key = EntryKey(character_id, costume_index, alt_index)
        self._entries[key] = color
        return key

    # ==================== 查询 ====================

    def get(self, key: EntryKey, default: Optional[Color] = None) -> Optional[Color]:
        """获取颜色，键不存在时返回 default"""
        return self._entries.get(key, default)

    def alternates(self, character_id: str, costume_index: int) -> List[Color]:
        """
        获取某角色某服装的全部颜色

        Returns:
            按 alt_index 升序排列的颜色列表
        """
        keys = sorted(
            key for key in self._entries
            if key.group == (character_id, costume_index)
        )
        return [self._entries[key] for key in keys]

    def keys(self):
        """所有键 (插入顺序)"""
        return self._entries.keys()

    def values(self):
        """所有颜色 (插入顺序)"""
        return self._entries.values()

    def items(self):
        """所有 (键, 颜色) 对 (插入顺序)"""
        return self._entries.items()

    def sorted_items(self) -> List[Tuple[EntryKey, Color]]:
        """按规范顺序 (character_id, costume_index, alt_index) 返回条目"""
        return sorted(self._entries.items(), key=lambda item: item[0])

    def __len__(self) -> int:
        """返回条目数量"""
        return len(self._entries)

    def __iter__(self) -> Iterator[EntryKey]:
        """按插入顺序迭代键"""
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        """检查键是否存在"""
        return key in self._entries

    def __getitem__(self, key: EntryKey) -> Color:
        """根据键获取颜色"""
        return self._entries[key]

    def __eq__(self, other: object) -> bool:
        """内容相同即相等，不考虑顺序"""
        if not isinstance(other, PlayerColorParam):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        """显示条目数量"""
        return f"PlayerColorParam({len(self._entries)} entries)"

    # ==================== 编解码 ====================

    @classmethod
    def from_bytes(cls, data: bytes) -> 'PlayerColorParam':
        """从二进制数据解码"""
        from .decoder import decode
        return decode(data)

    def to_bytes(self, strict: bool = True) -> bytes:
        """编码为二进制数据"""
        from .encoder import encode
        return encode(self, strict=strict)

    @classmethod
    def read(cls, path: Union[str, os.PathLike]) -> 'PlayerColorParam':
        """从文件读取"""
        from .decoder import read
        return read(path)

    def write(self, path: Union[str, os.PathLike], strict: bool = True) -> None:
        """写入文件"""
        from .encoder import write
        write(self, path, strict=strict)
