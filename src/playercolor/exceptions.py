#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
PlayerColorParam 异常定义

所有异常均继承自 PlayerColorError，便于统一捕获。
"""

from typing import List


class PlayerColorError(Exception):
    """PlayerColorParam 基础异常"""
    pass


class InvalidFormatError(PlayerColorError):
    """
    文件格式无效异常

    当文件版本号或结构不符合预期时抛出。
    """
    def __init__(self, message: str, expected: str = None, actual: str = None):
        self.expected = expected
        self.actual = actual
        if expected and actual:
            message = f"{message}: 期望 {expected}, 实际 {actual}"
        super().__init__(message)


class VersionMismatchError(InvalidFormatError):
    """
    版本不匹配异常

    Header 中的版本号不是唯一受支持的版本时抛出。
    """
    def __init__(self, file_version: int, supported_versions: List[int]):
        self.file_version = file_version
        self.supported_versions = supported_versions
        super().__init__(
            f"不支持的文件版本 {file_version}, "
            f"支持的版本: {supported_versions}"
        )


class TruncatedDataError(PlayerColorError, EOFError):
    """
    数据截断异常

    读取或跳转超出缓冲区范围时抛出 (包括未以 NUL 结尾的字符串)。
    """
    def __init__(self, position: int, expected: int, actual: int, message: str = None):
        self.position = position
        self.expected = expected
        self.actual = actual
        super().__init__(
            message or
            f"数据不足: 位置 {position} 处期望读取 {expected} 字节，"
            f"实际只有 {actual} 字节"
        )

    @classmethod
    def out_of_range(cls, position: int, target: int) -> 'TruncatedDataError':
        """跳转目标超出流的可访问范围"""
        return cls(
            position, 0, 0,
            message=f"位置 {position} 处的跳转目标 {target} 超出可访问范围"
        )


class InvalidStringError(PlayerColorError, ValueError):
    """
    字符串编码异常

    角色 ID 字节序列不是合法的 UTF-8 时抛出。
    """
    def __init__(self, position: int, data: bytes):
        self.position = position
        self.data = data
        super().__init__(
            f"位置 {position} 处的字符串不是合法的 UTF-8: {data!r}"
        )


class CharacterIdLengthError(PlayerColorError, ValueError):
    """
    角色 ID 长度异常

    严格模式编码时，角色 ID 不满足固定 8 字节字符串槽位
    (6 字节内容 + 2 字节填充) 的假设时抛出。
    """
    def __init__(self, character_id: str, length: int, expected: int):
        self.character_id = character_id
        self.length = length
        self.expected = expected
        super().__init__(
            f"角色 ID {character_id!r} 编码后长度为 {length} 字节, "
            f"格式要求恰好 {expected} 字节"
        )
