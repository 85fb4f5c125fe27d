#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
PlayerColorParam - 角色服装颜色覆盖表的二进制编解码库

支持解码 (bytes -> PlayerColorParam) 与编码 (PlayerColorParam -> bytes)
"""

import logging

__version__ = "0.1.0"

# 异常类
from .exceptions import (
    PlayerColorError,
    InvalidFormatError,
    VersionMismatchError,
    TruncatedDataError,
    InvalidStringError,
    CharacterIdLengthError,
)

# 数据结构
from .core.schema import EntryKey, Color, FORMAT_VERSION
from .param import PlayerColorParam

# 编解码
from .decoder import ParamDecoder, decode, decode_stream, read
from .encoder import ParamEncoder, encode, encode_to_stream, write

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # 版本
    "__version__",
    # 异常
    "PlayerColorError",
    "InvalidFormatError",
    "VersionMismatchError",
    "TruncatedDataError",
    "InvalidStringError",
    "CharacterIdLengthError",
    # 数据结构
    "EntryKey",
    "Color",
    "FORMAT_VERSION",
    "PlayerColorParam",
    # 解码
    "ParamDecoder",
    "decode",
    "decode_stream",
    "read",
    # 编码
    "ParamEncoder",
    "encode",
    "encode_to_stream",
    "write",
]
