"""参数脱敏工具

解析器参数写入日志前，屏蔽其中的敏感字段。
"""

import re
from collections.abc import Mapping
from typing import Any

# 敏感字段名片段（不区分大小写）
SENSITIVE_FIELD_PARTS = frozenset(
    {
        "password",
        "passwd",
        "token",
        "secret",
        "api_key",
        "apikey",
        "credential",
        "authorization",
        "cookie",
        "private_key",
    }
)

MASK = "***REDACTED***"

# 值中可能夹带的凭据
SENSITIVE_VALUE_PATTERNS = [
    re.compile(r"(bearer\s+)[a-z0-9\-_.]+", re.IGNORECASE),
    re.compile(r"(api[_-]?key[=:]\s*)[a-z0-9\-_.]+", re.IGNORECASE),
]


def _is_sensitive_field(field: str) -> bool:
    lowered = field.lower()
    return any(part in lowered for part in SENSITIVE_FIELD_PARTS)


def _mask_value(value: str, max_length: int) -> str:
    for pattern in SENSITIVE_VALUE_PATTERNS:
        value = pattern.sub(lambda m: m.group(1) + MASK, value)
    if len(value) > max_length:
        value = value[:max_length] + "...(truncated)"
    return value


def _sanitize_value(value: Any, max_length: int) -> Any:
    if isinstance(value, Mapping):
        return sanitize_args(value, max_length)
    if isinstance(value, str):
        return _mask_value(value, max_length)
    if isinstance(value, (list, tuple)):
        return [_sanitize_value(item, max_length) for item in value]
    return value


def sanitize_args(args: Any, max_value_length: int = 100) -> Any:
    """脱敏解析器参数

    Args:
        args: 解析器收到的参数，通常是字典
        max_value_length: 字符串值的最大显示长度

    Returns:
        脱敏后的副本；非映射类型按单个值处理
    """
    if not isinstance(args, Mapping):
        return _sanitize_value(args, max_value_length)

    sanitized = {}
    for key, value in args.items():
        if isinstance(key, str) and _is_sensitive_field(key):
            sanitized[key] = MASK
        else:
            sanitized[key] = _sanitize_value(value, max_value_length)
    return sanitized


def sanitize_for_log(args: Any, max_value_length: int = 100) -> str:
    """将参数转为安全的日志字符串"""
    return str(sanitize_args(args, max_value_length))
