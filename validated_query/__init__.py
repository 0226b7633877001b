"""Validated Query

为查询解析函数提供参数校验、混入组合与统一错误处理。
"""

import logging

logger = logging.getLogger("validated_query")

from .errors import (  # noqa: E402
    InvalidArgumentError,
    MixinContractError,
    ResolveTimeoutError,
    ValidatedQueryError,
)
from .mixin import Mixin, describe_mixin, labeled, mixin_label  # noqa: E402
from .registry import ExtensionRegistry, get_default_registry  # noqa: E402
from .query import ValidatedQuery  # noqa: E402
from .decorators import validated_query  # noqa: E402

__all__ = [
    "logger",
    # Core
    "ValidatedQuery",
    "validated_query",
    "Mixin",
    "labeled",
    "mixin_label",
    "describe_mixin",
    "ExtensionRegistry",
    "get_default_registry",
    # Errors
    "ValidatedQueryError",
    "InvalidArgumentError",
    "MixinContractError",
    "ResolveTimeoutError",
]
