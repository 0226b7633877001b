"""配置定义

集中管理查询包装器的配置常量。
"""

from dataclasses import dataclass

# 配置中的保留键
RESERVED_KEYS = frozenset({"name", "resolve", "run", "validate", "mixins"})


@dataclass(frozen=True)
class ValidatedQueryConfig:
    """查询包装器配置

    所有配置项的默认值集中定义在此，便于统一管理。
    """

    # 日志中参数值的最大显示长度
    log_max_value_length: int = 100

    # 慢解析告警阈值（毫秒）
    slow_resolve_threshold_ms: float = 100.0

    # with_timeout 默认超时（秒）
    default_timeout_seconds: float = 30.0


# 默认配置实例
DEFAULT_CONFIG = ValidatedQueryConfig()
