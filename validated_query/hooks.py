"""错误钩子

解析失败时由注册表调用的全局处理函数。
"""

from validated_query import logger


def reraise(error: Exception):
    """默认钩子：原样抛出"""
    raise error


def log_and_reraise(error: Exception):
    """记录日志后抛出"""
    logger.error(f"[HOOK] resolve failed: {error}", exc_info=error)
    raise error


def log_and_swallow(error: Exception) -> None:
    """记录日志后吞掉错误，解析器返回 None"""
    error_code = getattr(error, "error_code", "UNKNOWN")
    logger.error(
        f"[HOOK] resolve failed: {error} (code={error_code})", exc_info=error
    )
    return None
