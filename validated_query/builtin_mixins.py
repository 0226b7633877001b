"""内置混入

将横切关注点（超时、日志）作为混入挂到查询上，替换配置中的 ``run``。
"""

import asyncio
import functools
import inspect
import time

from validated_query import logger
from validated_query.config import DEFAULT_CONFIG, ValidatedQueryConfig
from validated_query.errors import ResolveTimeoutError
from validated_query.mixin import Mixin, QueryOptions
from validated_query.utils.sanitizer import sanitize_for_log


async def _await_if_needed(value):
    if inspect.isawaitable(value):
        return await value
    return value


def with_timeout(seconds: float | None = None) -> Mixin:
    """超时混入

    Args:
        seconds: 超时时间（秒），默认取 DEFAULT_CONFIG.default_timeout_seconds
    """
    if seconds is None:
        seconds = DEFAULT_CONFIG.default_timeout_seconds
    if seconds <= 0:
        raise ValueError("timeout must be positive")

    def transform(options: QueryOptions) -> QueryOptions:
        run = options["run"]
        name = options["name"]

        @functools.wraps(run)
        async def run_with_timeout(parent, args, context):
            try:
                return await asyncio.wait_for(
                    _await_if_needed(run(parent, args, context)),
                    timeout=seconds,
                )
            except asyncio.TimeoutError:
                logger.error(f"[TIMEOUT] {name} exceeded {seconds:.1f}s")
                raise ResolveTimeoutError(f"{name} timed out after {seconds}s")

        return {**options, "run": run_with_timeout}

    return Mixin(label="with_timeout", transform=transform)


def with_logging(config: ValidatedQueryConfig = DEFAULT_CONFIG) -> Mixin:
    """日志混入

    记录解析的入口、出口与耗时，参数经脱敏后写入日志；
    耗时超过 slow_resolve_threshold_ms 时记录警告。
    """
    threshold_ms = config.slow_resolve_threshold_ms

    def transform(options: QueryOptions) -> QueryOptions:
        run = options["run"]
        name = options["name"]

        @functools.wraps(run)
        async def run_with_logging(parent, args, context):
            safe_args = sanitize_for_log(args, config.log_max_value_length)
            logger.debug(f"[ENTRY] {name} args={safe_args}")
            start = time.perf_counter()
            try:
                result = await _await_if_needed(run(parent, args, context))
            except Exception as e:
                logger.error(f"[ERROR] {name}: {e}")
                raise
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.debug(f"[EXIT] {name} elapsed={elapsed_ms:.2f}ms")
            if elapsed_ms > threshold_ms:
                logger.warning(
                    f"[PERF] {name} took {elapsed_ms:.2f}ms "
                    f"(threshold: {threshold_ms:.2f}ms)"
                )
            return result

        return {**options, "run": run_with_logging}

    return Mixin(label="with_logging", transform=transform)
