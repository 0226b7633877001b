"""扩展注册表

保存全局混入列表与全局错误钩子。应在启动阶段单线程配置完毕，
之后由各查询实例读取。
"""

import threading
from collections.abc import Callable, Iterable
from typing import Any

from validated_query import logger
from validated_query.hooks import reraise
from validated_query.mixin import MixinFunc

ErrorHook = Callable[[Exception], Any]


class ExtensionRegistry:
    """扩展注册表

    - 全局混入：构造查询时追加在显式混入之后，构造时取快照
    - 错误钩子：每次调用时读取，替换后对已构造的实例同样生效
    """

    def __init__(self, error_hook: ErrorHook = reraise):
        self._lock = threading.Lock()
        self._mixins: list[MixinFunc] = []
        self._error_hook = error_hook

    def add_mixin(self, mixin: MixinFunc) -> MixinFunc:
        """追加全局混入

        可作为装饰器使用，返回原混入。

        Raises:
            TypeError: 混入不可调用
        """
        if not callable(mixin):
            raise TypeError(f"global mixin must be callable, got {type(mixin).__name__}")
        with self._lock:
            self._mixins.append(mixin)
        logger.debug(f"[MIXIN] registered global mixin {mixin!r}")
        return mixin

    def extend_mixins(self, mixins: Iterable[MixinFunc]) -> None:
        """按顺序追加多个全局混入"""
        for mixin in mixins:
            self.add_mixin(mixin)

    def snapshot_mixins(self) -> list[MixinFunc]:
        """返回当前全局混入的副本"""
        with self._lock:
            return list(self._mixins)

    def clear_mixins(self) -> None:
        with self._lock:
            self._mixins.clear()

    @property
    def error_hook(self) -> ErrorHook:
        return self._error_hook

    def set_error_hook(self, hook: ErrorHook) -> None:
        """替换错误钩子

        Raises:
            TypeError: 钩子不可调用
        """
        if not callable(hook):
            raise TypeError(f"error hook must be callable, got {type(hook).__name__}")
        self._error_hook = hook
        logger.debug(f"[HOOK] error hook replaced with {hook!r}")

    def reset_error_hook(self) -> None:
        self._error_hook = reraise

    def handle_error(self, error: Exception) -> Any:
        """将错误交给当前钩子，返回钩子的返回值"""
        return self._error_hook(error)

    def reset(self) -> None:
        """清空混入并恢复默认钩子"""
        self.clear_mixins()
        self.reset_error_hook()


_default_registry = ExtensionRegistry()


def get_default_registry() -> ExtensionRegistry:
    """获取进程级默认注册表"""
    return _default_registry
