"""混入定义

混入是在构造阶段改写查询配置的函数。可直接使用普通函数，
也可用 Mixin 附带一个显式标签，便于出错时定位。
"""

from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from typing import Any

QueryOptions = MutableMapping[str, Any]
MixinFunc = Callable[[QueryOptions], QueryOptions]


@dataclass(frozen=True)
class Mixin:
    """带标签的混入"""

    label: str
    transform: MixinFunc

    def __call__(self, options: QueryOptions) -> QueryOptions:
        return self.transform(options)


def labeled(label: str) -> Callable[[MixinFunc], Mixin]:
    """将函数包装为带标签混入的装饰器

    用法:
        @labeled("double")
        def double(options):
            ...
    """

    def decorator(func: MixinFunc) -> Mixin:
        return Mixin(label=label, transform=func)

    return decorator


def mixin_label(candidate: Any) -> str | None:
    """读取混入的标签，优先 Mixin.label，其次函数名"""
    label = getattr(candidate, "label", None)
    if not isinstance(label, str) or not label:
        label = getattr(candidate, "__name__", None)
    # lambda 没有可用名称
    if not isinstance(label, str) or not label or label == "<lambda>":
        return None
    return label


def describe_mixin(candidate: Any, index: int) -> str:
    """生成混入的诊断描述

    Args:
        candidate: 混入对象
        index: 混入在序列中的位置（从0开始）

    Returns:
        如 "the mixin 'double'"，无法识别名称时为 "one of the mixins (mixin #2)"
    """
    label = mixin_label(candidate)
    if label is not None:
        return f"the mixin '{label}'"
    return f"one of the mixins (mixin #{index + 1})"
