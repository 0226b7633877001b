"""查询装饰器

用装饰器语法把解析函数直接声明为 ValidatedQuery。
"""

from collections.abc import Callable
from typing import Any

from validated_query.mixin import MixinFunc
from validated_query.query import ValidatedQuery
from validated_query.registry import ExtensionRegistry


def validated_query(
    name: str | None = None,
    validate: Callable | None = None,
    mixins: list[MixinFunc] | tuple[MixinFunc, ...] | None = None,
    _registry: ExtensionRegistry | None = None,
    **others: Any,
) -> Callable[[Callable], ValidatedQuery]:
    """将解析函数包装为 ValidatedQuery 的装饰器

    Args:
        name: 查询名称，默认取函数名
        validate: 参数校验函数
        mixins: 显式混入
        _registry: 扩展注册表，带下划线以免与透传字段重名
        **others: 透传字段

    用法:
        @validated_query(validate=check_args)
        async def user(parent, args, context):
            ...

        schema_resolvers["user"] = user.resolver()
    """

    def decorator(func: Callable) -> ValidatedQuery:
        return ValidatedQuery(
            name=name if name is not None else func.__name__,
            resolve=func,
            validate=validate,
            mixins=mixins,
            _registry=_registry,
            **others,
        )

    return decorator
