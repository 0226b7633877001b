"""带校验的查询

包装一个解析函数：构造时依次应用混入改写配置，调用时先校验参数再执行，
失败统一交给注册表中的错误钩子处理。
"""

import inspect
from collections.abc import Awaitable, Callable, Mapping, MutableMapping
from typing import Any

from validated_query import logger
from validated_query.config import RESERVED_KEYS
from validated_query.errors import InvalidArgumentError, MixinContractError
from validated_query.mixin import (
    MixinFunc,
    QueryOptions,
    describe_mixin,
    mixin_label,
)
from validated_query.registry import ExtensionRegistry, get_default_registry

Resolver = Callable[[Any, Any, Any], Awaitable[Any]]


def _noop_validate(args: Any) -> None:
    return None


class ValidatedQuery:
    """带校验的查询

    用法:
        query = ValidatedQuery(
            name="echo",
            resolve=lambda parent, args, context: args["value"],
        )
        resolver = query.resolver()
        await resolver(None, {"value": 5}, None)  # 5

    注意：混入应通过 ``run`` 字段替换解析函数。每个混入执行后 ``resolve``
    都会被 ``run`` 覆盖，只改 ``resolve`` 的修改会被丢弃。
    """

    def __init__(
        self,
        name: str | None = None,
        resolve: Callable | None = None,
        validate: Callable | None = None,
        mixins: list[MixinFunc] | tuple[MixinFunc, ...] | None = None,
        *,
        _registry: ExtensionRegistry | None = None,
        **others: Any,
    ):
        """
        Args:
            name: 查询名称，仅用于诊断
            resolve: 解析函数，签名为 (parent, args, context)
            validate: 参数校验函数，默认不做任何校验
            mixins: 显式混入，先于全局混入执行
            _registry: 扩展注册表，默认使用进程级注册表。带下划线以免与透传字段重名
            **others: 其余字段原样保留，供混入或外部框架读取

        Raises:
            InvalidArgumentError: 参数类型不符
            MixinContractError: 某个混入未返回配置对象
        """
        if mixins is None:
            mixins = []
        if not isinstance(mixins, (list, tuple)) or not all(
            callable(m) for m in mixins
        ):
            raise InvalidArgumentError(
                "[ValidatedQuery] - `mixins` must be a list of callables."
            )
        if not isinstance(name, str):
            raise InvalidArgumentError("[ValidatedQuery] - `name` must be a string.")
        if not callable(resolve):
            raise InvalidArgumentError(
                "[ValidatedQuery] - `resolve` must be callable."
            )
        if validate is None:
            validate = _noop_validate
        elif not callable(validate):
            raise InvalidArgumentError(
                "[ValidatedQuery] - `validate` must be callable."
            )

        self._registry = (
            _registry if _registry is not None else get_default_registry()
        )
        self.options: QueryOptions = {
            **others,
            "mixins": [*mixins, *self._registry.snapshot_mixins()],
            "name": name,
            "resolve": resolve,
            "run": resolve,
            "validate": validate,
        }

        extra_fields = sorted(k for k in others if k not in RESERVED_KEYS)
        logger.debug(
            f"[QUERY] building {name} with {len(self.options['mixins'])} "
            f"mixin(s), extra fields: {extra_fields}"
        )
        self._apply_mixins()

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any], registry: ExtensionRegistry | None = None
    ) -> "ValidatedQuery":
        """从配置映射构造

        映射中的所有字段（包括名为 registry 的字段）都按配置处理，
        注册表只能通过本方法的 registry 参数指定。
        """
        if not isinstance(options, Mapping):
            raise InvalidArgumentError(
                "[ValidatedQuery] - options must be a mapping."
            )
        return cls(_registry=registry, **options)

    @property
    def name(self) -> str:
        return self.options["name"]

    @property
    def registry(self) -> ExtensionRegistry:
        return self._registry

    def _apply_mixins(self) -> None:
        """依次应用混入，每一步的输出作为下一步的输入"""
        name = self.options["name"]

        for index, mixin in enumerate(self.options["mixins"]):
            options = mixin(self.options)

            if not isinstance(options, MutableMapping):
                raise MixinContractError(
                    f"Error in {name} query: {describe_mixin(mixin, index)} "
                    "didn't return the options object.",
                    query_name=name,
                    mixin_label=mixin_label(mixin),
                )
            # run 缺失时 resolve 为 None，调用阶段失败并交给错误钩子
            options["resolve"] = options.get("run")
            self.options = options
            logger.debug(f"[MIXIN] {name} applied {describe_mixin(mixin, index)}")

    def resolver(self) -> Resolver:
        """返回供查询框架注册的异步解析器"""

        async def resolve_field(parent: Any, args: Any, context: Any) -> Any:
            options = self.options
            try:
                checked = options["validate"](args)
                if inspect.isawaitable(checked):
                    await checked
                result = options["resolve"](parent, args, context)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as e:
                logger.debug(f"[RESOLVE] {options['name']} failed: {e}")
                return self._registry.handle_error(e)
            return result

        resolve_field.__name__ = f"resolve_{self.name}"
        resolve_field.__qualname__ = resolve_field.__name__
        return resolve_field

    def __repr__(self) -> str:
        name = getattr(self, "options", {}).get("name")
        return f"ValidatedQuery(name={name!r})"
