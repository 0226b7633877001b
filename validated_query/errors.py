"""领域错误类型

定义查询构建与混入相关的错误类型。
"""


class ValidatedQueryError(Exception):
    """查询模块基础错误"""

    def __init__(self, message: str, error_code: str = "VALIDATED_QUERY_ERROR"):
        super().__init__(message)
        self.error_code = error_code


class InvalidArgumentError(ValidatedQueryError, TypeError):
    """构造参数类型错误"""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_ARGUMENT")


class MixinContractError(ValidatedQueryError):
    """混入未返回配置对象"""

    def __init__(self, message: str, query_name: str, mixin_label: str):
        super().__init__(message, "MIXIN_CONTRACT")
        self.query_name = query_name
        self.mixin_label = mixin_label


class ResolveTimeoutError(ValidatedQueryError):
    """解析超时"""

    def __init__(self, message: str = "Resolve timed out"):
        super().__init__(message, "TIMEOUT")
