"""查询测试共享fixtures"""

import pytest

from validated_query import ExtensionRegistry, get_default_registry


@pytest.fixture(autouse=True)
def reset_default_registry():
    """每个测试前后重置默认注册表"""
    registry = get_default_registry()
    registry.reset()
    yield registry
    registry.reset()


@pytest.fixture
def registry():
    """独立的注册表实例"""
    return ExtensionRegistry()
