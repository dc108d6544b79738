"""LLM Provider 集成层。

该包下的模块负责：
- 定义 Provider 抽象接口 (base)。
- 维护 Provider 与模型配置 (registry)。
- 提供各厂商的具体实现 (openai_client、deepseek_client、local_client)。

Provider 的选择只发生在 create_provider 这一处。
"""

from typing import Callable, Mapping, Optional, TypeVar

from chat_gateway.domain.exceptions import UnknownProviderError
from chat_gateway.providers.base import ProviderClient
from chat_gateway.providers.deepseek_client import DeepSeekClient
from chat_gateway.providers.local_client import LocalClient
from chat_gateway.providers.openai_client import OpenAIClient


T = TypeVar("T")

PROVIDER_CLIENTS: Mapping[str, Callable[..., ProviderClient]] = {
    "openai": OpenAIClient,
    "deepseek": DeepSeekClient,
    "local": LocalClient,
}


def select_provider(name: str, table: Mapping[str, T]) -> T:
    """按名称从 Provider 表中取出条目，未知名称抛出 UnknownProviderError。"""

    entry = table.get(name)
    if entry is None:
        raise UnknownProviderError(
            code="UNKNOWN_PROVIDER",
            message=f"AI service is not configured: {name}",
            provider=name,
        )
    return entry


def create_provider(
    name: str,
    settings,
    providers: Optional[Mapping[str, ProviderClient]] = None,
) -> ProviderClient:
    """根据名称取得 Provider 实例。

    传入 providers 时从这张实例表里取，否则按 PROVIDER_CLIENTS 新建。
    """

    if providers is not None:
        return select_provider(name, providers)
    return select_provider(name, PROVIDER_CLIENTS)(settings)
