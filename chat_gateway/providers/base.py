"""Provider 抽象接口。

网关控制器不直接依赖具体厂商的 HTTP 调用，而是依赖此协议：

- 每个厂商实现一个 ProviderClient（如 OpenAIClient）。
- 负责：把组装好的 Conversation 转成具体 API 请求，并从响应中取出回复文本。

这样可以在不改控制器代码的前提下接入更多厂商。
"""

from typing import Optional, Protocol

from chat_gateway.domain.models import ContextCounts, Conversation


class ProviderClient(Protocol):
    """LLM Provider 客户端协议。

    实现者需要提供：
    - name: Provider 名称，用于日志/调试。
    - requires_credential: 是否必须配置密钥。
    - complete(...): 执行一次非流式对话调用，返回回复文本。
    """

    name: str
    requires_credential: bool

    def complete(
        self,
        conversation: Conversation,
        credential: Optional[str],
        counts: ContextCounts,
    ) -> str:
        ...
