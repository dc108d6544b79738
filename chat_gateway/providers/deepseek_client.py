"""DeepSeek Provider 适配器。

接口风格与 OpenAI 一致，使用 chat/completions 端点：
- URL: {base_url}/chat/completions
- 认证: Authorization: Bearer <api_key>

区别在于 DeepSeek 的错误响应可能是纯文本，因此错误体不做 JSON 解析，
原样带回状态码与响应文本。
"""

import httpx

from chat_gateway.domain.exceptions import BackendError
from chat_gateway.providers.openai_client import OpenAICompatibleClient
from chat_gateway.providers.registry import DEEPSEEK_CONFIG


class DeepSeekClient(OpenAICompatibleClient):
    """DeepSeek Provider 客户端实现。"""

    name = "deepseek"
    credential_env = "DEEPSEEK_API_KEY"
    provider_config = DEEPSEEK_CONFIG

    def _raise_for_status(self, resp: httpx.Response) -> None:
        raise BackendError(
            code="BACKEND_ERROR",
            message=f"DeepSeek API request failed: {resp.status_code} {resp.text}",
            provider=self.name,
            status_code=resp.status_code,
            payload=resp.text,
        )
