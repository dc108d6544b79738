"""OpenAI Provider 适配器。

本模块负责：

1. 接收组装好的 Conversation。
2. 将其转换为 OpenAI chat/completions 的 HTTP 请求格式。
3. 调用 HTTP 接口并处理网络/API 异常。
4. 从响应 JSON 中取出 choices[0].message.content。

DeepSeek 等兼容 OpenAI 协议的厂商可以继承 OpenAICompatibleClient，
只覆盖配置与错误处理部分。
"""

import json
from typing import Any, Dict, Optional

import httpx

from chat_gateway.domain.exceptions import BackendError, MissingCredentialError, TransportError
from chat_gateway.domain.models import ContextCounts, Conversation
from chat_gateway.providers.registry import OPENAI_CONFIG, ProviderConfig


class OpenAICompatibleClient:
    """OpenAI 协议族客户端的公共实现。"""

    name = "openai-compatible"
    requires_credential = True
    credential_env = "OPENAI_API_KEY"
    provider_config: ProviderConfig = OPENAI_CONFIG

    def __init__(self, settings):
        # Settings 里包含 base_url、超时等配置
        self._settings = settings

    @property
    def base_url(self) -> str:
        base = getattr(self._settings, f"{self.provider_config.name}_base_url", None) or self.provider_config.base_url
        return base.rstrip("/")

    def complete(
        self,
        conversation: Conversation,
        credential: Optional[str],
        counts: ContextCounts,
    ) -> str:
        """执行一次非流式对话调用。

        步骤：
        1. 校验密钥，缺失时不发出任何请求。
        2. 构造 HTTP 请求 payload。
        3. 发送请求并捕获网络错误/服务端错误。
        4. 从响应中取出回复文本，取不到时返回空串。
        """

        if self.requires_credential and not credential:
            raise MissingCredentialError(
                code="MISSING_CREDENTIAL",
                message=f"{self.credential_env} is not configured",
                provider=self.name,
            )
        payload = self._build_payload(conversation)
        try:
            with httpx.Client(timeout=self._settings.http_timeout, trust_env=False) as client:
                resp = client.post(
                    f"{self.base_url}/chat/completions",
                    json=payload,
                    headers=self._build_headers(credential),
                )
        except httpx.RequestError as e:
            # DNS 失败、连接超时等
            raise TransportError(
                code="TRANSPORT_FAILURE",
                message=f"{self.name} request failed: {e}",
                provider=self.name,
            )
        if not 200 <= resp.status_code < 300:
            self._raise_for_status(resp)
        try:
            data = resp.json()
        except ValueError:
            raise BackendError(
                code="INVALID_RESPONSE",
                message=f"{self.name} returned a non-JSON response: {resp.text[:200]}",
                provider=self.name,
                status_code=resp.status_code,
            )
        return self._extract_text(data)

    def _build_headers(self, credential: Optional[str]) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if credential:
            headers["Authorization"] = f"Bearer {credential}"
        return headers

    def _build_payload(self, conversation: Conversation) -> Dict[str, Any]:
        """将 Conversation 转成 chat/completions 所需的请求 JSON。"""

        model_cfg = self.provider_config.model
        return {
            "model": model_cfg.provider_model,
            "messages": [m.to_payload() for m in conversation],
            "max_tokens": model_cfg.max_tokens,
            "temperature": model_cfg.temperature,
        }

    def _raise_for_status(self, resp: httpx.Response) -> None:
        """OpenAI 的错误体是 JSON，原样带回给上层。"""

        try:
            error_payload: Any = resp.json()
        except ValueError:
            error_payload = resp.text
        raise BackendError(
            code="BACKEND_ERROR",
            message=f"OpenAI API error: {json.dumps(error_payload, ensure_ascii=False)}",
            provider=self.name,
            status_code=resp.status_code,
            payload=error_payload,
        )

    @staticmethod
    def _extract_text(data: Any) -> str:
        """取出 choices[0].message.content；任何一层缺失都返回空串。"""

        if not isinstance(data, dict):
            return ""
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            return ""
        first = choices[0] if isinstance(choices[0], dict) else {}
        message = first.get("message") or {}
        if not isinstance(message, dict):
            return ""
        content = message.get("content")
        return content if isinstance(content, str) else ""


class OpenAIClient(OpenAICompatibleClient):
    """OpenAI 提供方客户端实现。"""

    name = "openai"
    credential_env = "OPENAI_API_KEY"
    provider_config = OPENAI_CONFIG
