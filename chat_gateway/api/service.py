"""对外 API 服务模块。

ChatGateway 是网关唯一的入口：

    ReceivedRequest -> ConfigResolved -> ConversationAssembled
        -> Dispatched -> Succeeded | Failed -> ResponseSent

每次请求都从头走一遍，不保留任何跨请求状态。所有 BusinessError 都在
handle() 里被捕获并压平成 Failure，调用方永远只会拿到 GatewayResult。
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional
from uuid import uuid4

from pydantic import ValidationError

from chat_gateway.api.schemas import ChatRequestBody
from chat_gateway.config.resolver import describe_sources, resolve_config
from chat_gateway.config.settings import settings as default_settings
from chat_gateway.domain.conversation import assemble
from chat_gateway.domain.exceptions import BusinessError, MalformedRequestError
from chat_gateway.domain.models import ChatRequest, Failure, GatewayResult, Success
from chat_gateway.infrastructure.logging.logger import logger
from chat_gateway.prompts import apology_text
from chat_gateway.providers import create_provider
from chat_gateway.providers.base import ProviderClient


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class ChatGateway:
    def __init__(
        self,
        settings=default_settings,
        providers: Optional[Mapping[str, ProviderClient]] = None,
        clock: Callable[[], str] = _utcnow,
    ):
        """初始化网关。

        Args:
            settings: 配置对象，需提供 config_sources() 与 prompt_locale 等字段
            providers: 可选的 Provider 实例表（按名称索引），缺省时按需创建
            clock: 生成 ISO 时间戳的函数
        """
        self._settings = settings
        self._providers = providers
        self._clock = clock

    @property
    def locale(self) -> str:
        return getattr(self._settings, "prompt_locale", "en")

    def parse_request(self, raw: Any) -> ChatRequest:
        """把入站 JSON 解析为 ChatRequest，失败抛出 MalformedRequestError。"""

        if not isinstance(raw, dict):
            raise MalformedRequestError(
                code="MALFORMED_REQUEST",
                message="Request body must be a JSON object",
            )
        try:
            body = ChatRequestBody.model_validate(raw)
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise MalformedRequestError(
                code="MALFORMED_REQUEST",
                message=f"Invalid request body: {fields}",
            )
        return body.to_domain()

    def handle_payload(self, raw: Any) -> GatewayResult:
        """解析并处理一次原始请求体。"""

        try:
            request = self.parse_request(raw)
        except MalformedRequestError as e:
            self._log(logging.WARNING, "Rejected malformed request", {}, error=e.message)
            return self.failure(e)
        return self.handle(request)

    def handle(self, request: ChatRequest) -> GatewayResult:
        """执行一次网关调用，返回 Success 或 Failure。"""

        log_ctx: Dict[str, Any] = {"trace_id": f"tr-{uuid4().hex}"}
        try:
            sources = self._settings.config_sources()
            resolved = resolve_config(sources)
            log_ctx["provider"] = resolved.provider
            self._log(
                logging.INFO,
                "Resolved configuration",
                log_ctx,
                sources=describe_sources(sources),
                has_credential=resolved.has_credential,
            )

            counts = request.context_counts()
            conversation = assemble(
                request.message,
                request.history,
                counts.todos,
                counts.plans,
                locale=self.locale,
            )
            self._log(
                logging.INFO,
                "Assembled conversation",
                log_ctx,
                messages=len(conversation),
                history=len(request.history),
                todos=counts.todos,
                plans=counts.plans,
            )

            provider = create_provider(resolved.provider, self._settings, self._providers)
            text = provider.complete(conversation, resolved.credential, counts)
        except BusinessError as e:
            self._log(logging.WARNING, "Request failed", log_ctx, code=e.code, error=e.message)
            return self.failure(e)
        except Exception as e:
            logger.exception(
                "Unexpected gateway error",
                extra={"extra": {**log_ctx, "error": str(e)}},
            )
            return Failure(
                error=str(e) or "AI service is temporarily unavailable",
                kind="INTERNAL_ERROR",
                response=apology_text(self.locale),
                timestamp=self._clock(),
            )

        self._log(logging.INFO, "Request succeeded", log_ctx, reply_chars=len(text))
        return Success(
            response=text,
            provider=resolved.provider,
            has_credential=resolved.has_credential,
            timestamp=self._clock(),
        )

    def failure(self, error: BusinessError) -> Failure:
        return Failure(
            error=error.message,
            kind=error.code,
            response=apology_text(self.locale),
            timestamp=self._clock(),
        )

    def _log(self, level: int, message: str, ctx: Dict[str, Any], **fields: Any) -> None:
        logger.log(level, message, extra={"extra": {**ctx, **fields}})


_gateway: Optional[ChatGateway] = None


def get_default_gateway() -> ChatGateway:
    """获取默认的网关实例（单例）。"""
    global _gateway
    if _gateway is None:
        _gateway = ChatGateway(default_settings)
    return _gateway


def run_chat(payload: Any) -> Dict[str, Any]:
    """处理一次原始请求体，返回对外 JSON 响应体。

    Args:
        payload: 已解码的 JSON 请求体

    Returns:
        包含 success / response / error / debug 的字典
    """
    result = get_default_gateway().handle_payload(payload)
    return result.to_body(
        debug=default_settings.expose_debug,
        environment=default_settings.app_env,
    )
