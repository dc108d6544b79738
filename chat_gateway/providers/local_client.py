"""本地模拟 Provider（开发用）。

不发网络请求、不需要密钥，按模板生成确定性的回复，总是成功。
"""

from typing import Optional

from chat_gateway.domain.models import ContextCounts, Conversation
from chat_gateway.prompts import DEFAULT_LOCALE, render_local_reply


class LocalClient:
    name = "local"
    requires_credential = False

    def __init__(self, settings=None):
        self._locale = getattr(settings, "prompt_locale", DEFAULT_LOCALE)

    def complete(
        self,
        conversation: Conversation,
        credential: Optional[str],
        counts: ContextCounts,
    ) -> str:
        # 最后一条 user 消息即当前请求文本
        message = next((m.content for m in reversed(conversation) if m.role == "user"), "")
        return render_local_reply(message, counts.todos, counts.plans, self._locale)
