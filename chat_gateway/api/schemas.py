"""入站请求体校验。"""

from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field

from chat_gateway.domain.models import ChatMessage, ChatRequest


class HistoryMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str

    model_config = ConfigDict(extra="ignore")


class ChatRequestBody(BaseModel):
    """POST /api/ai/chat 的请求体。

    message 必填；history / todos / plans 缺省为空数组。
    todos / plans 不校验元素结构，只参与计数。
    """

    message: str
    history: List[HistoryMessage] = Field(default_factory=list)
    todos: List[Any] = Field(default_factory=list)
    plans: List[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    def to_domain(self) -> ChatRequest:
        return ChatRequest(
            message=self.message,
            history=tuple(ChatMessage(role=m.role, content=m.content) for m in self.history),
            todos=tuple(self.todos),
            plans=tuple(self.plans),
        )
