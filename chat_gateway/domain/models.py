"""统一的对话与结果数据模型。

本模块定义了网关在各 Provider 之间共享的标准数据结构：

- ChatMessage: 一条对话消息（system/user/assistant）。
- ChatRequest: 调用方传入的一次对话请求（消息 + 历史 + 任务/计划上下文）。
- Success / Failure: 网关对外唯一的结果类型 GatewayResult。

所有 Provider 适配器都只依赖这些模型，
并负责在各自的 API JSON 和这些模型之间做转换。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple, Union


# LLM 消息角色类型（与 OpenAI / DeepSeek 的 role 字段对应）
Role = Literal["system", "user", "assistant"]
ROLES: Tuple[str, ...] = ("system", "user", "assistant")


@dataclass(frozen=True)
class ChatMessage:
    """一条对话消息，构造后不可变。"""

    role: Role
    content: str

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Invalid role: {self.role!r}")

    def to_payload(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


# 发给 Provider 的完整消息序列：1 条 system + 至多 6 条历史 + 1 条 user
Conversation = List[ChatMessage]


@dataclass(frozen=True)
class ContextCounts:
    """任务与计划条目数量，只用于提示词个性化。"""

    todos: int = 0
    plans: int = 0


@dataclass(frozen=True)
class ChatRequest:
    """一次入站对话请求。

    todos / plans 对网关是不透明数据，只会被计数，不会检查结构。
    """

    message: str
    history: Tuple[ChatMessage, ...] = ()
    todos: Tuple[Any, ...] = ()
    plans: Tuple[Any, ...] = ()

    def context_counts(self) -> ContextCounts:
        return ContextCounts(todos=len(self.todos), plans=len(self.plans))


@dataclass(frozen=True)
class Success:
    """Provider 成功返回。"""

    response: str
    provider: str
    has_credential: bool
    timestamp: str

    success: bool = field(default=True, init=False)
    http_status: int = field(default=200, init=False)

    def to_body(self, debug: bool = True, environment: Optional[str] = None) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": True, "response": self.response}
        if debug:
            body["debug"] = {
                "aiService": self.provider,
                "hasApiKey": self.has_credential,
                "timestamp": self.timestamp,
            }
        return body


@dataclass(frozen=True)
class Failure:
    """任意失败：error 为诊断信息，response 为固定的致歉文案。"""

    error: str
    kind: str
    response: str
    timestamp: str

    success: bool = field(default=False, init=False)
    http_status: int = field(default=500, init=False)

    def to_body(self, debug: bool = True, environment: Optional[str] = None) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "success": False,
            "error": self.error,
            "response": self.response,
        }
        if debug:
            body["debug"] = {
                "timestamp": self.timestamp,
                "kind": self.kind,
                "environment": environment,
            }
        return body


GatewayResult = Union[Success, Failure]
