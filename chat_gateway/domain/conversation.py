"""对话组装。

把调用方传入的当前消息、历史与上下文数量组装成发给 Provider 的消息序列：

    [system] + 最近 HISTORY_WINDOW 条历史 + [user]

这是纯函数：不做 I/O、不修改入参，同样的输入总是得到同样的输出。
"""

from typing import Sequence

from chat_gateway.domain.models import ChatMessage, Conversation
from chat_gateway.prompts import DEFAULT_LOCALE, render_system_prompt


# 历史窗口是硬上限，不可配置
HISTORY_WINDOW = 6


def window_history(history: Sequence[ChatMessage]) -> list[ChatMessage]:
    """保留最近 HISTORY_WINDOW 条历史，顺序不变。"""

    return list(history[-HISTORY_WINDOW:]) if history else []


def assemble(
    message: str,
    history: Sequence[ChatMessage],
    todo_count: int,
    plan_count: int,
    locale: str = DEFAULT_LOCALE,
) -> Conversation:
    system = ChatMessage(role="system", content=render_system_prompt(todo_count, plan_count, locale))
    return [system, *window_history(history), ChatMessage(role="user", content=message)]
