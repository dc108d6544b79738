"""Chat Gateway 顶层包。

该包为任务管理助手提供 LLM 网关：配置解析、对话组装、
Provider 适配（OpenAI / DeepSeek / 本地模拟）、统一错误映射
以及对外的 HTTP 入口。
"""

from chat_gateway.api.service import ChatGateway, run_chat

__all__ = ["ChatGateway", "run_chat"]
