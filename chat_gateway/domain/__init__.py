"""领域层模型与协议。

包含：
- models: 统一的 ChatMessage / ChatRequest / GatewayResult 模型。
- conversation: 对话组装（system prompt + 历史窗口 + 当前消息）。
- exceptions: 业务异常类型定义。
"""
