"""提示词与固定文案。

按语言(locale) 提供：
- 任务助手的 system prompt 模板（嵌入任务数与计划数）。
- 本地模拟 Provider 的回复模板。
- 失败时返回给用户的固定致歉文案。

未知 locale 一律回落到 "en"。
"""

from typing import Dict


DEFAULT_LOCALE = "en"

SYSTEM_PROMPTS: Dict[str, str] = {
    "en": (
        "You are a professional task-management assistant who helps the user manage tasks, "
        "plan their time and work more efficiently.\n"
        "The user currently has {todo_count} tasks and {plan_count} plans.\n"
        "Give personalized advice based on this task data; keep answers concise, actionable "
        "and focused on what matters most."
    ),
    "zh": (
        "你是一个专业的任务管理助手，帮助用户管理任务、规划时间、提高效率。\n"
        "当前用户有 {todo_count} 个任务和 {plan_count} 个计划。\n"
        "请根据任务数据提供个性化的建议，回答要简洁实用，突出重点。"
    ),
}

LOCAL_REPLIES: Dict[str, str] = {
    "en": (
        "🤖 Local simulation: {message}\n\n"
        "You currently have {todo_count} tasks and {plan_count} plans.\n\n"
        "Suggestions:\n"
        "1. Handle the important tasks first\n"
        "2. Budget your time sensibly\n"
        "3. Review your progress regularly\n\n"
        "💡 Tip: configure an API key to enable real AI replies."
    ),
    "zh": (
        "🤖 本地模拟: {message}\n\n"
        "当前有 {todo_count} 个任务，{plan_count} 个计划。\n\n"
        "建议：\n1. 优先处理重要任务\n2. 合理分配时间\n3. 定期回顾进度\n\n"
        "💡 提示: 配置 API 密钥以启用真实 AI 功能。"
    ),
}

APOLOGIES: Dict[str, str] = {
    "en": "Sorry, the AI assistant can't respond right now. Please check the configuration or try again later.",
    "zh": "抱歉，AI 助手暂时无法响应。请检查配置或稍后重试。",
}


def _pick(table: Dict[str, str], locale: str) -> str:
    return table.get(locale) or table[DEFAULT_LOCALE]


def render_system_prompt(todo_count: int, plan_count: int, locale: str = DEFAULT_LOCALE) -> str:
    return _pick(SYSTEM_PROMPTS, locale).format(todo_count=todo_count, plan_count=plan_count)


def render_local_reply(message: str, todo_count: int, plan_count: int, locale: str = DEFAULT_LOCALE) -> str:
    return _pick(LOCAL_REPLIES, locale).format(message=message, todo_count=todo_count, plan_count=plan_count)


def apology_text(locale: str = DEFAULT_LOCALE) -> str:
    return _pick(APOLOGIES, locale)
