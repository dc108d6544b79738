"""Provider / 密钥解析。

多个配置源里可能同时出现同一含义的值（例如公开变量与构建期变量），
这里用一个纯函数按配置源顺序合并出最终生效的 ResolvedConfig：

- 排在前面的配置源优先，空串与纯空白视为未设置。
- Provider 名称都未设置时回落到 "deepseek"。
- 各厂商密钥彼此独立解析；缺失密钥在这里不报错，
  只有真正派发到需要密钥的 Provider 时才报错。
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Sequence


DEFAULT_PROVIDER = "deepseek"

# 逻辑 key -> Provider 名称
CREDENTIAL_KEYS: Mapping[str, str] = {
    "openai": "openai_api_key",
    "deepseek": "deepseek_api_key",
}


@dataclass(frozen=True)
class ConfigSource:
    """一个命名配置源，values 以逻辑 key（provider / openai_api_key / ...）索引。"""

    name: str
    values: Mapping[str, Optional[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolvedConfig:
    """单次请求生效的配置。"""

    provider: str
    credentials: Mapping[str, Optional[str]] = field(default_factory=dict)

    @property
    def credential(self) -> Optional[str]:
        return self.credentials.get(self.provider)

    @property
    def has_credential(self) -> bool:
        return bool(self.credential)


def _first_value(sources: Sequence[ConfigSource], key: str) -> Optional[str]:
    for source in sources:
        raw = source.values.get(key)
        if raw is None:
            continue
        value = str(raw).strip()
        if value:
            return value
    return None


def resolve_config(sources: Sequence[ConfigSource]) -> ResolvedConfig:
    """按顺序合并配置源，得到 Provider 与各厂商密钥。"""

    provider = (_first_value(sources, "provider") or DEFAULT_PROVIDER).lower()
    credentials: Dict[str, Optional[str]] = {
        name: _first_value(sources, key) for name, key in CREDENTIAL_KEYS.items()
    }
    return ResolvedConfig(provider=provider, credentials=credentials)


def describe_sources(sources: Sequence[ConfigSource]) -> Dict[str, Dict[str, object]]:
    """生成可写入日志的配置源摘要，密钥只记录是否已设置。"""

    summary: Dict[str, Dict[str, object]] = {}
    for source in sources:
        entry: Dict[str, object] = {"provider": source.values.get("provider")}
        for key in CREDENTIAL_KEYS.values():
            entry[key] = "set" if _first_value([source], key) else "unset"
        summary[source.name] = entry
    return summary
