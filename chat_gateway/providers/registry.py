"""Provider 与模型配置。

每个联网 Provider 固定使用一个模型与一组生成参数，集中在这里配置，
便于后续升级模型或调整参数。base_url 可被 Settings 覆盖。"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelConfig:
    """单个模型的配置。"""

    provider_model: str
    max_tokens: int
    temperature: float


@dataclass(frozen=True)
class ProviderConfig:
    """某个 Provider 的整体配置。"""

    name: str
    base_url: str
    model: ModelConfig


OPENAI_CONFIG = ProviderConfig(
    name="openai",
    base_url="https://api.openai.com/v1",
    model=ModelConfig(provider_model="gpt-3.5-turbo", max_tokens=1000, temperature=0.7),
)

DEEPSEEK_CONFIG = ProviderConfig(
    name="deepseek",
    base_url="https://api.deepseek.com",
    model=ModelConfig(provider_model="deepseek-chat", max_tokens=1000, temperature=0.7),
)

