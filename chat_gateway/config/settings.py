"""配置管理模块。

支持从 .env、config.yaml 以及环境变量加载配置。

与前端共用同一份 .env：Provider 名称与各厂商密钥都同时存在
"公开变量"（NEXT_PUBLIC_*，前端运行时可见）与"构建期变量"两种写法。
这里只负责把两种写法原样读进来，谁优先由 resolver 决定。
"""

import os
import warnings
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chat_gateway.config.resolver import ConfigSource


def _load_config_from_yaml() -> Dict[str, Any]:
    """从 config.yaml 加载配置（若存在）。"""
    candidates = []
    explicit = os.getenv("GATEWAY_CONFIG_FILE")
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.extend([
        Path.cwd() / "config.yaml",
        Path(__file__).resolve().parents[2] / "config.yaml",
    ])

    seen: set[Path] = set()
    for path in candidates:
        if not path or path in seen:
            continue
        seen.add(path)
        try:
            if path.exists():
                data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
                if isinstance(data, dict):
                    return data
                warnings.warn(f"Config file {path} is not a mapping, ignored")
        except (OSError, yaml.YAMLError) as exc:
            warnings.warn(f"Failed to read config file {path}: {exc}")
    return {}


class Settings(BaseSettings):
    """网关配置（使用 Pydantic）。"""

    # ---- Provider 选择 ----
    public_ai_service: Optional[str] = Field(
        default=None,
        alias="NEXT_PUBLIC_AI_SERVICE",
        description="公开变量：Provider 名称，例如 openai、deepseek、local",
    )
    ai_service: Optional[str] = Field(
        default=None,
        alias="AI_SERVICE",
        description="构建期变量：Provider 名称",
    )

    # ---- OpenAI ----
    public_openai_api_key: Optional[str] = Field(default=None, alias="NEXT_PUBLIC_OPENAI_API_KEY")
    openai_api_key: Optional[str] = Field(default=None, alias="OPENAI_API_KEY")
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        alias="OPENAI_BASE_URL",
        description="OpenAI API 基础URL",
    )

    # ---- DeepSeek ----
    public_deepseek_api_key: Optional[str] = Field(default=None, alias="NEXT_PUBLIC_DEEPSEEK_API_KEY")
    deepseek_api_key: Optional[str] = Field(default=None, alias="DEEPSEEK_API_KEY")
    deepseek_base_url: str = Field(
        default="https://api.deepseek.com",
        alias="DEEPSEEK_BASE_URL",
        description="DeepSeek API 基础URL",
    )

    # ---- 通用 ----
    http_timeout: float = Field(default=30.0, ge=1.0, alias="HTTP_TIMEOUT", description="HTTP 超时时间（秒）")
    prompt_locale: Literal["en", "zh"] = Field(default="en", alias="PROMPT_LOCALE", description="提示词语言")
    log_dir: str = Field(default="logs", alias="LOG_DIR", description="日志目录")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_redact_content: bool = Field(default=False, alias="LOG_REDACT_CONTENT", description="是否脱敏日志内容")
    expose_debug: bool = Field(default=True, alias="EXPOSE_DEBUG", description="响应中是否附带 debug 字段")
    app_env: str = Field(default="development", alias="APP_ENV")
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8000, alias="APP_PORT")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000", "tauri://localhost"],
        alias="CORS_ORIGINS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @staticmethod
    def _config_source() -> Dict[str, Any]:
        return _load_config_from_yaml()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return (v or "INFO").upper()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            cls._config_source,
            file_secret_settings,
        )

    def config_sources(self) -> List[ConfigSource]:
        """按优先级排列的命名配置源：公开变量在前，构建期变量在后。"""

        return [
            ConfigSource(
                name="public",
                values={
                    "provider": self.public_ai_service,
                    "openai_api_key": self.public_openai_api_key,
                    "deepseek_api_key": self.public_deepseek_api_key,
                },
            ),
            ConfigSource(
                name="build",
                values={
                    "provider": self.ai_service,
                    "openai_api_key": self.openai_api_key,
                    "deepseek_api_key": self.deepseek_api_key,
                },
            ),
        ]


settings = Settings()
