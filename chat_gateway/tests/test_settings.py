import pytest

from chat_gateway.config.resolver import resolve_config
from chat_gateway.config.settings import Settings


ENV_KEYS = [
    "NEXT_PUBLIC_AI_SERVICE",
    "AI_SERVICE",
    "NEXT_PUBLIC_OPENAI_API_KEY",
    "OPENAI_API_KEY",
    "NEXT_PUBLIC_DEEPSEEK_API_KEY",
    "DEEPSEEK_API_KEY",
    "GATEWAY_CONFIG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_public_variables_come_first(monkeypatch):
    monkeypatch.setenv("NEXT_PUBLIC_AI_SERVICE", "openai")
    monkeypatch.setenv("AI_SERVICE", "local")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-build")

    s = Settings()
    sources = s.config_sources()
    assert [src.name for src in sources] == ["public", "build"]

    resolved = resolve_config(sources)
    assert resolved.provider == "openai"
    assert resolved.credential == "sk-build"


def test_build_variable_used_alone(monkeypatch):
    monkeypatch.setenv("AI_SERVICE", "local")
    assert resolve_config(Settings().config_sources()).provider == "local"


def test_nothing_set_defaults_to_deepseek():
    resolved = resolve_config(Settings().config_sources())
    assert resolved.provider == "deepseek"
    assert resolved.credential is None


def test_yaml_config_file(monkeypatch, tmp_path):
    cfg = tmp_path / "gateway.yaml"
    cfg.write_text("AI_SERVICE: local\nprompt_locale: zh\nhttp_timeout: 5\n", encoding="utf-8")
    monkeypatch.setenv("GATEWAY_CONFIG_FILE", str(cfg))

    s = Settings()
    assert s.ai_service == "local"
    assert s.prompt_locale == "zh"
    assert s.http_timeout == 5.0


def test_environment_overrides_yaml(monkeypatch, tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("AI_SERVICE: local\n", encoding="utf-8")
    monkeypatch.setenv("AI_SERVICE", "openai")
    assert Settings().ai_service == "openai"


def test_init_by_field_name():
    s = Settings(public_ai_service="local", log_level="debug")
    assert s.public_ai_service == "local"
    assert s.log_level == "DEBUG"
