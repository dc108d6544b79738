from chat_gateway.config.resolver import ConfigSource, describe_sources, resolve_config


def _sources(public=None, build=None):
    return [
        ConfigSource(name="public", values=public or {}),
        ConfigSource(name="build", values=build or {}),
    ]


def test_public_provider_wins_over_build():
    resolved = resolve_config(_sources(public={"provider": "openai"}, build={"provider": "local"}))
    assert resolved.provider == "openai"


def test_build_provider_used_when_public_missing():
    resolved = resolve_config(_sources(build={"provider": "local"}))
    assert resolved.provider == "local"


def test_default_provider_is_deepseek():
    assert resolve_config(_sources()).provider == "deepseek"
    assert resolve_config([]).provider == "deepseek"


def test_blank_values_count_as_missing():
    resolved = resolve_config(_sources(public={"provider": "  "}, build={"provider": "openai"}))
    assert resolved.provider == "openai"


def test_provider_name_is_normalized():
    assert resolve_config(_sources(public={"provider": " OpenAI "})).provider == "openai"


def test_credentials_resolved_per_family():
    resolved = resolve_config(
        _sources(
            public={"provider": "openai", "deepseek_api_key": "ds-public"},
            build={"openai_api_key": "oa-build", "deepseek_api_key": "ds-build"},
        )
    )
    assert resolved.credentials == {"openai": "oa-build", "deepseek": "ds-public"}
    assert resolved.credential == "oa-build"
    assert resolved.has_credential


def test_missing_credential_does_not_raise():
    resolved = resolve_config(_sources(public={"provider": "deepseek"}))
    assert resolved.credential is None
    assert not resolved.has_credential


def test_local_provider_has_no_credential():
    resolved = resolve_config(_sources(public={"provider": "local", "openai_api_key": "k"}))
    assert resolved.credential is None


def test_describe_sources_hides_secrets():
    summary = describe_sources(_sources(public={"openai_api_key": "secret"}, build={"provider": "local"}))
    assert summary["public"]["openai_api_key"] == "set"
    assert summary["build"]["deepseek_api_key"] == "unset"
    assert summary["build"]["provider"] == "local"
    assert "secret" not in repr(summary)
