import pytest

from marketplace_github.config import EnvConfig, MappingConfig, load_settings
from marketplace_github.contracts.config import ConfigLookup, GitHubGraphQLSettings
from marketplace_github.contracts.exceptions import ConfigError


def test_mapping_config_returns_value_or_default() -> None:
    config = MappingConfig({"A": "1"})

    assert config.get("A", "") == "1"
    assert config.get("B", "fallback") == "fallback"


def test_env_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_PERSONAL_TOKEN", "tok_123")

    assert EnvConfig().get("GITHUB_PERSONAL_TOKEN", "") == "tok_123"


def test_env_config_returns_default_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_PERSONAL_TOKEN", raising=False)

    assert EnvConfig().get("GITHUB_PERSONAL_TOKEN", "") == ""


def test_env_config_accepts_explicit_environ() -> None:
    assert EnvConfig({"X": "y"}).get("X", "") == "y"


def test_lookups_satisfy_protocol() -> None:
    assert isinstance(EnvConfig(), ConfigLookup)
    assert isinstance(MappingConfig(), ConfigLookup)


def test_load_settings_defaults() -> None:
    settings = load_settings(MappingConfig())

    assert settings == GitHubGraphQLSettings()
    assert settings.url == "https://api.github.com/graphql"
    assert settings.token_key == "GITHUB_PERSONAL_TOKEN"
    assert settings.user_agent.startswith("marketplace-github/")


def test_load_settings_applies_overrides() -> None:
    settings = load_settings(
        MappingConfig(
            {
                "GITHUB_GRAPHQL_URL": "https://ghe.example.com/api/graphql",
                "GITHUB_GRAPHQL_TIMEOUT": "12.5",
                "GITHUB_TOKEN_KEY": "GH_TOKEN",
            }
        )
    )

    assert settings.url == "https://ghe.example.com/api/graphql"
    assert settings.timeout == 12.5
    assert settings.token_key == "GH_TOKEN"


@pytest.mark.parametrize("timeout", ["abc", "0", "-1"])
def test_load_settings_rejects_invalid_timeout(timeout: str) -> None:
    with pytest.raises(ConfigError, match="invalid GitHub GraphQL settings"):
        load_settings(MappingConfig({"GITHUB_GRAPHQL_TIMEOUT": timeout}))


def test_settings_are_frozen() -> None:
    settings = GitHubGraphQLSettings()

    with pytest.raises(ValueError):
        settings.timeout = 1.0  # type: ignore[misc]
