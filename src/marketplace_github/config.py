"""Config lookups and settings loading."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import ValidationError

from marketplace_github.contracts.config import ConfigLookup, GitHubGraphQLSettings
from marketplace_github.contracts.exceptions import ConfigError

_LOG = logging.getLogger(__name__)

# Config keys that override GitHubGraphQLSettings fields.
_SETTINGS_KEYS = {
    "GITHUB_GRAPHQL_URL": "url",
    "GITHUB_GRAPHQL_TIMEOUT": "timeout",
    "GITHUB_TOKEN_KEY": "token_key",
}


class MappingConfig:
    """Config lookup backed by a plain mapping."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str, default: str) -> str:
        return self._values.get(key, default)


class EnvConfig:
    """Config lookup backed by process environment variables.

    The environment is read at lookup time, so changes made after
    construction are visible.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def get(self, key: str, default: str) -> str:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(key, default)


def load_settings(config: ConfigLookup) -> GitHubGraphQLSettings:
    """Build :class:`GitHubGraphQLSettings` from a config lookup.

    Unset keys keep the model defaults.

    Raises:
        ConfigError: If a configured value fails validation.
    """
    overrides: dict[str, str] = {}
    for key, field_name in _SETTINGS_KEYS.items():
        value = config.get(key, "")
        if value:
            overrides[field_name] = value

    try:
        settings = GitHubGraphQLSettings.model_validate(overrides)
    except ValidationError as exc:
        raise ConfigError(f"invalid GitHub GraphQL settings: {exc}") from exc

    _LOG.debug("Loaded GitHub GraphQL settings for %s", settings.url)
    return settings
