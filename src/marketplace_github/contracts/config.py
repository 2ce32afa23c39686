"""Configuration contracts."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
GITHUB_TOKEN_KEY = "GITHUB_PERSONAL_TOKEN"


@runtime_checkable
class ConfigLookup(Protocol):
    """Key/value configuration source.

    ``get`` must never raise; it returns ``default`` when the key is unset.
    """

    def get(self, key: str, default: str) -> str: ...


def _default_user_agent() -> str:
    from marketplace_github import __version__

    return f"marketplace-github/{__version__}"


class GitHubGraphQLSettings(BaseModel):
    url: str = GITHUB_GRAPHQL_URL
    token_key: str = Field(default=GITHUB_TOKEN_KEY, min_length=1)
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default_factory=_default_user_agent)

    model_config = {"frozen": True}
