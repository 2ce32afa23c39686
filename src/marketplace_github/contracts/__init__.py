"""Shared contracts: settings, config lookup protocol, and exceptions."""

from marketplace_github.contracts.config import ConfigLookup, GitHubGraphQLSettings
from marketplace_github.contracts.exceptions import (
    ClientNotInitializedError,
    ConfigError,
    MarketplaceGitHubError,
)

__all__ = [
    "ClientNotInitializedError",
    "ConfigError",
    "ConfigLookup",
    "GitHubGraphQLSettings",
    "MarketplaceGitHubError",
]
