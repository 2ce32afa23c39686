"""Public API surface for marketplace-github."""

__version__ = "0.1.0"

from marketplace_github.config import EnvConfig, MappingConfig, load_settings
from marketplace_github.contracts.config import ConfigLookup, GitHubGraphQLSettings
from marketplace_github.contracts.exceptions import (
    ClientNotInitializedError,
    ConfigError,
    MarketplaceGitHubError,
)
from marketplace_github.github_gql import GitHubGraphQLClient
from marketplace_github.service import GitHubGraphQLService

__all__ = [
    "ClientNotInitializedError",
    "ConfigError",
    "ConfigLookup",
    "EnvConfig",
    "GitHubGraphQLClient",
    "GitHubGraphQLService",
    "GitHubGraphQLSettings",
    "MappingConfig",
    "MarketplaceGitHubError",
    "__version__",
    "load_settings",
]
