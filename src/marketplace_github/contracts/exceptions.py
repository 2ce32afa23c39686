"""Exception hierarchy for marketplace-github.

All package exceptions inherit from :class:`MarketplaceGitHubError`. Errors
raised by the GraphQL transport itself live in
:mod:`marketplace_github.github_gql.exceptions` and are not wrapped.
"""

from __future__ import annotations


class MarketplaceGitHubError(Exception):
    """Base exception for all marketplace-github errors."""


class ConfigError(MarketplaceGitHubError):
    """Configuration loading or validation failure."""


class ClientNotInitializedError(MarketplaceGitHubError):
    """The GitHub GraphQL client was requested before it was initialized.

    Raised when no credential was configured, ``initialize`` was never
    called, or ``shutdown`` already ran. Retrying will not help.
    """

    def __init__(self, message: str = "github graphql client not initialized") -> None:
        super().__init__(message)
