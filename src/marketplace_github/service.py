"""Lifecycle-managed holder for the GitHub GraphQL client."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import httpx

from marketplace_github.contracts.config import ConfigLookup, GitHubGraphQLSettings
from marketplace_github.contracts.exceptions import ClientNotInitializedError
from marketplace_github.github_gql.client import GitHubGraphQLClient

_LOG = logging.getLogger(__name__)


class GitHubGraphQLService:
    """Owns an optional, token-authenticated GitHub GraphQL client.

    The host drives the lifecycle: :meth:`initialize` once at startup,
    :meth:`get_client` while running, :meth:`shutdown` once at exit. Calls are
    expected to be sequential; there is no internal locking.

    A missing credential is not an error. The service stays uninitialized so
    the application can start without the GitHub integration, and only
    :meth:`get_client` fails.
    """

    def __init__(
        self,
        settings: GitHubGraphQLSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or GitHubGraphQLSettings()
        self._http_client = http_client
        self._client: GitHubGraphQLClient | None = None

    @property
    def is_ready(self) -> bool:
        return self._client is not None

    def initialize(self, config: ConfigLookup) -> None:
        # empty default keeps startup working when the token is not set
        token = config.get(self._settings.token_key, "")
        if not token:
            if self._client is None:
                _LOG.info("%s is not set; GitHub GraphQL client disabled", self._settings.token_key)
            else:
                _LOG.info("%s is not set; keeping the existing GitHub GraphQL client", self._settings.token_key)
            return

        base = GitHubGraphQLClient(
            self._settings.url,
            headers={"user-agent": self._settings.user_agent},
            timeout=self._settings.timeout,
            http_client=self._http_client,
        )
        self._client = base.defaults(headers={"authorization": f"token {token}"})
        _LOG.debug("GitHub GraphQL client initialized for %s", self._settings.url)

    def get_client(self) -> GitHubGraphQLClient:
        if self._client is None:
            raise ClientNotInitializedError()
        return self._client

    def shutdown(self) -> None:
        if self._client is not None:
            _LOG.debug("Releasing GitHub GraphQL client")
        self._client = None

    @contextmanager
    def lifecycle(self, config: ConfigLookup) -> Iterator[GitHubGraphQLService]:
        """Run :meth:`initialize` on entry and :meth:`shutdown` on exit."""
        self.initialize(config)
        try:
            yield self
        finally:
            self.shutdown()
