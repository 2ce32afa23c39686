"""httpx-based GraphQL client for the GitHub API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from marketplace_github.contracts.config import GITHUB_GRAPHQL_URL
from marketplace_github.github_gql.exceptions import (
    GraphQLClientGraphQLMultiError,
    GraphQLClientHttpError,
    GraphQLClientInvalidResponseError,
)

_LOG = logging.getLogger(__name__)

__all__ = ["GITHUB_GRAPHQL_URL", "GitHubGraphQLClient"]


class GitHubGraphQLClient:
    """GraphQL caller bound to one endpoint and a fixed set of headers.

    Instances are immutable: :meth:`defaults` returns a new client with
    merged settings instead of changing this one.

    When ``http_client`` is given it is used for every request and remains
    owned by the caller. Otherwise each request opens and closes its own
    ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        url: str = GITHUB_GRAPHQL_URL,
        *,
        headers: Mapping[str, str] | httpx.Headers | None = None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._headers = httpx.Headers(headers)
        self._timeout = timeout
        self._http_client = http_client

    @property
    def url(self) -> str:
        return self._url

    @property
    def headers(self) -> httpx.Headers:
        return self._headers.copy()

    @property
    def timeout(self) -> float:
        return self._timeout

    def defaults(
        self,
        *,
        url: str | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> GitHubGraphQLClient:
        """Return a new client with the given settings layered over this one's.

        Header names are matched case-insensitively; the given values win.
        """
        merged = self._headers.copy()
        merged.update(headers or {})
        return GitHubGraphQLClient(
            url or self._url,
            headers=merged,
            timeout=self._timeout if timeout is None else timeout,
            http_client=self._http_client,
        )

    async def execute(
        self,
        query: str,
        operation_name: str | None = None,
        variables: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        payload: dict[str, Any] = {
            "query": query,
            "operationName": operation_name,
            "variables": variables or {},
        }
        timeout = kwargs.pop("timeout", self._timeout)
        _LOG.debug("POST %s operation=%s", self._url, operation_name or "<anonymous>")

        if self._http_client is not None:
            return await self._http_client.post(
                self._url, json=payload, headers=self._headers, timeout=timeout, **kwargs
            )

        async with httpx.AsyncClient(timeout=timeout) as http:
            return await http.post(self._url, json=payload, headers=self._headers, **kwargs)

    def get_data(self, response: httpx.Response) -> dict[str, Any]:
        """Extract ``data`` from a GraphQL response.

        Raises:
            GraphQLClientHttpError: On a non-2xx status.
            GraphQLClientInvalidResponseError: If the body is not a GraphQL result.
            GraphQLClientGraphQLMultiError: If the result carries ``errors``.
        """
        if not response.is_success:
            raise GraphQLClientHttpError(status_code=response.status_code, response=response)

        try:
            response_json = response.json()
        except ValueError as exc:
            raise GraphQLClientInvalidResponseError(response=response) from exc

        if not isinstance(response_json, dict) or ("data" not in response_json and "errors" not in response_json):
            raise GraphQLClientInvalidResponseError(response=response)

        data = response_json.get("data")
        errors = response_json.get("errors")

        if errors:
            raise GraphQLClientGraphQLMultiError.from_errors_dicts(errors_dicts=errors, data=data)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise GraphQLClientInvalidResponseError(response=response)

        return data

    async def __call__(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        operation_name: str | None = None,
    ) -> dict[str, Any]:
        response = await self.execute(query, operation_name=operation_name, variables=variables)
        return self.get_data(response)

    def __repr__(self) -> str:
        return f"GitHubGraphQLClient(url={self._url!r})"
