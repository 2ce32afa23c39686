"""Shared test fixtures for marketplace-github tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from marketplace_github.config import MappingConfig


@pytest.fixture
def token_config() -> MappingConfig:
    """A config lookup with a GitHub token set."""
    return MappingConfig({"GITHUB_PERSONAL_TOKEN": "abc123"})


@pytest.fixture
def empty_config() -> MappingConfig:
    """A config lookup with nothing set."""
    return MappingConfig()


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_http_client(
    recorded_requests: list[httpx.Request],
) -> Callable[[httpx.Response], httpx.AsyncClient]:
    """Build an AsyncClient whose transport records requests and replies with a canned response."""

    def _make(response: httpx.Response) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return response

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make

