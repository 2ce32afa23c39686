"""Typed GitHub GraphQL client and generated schema models."""

from marketplace_github.github_gql.client import GITHUB_GRAPHQL_URL, GitHubGraphQLClient
from marketplace_github.github_gql.exceptions import (
    GraphQLClientError,
    GraphQLClientGraphQLError,
    GraphQLClientGraphQLMultiError,
    GraphQLClientHttpError,
    GraphQLClientInvalidResponseError,
)
from marketplace_github.github_gql.schema import Author, Post, Query, QueryAuthorArgs

__all__ = [
    "GITHUB_GRAPHQL_URL",
    "Author",
    "GitHubGraphQLClient",
    "GraphQLClientError",
    "GraphQLClientGraphQLError",
    "GraphQLClientGraphQLMultiError",
    "GraphQLClientHttpError",
    "GraphQLClientInvalidResponseError",
    "Post",
    "Query",
    "QueryAuthorArgs",
]
