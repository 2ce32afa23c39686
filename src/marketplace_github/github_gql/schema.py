"""Models generated from the marketplace GraphQL schema.

Optional fields map to nullable schema fields and default to ``None``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from marketplace_github.github_gql.base_model import BaseModel


class Post(BaseModel):
    typename__: Literal["Post"] | None = Field(default=None, alias="__typename")
    id: int
    title: str
    votes: int | None = None


class Author(BaseModel):
    typename__: Literal["Author"] | None = Field(default=None, alias="__typename")
    id: int
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    posts: list[Post]


class Query(BaseModel):
    typename__: Literal["Query"] | None = Field(default=None, alias="__typename")
    author: Author


class QueryAuthorArgs(BaseModel):
    id: int
