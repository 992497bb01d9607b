"""Domain models."""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, field_validator


class HttpMethod(str, Enum):
    """HTTP verbs offered by the method picker, in display order."""

    GET = "GET"
    HEAD = "HEAD"
    PUT = "PUT"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "HttpMethod":
        """Return the method called ``name``, raising ValueError if unknown."""
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown HTTP method: {name!r}") from None


class Header(NamedTuple):
    name: str
    value: str


class EnvironmentValue(NamedTuple):
    key: str
    value: str


def _require_pairs(rows: object) -> object:
    """Reject rows stored as objects; a pair is always a two-item array."""
    if isinstance(rows, list):
        for row in rows:
            if not isinstance(row, (list, tuple)):
                raise ValueError(f"expected a [first, second] pair, got {type(row).__name__}")
    return rows


class Request(BaseModel):
    """A user-authored description of an HTTP call. Never executed.

    Headers are an ordered list of pairs rather than a mapping: names may
    repeat and their order is kept as entered.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    url: str
    method: HttpMethod
    headers: list[Header]
    body: str

    @field_validator("headers", mode="before")
    @classmethod
    def _headers_are_pairs(cls, value: object) -> object:
        return _require_pairs(value)

    @classmethod
    def blank(cls, name: str) -> "Request":
        """Return an empty GET request called ``name``."""
        return cls(name=name, url="", method=HttpMethod.GET, headers=[], body="")


class Environment(BaseModel):
    """A named, ordered set of key/value rows."""

    model_config = ConfigDict(extra="forbid")

    name: str
    values: list[EnvironmentValue]

    @field_validator("values", mode="before")
    @classmethod
    def _values_are_pairs(cls, value: object) -> object:
        return _require_pairs(value)
