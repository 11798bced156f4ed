"""
Request accessors and URL building for API Gateway proxy events.
"""

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import urlencode

JsonDict = dict[str, Any]


class RequestParams(Mapping[str, str]):
    """Read-only view of the current request's query-string parameters."""

    def __init__(self, params: Mapping[str, str] | None = None) -> None:
        self._params: dict[str, str] = dict(params or {})

    @classmethod
    def from_event(cls, event: JsonDict) -> "RequestParams":
        return cls(event.get("queryStringParameters") or {})

    def __getitem__(self, key: str) -> str:
        return self._params[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def get_param(self, name: str) -> str | None:
        """Return the raw value of a query parameter, or None if absent."""
        return self._params.get(name)


class QueryUrlBuilder:
    """Builds links to the current path with one query parameter overridden.

    All other query parameters of the current request are preserved in
    their original order; the overridden one keeps its position if present.
    """

    def __init__(self, path: str, params: Mapping[str, str] | None = None) -> None:
        self.path = path or "/"
        self.params: dict[str, str] = dict(params or {})

    @classmethod
    def from_event(cls, event: JsonDict) -> "QueryUrlBuilder":
        return cls(
            event.get("path") or "/",
            event.get("queryStringParameters") or {},
        )

    def build(self, name: str, value: Any) -> str:
        query = dict(self.params)
        query[name] = str(value)
        return f"{self.path}?{urlencode(query)}"
