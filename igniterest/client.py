"""Client for the Apache Ignite REST API: caches, key/value access and SQL."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

DEFAULT_BASE_URL = "http://127.0.0.1:8080/ignite"
DEFAULT_SCHEMA = "PUBLIC"

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class CacheValue:
    """A value stored in a cache: an integer id and a name."""

    id: int
    name: str

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object form of this value."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_json(cls, data: Any) -> "CacheValue":
        """Build a value from its JSON object form; raise ValueError if malformed."""
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {data!r}")
        for field in ("id", "name"):
            if field not in data:
                raise ValueError(f"missing field `{field}`")
        ident, name = data["id"], data["name"]
        if not _is_int(ident) or not _I32_MIN <= ident <= _I32_MAX:
            raise ValueError(f"invalid value for `id`: {ident!r}")
        if not isinstance(name, str):
            raise ValueError(f"invalid value for `name`: {name!r}")
        return cls(id=ident, name=name)


class IgniteRestError(Exception):
    """A request to the REST API failed or returned an unusable answer."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        reason: str = "",
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.reason = reason or ""
        self.body = body


def _success_status_ok(body: Any) -> bool:
    if not isinstance(body, dict):
        return False
    value = body.get("successStatus")
    return _is_int(value) and value == 0


class IgniteRestClient:
    """Talks to an Ignite node over its HTTP REST endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def _post(self, path: str, payload: dict[str, Any]) -> requests.Response:
        response = self.session.post(f"{self.base_url}/{path}", json=payload)
        if not 200 <= response.status_code < 300:
            raise IgniteRestError(
                f"request to {path} failed with status {response.status_code}",
                status=response.status_code,
                reason=response.reason or "",
                body=response.text,
            )
        return response

    def get_or_create_cache(self, cache_name: str) -> None:
        """Ensure the named cache exists."""
        self._post("cache/getOrCreate", {"cacheName": cache_name})

    def put(self, cache_name: str, key: Any, value: Any) -> None:
        """Store value under key in the named cache."""
        if isinstance(value, CacheValue):
            value = value.to_json()
        self._post("cache/put", {"cacheName": cache_name, "key": key, "value": value})

    def get(self, cache_name: str, key: Any) -> Any:
        """Return the JSON value stored under key, or None if there is none."""
        response = self._post("cache/get", {"cacheName": cache_name, "key": key})
        body = response.json()
        if not isinstance(body, dict) or "response" not in body:
            raise IgniteRestError(
                "'response' field missing in GET response",
                status=response.status_code,
                reason=response.reason or "",
                body=body,
            )
        return body["response"]

    def sql(
        self,
        query: str,
        args: list[Any] | None = None,
        schema_name: str = DEFAULT_SCHEMA,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        """Run an SQL statement and return the decoded response body."""
        payload: dict[str, Any] = {"schemaName": schema_name, "query": query}
        if page_size is not None:
            payload["pageSize"] = page_size
        if args is not None:
            payload["args"] = list(args)
        response = self._post("sql", payload)
        body = response.json()
        if not _success_status_ok(body):
            raise IgniteRestError(
                "SQL statement failed",
                status=response.status_code,
                reason=response.reason or "",
                body=body,
            )
        return body

    def destroy_cache(self, cache_name: str) -> None:
        """Destroy the named cache."""
        self._post("cache/destroy", {"cacheName": cache_name})

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "IgniteRestClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def row_fields(item: Any) -> tuple[int | None, str | None]:
    """Pick (id, name) out of an SQL result row; missing or mistyped fields are None."""
    if not isinstance(item, list):
        return None, None
    ident = item[0] if len(item) > 0 else None
    name = item[1] if len(item) > 1 else None
    if not (_is_int(ident) and _I64_MIN <= ident <= _I64_MAX):
        ident = None
    if not isinstance(name, str):
        name = None
    return ident, name