"""Command that walks through cache and SQL operations against an Ignite node."""

from __future__ import annotations

import argparse
import json
import sys
from functools import partial
from typing import Any, TextIO

import requests

from igniterest.client import (
    DEFAULT_BASE_URL,
    CacheValue,
    IgniteRestClient,
    IgniteRestError,
    row_fields,
)

DEFAULT_CACHE_NAME = "my_rest_cache"
PAGE_SIZE = 100


def _status(exc: IgniteRestError) -> str:
    if exc.status is None:
        return "unknown"
    return f"{exc.status} {exc.reason}".strip()


def _http_failed(exc: IgniteRestError) -> bool:
    return exc.status is None or not 200 <= exc.status < 300


def _dump(body: Any) -> str:
    return json.dumps(body)


def _fail(message: str, exc: IgniteRestError) -> IgniteRestError:
    return IgniteRestError(message, status=exc.status, reason=exc.reason, body=exc.body)


def _sql_step(client, say, warn, query, args, page_size, query_msg, request_msg, error_name):
    try:
        return client.sql(query, args=args, page_size=page_size)
    except IgniteRestError as exc:
        if _http_failed(exc):
            warn(f"   {request_msg}: Status: {_status(exc)}, Body: {exc.body!r}")
            raise _fail(f"{error_name} request failed", exc) from exc
        warn(f"   {query_msg}: Status: {_status(exc)}, Body: {_dump(exc.body)}")
        raise _fail(f"{error_name} failed", exc) from exc


def _print_rows(say, body: dict[str, Any], title: str, empty_msg: str) -> None:
    response = body.get("response")
    items = response.get("items") if isinstance(response, dict) else None
    if not isinstance(items, list):
        say(f"   {empty_msg}")
        return
    say(f"   --- {title} ---")
    for item in items:
        ident, name = row_fields(item)
        say(f"     ID: {ident!r}, Name: {name!r}")
    say("   -------------------------")


def run(
    client: IgniteRestClient,
    cache_name: str = DEFAULT_CACHE_NAME,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Run the walkthrough, reporting to out and err; raise on a fatal failure."""
    say = partial(print, file=out if out is not None else sys.stdout)
    warn = partial(print, file=err if err is not None else sys.stderr)

    say("--- Apache Ignite REST API Client Example ---")

    say(f"\n1. Creating/getting cache '{cache_name}'...")
    try:
        client.get_or_create_cache(cache_name)
    except IgniteRestError as exc:
        warn(f"   Failed to ensure cache: Status: {_status(exc)}, Body: {exc.body!r}")
        raise _fail("Failed to ensure cache", exc) from exc
    say(f"   Cache '{cache_name}' ensured (created or already exists).")

    entries = [
        (1, CacheValue(id=1, name="Data from Rust REST client!")),
        (2, CacheValue(id=2, name="Another entry!")),
    ]
    for prefix, (key, value) in zip(("\n2. ", "   "), entries):
        say(f"{prefix}Putting key:{key} -> value:{value!r} into cache...")
        try:
            client.put(cache_name, key, value)
        except IgniteRestError as exc:
            warn(
                f"   Failed to put data for key {key}: "
                f"Status: {_status(exc)}, Body: {exc.body!r}"
            )
            raise _fail(f"Failed to put data for key {key}", exc) from exc
        say(f"   Data for key {key} put successfully.")

    key1 = entries[0][0]
    say(f"\n3. Getting value for key:{key1}...")
    try:
        found = client.get(cache_name, key1)
    except IgniteRestError as exc:
        if _http_failed(exc):
            warn(
                f"   Failed to get data for key {key1}: "
                f"Status: {_status(exc)}, Body: {exc.body!r}"
            )
            raise _fail(f"Failed to get data for key {key1}", exc) from exc
        warn(f"   'response' field missing in GET response for key {key1}: {_dump(exc.body)}")
    else:
        if found is None:
            say(f"   No value found for key {key1}.")
        else:
            say(f"   Retrieved value for key {key1}: {CacheValue.from_json(found)!r}")

    missing_key = 99
    say(f"   Attempting to get non-existent key:{missing_key}...")
    try:
        found = client.get(cache_name, missing_key)
    except IgniteRestError as exc:
        if _http_failed(exc):
            warn(
                f"   Failed to get data for non-existent key {missing_key}: "
                f"Status: {_status(exc)}, Body: {exc.body!r}"
            )
            raise _fail(f"Failed to get data for non-existent key {missing_key}", exc) from exc
        warn(f"   'response' field missing for non-existent key {missing_key}: {_dump(exc.body)}")
    else:
        if found is None:
            say(f"   Correctly found no value for non-existent key {missing_key}.")
        else:
            warn(
                f"   Unexpectedly found value for non-existent key {missing_key}: {_dump(found)}"
            )

    say(f"\n4. Executing SQL: CREATE TABLE '{cache_name}'...")
    _sql_step(
        client, say, warn,
        f'CREATE TABLE {cache_name} (id INT PRIMARY KEY, name VARCHAR) WITH "template=REPLICATED"',
        None, PAGE_SIZE,
        "SQL: CREATE TABLE failed", "SQL: CREATE TABLE request failed", "SQL CREATE TABLE",
    )
    say(f"   SQL: CREATE TABLE {cache_name} executed successfully.")

    say(f"\n5. Executing SQL: INSERT Data into '{cache_name}'...")
    _sql_step(
        client, say, warn,
        f"INSERT INTO {cache_name} (id, name) VALUES (?, ?)",
        [101, "SQL Inserted Item 1"], None,
        "SQL: INSERT for Item 1 failed", "SQL: INSERT for Item 1 request failed", "SQL INSERT",
    )
    say("   SQL: INSERT for Item 1 executed successfully.")

    say(f"\n6. Executing SQL: SELECT Data from '{cache_name}'...")
    body = _sql_step(
        client, say, warn,
        f"SELECT id, name FROM {cache_name}",
        None, PAGE_SIZE,
        "SQL: SELECT query failed", "SQL: SELECT request failed", "SQL SELECT",
    )
    say("   SQL: SELECT query executed successfully.")
    _print_rows(say, body, "SQL Query Results", "No items found in SQL SELECT response.")

    say(f"\n7. Executing SQL: Parameterized SELECT Data from '{cache_name}'...")
    body = _sql_step(
        client, say, warn,
        f"SELECT id, name FROM {cache_name} WHERE id = ?",
        [101], PAGE_SIZE,
        "SQL: Parameterized SELECT query failed",
        "SQL: Parameterized SELECT request failed",
        "SQL Parameterized SELECT",
    )
    say("   SQL: Parameterized SELECT query executed successfully.")
    _print_rows(
        say, body, "SQL Parameterized Query Results",
        "No items found in SQL Parameterized SELECT response.",
    )

    say(f"\n8. Destroying cache/table '{cache_name}'...")
    try:
        client.destroy_cache(cache_name)
    except IgniteRestError as exc:
        warn(f"   Failed to destroy cache/table: Status: {_status(exc)}, Body: {exc.body!r}")
    else:
        say(f"   Cache/table '{cache_name}' destroyed.")

    say("\n--- Program Finished ---")


def main(argv: list[str] | None = None) -> int:
    """Entry point of the command; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="igniterest",
        description="Exercise cache and SQL operations of an Ignite REST endpoint.",
    )
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="REST endpoint base URL")
    parser.add_argument("--cache-name", default=DEFAULT_CACHE_NAME, help="cache and table name")
    args = parser.parse_args(argv)

    with IgniteRestClient(args.base_url) as client:
        try:
            run(client, args.cache_name)
        except (IgniteRestError, requests.RequestException, ValueError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())