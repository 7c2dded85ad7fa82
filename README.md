# igniterest

`igniterest` is a small Python client for the HTTP REST API of an Apache Ignite
cluster. It can create and destroy caches, put and get values by key, and run
SQL statements and queries. It also installs a command that walks through
these operations against a running node.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Using the client

`igniterest.client.IgniteRestClient` talks to the REST endpoint of a running
Ignite node. Its `base_url` defaults to `http://127.0.0.1:8080/ignite`; a
`requests.Session` may be passed in as `session`, otherwise the client creates
its own. Used as a context manager, or through `close()`, it closes the
session it created (a session passed in is left open):

```python
from igniterest.client import CacheValue, IgniteRestClient

with IgniteRestClient(base_url="http://127.0.0.1:8080/ignite") as client:
    client.get_or_create_cache("my_rest_cache")

    client.put("my_rest_cache", 1, CacheValue(id=1, name="Hello, Ignite!"))
    print(client.get("my_rest_cache", 1))   # the stored JSON value
    print(client.get("my_rest_cache", 99))  # None: nothing stored under 99

    client.destroy_cache("my_rest_cache")
```

Every call sends a JSON body by POST to a path under the base URL:
`cache/getOrCreate`, `cache/put`, `cache/get`, `cache/destroy` and `sql`.

`put` accepts any JSON-serialisable value; a `CacheValue` is sent as its JSON
object form. `get` returns the `response` field of the reply as decoded JSON,
or `None` when nothing is stored under the key.

`CacheValue` is a frozen record with an integer `id` and a string `name`.
`CacheValue.to_json()` gives the JSON object `{"id": ..., "name": ...}`, and
`CacheValue.from_json(data)` builds a value back from such an object, raising
`ValueError` if it is not an object, lacks a field, has an `id` that is not a
32-bit integer, or a `name` that is not a string.

### SQL

`IgniteRestClient.sql(query, args=None, schema_name="PUBLIC", page_size=None)`
sends a statement to the `sql` endpoint and returns the decoded reply. DDL,
DML and queries all go through it:

```python
client.sql(
    'CREATE TABLE people (id INT PRIMARY KEY, name VARCHAR) WITH "template=REPLICATED"',
    page_size=100,
)
client.sql("INSERT INTO people (id, name) VALUES (?, ?)", [101, "Item 1"])
body = client.sql("SELECT id, name FROM people WHERE id = ?", [101], page_size=100)
```

`args` and `pageSize` are only included in the request when given.
`row_fields(item)` picks `(id, name)` out of a result row such as those in
`body["response"]["items"]`; a missing or mistyped field comes back as `None`.

### Errors

`IgniteRestError` is raised when the server answers with a non-2xx HTTP
status, when a `get` reply has no `response` field, and when an SQL reply does
not carry `successStatus` equal to `0`. It has `message`, `status`, `reason`
and `body` attributes describing the failure.

## The demo command

```
igniterest-demo
igniterest-demo --base-url http://127.0.0.1:8080/ignite --cache-name my_rest_cache
```

The command creates a cache, stores two values and reads one back, checks
that an unused key holds nothing, creates a table of the same name, inserts a
row, selects all rows and then a single row by id, and finally destroys the
cache, printing each step. `--base-url` sets the REST endpoint and
`--cache-name` the cache and table name (default `my_rest_cache`). Failures
are reported on standard error; the command exits with status 1 if a step
cannot complete, and 0 otherwise.

The same session can be driven from Python with
`igniterest.demo.run(client, cache_name, out, err)`, passing a client, a cache
name and the streams to write progress and errors to. It raises
`IgniteRestError` on a failure that ends the session.

## What it does not do

The package speaks only the HTTP REST API. It does not implement Ignite's
binary thin-client protocol, and offers no typed, binary-serialised caches;
values travel as JSON.