# chnative

Building blocks for working with the ClickHouse native protocol from Python.

## What is in the package

- `chnative.errors`: the server's error codes as the `ErrorCode` enum, the
  exception hierarchy rooted at `Error` (`ValidationError`, `ProtocolError`,
  `UnimplementedError`, `LibraryAssertionError`, `OpenSSLError`,
  `CompressionError`) and `ServerError`. A `ServerError` wraps a
  `ServerExceptionInfo` (code, name, display text, stack trace and an optional
  nested exception); its `code` and `exception` properties give them back, and
  `str()` of it is the display text. `ServerExceptionInfo.chain()` yields the
  exception and each nested one, outermost first.
- `chnative.protocol`: packet codes `ServerCode` and `ClientCode`, plus
  `CompressionState` and `Stage`. `parse_server_code` and `parse_client_code`
  turn a raw integer into a code and raise `ProtocolError` for an unknown one.
- `chnative.version`: `library_version()` returns the version packed into one
  number (two decimal digits per component, 2.5.1 gives `2050100`), and
  `version_string()` returns `"2.5.1"`.

Helpers that are handy when testing code against a server:

- `chnative.comparison`: `compare_recursive` compares two values, descending
  into nested containers (strings are compared as plain values) and treating
  NaN as equal to NaN; `None` equals only `None`. It returns a
  `ComparisonResult` that is truthy on success and carries a message
  explaining a mismatch otherwise. `compare_containers_recursive` does the
  element-wise part, and `is_container` tells whether a value is a sized
  iterable.
- `chnative.timing`: `Timer` (with `start`, `restart` and `elapsed` in
  seconds), `MeasuresCollector` that records `(name, result)` pairs of a
  measuring function, and `collect` to create one.
- `chnative.support`: `get_env_or_default` reads an environment variable with
  a fallback and a conversion, `version_number` packs a server version into a
  comparable number, `uuid_to_string` formats a UUID held as two 64-bit
  halves, and `format_container`, `format_optional` and `format_duration`
  render values as text.
- `chnative.generators`: deterministic sample values (numbers over integer and
  float ranges, strings, fixed strings, dates, date-times, UUIDs, 128-bit
  integers, decimals, IPv4 and IPv6 addresses), combinators such as
  `generate_vector`, `same_value_generator`, `alternate_generators`,
  `make_arrays` and `concat_sequences`, and seeded `RandomGenerator` and
  `FromVectorGenerator`.
- `chnative.tcp_server`: `LocalTcpServer`, a socket listening on
  `127.0.0.1` that never accepts connections, usable as a context manager.
  Port `0` picks a free port, stored in `port` after `start()`.

## What it does not do

The package has no client: it does not connect to a server, send queries,
encode or decode blocks and columns, parse type names or compress data. It
provides the error types, protocol codes and test helpers that such a client
and its tests use.

## Installing

```
pip install .
```

## Example

```python
from chnative.errors import ErrorCode, ServerError, ServerExceptionInfo
from chnative.comparison import compare_recursive

info = ServerExceptionInfo(code=ErrorCode.UNKNOWN_TABLE, name="DB::Exception",
                           display_text="Table default.t does not exist")
try:
    raise ServerError(info)
except ServerError as err:
    print(err.code, err)

assert compare_recursive([1.0, float("nan")], [1.0, float("nan")])
```

## Running the tests

```
pip install .[test]
pytest
```