# httpparts

Small, strict types for pieces of an HTTP request target: the URI scheme,
the port, and the path with its query. Invalid input raises `InvalidUri`,
whose `kind` tells you which rule was broken.

The package has no dependencies outside the standard library.

## Installing

```
pip install httpparts
```

## Schemes

```python
from httpparts.scheme import Scheme, parse_scheme_prefix

Scheme.parse("http") is Scheme.HTTP     # True
Scheme.parse("https") is Scheme.HTTPS   # True
Scheme.parse("my+funky+scheme").as_str()  # "my+funky+scheme"
Scheme.parse("FTP") == "ftp"            # True, compared case-insensitively
```

`Scheme.parse` accepts `str` or `bytes`. Any scheme other than the exact
`http` and `https` is kept as written. Such a scheme never equals
`Scheme.HTTP` or `Scheme.HTTPS`, even if it is spelled `HTTP`. Schemes
longer than 64 characters fail with `ErrorKind.SCHEME_TOO_LONG`; characters
outside letters, digits, `+`, `-`, `.` and `~` fail with
`ErrorKind.INVALID_SCHEME`.

`parse_scheme_prefix` looks for `scheme://` at the start of some bytes. It
returns a `SchemePrefix` with the `scheme`, its `length`, and `consumed`
(the length plus the three bytes of `://`). It returns `None` when there is
no such prefix.

```python
prefix = parse_scheme_prefix(b"ftp://example.com/")
prefix.scheme.as_str(), prefix.length, prefix.consumed   # ("ftp", 3, 6)
parse_scheme_prefix(b"/just/a/path")                     # None
```

## Paths and queries

```python
from httpparts.path import PathAndQuery

pq = PathAndQuery.parse("/hello/world?key=value#fragment")
pq.path()     # "/hello/world"
pq.query()    # "key=value"   (the fragment is dropped)
pq.as_str()   # "/hello/world?key=value"

PathAndQuery.parse("/path?").query()   # ""
PathAndQuery.parse("/path").query()    # None
PathAndQuery.empty().path()            # "/"
PathAndQuery.star().path()             # "*"
```

Paths and queries may hold UTF-8 text. Percent-encodings are left exactly
as written. Control characters, spaces and bytes that are not valid UTF-8
fail with `ErrorKind.INVALID_URI_CHAR`. `"`, `{` and `}` are accepted in the
path, so JSON embedded in a path parses.

A `PathAndQuery` compares equal to another `PathAndQuery` or to a string.
Comparison is case-sensitive, and values sort by their text.

## Ports

```python
from httpparts.port import Port

port = Port.parse("8080")
port.as_u16()    # 8080
port.as_str()    # "8080"
int(port)        # 8080
port == 8080     # True
Port.parse("70000")   # raises InvalidUri (ErrorKind.INVALID_PORT)
```

## Errors

```python
from httpparts.errors import ErrorKind, InvalidUri
from httpparts.scheme import Scheme

try:
    Scheme.parse("my_funky_scheme")
except InvalidUri as err:
    err.kind is ErrorKind.INVALID_SCHEME   # True
    str(err)                               # "invalid scheme"
```

`InvalidUri` is a subclass of `ValueError`. `InvalidUriParts` is a
subclass of `InvalidUri`.

## What this package does not do

The package parses schemes, ports, and paths with queries, each on its
own. It does not parse:

- a whole URI;
- the authority (host, user information and port taken together);
- HTTP protocol versions.

It has no builder for assembling URIs. `ErrorKind` lists reasons such as
`INVALID_AUTHORITY`, `TOO_LONG` and `SCHEME_MISSING`, but no code in this
package raises them yet.

## Running the tests

```
pip install -e ".[test]"
pytest
```