"""Minimal URI values produced from fully expanded templates."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from ipaddress import IPv4Address, IPv6Address
from typing import Any, Union

from .charset import Charset
from .encoding import pct_encode


Host = Union[str, IPv4Address, IPv6Address]


def render_host(host: Host) -> str:
    """Render a host, IPv6 addresses in brackets."""
    if (isinstance(host, IPv6Address)):
        return '[' + str(host) + ']'
    return str(host)


class Authority:
    """
    URI authority user@host:port.

    https://tools.ietf.org/html/rfc3986#section-3.2
    """

    __slots__ = ('_host', '_user', '_port')

    _host: Host
    _user: (str | None)
    _port: (int | None)

    def __init__(self, host: Host = '', user: (str | None) = None, port: (int | None) = None) -> None:
        self._host = host
        self._user = user
        self._port = port

    @property
    def host(self) -> Host:
        """Get the host."""
        return self._host

    @property
    def user(self) -> (str | None):
        """Get the user info."""
        return self._user

    @property
    def port(self) -> (int | None):
        """Get the port."""
        return self._port

    def __eq__(self, other: object) -> bool:
        """Compare all parts."""
        if (not isinstance(other, Authority)):
            return NotImplemented
        return (self._host, self._user, self._port) == (other._host, other._user, other._port)

    def __hash__(self) -> int:
        """Hash all parts."""
        return hash((self._host, self._user, self._port))

    def __repr__(self) -> str:
        """Show the constructor call."""
        return f'Authority({self._host!r}, user={self._user!r}, port={self._port!r})'

    def __str__(self) -> str:
        """Convert to string."""
        return (((self._user + '@') if (self._user is not None) else '') + render_host(self._host)
                + ((':' + str(self._port)) if (self._port is not None) else ''))


class Query:
    """Ordered query parameters, each a name with an optional value."""

    __slots__ = ('_pairs', )

    _pairs: tuple[tuple[str, (str | None)], ...]

    def __init__(self, pairs: Iterable[tuple[str, (str | None)]] = ()) -> None:
        self._pairs = tuple((name, value) for name, value in pairs)

    def add(self, name: str, value: (str | None) = None) -> Query:
        """Get a new query with one more parameter."""
        return Query(self._pairs + ((name, value), ))

    def get(self, name: str) -> list[(str | None)]:
        """Get all values of a parameter."""
        return [value for key, value in self._pairs if (key == name)]

    def __iter__(self) -> Iterator[tuple[str, (str | None)]]:
        """Iterate name/value pairs in order."""
        return iter(self._pairs)

    def __len__(self) -> int:
        """Count the pairs."""
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        """Compare pairs in order."""
        if (not isinstance(other, Query)):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self) -> int:
        """Hash the pairs."""
        return hash(self._pairs)

    def __repr__(self) -> str:
        """Show the constructor call."""
        return f'Query({list(self._pairs)!r})'

    def __str__(self) -> str:
        """Convert to string."""
        return '&'.join((pct_encode(name, Charset.QUERY)
                         + (('=' + pct_encode(value, Charset.QUERY)) if (value is not None) else ''))
                        for name, value in self._pairs)


class URI:
    """
    A resolved URI.

    https://tools.ietf.org/html/rfc3986#section-3
    """

    __slots__ = ('_scheme', '_authority', '_path', '_query', '_fragment')

    _scheme: (str | None)
    _authority: (Authority | None)
    _path: str
    _query: Query
    _fragment: (str | None)

    def __init__(self, scheme: (str | None) = None, authority: (Authority | None) = None, path: str = '',
                 query: (Query | None) = None, fragment: (str | None) = None) -> None:
        self._scheme = scheme
        self._authority = authority
        self._path = path
        self._query = query if (query is not None) else Query()
        self._fragment = fragment

    @property
    def scheme(self) -> (str | None):
        """Get the scheme."""
        return self._scheme

    @property
    def authority(self) -> (Authority | None):
        """Get the authority."""
        return self._authority

    @property
    def path(self) -> str:
        """Get the path."""
        return self._path

    @property
    def query(self) -> Query:
        """Get the query parameters."""
        return self._query

    @property
    def fragment(self) -> (str | None):
        """Get the fragment."""
        return self._fragment

    def _key(self) -> tuple[Any, ...]:
        return (self._scheme, self._authority, self._path, self._query, self._fragment)

    def __eq__(self, other: object) -> bool:
        """Compare all parts."""
        if (not isinstance(other, URI)):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        """Hash all parts."""
        return hash(self._key())

    def __repr__(self) -> str:
        """Show the constructor call."""
        return (f'URI({self._scheme!r}, {self._authority!r}, {self._path!r}, {self._query!r}, '
                f'{self._fragment!r})')

    def __str__(self) -> str:
        """Convert to string."""
        output = ''
        if (self._scheme):
            output += self._scheme + ':'
        if (self._authority is not None):
            output += '//' + str(self._authority)
        output += pct_encode(self._path, Charset.PATH)
        if (self._query):
            output += '?' + str(self._query)
        if (self._fragment is not None):
            output += '#' + pct_encode(self._fragment, Charset.FRAGMENT)
        return output
