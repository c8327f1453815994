"""Structured URI templates per http://tools.ietf.org/html/rfc6570."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from .encoding import encode_value, encode_values
from .expansions import (FRAGMENT_VARIANTS, PATH_VARIANTS, QUERY_VARIANTS, FragmentSegment, ParamElement, PathSegment,
                         QuerySegment, contains_expansions, expand_fragment, expand_path, expand_query,
                         validate_segments)
from .render import SegmentUnsupportedError, render_fragment_identifier, render_path, render_template
from .uri import Authority, Query, URI


_LOG = logging.getLogger(__name__)


class UnresolvedExpansionError(Exception):
    """Exception thrown when a template with expansions is converted to a URI."""

    template: str

    def __init__(self, template: str) -> None:
        super().__init__(template)
        self.template = template

    def __str__(self) -> str:
        """Convert to string."""
        return 'All expansions must be resolved to be convertible: ' + self.template


class URITemplate:
    """
    A URI template built from segments.

    Only a subset of RFC 6570 is modeled. Levels 1 and 2 completely,
    of Level 3 slash-prefixed path segments, form-style queries and
    fragment expansion.

    Templates are immutable, every expansion returns a new template.
    """

    __slots__ = ('_scheme', '_authority', '_path', '_query', '_fragment', '_rendered')

    _scheme: (str | None)
    _authority: (Authority | None)
    _path: tuple[PathSegment, ...]
    _query: (tuple[QuerySegment, ...] | None)
    _fragment: (tuple[FragmentSegment, ...] | None)
    _rendered: (str | None)

    def __init__(self, scheme: (str | None) = None, authority: (Authority | None) = None,
                 path: Iterable[PathSegment] = (), query: (Iterable[QuerySegment] | None) = None,
                 fragment: (Iterable[FragmentSegment] | None) = None) -> None:
        self._scheme = scheme
        self._authority = authority
        self._path = validate_segments('path', path, PATH_VARIANTS)
        self._query = validate_segments('query', query, QUERY_VARIANTS) if (query is not None) else None
        self._fragment = (validate_segments('fragment', fragment, FRAGMENT_VARIANTS)
                          if (fragment is not None) else None)
        self._rendered = None

    @property
    def scheme(self) -> (str | None):
        """Get the scheme."""
        return self._scheme

    @property
    def authority(self) -> (Authority | None):
        """Get the authority."""
        return self._authority

    @property
    def path(self) -> tuple[PathSegment, ...]:
        """Get the path segments."""
        return self._path

    @property
    def query(self) -> (tuple[QuerySegment, ...] | None):
        """Get the query segments, None if there is no query."""
        return self._query

    @property
    def fragment(self) -> (tuple[FragmentSegment, ...] | None):
        """Get the fragment segments, None if there is no fragment."""
        return self._fragment

    @property
    def variable_names(self) -> list[str]:
        """Get the names of all unexpanded variables, in order of appearance."""
        names: list[str] = []
        for segment in (self._path + (self._query or ()) + (self._fragment or ())):
            for name in segment.variable_names:
                if (name not in names):
                    names.append(name)
        return names

    @property
    def contains_expansions(self) -> bool:
        """Check if any variable still needs a value."""
        return (contains_expansions(self._path) or contains_expansions(self._query)
                or contains_expansions(self._fragment))

    def _replace(self, **kwargs: Any) -> URITemplate:
        fields = {
            'scheme': self._scheme,
            'authority': self._authority,
            'path': self._path,
            'query': self._query,
            'fragment': self._fragment,
        }
        fields.update(kwargs)
        return URITemplate(**fields)

    def expand_path(self, name: str, value: Any) -> URITemplate:
        """
        Replace the variable name in the path.

        A sequence of values produces one path element each.
        """
        return self._replace(path=expand_path(self._path, name, encode_values(value)))

    def expand_query(self, name: str, *values: Any) -> URITemplate:
        """
        Replace the variable name in the query.

        Without values the parameter renders as bare name, a single
        sequence is used as the list of values.
        """
        if (self._query is None):
            return self
        if ((1 == len(values)) and (not isinstance(values[0], (str, bytes))) and isinstance(values[0], Sequence)):
            values = tuple(values[0])
        return self._replace(query=expand_query(self._query, name, [encode_value(value) for value in values]))

    def expand_fragment(self, name: str, value: Any) -> URITemplate:
        """Replace the variable name in the fragment."""
        if (self._fragment is None):
            return self
        return self._replace(fragment=expand_fragment(self._fragment, name, encode_value(value)))

    def expand_any(self, name: str, value: Any) -> URITemplate:
        """Replace the variable name everywhere."""
        return self.expand_path(name, value).expand_query(name, value).expand_fragment(name, value)

    def to_uri(self) -> URI:
        """Convert to a URI, all variables must have been expanded."""
        if (self.contains_expansions):
            _LOG.debug('Unresolved expansions in %s', self)
            raise UnresolvedExpansionError(str(self))

        query = Query()
        for segment in (self._query or ()):
            if (not isinstance(segment, ParamElement)):
                raise SegmentUnsupportedError(segment, 'URI query')
            for name, value in segment.pairs:
                query = query.add(name, value)

        uri = URI(self._scheme, self._authority,
                  path=(render_path(self._path) if (self._path) else ''),
                  query=query,
                  fragment=(render_fragment_identifier(self._fragment) if (self._fragment is not None) else None))
        _LOG.debug('Converted %s to %s', self, uri)
        return uri

    def __eq__(self, other: object) -> bool:
        """Compare all parts."""
        if (not isinstance(other, URITemplate)):
            return NotImplemented
        return ((self._scheme, self._authority, self._path, self._query, self._fragment)
                == (other._scheme, other._authority, other._path, other._query, other._fragment))

    def __hash__(self) -> int:
        """Hash all parts."""
        return hash((self._scheme, self._authority, self._path, self._query, self._fragment))

    def __repr__(self) -> str:
        """Show the constructor call."""
        return (f'URITemplate({self._scheme!r}, {self._authority!r}, {list(self._path)!r}, '
                f'{list(self._query) if (self._query is not None) else None!r}, '
                f'{list(self._fragment) if (self._fragment is not None) else None!r})')

    def __str__(self) -> str:
        """Convert to string."""
        if (self._rendered is None):
            self._rendered = render_template(self)
        return self._rendered
