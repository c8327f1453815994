"""Segments of a URI template and their expansion per http://tools.ietf.org/html/rfc6570."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, ClassVar

from .variable import validate_variable, validate_variables


class Segment:
    """
    Base class for template segments.

    Segments are immutable values, expanding one produces new segments.
    """

    __slots__ = ()

    @property
    def is_expansion(self) -> bool:
        """Check if this segment still needs a value."""
        return False

    @property
    def variable_names(self) -> tuple[str, ...]:
        """Get the names of all variables in this segment."""
        return ()

    def _key(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        """Compare by variant and contents."""
        if (type(self) is not type(other)):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        """Hash by variant and contents."""
        return hash((type(self).__name__, ) + self._key())

    def __repr__(self) -> str:
        """Show the constructor call."""
        return type(self).__name__ + '(' + ', '.join(repr(item) for item in self._flat_key()) + ')'

    def _flat_key(self) -> tuple[Any, ...]:
        return self._key()


def _remaining(names: Iterable[str], name: str) -> tuple[str, ...]:
    """Drop every occurrence of name."""
    return tuple(var for var in names if (var != name))


# path

class PathSegment(Segment):
    """Base class for path segments."""

    __slots__ = ()

    def expand(self, name: str, values: Sequence[str]) -> list[PathSegment]:
        """Replace the variable name with values."""
        return [self]


class PathElement(PathSegment):
    """Static path element."""

    __slots__ = ('_value', )

    _value: str

    def __init__(self, value: str) -> None:
        self._value = value

    @property
    def value(self) -> str:
        """Get the literal value."""
        return self._value

    def _key(self) -> tuple[Any, ...]:
        return (self._value, )

    def __str__(self) -> str:
        """Convert to string."""
        return '/' + self._value


class PathExpansion(PathSegment):
    """
    Base class for path expressions.

    https://tools.ietf.org/html/rfc6570#section-3.2
    """

    __slots__ = ('_names', )

    operator: ClassVar[str] = ''

    _names: tuple[str, ...]

    def __init__(self, *names: str) -> None:
        self._names = validate_variables(type(self).__name__, names)

    @property
    def names(self) -> tuple[str, ...]:
        """Get the variable names."""
        return self._names

    @property
    def is_expansion(self) -> bool:
        """Check if this segment still needs a value."""
        return True

    @property
    def variable_names(self) -> tuple[str, ...]:
        """Get the names of all variables."""
        return self._names

    def _key(self) -> tuple[Any, ...]:
        return (self._names, )

    def _flat_key(self) -> tuple[Any, ...]:
        return self._names

    def _residual(self, names: tuple[str, ...]) -> PathSegment:
        """Build the expansion left over after a partial expansion."""
        return type(self)(*names)

    def expand(self, name: str, values: Sequence[str]) -> list[PathSegment]:
        """Replace the variable name with one path element per value."""
        if (name not in self._names):
            return [self]
        expanded: list[PathSegment] = [PathElement(value) for value in values]
        remaining = _remaining(self._names, name)
        if (remaining):
            expanded.append(self._residual(remaining))
        return expanded

    def __str__(self) -> str:
        """Convert to string."""
        return '{' + self.operator + ','.join(self._names) + '}'


class SimpleExpansion(PathExpansion):
    """
    Simple String expansion {var}.

    https://tools.ietf.org/html/rfc6570#section-3.2.2
    """

    __slots__ = ()


class ReservedExpansion(PathExpansion):
    """
    Reserved Expansion {+var}.

    Once one of its variables is expanded the rest continue as a simple expansion.
    https://tools.ietf.org/html/rfc6570#section-3.2.3
    """

    __slots__ = ()

    operator: ClassVar[str] = '+'

    def _residual(self, names: tuple[str, ...]) -> PathSegment:
        """Build the expansion left over after a partial expansion."""
        return SimpleExpansion(*names)


class PathSegmentExpansion(PathExpansion):
    """
    Path Segment Expansion {/var}.

    https://tools.ietf.org/html/rfc6570#section-3.2.6
    """

    __slots__ = ()

    operator: ClassVar[str] = '/'


# query

class QuerySegment(Segment):
    """Base class for query segments."""

    __slots__ = ()

    def expand(self, name: str, values: Sequence[str]) -> list[QuerySegment]:
        """Replace the variable name with values."""
        return [self]


class ParamElement(QuerySegment):
    """
    Static query parameter.

    No values render as a bare name, each value renders as name=value.
    """

    __slots__ = ('_name', '_values')

    _name: str
    _values: tuple[str, ...]

    def __init__(self, name: str, *values: str) -> None:
        self._name = name
        self._values = tuple(values)

    @property
    def name(self) -> str:
        """Get the parameter name."""
        return self._name

    @property
    def values(self) -> tuple[str, ...]:
        """Get the parameter values."""
        return self._values

    @property
    def pairs(self) -> list[tuple[str, (str | None)]]:
        """Get the name/value pairs this parameter contributes to a query."""
        if (not self._values):
            return [(self._name, None)]
        return [(self._name, value) for value in self._values]

    def _key(self) -> tuple[Any, ...]:
        return (self._name, self._values)

    def _flat_key(self) -> tuple[Any, ...]:
        return (self._name, ) + self._values

    def tokens(self) -> list[str]:
        """Render each name=value pair."""
        return [(name if (value is None) else (name + '=' + value)) for name, value in self.pairs]


class ParamExpansion(QuerySegment):
    """
    Base class for query parameters with an expression as value.

    Renders as param={var}.
    """

    __slots__ = ('_param', '_names')

    operator: ClassVar[str] = ''

    _param: str
    _names: tuple[str, ...]

    def __init__(self, param: str, *names: str) -> None:
        self._param = validate_variable(param)
        self._names = validate_variables(type(self).__name__, names)

    @property
    def param(self) -> str:
        """Get the parameter name."""
        return self._param

    @property
    def names(self) -> tuple[str, ...]:
        """Get the variable names."""
        return self._names

    @property
    def is_expansion(self) -> bool:
        """Check if this segment still needs a value."""
        return True

    @property
    def variable_names(self) -> tuple[str, ...]:
        """Get the names of all variables."""
        return self._names

    def _key(self) -> tuple[Any, ...]:
        return (self._param, self._names)

    def _flat_key(self) -> tuple[Any, ...]:
        return (self._param, ) + self._names

    def _residual(self, names: tuple[str, ...]) -> QuerySegment:
        """Build the expansion left over after a partial expansion."""
        return type(self)(self._param, *names)

    def expand(self, name: str, values: Sequence[str]) -> list[QuerySegment]:
        """Replace the variable name with a static parameter under the same name."""
        if (name not in self._names):
            return [self]
        expanded: list[QuerySegment] = [ParamElement(self._param, *values)]
        remaining = _remaining(self._names, name)
        if (remaining):
            expanded.append(self._residual(remaining))
        return expanded

    def tokens(self) -> list[str]:
        """Render the parameter with its expression."""
        return [self._param + '=' + '{' + self.operator + ','.join(self._names) + '}']


class SimpleParamExpansion(ParamExpansion):
    """
    Simple String expansion as parameter value param={var}.

    https://tools.ietf.org/html/rfc6570#section-3.2.2
    """

    __slots__ = ()


class ReservedParamExpansion(ParamExpansion):
    """
    Reserved Expansion as parameter value param={+var}.

    Once one of its variables is expanded the rest continue as a simple expansion.
    https://tools.ietf.org/html/rfc6570#section-3.2.3
    """

    __slots__ = ()

    operator: ClassVar[str] = '+'

    def _residual(self, names: tuple[str, ...]) -> QuerySegment:
        """Build the expansion left over after a partial expansion."""
        return SimpleParamExpansion(self._param, *names)


class FormExpansion(QuerySegment):
    """
    Form-Style Query Expansion {?var}.

    Every variable becomes its own name=value parameter.
    https://tools.ietf.org/html/rfc6570#section-3.2.8
    """

    __slots__ = ('_names', )

    _names: tuple[str, ...]

    def __init__(self, *names: str) -> None:
        self._names = validate_variables(type(self).__name__, names)

    @property
    def names(self) -> tuple[str, ...]:
        """Get the variable names."""
        return self._names

    @property
    def is_expansion(self) -> bool:
        """Check if this segment still needs a value."""
        return True

    @property
    def variable_names(self) -> tuple[str, ...]:
        """Get the names of all variables."""
        return self._names

    def _key(self) -> tuple[Any, ...]:
        return (self._names, )

    def _flat_key(self) -> tuple[Any, ...]:
        return self._names

    def expand(self, name: str, values: Sequence[str]) -> list[QuerySegment]:
        """Replace the variable name with a static parameter named after it."""
        if (name not in self._names):
            return [self]
        expanded: list[QuerySegment] = [ParamElement(name, *values)]
        remaining = _remaining(self._names, name)
        if (remaining):
            expanded.append(type(self)(*remaining))
        return expanded

    def render(self, first: bool) -> str:
        """Render as an expression, opening the query or continuing it."""
        return '{' + ('?' if (first) else '&') + ','.join(self._names) + '}'


class FormContinuationExpansion(FormExpansion):
    """
    Form-Style Query Continuation {&var}.

    https://tools.ietf.org/html/rfc6570#section-3.2.9
    """

    __slots__ = ()


# fragment

class FragmentSegment(Segment):
    """Base class for fragment segments."""

    __slots__ = ()

    def expand(self, name: str, value: str) -> list[FragmentSegment]:
        """Replace the variable name with a value."""
        return [self]


class FragmentElement(FragmentSegment):
    """Static fragment element."""

    __slots__ = ('_value', )

    _value: str

    def __init__(self, value: str) -> None:
        self._value = value

    @property
    def value(self) -> str:
        """Get the literal value."""
        return self._value

    def _key(self) -> tuple[Any, ...]:
        return (self._value, )

    def __str__(self) -> str:
        """Convert to string."""
        return self._value


class SimpleFragmentExpansion(FragmentSegment):
    """
    Fragment Expansion {#var} of a single variable.

    https://tools.ietf.org/html/rfc6570#section-3.2.4
    """

    __slots__ = ('_name', )

    _name: str

    def __init__(self, name: str) -> None:
        self._name = validate_variable(name)

    @property
    def name(self) -> str:
        """Get the variable name."""
        return self._name

    @property
    def is_expansion(self) -> bool:
        """Check if this segment still needs a value."""
        return True

    @property
    def variable_names(self) -> tuple[str, ...]:
        """Get the names of all variables."""
        return (self._name, )

    def _key(self) -> tuple[Any, ...]:
        return (self._name, )

    def expand(self, name: str, value: str) -> list[FragmentSegment]:
        """Replace the variable name with a value."""
        if (name != self._name):
            return [self]
        return [FragmentElement(value)]

    def __str__(self) -> str:
        """Convert to string."""
        return self._name


class MultiFragmentExpansion(FragmentSegment):
    """
    Fragment Expansion {#var,...} of several variables.

    https://tools.ietf.org/html/rfc6570#section-3.2.4
    """

    __slots__ = ('_names', )

    _names: tuple[str, ...]

    def __init__(self, *names: str) -> None:
        self._names = validate_variables(type(self).__name__, names)

    @property
    def names(self) -> tuple[str, ...]:
        """Get the variable names."""
        return self._names

    @property
    def is_expansion(self) -> bool:
        """Check if this segment still needs a value."""
        return True

    @property
    def variable_names(self) -> tuple[str, ...]:
        """Get the names of all variables."""
        return self._names

    def _key(self) -> tuple[Any, ...]:
        return (self._names, )

    def _flat_key(self) -> tuple[Any, ...]:
        return self._names

    def expand(self, name: str, value: str) -> list[FragmentSegment]:
        """Replace the variable name with a value, keep the others as expansion."""
        if (name not in self._names):
            return [self]
        expanded: list[FragmentSegment] = [FragmentElement(value)]
        remaining = _remaining(self._names, name)
        if (remaining):
            expanded.append(MultiFragmentExpansion(*remaining))
        return expanded

    def __str__(self) -> str:
        """Convert to string."""
        return ','.join(self._names)


PATH_VARIANTS: tuple[type[PathSegment], ...] = (PathElement, SimpleExpansion, ReservedExpansion, PathSegmentExpansion)
QUERY_VARIANTS: tuple[type[QuerySegment], ...] = (ParamElement, SimpleParamExpansion, ReservedParamExpansion,
                                                  FormExpansion, FormContinuationExpansion)
FRAGMENT_VARIANTS: tuple[type[FragmentSegment], ...] = (FragmentElement, SimpleFragmentExpansion,
                                                        MultiFragmentExpansion)


class SegmentInvalidError(ValueError):
    """Exception thrown for segments placed where their kind does not belong."""

    segment: Any
    context: str

    def __init__(self, segment: Any, context: str) -> None:
        super().__init__(segment, context)
        self.segment = segment
        self.context = context

    def __str__(self) -> str:
        """Convert to string."""
        return f'Bad segment: {self.segment!r} is not a {self.context} segment'


def validate_segments(context: str, segments: Iterable[Any], variants: tuple[type[Segment], ...]) -> tuple[Any, ...]:
    """Check that every segment is one of the variants, return them as a tuple."""
    segments = tuple(segments)
    for segment in segments:
        if (not isinstance(segment, variants)):
            raise SegmentInvalidError(segment, context)
    return segments


def expand_path(path: Iterable[PathSegment], name: str, values: Sequence[str]) -> tuple[PathSegment, ...]:
    """Expand a variable in every path segment."""
    expanded: list[PathSegment] = []
    for segment in path:
        expanded.extend(segment.expand(name, values))
    return tuple(expanded)


def expand_query(query: (Iterable[QuerySegment] | None), name: str,
                 values: Sequence[str]) -> (tuple[QuerySegment, ...] | None):
    """Expand a variable in every query segment."""
    if (query is None):
        return None
    expanded: list[QuerySegment] = []
    for segment in query:
        expanded.extend(segment.expand(name, values))
    return tuple(expanded)


def expand_fragment(fragment: (Iterable[FragmentSegment] | None), name: str,
                    value: str) -> (tuple[FragmentSegment, ...] | None):
    """Expand a variable in every fragment segment."""
    if (fragment is None):
        return None
    expanded: list[FragmentSegment] = []
    for segment in fragment:
        expanded.extend(segment.expand(name, value))
    return tuple(expanded)


def contains_expansions(segments: (Iterable[Segment] | None)) -> bool:
    """Check if any segment still needs a value."""
    return any(segment.is_expansion for segment in (segments or ()))
