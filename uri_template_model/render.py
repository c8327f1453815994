"""Render URI templates as RFC 6570 strings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .expansions import (PATH_VARIANTS, FormExpansion, FragmentElement, FragmentSegment, MultiFragmentExpansion,
                         ParamElement, PathSegment, ReservedParamExpansion, Segment, SimpleFragmentExpansion,
                         SimpleParamExpansion)
from .uri import Authority

if (TYPE_CHECKING):
    from .uritemplate import URITemplate


class SegmentUnsupportedError(Exception):
    """Exception thrown when a segment can not be rendered where it is placed."""

    segment: Segment
    context: str

    def __init__(self, segment: Segment, context: str) -> None:
        super().__init__(segment, context)
        self.segment = segment
        self.context = context

    def __str__(self) -> str:
        """Convert to string."""
        return f'Segment {type(self.segment).__name__} not supported in {self.context}'


def render_scheme_authority(scheme: (str | None), authority: (Authority | None)) -> str:
    """Render scheme://authority, either part may be missing."""
    if (scheme is not None):
        if (authority is not None):
            return scheme + '://' + str(authority)
        return scheme + ':'
    if (authority is not None):
        return str(authority)
    return ''


def render_path(path: Sequence[PathSegment]) -> str:
    """Render path segments, an empty path is '/'."""
    if (not path):
        return '/'
    output = ''
    for segment in path:
        if (not isinstance(segment, PATH_VARIANTS)):
            raise SegmentUnsupportedError(segment, 'path')
        output += str(segment)
    return output


def render_query(query: Sequence[Segment]) -> str:
    """
    Render query segments.

    Static parameters and parameter expressions come first, joined by '&'.
    Form expansions follow as expressions, the first one opens the query
    with '?' only if nothing was rendered before it.
    """
    if (not query):
        return '?'
    elements: list[str] = []
    forms: list[FormExpansion] = []
    for segment in query:
        if (isinstance(segment, FormExpansion)):
            forms.append(segment)
        elif (isinstance(segment, (ParamElement, SimpleParamExpansion, ReservedParamExpansion))):
            elements.extend(segment.tokens())
        else:
            raise SegmentUnsupportedError(segment, 'query')

    expressions = ''
    for index, form in enumerate(forms):
        expressions += form.render(first=((not elements) and (0 == index)))
    if (not elements):
        return expressions
    return '?' + '&'.join(elements) + expressions


def render_fragment(fragment: Sequence[Segment]) -> str:
    """Render fragment segments as #literals{#names}."""
    elements: list[str] = []
    expansions: list[str] = []
    for segment in fragment:
        if (isinstance(segment, FragmentElement)):
            elements.append(str(segment))
        elif (isinstance(segment, (SimpleFragmentExpansion, MultiFragmentExpansion))):
            expansions.append(str(segment))
        else:
            raise SegmentUnsupportedError(segment, 'fragment')

    if (elements and expansions):
        return '#' + ','.join(elements) + '{#' + ','.join(expansions) + '}'
    elif (elements):
        return '#' + ','.join(elements)
    elif (expansions):
        return '{#' + ','.join(expansions) + '}'
    return '#'


def render_fragment_identifier(fragment: Sequence[FragmentSegment]) -> str:
    """Join static fragment elements into a single fragment."""
    elements: list[str] = []
    for segment in fragment:
        if (not isinstance(segment, FragmentElement)):
            raise SegmentUnsupportedError(segment, 'fragment identifier')
        elements.append(segment.value)
    return ','.join(elements)


def render_template(template: URITemplate) -> str:
    """
    Render a whole template.

    Works at any point of the expansion, unexpanded variables render as
    expressions.
    """
    output = render_scheme_authority(template.scheme, template.authority)
    if ((template.scheme is not None) and (template.authority is not None)
            and (not template.path) and (template.query is None) and (template.fragment is None)):
        return output
    output += render_path(template.path)
    if (template.query is not None):
        output += render_query(template.query)
    if (template.fragment is not None):
        output += render_fragment(template.fragment)
    return output
