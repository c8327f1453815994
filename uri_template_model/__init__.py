"""Structured RFC 6570 URI templates with partial expansion."""

from __future__ import annotations

import logging

from .charset import Charset, is_unreserved
from .expansions import (FormContinuationExpansion, FormExpansion, FragmentElement, MultiFragmentExpansion,
                         ParamElement, PathElement, PathSegmentExpansion, ReservedExpansion, ReservedParamExpansion,
                         SegmentInvalidError, SimpleExpansion, SimpleFragmentExpansion, SimpleParamExpansion)
from .render import SegmentUnsupportedError
from .uri import Authority, Query, URI
from .uritemplate import URITemplate, UnresolvedExpansionError
from .variable import ExpansionInvalidError, VariableInvalidError, validate_variable


__all__ = ['URITemplate', 'URI', 'Authority', 'Query', 'Charset',
           'PathElement', 'SimpleExpansion', 'ReservedExpansion', 'PathSegmentExpansion',
           'ParamElement', 'SimpleParamExpansion', 'ReservedParamExpansion', 'FormExpansion',
           'FormContinuationExpansion',
           'FragmentElement', 'SimpleFragmentExpansion', 'MultiFragmentExpansion',
           'ExpansionInvalidError', 'VariableInvalidError', 'SegmentInvalidError', 'SegmentUnsupportedError',
           'UnresolvedExpansionError',
           'is_unreserved', 'render', 'finalize', 'validate']


_LOG = logging.getLogger(__name__)


def render(template: URITemplate) -> str:
    return str(template)


def finalize(template: URITemplate) -> (URI | None):
    try:
        return template.to_uri()
    except UnresolvedExpansionError as error:
        _LOG.debug('Template not finalized: %s', error)
        return None


def validate(name: str) -> bool:
    try:
        validate_variable(name)
        return True
    except VariableInvalidError:
        return False
