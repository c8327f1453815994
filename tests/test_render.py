from ipaddress import IPv4Address, IPv6Address

import pytest

from uri_template_model import render
from uri_template_model.expansions import (FormContinuationExpansion, FormExpansion, FragmentElement, FragmentSegment,
                                           MultiFragmentExpansion, ParamElement, PathElement, PathSegment,
                                           PathSegmentExpansion, QuerySegment, ReservedExpansion,
                                           ReservedParamExpansion, SimpleExpansion, SimpleFragmentExpansion,
                                           SimpleParamExpansion)
from uri_template_model.render import (SegmentUnsupportedError, render_fragment, render_path, render_query,
                                       render_scheme_authority)
from uri_template_model.uri import Authority
from uri_template_model.uritemplate import URITemplate


@pytest.mark.parametrize('scheme, authority, expected', (
    (None, None, ''),
    ('http', None, 'http:'),
    (None, Authority('example.com'), 'example.com'),
    ('http', Authority('example.com'), 'http://example.com'),
    ('http', Authority('example.com', user='bob'), 'http://bob@example.com'),
    ('http', Authority('example.com', port=8080), 'http://example.com:8080'),
    ('http', Authority('example.com', user='bob', port=8080), 'http://bob@example.com:8080'),
    ('http', Authority(IPv4Address('192.168.0.1')), 'http://192.168.0.1'),
    ('http', Authority(IPv6Address('::1'), port=80), 'http://[::1]:80'),
))
def test_render_scheme_authority(scheme, authority, expected):
    assert render_scheme_authority(scheme, authority) == expected


@pytest.mark.parametrize('path, expected', (
    ((), '/'),
    ((PathElement('a'), ), '/a'),
    ((PathElement('a'), PathElement('b')), '/a/b'),
    ((SimpleExpansion('a'), ), '{a}'),
    ((SimpleExpansion('a', 'b'), ), '{a,b}'),
    ((ReservedExpansion('a', 'b'), ), '{+a,b}'),
    ((PathSegmentExpansion('a', 'b'), ), '{/a,b}'),
    ((PathElement('a'), SimpleExpansion('b'), ReservedExpansion('c'), PathSegmentExpansion('d')),
     '/a{b}{+c}{/d}'),
))
def test_render_path(path, expected):
    assert render_path(path) == expected


@pytest.mark.parametrize('query, expected', (
    ((), '?'),
    ((ParamElement('a'), ), '?a'),
    ((ParamElement('a', '1'), ), '?a=1'),
    ((ParamElement('a', '1', '2'), ), '?a=1&a=2'),
    ((ParamElement('a', '1'), ParamElement('b')), '?a=1&b'),
    ((SimpleParamExpansion('q', 'a', 'b'), ), '?q={a,b}'),
    ((ReservedParamExpansion('q', 'a'), ), '?q={+a}'),
    ((FormExpansion('a'), ), '{?a}'),
    ((FormExpansion('a', 'b'), ), '{?a,b}'),
    ((FormContinuationExpansion('a'), ), '{?a}'),
    ((FormExpansion('a'), FormContinuationExpansion('b')), '{?a}{&b}'),
    ((FormExpansion('a'), FormExpansion('b')), '{?a}{&b}'),
    ((ParamElement('x', '1'), FormExpansion('a')), '?x=1{&a}'),
    ((FormExpansion('a'), ParamElement('x', '1')), '?x=1{&a}'),
    ((ParamElement('x', '1'), FormContinuationExpansion('a', 'b')), '?x=1{&a,b}'),
    ((ParamElement('x'), SimpleParamExpansion('q', 'a'), FormExpansion('b')), '?x&q={a}{&b}'),
))
def test_render_query(query, expected):
    assert render_query(query) == expected


@pytest.mark.parametrize('fragment, expected', (
    ((), '#'),
    ((FragmentElement('a'), ), '#a'),
    ((FragmentElement('a'), FragmentElement('b')), '#a,b'),
    ((SimpleFragmentExpansion('a'), ), '{#a}'),
    ((MultiFragmentExpansion('a', 'b'), ), '{#a,b}'),
    ((SimpleFragmentExpansion('a'), MultiFragmentExpansion('b', 'c')), '{#a,b,c}'),
    ((FragmentElement('x'), SimpleFragmentExpansion('a')), '#x{#a}'),
    ((SimpleFragmentExpansion('a'), FragmentElement('x'), FragmentElement('y')), '#x,y{#a}'),
))
def test_render_fragment(fragment, expected):
    assert render_fragment(fragment) == expected


@pytest.mark.parametrize('render_function, segments', (
    (render_path, (FragmentElement('a'), )),
    (render_path, (PathElement('a'), PathSegment())),
    (render_query, (QuerySegment(), )),
    (render_fragment, (FragmentSegment(), )),
    (render_query, (PathElement('a'), )),
    (render_query, (SimpleExpansion('a'), )),
    (render_fragment, (ParamElement('a'), )),
))
def test_render_unsupported_segment(render_function, segments):
    with pytest.raises(SegmentUnsupportedError) as info:
        render_function(segments)
    assert info.value.segment is segments[-1]


@pytest.mark.parametrize('template, expected', (
    (URITemplate(), '/'),
    (URITemplate('http'), 'http:/'),
    (URITemplate('http', Authority('example.com')), 'http://example.com'),
    (URITemplate(authority=Authority('example.com')), 'example.com/'),
    (URITemplate('http', Authority('example.com'), path=[PathElement('a')]), 'http://example.com/a'),
    (URITemplate('http', Authority('example.com'), query=[]), 'http://example.com/?'),
    (URITemplate('http', Authority('example.com'), fragment=[]), 'http://example.com/#'),
    (URITemplate(query=[]), '/?'),
    (URITemplate(query=[], fragment=[]), '/?#'),
    (URITemplate(fragment=[FragmentElement('top')]), '/#top'),
    (URITemplate(query=[FormExpansion('q')]), '/{?q}'),
    (URITemplate(path=[PathElement('search')], query=[FormExpansion('q')], fragment=[SimpleFragmentExpansion('f')]),
     '/search{?q}{#f}'),
    (URITemplate('https', Authority('example.com', user='bob', port=443),
                 path=[PathElement('users'), SimpleExpansion('id'), PathSegmentExpansion('tab')],
                 query=[ParamElement('lang', 'en'), ReservedParamExpansion('next', 'url'),
                        FormContinuationExpansion('page', 'size')],
                 fragment=[FragmentElement('top'), MultiFragmentExpansion('a', 'b')]),
     'https://bob@example.com:443/users{id}{/tab}?lang=en&next={+url}{&page,size}#top{#a,b}'),
))
def test_render_template(template, expected):
    assert str(template) == expected
    assert render(template) == expected
