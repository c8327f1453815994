from ipaddress import IPv4Address, IPv6Address

import pytest

from uri_template_model.uri import Authority, Query, URI, render_host


@pytest.mark.parametrize('host, expected', (
    ('example.com', 'example.com'),
    (IPv4Address('10.0.0.1'), '10.0.0.1'),
    (IPv6Address('2001:db8::1'), '[2001:db8::1]'),
))
def test_render_host(host, expected):
    assert render_host(host) == expected


def test_query_builder():
    query = Query().add('a', '1').add('flag').add('a', '2')
    assert list(query) == [('a', '1'), ('flag', None), ('a', '2')]
    assert len(query) == 3
    assert query.get('a') == ['1', '2']
    assert query.get('flag') == [None]
    assert query.get('missing') == []
    assert str(query) == 'a=1&flag&a=2'


def test_query_is_immutable():
    query = Query([('a', '1')])
    query.add('b')
    assert list(query) == [('a', '1')]


def test_query_encoding():
    assert str(Query([('a b', 'c&d=e')])) == 'a%20b=c%26d%3De'


@pytest.mark.parametrize('uri, expected', (
    (URI(), ''),
    (URI('http', Authority('example.com')), 'http://example.com'),
    (URI('http', Authority('example.com'), '/a/b'), 'http://example.com/a/b'),
    (URI('mailto', path='bob@example.com'), 'mailto:bob@example.com'),
    (URI(path='/a b'), '/a%20b'),
    (URI(path='/a', query=Query([('q', 'x y')])), '/a?q=x%20y'),
    (URI(path='/a', query=Query()), '/a'),
    (URI(path='/a', fragment=''), '/a#'),
    (URI(path='/a', fragment='top'), '/a#top'),
    (URI('http', Authority(IPv6Address('::1'), user='bob', port=8080), '/'), 'http://bob@[::1]:8080/'),
))
def test_uri_str(uri, expected):
    assert str(uri) == expected


def test_uri_equality():
    assert URI('http', Authority('a.com'), '/x') == URI('http', Authority('a.com'), '/x')
    assert URI('http', Authority('a.com'), '/x') != URI('http', Authority('a.com', port=80), '/x')
    assert URI(query=None) == URI(query=Query())
    assert len({URI(path='/a'), URI(path='/a')}) == 1
