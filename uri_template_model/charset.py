"""Character sets for URI templates."""

from __future__ import annotations


class Charset:
    """
    Character classes used by templates and URIs.

    https://tools.ietf.org/html/rfc6570#section-1.5
    """

    ALPHA = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'
    DIGIT = '0123456789'
    HEX_DIGIT = '0123456789ABCDEF'
    UNRESERVED = ALPHA + DIGIT + '-._~'
    SUB_DELIMS = "!$&'()*+,;="

    # legal characters per component of a finalized URI
    PCHAR = UNRESERVED + SUB_DELIMS + ':@'
    PATH = PCHAR + '/'
    QUERY = UNRESERVED + "!$'()*,;:@/?"
    FRAGMENT = PCHAR + '/?'


def is_unreserved(text: str, charset: type[Charset] = Charset) -> bool:
    """Check that every character of text is unreserved."""
    return all((codepoint in charset.UNRESERVED) for codepoint in text)
