#! /usr/bin/env python
"""Escaping and unescaping of HTML special characters

Only the four characters that are significant in HTML attribute values
and character data are transformed::

    "   &quot;
    &   &amp;
    <   &lt;
    >   &gt;

All other characters, including non-ASCII characters and controls, are
passed through unchanged."""

import logging

from .errors import require
from .parser import BasicParser


ENTITIES = (
    ('"', '&quot;'),
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'))

_encode_map = dict(ENTITIES)


def encode(source):
    """Returns *source* with the four special characters escaped

    Raises :class:`tagkit.errors.InvalidArgument` if *source* is None.
    The result is never shorter than *source*.  For example::

        encode('<a href="x">&amp</a>')
        # returns '&lt;a href=&quot;x&quot;&gt;&amp;amp&lt;/a&gt;'"""
    require(source, "source")
    return ''.join(_encode_map.get(c, c) for c in source)


def encode_amp(source):
    """Returns *source* with only the ampersand escaped

    Useful for text that already contains markup but that must be
    embedded in an XML (or XSL-FO) document."""
    require(source, "source")
    return source.replace('&', '&amp;')


class EntityParser(BasicParser):

    """Scans a string replacing the four named entities"""

    def require_text(self):
        """Parses the whole source returning the decoded text"""
        result = []
        while True:
            result.append(self.parse_until('&'))
            if self.match_end():
                break
            result.append(self.require_entity())
        return ''.join(result)

    def require_entity(self):
        """Parses an entity reference at the current position

        The parser must be positioned on an '&'.  If one of the four
        recognised entities starts here it is consumed and the
        corresponding character returned.  Otherwise the '&' alone is
        consumed and returned, the text that follows is left to be
        copied through as ordinary data."""
        for c, entity in ENTITIES:
            if self.parse(entity):
                return c
        logging.debug("decode: unrecognised entity text at [%i]: %s",
                      self.pos, self.peek(10))
        return self.require('&')


def decode(source):
    """Returns *source* with the four named entities unescaped

    Raises :class:`tagkit.errors.InvalidArgument` if *source* is None.

    Decoding is lenient: an '&' that does not start one of the literal
    sequences &quot; &amp; &lt; or &gt; is copied through unchanged, as
    is any text following it.  As a result::

        decode(encode(s)) == s

    for any string s but the reverse is not true in general."""
    require(source, "source")
    return EntityParser(source).require_text()
