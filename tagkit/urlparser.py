#! /usr/bin/env python
"""Splits a URL into its path, fragment and query parameters

This is deliberately much less thorough than a full URI parser.  The
URL is treated as plain text and no %-decoding is performed on any of
the components: values are stored exactly as they appear in the URL.

The order of operations is significant.  The query is split from the
URL first, at the first '?', and the fragment is then split from the
text *before* the query, at the first '#'.  A '#' that appears in the
query is therefore treated as part of a parameter value::

    >>> p = parse("http://h/s#frag?p=1")
    >>> p.path, p.fragment, p.parameters
    ('http://h/s', 'frag', {'p': '1'})"""

import logging

from .errors import require
from .html import HTMLHyperlink
from .parser import BasicParser


class QueryParser(BasicParser):

    """Scans the query text of a URL into a dictionary"""

    def require_parameters(self):
        """Parses the whole source returning a parameter dictionary

        Empty parameters, e.g., those produced by a trailing or repeated
        '&', are ignored."""
        result = {}
        while not self.match_end():
            token = self.parse_until('&')
            self.parse('&')
            if not token:
                continue
            key, value = split_parameter(token)
            if key in result:
                logging.info("query: value of %s overwritten", key)
            result[key] = value
        return result


def split_parameter(token):
    """Splits a single parameter into a key, value pair

    The split is made at the first '=', if there is no '=' the value
    is an empty string."""
    key, sep, value = token.partition('=')
    return key, value


class URLParser(object):

    """Represents a URL split into its component parts

    url
        The URL string to parse, raises
        :class:`tagkit.errors.InvalidArgument` if None.

    The instance is populated on construction and should be treated as
    immutable."""

    def __init__(self, url):
        require(url, "url")
        #: the URL string that was parsed
        self.url = url
        #: the text preceding the fragment and query
        self.path = None
        #: the text following '#' or None if there is no fragment
        self.fragment = None
        #: a dictionary of parameters or None if there is no query
        self.parameters = None
        p = BasicParser(url)
        pre_query = p.parse_until('?')
        if p.parse('?'):
            self.parameters = QueryParser(
                p.parse_until(None)).require_parameters()
        p = BasicParser(pre_query)
        self.path = p.parse_until('#')
        if p.parse('#'):
            self.fragment = p.parse_until(None)
        logging.debug("URLParser: %s -> path=%s, fragment=%s, "
                      "parameters=%s", url, self.path, self.fragment,
                      self.parameters)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.url)

    def get_uri(self):
        """Returns the path of the URL

        This is the URL without any fragment or query."""
        return self.path

    def get_parameter(self, name):
        """Returns the value of parameter *name* or None"""
        if self.parameters is None:
            return None
        return self.parameters.get(name, None)

    def get_hyperlink(self, text=None):
        """Returns a :class:`tagkit.html.HTMLHyperlink` for this URL

        text
            The text of the link, defaults to the path.

        The link is set to the path, the location (bookmark) to the
        fragment and the properties to a copy of the parameters."""
        if text is None:
            text = self.path
        link = HTMLHyperlink(self.path, text)
        if self.fragment is not None:
            link.location = self.fragment
        if self.parameters is not None:
            link.properties = dict(self.parameters)
        return link


def parse(url):
    """Parses *url* returning a :class:`URLParser` instance"""
    return URLParser(url)
